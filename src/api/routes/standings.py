from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_standings_provider
from api.errors import BadGatewayError, ValidationError
from core.logging import get_logger
from monitoring.prometheus_exporter import record_rejection
from providers.api_football.exceptions import UpstreamError
from providers.api_football.standings_provider import ApiFootballStandingsProvider

router = APIRouter(tags=["standings"])
logger = get_logger("api.routes.standings")


@router.get("/standings", summary="Classifica per lega e stagione")
async def get_standings(
    league: Optional[str] = Query(None),
    season: Optional[str] = Query(None),
    provider: ApiFootballStandingsProvider = Depends(get_standings_provider),
) -> Any:
    if not league or not season:
        record_rejection("/standings", "missing_params")
        raise ValidationError("league e season richiesti")

    try:
        return await provider.fetch_standings(league, season)
    except UpstreamError as exc:
        logger.error("/standings %s", exc, extra={"route": "/standings", "upstream_status": exc.status_code})
        raise BadGatewayError("Errore API-Football") from exc
