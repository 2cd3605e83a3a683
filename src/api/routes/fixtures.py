from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_app_settings, get_fixtures_provider
from api.errors import BadGatewayError, ConfigurationError, ValidationError
from core.config import Settings
from core.logging import get_logger
from core.models import FixtureQuery
from monitoring.prometheus_exporter import record_rejection
from providers.api_football.exceptions import UpstreamError
from providers.api_football.fixtures_provider import ApiFootballFixturesProvider

router = APIRouter(tags=["fixtures"])
logger = get_logger("api.routes.fixtures")


@router.get("/fixtures", summary="Fixtures API-Football (passthrough)")
async def get_fixtures(
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    league: Optional[str] = Query(None),
    season: Optional[str] = Query(None),
    team: Optional[str] = Query(None),
    provider: ApiFootballFixturesProvider = Depends(get_fixtures_provider),
) -> Any:
    query = FixtureQuery.from_request(date=date, league=league, season=season, team=team)

    # Una data senza lega/squadra restituisce tutte le partite del giorno: troppo grande.
    if query.date and not query.has_scope:
        record_rejection("/fixtures", "date_without_scope")
        raise ValidationError("Richiesta troppo ampia. Specifica league o team.")

    try:
        return await provider.fetch_fixtures(query)
    except UpstreamError as exc:
        logger.error("/fixtures %s", exc, extra={"route": "/fixtures", "upstream_status": exc.status_code})
        raise BadGatewayError("Errore API-Football") from exc


@router.get("/fixtures/compact", summary="Fixtures in forma compatta")
async def get_fixtures_compact(
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    league: Optional[str] = Query(None),
    season: Optional[str] = Query(None),
    team: Optional[str] = Query(None),
    settings: Settings = Depends(get_app_settings),
    provider: ApiFootballFixturesProvider = Depends(get_fixtures_provider),
) -> Dict[str, Any]:
    if not settings.has_api_key:
        record_rejection("/fixtures/compact", "missing_api_key")
        raise ConfigurationError("API_FOOTBALL_KEY mancante")

    query = FixtureQuery.from_request(date=date, league=league, season=season, team=team)

    # Più restrittiva di /fixtures: normalizzare risultati non filtrati è costoso.
    if not query.has_scope:
        record_rejection("/fixtures/compact", "missing_scope")
        raise ValidationError("league o team richiesti per una risposta compatta")

    try:
        compact = await provider.fetch_compact_fixtures(query)
    except UpstreamError as exc:
        logger.error(
            "/fixtures/compact %s",
            exc,
            extra={"route": "/fixtures/compact", "upstream_status": exc.status_code},
        )
        raise BadGatewayError("Errore API-Football (compact)") from exc

    return {
        "count": len(compact),
        "fixtures": compact,
    }
