from __future__ import annotations

from typing import Any

from core.exceptions import PayloadFormatError
from core.logging import get_logger
from core.models import CompactFixtureList, FixtureQuery
from core.normalization import normalize_fixtures
from .exceptions import MalformedPayloadError
from .http_client import ApiFootballHttpClient

log = get_logger(__name__)


class ApiFootballFixturesProvider:
    """
    Provider /fixtures.
    - fetch_fixtures: payload grezzo, passthrough
    - fetch_compact_fixtures: payload normalizzato in forma compatta
    La validazione dei filtri resta alle route.
    """

    def __init__(self, client: ApiFootballHttpClient) -> None:
        self._client = client

    async def fetch_fixtures(self, query: FixtureQuery) -> Any:
        return await self._client.api_get("/fixtures", params=query.to_params())

    async def fetch_compact_fixtures(self, query: FixtureQuery) -> CompactFixtureList:
        raw = await self.fetch_fixtures(query)
        try:
            compact = normalize_fixtures(raw)
        except PayloadFormatError as exc:
            raise MalformedPayloadError(str(exc)) from exc
        log.info("fixtures compatte=%s params=%s", len(compact), query.to_params())
        return compact


__all__ = ["ApiFootballFixturesProvider"]
