from __future__ import annotations

from typing import Any

from .http_client import ApiFootballHttpClient


class ApiFootballStandingsProvider:
    """Provider /standings: passthrough del payload upstream."""

    def __init__(self, client: ApiFootballHttpClient) -> None:
        self._client = client

    async def fetch_standings(self, league: str, season: str) -> Any:
        return await self._client.api_get(
            "/standings",
            params={"league": league, "season": season},
        )


__all__ = ["ApiFootballStandingsProvider"]
