from __future__ import annotations

from fastapi import Request

from core.config import Settings
from providers.api_football.fixtures_provider import ApiFootballFixturesProvider
from providers.api_football.standings_provider import ApiFootballStandingsProvider


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_fixtures_provider(request: Request) -> ApiFootballFixturesProvider:
    return ApiFootballFixturesProvider(request.app.state.client)


def get_standings_provider(request: Request) -> ApiFootballStandingsProvider:
    return ApiFootballStandingsProvider(request.app.state.client)
