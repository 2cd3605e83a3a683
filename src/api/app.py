from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.logging import configure_logging, get_logger
from providers.api_football.http_client import ApiFootballHttpClient

from api.errors import install_error_handlers
from api.routes.health import router as health_router
from api.routes.fixtures import router as fixtures_router
from api.routes.standings import router as standings_router
from api.routes.metrics import router as metrics_router

logger = get_logger("api.app")


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[ApiFootballHttpClient] = None,
) -> FastAPI:
    """
    Costruisce l'app con configurazione e client iniettati.
    Senza argomenti usa get_settings() e un client httpx reale.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    client = client or ApiFootballHttpClient(settings)

    if not settings.has_api_key:
        logger.warning("API_FOOTBALL_KEY mancante (il server resta attivo)")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(title="API-Football Proxy", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(health_router)
    app.include_router(fixtures_router)
    app.include_router(standings_router)
    if settings.enable_prometheus_exporter:
        app.include_router(metrics_router)
    return app
