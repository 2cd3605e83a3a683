from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.logging import get_logger

logger = get_logger("api.errors")


class ApiError(Exception):
    """Errore già mappato su uno status HTTP; il messaggio è visibile al client."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Richiesta troppo generica o incompleta: nessuna chiamata upstream."""

    status_code = 400


class ConfigurationError(ApiError):
    """Credenziale obbligatoria per la route non configurata."""

    status_code = 503


class BadGatewayError(ApiError):
    """Fallimento upstream; il dettaglio resta nei log."""

    status_code = 502


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Errore non gestito %s: %s",
        request.url.path,
        exc,
        exc_info=exc,
        extra={"route": request.url.path},
    )
    return JSONResponse(status_code=500, content={"error": "Errore interno"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


__all__ = [
    "ApiError",
    "ValidationError",
    "ConfigurationError",
    "BadGatewayError",
    "install_error_handlers",
]
