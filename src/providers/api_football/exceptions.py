from typing import Optional


class UpstreamError(Exception):
    """Sollevata quando la chiamata all'API-Football fallisce (status != 2xx, rete, payload non valido)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamTimeoutError(UpstreamError):
    """Sollevata quando l'upstream non risponde entro il timeout configurato."""


class MalformedPayloadError(UpstreamError):
    """Sollevata quando il payload upstream non ha la forma attesa dalla normalizzazione."""
