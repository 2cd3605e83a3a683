from __future__ import annotations

import asyncio
import time
from typing import Any, Dict, Optional

import httpx

from core.config import Settings
from core.logging import get_logger
from monitoring.prometheus_exporter import record_upstream_call
from .exceptions import UpstreamError, UpstreamTimeoutError

log = get_logger(__name__)


class ApiFootballHttpClient:
    """
    Client HTTP asincrono per API Football (versione httpx).

    Un solo tentativo per chiamata: nessun retry, nessun backoff.
    Il timeout copre l'intera chiamata (connessione + lettura body); alla
    scadenza la richiesta viene cancellata e si solleva UpstreamTimeoutError.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._base = settings.api_football_base_url.rstrip("/")
        self._timeout = settings.api_football_timeout
        self._client = httpx.AsyncClient(
            headers={
                # chiave vuota ammessa: la chiamata parte comunque
                "x-apisports-key": settings.api_football_key or "",
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(self._timeout),
            transport=transport,
        )

    async def api_get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Esegue una GET e ritorna il JSON decodificato (valore opaco).
        Solleva UpstreamError per status != 2xx, errori di rete o JSON non valido.
        """
        url = f"{self._base}/{path.lstrip('/')}"
        log.info("api_football GET %s params=%s", path, params)
        start = time.perf_counter()

        try:
            resp = await asyncio.wait_for(
                self._client.get(url, params=params or None),
                timeout=self._timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            elapsed = time.perf_counter() - start
            record_upstream_call(path, "timeout", elapsed)
            log.error("Timeout %s dopo %.1fms", path, elapsed * 1000)
            raise UpstreamTimeoutError(
                f"Timeout API-Football dopo {self._timeout}s path={path}"
            ) from e
        except httpx.RequestError as e:
            elapsed = time.perf_counter() - start
            record_upstream_call(path, "network", elapsed)
            log.error("Errore rete %s dopo %.1fms: %s", path, elapsed * 1000, e)
            raise UpstreamError(f"Errore di rete API-Football: {e.__class__.__name__}") from e

        elapsed = time.perf_counter() - start
        if not resp.is_success:
            record_upstream_call(path, "http_error", elapsed)
            log.error(
                "Status %s %s (%.1fms) body=%s",
                resp.status_code,
                path,
                elapsed * 1000,
                resp.text[:300],
            )
            raise UpstreamError(
                f"API-Football {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            data = resp.json()
        except ValueError as e:
            record_upstream_call(path, "invalid_json", elapsed)
            log.error("Risposta non JSON %s status=%s", path, resp.status_code)
            raise UpstreamError(
                f"Risposta non valida (non JSON) status={resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        record_upstream_call(path, "ok", elapsed)
        log.debug("OK %s %s %.1fms", path, resp.status_code, elapsed * 1000)
        return data

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["ApiFootballHttpClient"]
