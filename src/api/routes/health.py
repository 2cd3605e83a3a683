from __future__ import annotations

import time

from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "api-football-proxy"

# avvio processo (import del modulo), indipendente dalle istanze dell'app
_PROCESS_STARTED_AT = time.monotonic()


@router.get("/", summary="Health check")
def health():
    """
    Health endpoint minimale, nessuna chiamata upstream.
    """
    uptime = max(0.0, time.monotonic() - _PROCESS_STARTED_AT)
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "uptime": round(uptime, 3),
    }
