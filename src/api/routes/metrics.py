from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST

from monitoring.prometheus_exporter import generate_prometheus_text

router = APIRouter(tags=["metrics"])


@router.get("/metrics", summary="Metriche Prometheus", include_in_schema=False)
def get_metrics() -> Response:
    return Response(content=generate_prometheus_text(), media_type=CONTENT_TYPE_LATEST)
