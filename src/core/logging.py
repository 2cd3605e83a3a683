from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict


EXTRA_WHITELIST = {"route", "upstream_path", "upstream_status", "latency_ms", "params"}


class JsonFormatter(logging.Formatter):
    """Formatter JSON con supporto campi extra selezionati."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Extra whitelisted
        for key in EXTRA_WHITELIST:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


_level: int = logging.INFO
_managed: Dict[str, logging.Logger] = {}


def configure_logging(level_name: str) -> int:
    """
    Applica il livello (Settings.log_level) ai logger già creati e ai successivi.
    Nome non valido => INFO.
    """
    global _level
    level = logging.getLevelName((level_name or "INFO").upper())
    _level = level if isinstance(level, int) else logging.INFO
    for logger in _managed.values():
        logger.setLevel(_level)
    return _level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level)
        logger.propagate = False
        _managed[name] = logger
    return logger


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
