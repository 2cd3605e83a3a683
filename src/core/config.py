import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

DEFAULT_BASE_URL = "https://v3.football.api-sports.io"


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    v = value.strip().lower()
    if v in {"0", "false", "no"}:
        return False
    return True


@dataclass(frozen=True)
class Settings:
    """
    Configurazione di processo, letta una sola volta all'avvio.

    La chiave API può mancare: il server parte comunque e solo
    /fixtures/compact la considera obbligatoria.
    """

    api_football_key: Optional[str]
    api_football_base_url: str
    api_football_timeout: float

    host: str
    port: int
    log_level: str

    enable_prometheus_exporter: bool

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_football_key)

    @classmethod
    def from_env(cls) -> "Settings":
        def _int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un intero (valore: {raw!r})") from e

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un numero (valore: {raw!r})") from e

        key = (os.getenv("API_FOOTBALL_KEY") or "").strip() or None
        base_url = os.getenv("API_FOOTBALL_BASE_URL") or DEFAULT_BASE_URL
        timeout = _float("API_FOOTBALL_TIMEOUT", 8.0)
        if timeout <= 0:
            raise ValueError(f"Variabile API_FOOTBALL_TIMEOUT deve essere > 0 (valore: {timeout!r})")

        host = os.getenv("HOST", "0.0.0.0")
        port = _int("PORT", 3000)
        log_level = os.getenv("PROXY_LOG_LEVEL", "INFO").upper()

        enable_prometheus_exporter = _parse_bool(os.getenv("ENABLE_PROMETHEUS_EXPORTER"), False)

        return cls(
            api_football_key=key,
            api_football_base_url=base_url.rstrip("/"),
            api_football_timeout=timeout,
            host=host,
            port=port,
            log_level=log_level,
            enable_prometheus_exporter=enable_prometheus_exporter,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _reset_settings_cache_for_tests() -> None:
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "_reset_settings_cache_for_tests", "DEFAULT_BASE_URL"]
