import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from core.config import Settings, _reset_settings_cache_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    _reset_settings_cache_for_tests()
    yield
    _reset_settings_cache_for_tests()


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = dict(
            api_football_key="DUMMY_KEY",
            api_football_base_url="https://upstream.test",
            api_football_timeout=8.0,
            host="127.0.0.1",
            port=3000,
            log_level="INFO",
            enable_prometheus_exporter=False,
        )
        values.update(overrides)
        return Settings(**values)

    return _make
