import pytest

from core.config import DEFAULT_BASE_URL, get_settings, _reset_settings_cache_for_tests


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "API_FOOTBALL_KEY",
        "API_FOOTBALL_BASE_URL",
        "API_FOOTBALL_TIMEOUT",
        "PORT",
        "HOST",
        "PROXY_LOG_LEVEL",
        "ENABLE_PROMETHEUS_EXPORTER",
    ):
        monkeypatch.delenv(name, raising=False)
    _reset_settings_cache_for_tests()


def test_missing_api_key_non_fatale() -> None:
    s = get_settings()
    assert s.api_football_key is None
    assert s.has_api_key is False


def test_blank_api_key_come_assente(monkeypatch) -> None:
    monkeypatch.setenv("API_FOOTBALL_KEY", "   ")
    assert get_settings().has_api_key is False


def test_present_api_key_ok(monkeypatch) -> None:
    monkeypatch.setenv("API_FOOTBALL_KEY", "TEST_KEY")
    s = get_settings()
    assert s.api_football_key == "TEST_KEY"
    assert s.has_api_key is True


def test_defaults() -> None:
    s = get_settings()
    assert s.port == 3000
    assert s.api_football_timeout == 8.0
    assert s.api_football_base_url == DEFAULT_BASE_URL
    assert s.enable_prometheus_exporter is False


def test_override_da_env(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_FOOTBALL_TIMEOUT", "2.5")
    monkeypatch.setenv("API_FOOTBALL_BASE_URL", "https://example.test/")
    monkeypatch.setenv("ENABLE_PROMETHEUS_EXPORTER", "1")
    s = get_settings()
    assert s.port == 8080
    assert s.api_football_timeout == 2.5
    assert s.api_football_base_url == "https://example.test"
    assert s.enable_prometheus_exporter is True


def test_port_non_numerica(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "abc")
    with pytest.raises(ValueError) as exc:
        get_settings()
    assert "PORT" in str(exc.value)


def test_settings_cached(monkeypatch) -> None:
    monkeypatch.setenv("API_FOOTBALL_KEY", "A")
    first = get_settings()
    monkeypatch.setenv("API_FOOTBALL_KEY", "B")
    assert get_settings() is first
