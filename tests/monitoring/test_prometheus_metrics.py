from monitoring.prometheus_exporter import (
    _REGISTRY,
    generate_prometheus_text,
    record_rejection,
    record_upstream_call,
)


def _value(name, labels):
    return _REGISTRY.get_sample_value(name, labels) or 0.0


def test_record_upstream_call():
    labels = {"endpoint": "/test-ok", "outcome": "ok"}
    before = _value("proxy_upstream_requests_total", labels)
    record_upstream_call("/test-ok", "ok", 0.05)
    assert _value("proxy_upstream_requests_total", labels) == before + 1
    assert _value("proxy_upstream_latency_seconds_count", {"endpoint": "/test-ok"}) >= 1


def test_record_rejection_e_testo():
    record_rejection("/standings", "missing_params")
    output = generate_prometheus_text().decode("utf-8")
    assert "proxy_rejected_requests_total" in output
    assert 'reason="missing_params"' in output
