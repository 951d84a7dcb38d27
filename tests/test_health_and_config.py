from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobboard.config import Settings, _parse_origins


def test_health(client) -> None:
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_store_reports_job_count(client) -> None:
    r = client.get("/health/store")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["job_count"] == 5


def test_config_debug_lists_runtime_settings(client) -> None:
    body = client.get("/health/config").json()
    assert body["api_prefix"] == "/api"
    assert body["simulated_latency_ms"] == 0


def test_parse_origins_accepts_json_and_comma_lists() -> None:
    assert _parse_origins('["http://a.test", "http://b.test"]') == ["http://a.test", "http://b.test"]
    assert _parse_origins("http://a.test, http://b.test") == ["http://a.test", "http://b.test"]
    assert _parse_origins("") == []
    assert _parse_origins(None) == []


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
    monkeypatch.setenv("SIMULATED_LATENCY_MS", "250")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    s = Settings()
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.simulated_latency_ms == 250
    assert s.log_level == "WARNING"


def test_settings_reject_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_reject_negative_latency(monkeypatch) -> None:
    monkeypatch.setenv("SIMULATED_LATENCY_MS", "-1")
    with pytest.raises(ValidationError):
        Settings()
