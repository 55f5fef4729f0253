import logging

from fastapi import FastAPI

from shared.config import settings
from shared.observability import setup
from shared.observability.setup import configure_tracing, resolve_log_level, setup_observability


def test_env_flag_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("STOREFRONT_TEST_FLAG", raising=False)
    assert settings._env_flag("STOREFRONT_TEST_FLAG", True) is True
    assert settings._env_flag("STOREFRONT_TEST_FLAG", False) is False


def test_env_flag_parses_truthy_and_falsy_values(monkeypatch):
    for raw in ("1", "true", "YES", " on "):
        monkeypatch.setenv("STOREFRONT_TEST_FLAG", raw)
        assert settings._env_flag("STOREFRONT_TEST_FLAG", False) is True
    for raw in ("0", "false", "no", "off", ""):
        monkeypatch.setenv("STOREFRONT_TEST_FLAG", raw)
        assert settings._env_flag("STOREFRONT_TEST_FLAG", True) is False


def test_tracing_is_skipped_without_endpoint():
    assert configure_tracing(FastAPI(), "storefront", None) is False
    assert configure_tracing(FastAPI(), "storefront", "") is False


def test_metrics_disabled_leaves_no_metrics_route(monkeypatch):
    monkeypatch.setattr(settings, "METRICS_ENABLED", False)
    monkeypatch.setattr(settings, "OTLP_ENDPOINT", None)
    fresh = FastAPI()

    setup_observability(fresh, "storefront")

    assert "/metrics" not in [route.path for route in fresh.routes]


def test_metrics_enabled_calls_instrumentation(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "METRICS_ENABLED", True)
    monkeypatch.setattr(settings, "OTLP_ENDPOINT", None)
    monkeypatch.setattr(setup, "configure_metrics", calls.append)
    fresh = FastAPI()

    setup_observability(fresh, "storefront")

    assert calls == [fresh]


def test_resolve_log_level():
    assert resolve_log_level("DEBUG") == logging.DEBUG
    assert resolve_log_level("warning") == logging.WARNING
    assert resolve_log_level("BASIC_FORMAT") == logging.INFO
    assert resolve_log_level("LOUD") == logging.INFO
