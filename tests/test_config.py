"""
Tests for environment-driven settings and logging setup.
"""
import logging

import pytest

from job_management.config import DEFAULT_LOG_FORMAT, Settings
from job_management.infrastructure.log_setup import JobContextFilter, configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("ENVIRONMENT", "LOG_LEVEL", "LOG_FORMAT", "EVENT_HANDLER_FAIL_FAST"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.log_format == DEFAULT_LOG_FORMAT
    assert settings.event_handler_fail_fast is False
    assert settings.is_production is False


def test_reads_environment(clean_env):
    clean_env.setenv("ENVIRONMENT", "production")
    clean_env.setenv("LOG_LEVEL", "warning")
    clean_env.setenv("EVENT_HANDLER_FAIL_FAST", "yes")

    settings = Settings()

    assert settings.is_production
    assert settings.log_level == "WARNING"
    assert settings.event_handler_fail_fast is True


def test_invalid_log_level_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
        Settings()


def test_invalid_boolean_rejected(clean_env):
    clean_env.setenv("EVENT_HANDLER_FAIL_FAST", "maybe")

    with pytest.raises(ValueError, match="Invalid boolean for EVENT_HANDLER_FAIL_FAST"):
        Settings()


def test_configure_logging_applies_level(clean_env, monkeypatch):
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(Settings())

    assert calls["level"] == logging.DEBUG
    assert calls["format"] == DEFAULT_LOG_FORMAT
    assert calls["force"] is True


def test_job_context_filter_sets_default_job_id():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert JobContextFilter().filter(record) is True
    assert record.job_id == "-"
