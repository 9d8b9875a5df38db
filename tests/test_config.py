import logging

import pytest

from convertme.config import get_settings, parse_log_level, strict_enabled
from convertme.errors import ConfigurationError


def test_defaults():
    settings = get_settings()
    assert settings.strict is False
    assert settings.log_level == "warning"
    assert settings.log_level_value == logging.WARNING


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_strict_truthy_values(monkeypatch, value):
    monkeypatch.setenv("CONVERTME_STRICT", value)
    assert get_settings().strict is True


@pytest.mark.parametrize("value", ["", "0", "false", "nope"])
def test_strict_falsy_values(monkeypatch, value):
    monkeypatch.setenv("CONVERTME_STRICT", value)
    assert get_settings().strict is False


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("CONVERTME_LOG_LEVEL", "DEBUG")
    settings = get_settings()
    assert settings.log_level == "debug"
    assert settings.log_level_value == logging.DEBUG


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CONVERTME_LOG_LEVEL", "loud")
    with pytest.raises(ConfigurationError, match="CONVERTME_LOG_LEVEL"):
        get_settings()


def test_parse_log_level_names_its_source():
    assert parse_log_level(" Info ", source="--log-level") == "info"
    with pytest.raises(ConfigurationError, match="^--log-level must be one of"):
        parse_log_level("basic_format", source="--log-level")


def test_strict_enabled_ignores_log_level(monkeypatch):
    monkeypatch.setenv("CONVERTME_LOG_LEVEL", "loud")
    monkeypatch.setenv("CONVERTME_STRICT", "on")
    assert strict_enabled() is True
