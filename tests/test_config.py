"""Tests for environment-driven settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from mui import config as config_module
from mui.config import CatalogSettings


def test_defaults(monkeypatch):
    for name in ("MUI_LOCALES_PATH", "MUI_DEFAULT_LOCALE", "MUI_ENABLE_LOGGING", "MUI_LOG_LEVEL", "MUI_SAMPLE_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = CatalogSettings(_env_file=None)

    assert settings.locales_path == Path("locales")
    assert settings.default_locale == "en"
    assert settings.sample_key == "greeting"
    assert settings.enable_logging is False
    assert settings.log_level_value == logging.INFO


def test_reads_prefixed_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("MUI_LOCALES_PATH", str(tmp_path))
    monkeypatch.setenv("MUI_DEFAULT_LOCALE", "en-UK")
    monkeypatch.setenv("MUI_ENABLE_LOGGING", "true")
    monkeypatch.setenv("MUI_LOG_LEVEL", "debug")

    settings = CatalogSettings(_env_file=None)

    assert settings.locales_path == tmp_path
    assert settings.default_locale == "en-UK"
    assert settings.enable_logging is True
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("MUI_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        CatalogSettings(_env_file=None)


def test_get_settings_is_cached(monkeypatch):
    config_module.get_settings.cache_clear()
    try:
        assert config_module.get_settings() is config_module.get_settings()
    finally:
        config_module.get_settings.cache_clear()
