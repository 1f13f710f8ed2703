"""Tests for environment-driven configuration."""

import importlib

import dotenv
import pytest

import envelope_api
from envelope_api import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module under a patched environment, then restore it."""
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


def test_config_loads_dotenv_on_import(reload_config):
    calls = []
    reload_config.setattr(dotenv, "load_dotenv", lambda *args, **kwargs: calls.append(args) or True)

    importlib.reload(config)

    assert calls


def test_config_reads_environment(reload_config):
    reload_config.setenv("APP_TITLE", "Orders API")
    reload_config.setenv("LOG_LEVEL", "debug")
    reload_config.setenv("CORS_ORIGINS", " https://a.example , ,https://b.example")

    importlib.reload(config)

    assert config.APP_TITLE == "Orders API"
    assert config.LOG_LEVEL == "DEBUG"
    assert config.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_package_exports_envelope_helpers():
    assert envelope_api.ResResult.with_success(1).status_code == 200
    assert set(envelope_api.__all__) == {"ResResult", "error_response", "success_response"}
