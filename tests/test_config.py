"""Tests for NordigenSettings."""

from zoneinfo import ZoneInfo

import pytest

from nordigen.config import NordigenSettings, get_settings
from nordigen.constants import DEFAULT_USER_AGENT, NORDIGEN_API_BASE_URL
from nordigen.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("NORDIGEN_SECRET_ID", raising=False)
    monkeypatch.delenv("NORDIGEN_SECRET_KEY", raising=False)
    settings = NordigenSettings(_env_file=None)

    assert settings.base_url == NORDIGEN_API_BASE_URL
    assert settings.secret_id is None
    assert settings.secret_key is None
    assert settings.request_timeout == 30.0
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.zone() == ZoneInfo("UTC")


def test_loads_prefixed_environment_variables(monkeypatch):
    monkeypatch.setenv("NORDIGEN_SECRET_ID", "env-id")
    monkeypatch.setenv("NORDIGEN_SECRET_KEY", "env-key")
    monkeypatch.setenv("nordigen_timezone", "Europe/Riga")
    monkeypatch.setenv("NORDIGEN_REQUEST_TIMEOUT", "5")

    settings = NordigenSettings(_env_file=None)

    assert settings.secret_id == "env-id"
    assert settings.secret_key == "env-key"
    assert settings.request_timeout == 5.0
    assert settings.zone() == ZoneInfo("Europe/Riga")


def test_loads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("NORDIGEN_SECRET_ID", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("NORDIGEN_SECRET_ID=file-id\nUNRELATED=1\n")

    settings = NordigenSettings(_env_file=env_file)

    assert settings.secret_id == "file-id"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_unknown_timezone_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("NORDIGEN_TIMEZONE", "Europe/Atlantis")

    settings = NordigenSettings(_env_file=None)

    with pytest.raises(ConfigurationError, match="Unknown time zone: 'Europe/Atlantis'"):
        settings.zone()
