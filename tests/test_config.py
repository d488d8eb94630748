"""Tests for the settings layer."""

from conexa.core.config import API_PREFIX, Settings, get_settings


def test_api_endpoint_strips_trailing_slash():
    settings = Settings(api_host="https://acme.conexa.app/")
    assert settings.api_host == "https://acme.conexa.app"
    assert settings.api_endpoint == "https://acme.conexa.app" + API_PREFIX


def test_defaults():
    settings = Settings()
    assert settings.default_client_key == "default"
    assert settings.login_path == "/pdvauth"
    assert settings.refresh_path == "/refresh-token"
    assert settings.token_refresh_leeway == 0
    assert settings.api_token is None
    assert settings.credentials is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONEXA_API_HOST", "https://env.conexa.app")
    monkeypatch.setenv("CONEXA_CLIENT_ID", "77")
    monkeypatch.setenv("CONEXA_CREDENTIALS", '[{"client_id": "1", "key": "shop"}]')
    settings = Settings()
    assert settings.api_host == "https://env.conexa.app"
    assert settings.client_id == "77"
    assert settings.credentials == [{"client_id": "1", "key": "shop"}]


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("CONEXA_API_HOST", "https://cached.conexa.app")
    first = get_settings()
    assert first is get_settings()
    assert first.api_host == "https://cached.conexa.app"
