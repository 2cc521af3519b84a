"""Unit tests for pydantic-settings configuration."""

from tubebrief.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("API_BASE_URL", "API_TOKEN", "REQUEST_TIMEOUT", "ANALYSIS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "http://localhost:3000"
    assert settings.api_token == ""
    assert settings.request_timeout == 30.0
    assert settings.analysis_timeout == 120.0
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://tubebrief.example.com")
    monkeypatch.setenv("analysis_timeout", "300")

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "https://tubebrief.example.com"
    assert settings.analysis_timeout == 300.0


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
