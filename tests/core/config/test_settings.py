"""Tests for environment-based settings."""

import pytest

from wacloud.core.config.settings import Settings

SETTINGS_ENV = [
    "API_VERSION",
    "BASE_URL",
    "WP_ACCESS_TOKEN",
    "WP_PHONE_ID",
    "WP_BID",
    "LOG_LEVEL",
    "LOG_HTTP_BODIES",
    "LOG_DIR",
    "ENVIRONMENT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.api_version == "v21.0"
    assert settings.base_url == "https://graph.facebook.com/"
    assert settings.wp_access_token is None
    assert settings.log_level == "INFO"
    assert settings.log_http_bodies is False
    assert settings.is_development
    assert not settings.is_production


def test_version_comes_from_pyproject(clean_env):
    assert Settings().version == "0.1.0"


def test_values_from_environment(clean_env):
    clean_env.setenv("API_VERSION", "v19.0")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_HTTP_BODIES", "True")
    clean_env.setenv("ENVIRONMENT", "prod")

    settings = Settings()

    assert settings.api_version == "v19.0"
    assert settings.log_level == "DEBUG"
    assert settings.log_http_bodies is True
    assert settings.is_production


def test_invalid_log_level_raises(clean_env):
    clean_env.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings()


def test_unknown_environment_falls_back_to_dev(clean_env):
    clean_env.setenv("ENVIRONMENT", "staging")

    assert Settings().environment == "DEV"


def test_require_credentials(clean_env):
    settings = Settings()
    with pytest.raises(ValueError, match="WP_ACCESS_TOKEN is required"):
        settings.require_credentials()

    clean_env.setenv("WP_ACCESS_TOKEN", "token")
    settings = Settings()
    with pytest.raises(ValueError, match="WP_PHONE_ID is required"):
        settings.require_credentials()

    clean_env.setenv("WP_PHONE_ID", "123")
    assert Settings().require_credentials() == ("token", "123")


def test_blank_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("API_VERSION", "   ")
    clean_env.setenv("WP_PHONE_ID", "")

    settings = Settings()

    assert settings.api_version == "v21.0"
    assert settings.wp_phone_id is None


def test_repr_hides_access_token(clean_env):
    clean_env.setenv("WP_ACCESS_TOKEN", "very-secret-token")

    text = repr(Settings())

    assert "very-secret-token" not in text
    assert "wp_access_token=set" in text
