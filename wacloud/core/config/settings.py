"""
Environment configuration for the wacloud SDK.

Values come from the process environment, with a local ``.env`` loaded first.
WhatsApp credentials may be absent: the template models work without an
account, and credentials are only demanded by ``require_credentials()`` when a
messenger is built from settings.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(".env")

DEFAULT_API_VERSION = "v21.0"
DEFAULT_BASE_URL = "https://graph.facebook.com/"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
ENVIRONMENTS = ("DEV", "PROD")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALLBACK_VERSION = "0.1.0"


def _read_project_version() -> str:
    """Return the version declared in the nearest pyproject.toml above this file."""
    here = Path(__file__).resolve()
    for directory in here.parents:
        candidate = directory / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            with candidate.open("rb") as f:
                project = tomllib.load(f).get("project", {})
        except (OSError, tomllib.TOMLDecodeError):
            continue
        if project.get("name") == "wacloud" and project.get("version"):
            return project["version"]
    return _FALLBACK_VERSION


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_bool(name: str) -> bool:
    return (_env_str(name) or "").lower() in _TRUE_VALUES


class Settings:
    """SDK settings read once from the environment."""

    def __init__(self):
        self.version: str = _read_project_version()

        # Graph API
        self.api_version: str = _env_str("API_VERSION", DEFAULT_API_VERSION)
        self.base_url: str = _env_str("BASE_URL", DEFAULT_BASE_URL)

        # Credentials for the sending phone number
        self.wp_access_token: str | None = _env_str("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = _env_str("WP_PHONE_ID")
        self.wp_bid: str | None = _env_str("WP_BID")

        # Logging
        self.log_level: str = self._parse_log_level(_env_str("LOG_LEVEL", "INFO"))
        self.log_http_bodies: bool = _env_bool("LOG_HTTP_BODIES")
        self.log_dir: str = _env_str("LOG_DIR", "./logs")

        environment = (_env_str("ENVIRONMENT", "DEV")).upper()
        self.environment: str = environment if environment in ENVIRONMENTS else "DEV"

    @staticmethod
    def _parse_log_level(value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")
        return level

    def __repr__(self) -> str:
        token = "set" if self.wp_access_token else "unset"
        return (
            f"Settings(api_version={self.api_version!r}, "
            f"wp_phone_id={self.wp_phone_id!r}, wp_access_token={token}, "
            f"environment={self.environment!r})"
        )

    def require_credentials(self) -> tuple[str, str]:
        """Return ``(access_token, phone_id)``.

        Raises:
            ValueError: If WP_ACCESS_TOKEN or WP_PHONE_ID is not configured
        """
        if not self.wp_access_token:
            raise ValueError("WP_ACCESS_TOKEN is required")
        if not self.wp_phone_id:
            raise ValueError("WP_PHONE_ID is required")
        return self.wp_access_token, self.wp_phone_id

    @property
    def is_development(self) -> bool:
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        return self.environment == "PROD"


settings = Settings()
