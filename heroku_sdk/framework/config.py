"""
heroku_sdk.framework.config
────────────────────────────
Typed client configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic; invalid values fail when the
config is first loaded, not on the first request.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "0.1.0"

DEFAULT_API_URL = "https://api.heroku.com"


class HerokuConfig(BaseSettings):
    """
    Typed Heroku client configuration.
    Every field maps to a HEROKU_* environment variable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Credentials ───────────────────────────────────────────────────────────
    api_key: SecretStr | None = Field(default=None, alias="HEROKU_API_KEY")

    # ── Transport ─────────────────────────────────────────────────────────────
    api_base_url: str = Field(default=DEFAULT_API_URL, alias="HEROKU_API_URL")
    api_version: str = Field(default="3", alias="HEROKU_API_VERSION")
    user_agent: str = Field(
        default=f"heroku-sdk/{SDK_VERSION}", min_length=1, alias="HEROKU_USER_AGENT"
    )
    timeout_seconds: float = Field(default=30.0, gt=0, alias="HEROKU_TIMEOUT")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="HEROKU_LOG_LEVEL")
    log_format: str = Field(default="json", alias="HEROKU_LOG_FORMAT")

    # ── Error reporting ───────────────────────────────────────────────────────
    error_backend: str = Field(default="none", alias="HEROKU_ERROR_BACKEND")

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()

    @property
    def accept_header(self) -> str:
        return f"application/vnd.heroku+json; version={self.api_version}"


@lru_cache(maxsize=1)
def get_config() -> HerokuConfig:
    """
    Return the singleton client config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return HerokuConfig()


def _reset_config() -> None:
    """For tests: clear the config cache."""
    get_config.cache_clear()
