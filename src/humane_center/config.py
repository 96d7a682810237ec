"""
Client configuration, read from ``HUMANE_*`` environment variables or ``.env``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://webapi.prod.humane.cloud/"
DEFAULT_SESSION_URL = "https://humane.center/api/auth/session"
DEFAULT_DEVICES_URL = "https://humane.center/account/devices"

# The backend rejects clients it does not recognise as a browser.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.5 Safari/605.1.15"
)


class HumaneCenterSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HUMANE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL)
    session_url: str = Field(default=DEFAULT_SESSION_URL)
    devices_url: str = Field(default=DEFAULT_DEVICES_URL)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    timeout: float = Field(default=30.0, gt=0)
    session_cookie: Optional[str] = Field(default=None, description="humane.center session cookie value")
    token_file: Path = Field(default=Path.home() / ".humane" / "config.json")

    always_refresh: bool = Field(default=True, description="Fetch a fresh session before every call")
    session_timeout: float = Field(default=60 * 5, gt=0, description="Token age (s) before a lazy refresh")

    page_size: int = Field(default=30, ge=1)
    search_debounce: float = Field(default=0.3, ge=0)
    search_concurrency: int = Field(default=8, ge=1)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


@lru_cache
def get_settings() -> HumaneCenterSettings:
    return HumaneCenterSettings()
