"""
Client configuration management using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SELENIUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hub
    hub_host: str = "http://localhost"
    hub_port: int = 4444
    hub_path: str = "/wd/hub"

    # Session
    default_browser: str = "firefox"

    # Transport
    http_timeout: float = 30.0  # seconds

    # Waits
    poll_interval: float = Field(default=1.0, gt=0)  # seconds
    wait_timeout: float = Field(default=5, ge=0)  # seconds

    # Storage
    screenshots_directory: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @property
    def hub_url(self) -> str:
        return f"{self.hub_host}:{self.hub_port}{self.hub_path}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
