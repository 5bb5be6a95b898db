"""Application settings for the Brackets API client."""

from collections.abc import Callable
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

BaseURLProvider = Callable[[], str]


class Settings(BaseSettings):
    """Runtime settings for the backend connection."""

    model_config = SettingsConfigDict(
        env_prefix="BRACKETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    mode: Literal["debug", "release"] = "debug"
    debug_base_url: str = "http://127.0.0.1:3000"
    release_base_url: str = "https://api.yourapp.com"
    request_timeout_s: float = 30.0
    resource_timeout_s: float = 60.0

    @property
    def is_production(self) -> bool:
        return self.mode == "release"

    @property
    def base_url(self) -> str:
        """Base URL selected by the build-mode switch; read fresh on every access."""
        url = self.release_base_url if self.is_production else self.debug_base_url
        return url.rstrip("/")

    def base_url_provider(self) -> BaseURLProvider:
        """Return an accessor bound to these settings."""
        return lambda: self.base_url
