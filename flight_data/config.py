from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Central configuration for the Flight Data public site.

    - Reads from .env (local) and process environment.
    - Ignores extra env vars so adding new ones doesn't break startup.
    - Field names are accepted alongside env aliases so tests can build
      Settings(...) directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # Core app
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Flight Data", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    environment: str = Field(default="local", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Bind address for the bundled Uvicorn launcher.
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")

    # -------------------------------------------------------------------------
    # Localization
    # -------------------------------------------------------------------------
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")

    # -------------------------------------------------------------------------
    # Visitor session + identity service
    # -------------------------------------------------------------------------
    # Cookie issued by the identity service once a visitor signs in.
    session_cookie_name: str = Field(
        default="flight_data_session",
        alias="SESSION_COOKIE_NAME",
    )

    # The /login and /register routes only exist when these are set.
    login_url: Optional[str] = Field(default=None, alias="LOGIN_URL")
    register_url: Optional[str] = Field(default=None, alias="REGISTER_URL")

    dashboard_path: str = Field(default="/dashboard", alias="DASHBOARD_PATH")

    # -------------------------------------------------------------------------
    # Assets
    # -------------------------------------------------------------------------
    tailwind_cdn_url: str = Field(
        default="https://cdn.tailwindcss.com",
        alias="TAILWIND_CDN_URL",
    )

    @property
    def login_enabled(self) -> bool:
        return bool(self.login_url and self.login_url.strip())

    @property
    def registration_enabled(self) -> bool:
        return bool(self.register_url and self.register_url.strip())


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader so config is evaluated once per process.
    """
    settings = Settings()
    logger.info(
        "Settings loaded (env=%s, debug=%s, login=%s, register=%s)",
        settings.environment,
        settings.debug,
        settings.login_enabled,
        settings.registration_enabled,
    )
    return settings


# Singleton used everywhere else
settings: Settings = get_settings()
