from __future__ import annotations

import os
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field("sqlite:///salud.db", alias="DATABASE_URL")
    session_secret: str = Field(..., alias="SESSION_SECRET")
    session_ttl_seconds: int = Field(7 * 24 * 3600, alias="SESSION_TTL_SECONDS")

    allowed_emails_raw: str = Field("", alias="ALLOWED_EMAILS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_emails(self) -> List[str]:
        return [email.strip().lower() for email in self.allowed_emails_raw.split(",") if email.strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


# For local dev convenience only.
if os.getenv("BACKEND_DEBUG_SETTINGS"):
    print(get_settings())
