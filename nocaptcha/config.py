"""
Library configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

Keys are read as raw strings; NoCaptcha validates them at construction so a
missing key stops startup with EmptyKeyError instead of a settings error.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_secret: str = ""
    recaptcha_sitekey: str = ""
    recaptcha_lang: Optional[str] = None

    # Seconds to wait for siteverify
    recaptcha_timeout: float = Field(default=5.0, gt=0)

    @field_validator("recaptcha_lang")
    @classmethod
    def _blank_lang_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: Optional[str] = None
    log_format: Optional[str] = None  # "json" in production

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def resolved_log_level(self) -> str:
        return self.log_level or ("INFO" if self.is_production else "DEBUG")

    @property
    def resolved_log_format(self) -> str:
        return self.log_format or ("json" if self.is_production else "console")
