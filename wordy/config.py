"""
Configuration through environment variables.
All variables are prefixed with WORDY_.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Pygments style used to display generated code
    highlight_style: str = "monokai"

    model_config = SettingsConfigDict(env_prefix="WORDY_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    logging.getLogger("wordy").setLevel(settings.log_level.upper())
