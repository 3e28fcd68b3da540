"""
Settings and logging setup for the QA service.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///qa_service.sqlite"  # file in working directory

LOG_FORMAT = "%(asctime)s [%(levelname)s] [qa-service] %(name)s: %(message)s"

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8080


class Settings(BaseSettings):
    """Environment-backed settings; DATABASE_URL is the only knob."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    database_url: str = Field(default=DEFAULT_DATABASE_URL)

    @property
    def using_default_database(self) -> bool:
        return self.database_url == DEFAULT_DATABASE_URL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
