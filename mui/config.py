"""Runtime configuration based on environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MUI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    locales_path: Path = Field(
        default=Path("locales"),
        description="Directory holding one <locale>.mui file per locale.",
    )
    default_locale: str = Field(default="en", min_length=1)
    sample_key: str = Field(
        default="greeting",
        description="Key looked up in every locale when the entrypoint starts.",
    )
    enable_logging: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> CatalogSettings:
    """Return cached settings instance."""

    return CatalogSettings()


__all__ = ["CatalogSettings", "get_settings"]
