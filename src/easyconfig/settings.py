"""Library settings powered by Pydantic BaseSettings."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibrarySettings(BaseSettings):
    """Logging settings of the library itself.

    These never feed configuration property values.
    """

    model_config = SettingsConfigDict(
        env_prefix="EASYCONFIG_", case_sensitive=False, extra="ignore"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_json: bool = Field(default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for the configured level name."""
        return logging.getLevelNamesMapping()[self.log_level]


def get_settings() -> LibrarySettings:
    """Get a settings instance."""
    return LibrarySettings()
