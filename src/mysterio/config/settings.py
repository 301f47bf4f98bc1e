"""
Mysterio Process Settings

Values read from the process environment with pydantic-settings. These are
only fallbacks: every one of them can be overridden by an explicit argument
to the loader or a CLI flag.

The loader only reads ``LoaderSettings``, so a bad logging variable meant
for the CLI never affects ``ConfigMerger``.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mysterio.config.constants import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONFIG_DIR,
    DEFAULT_RC_FILENAME,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoaderSettings(BaseSettings):
    """Defaults for locating config files and the secret store."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
    )

    aws_region: str = Field(default=DEFAULT_AWS_REGION, alias="AWS_REGION")

    config_dir: str = Field(default=DEFAULT_CONFIG_DIR, alias="MYSTERIO_CONFIG_DIR")
    rc_path: str = Field(default=DEFAULT_RC_FILENAME, alias="MYSTERIO_RC_PATH")


class Settings(LoaderSettings):
    """Loader defaults plus the CLI's logging options."""

    environment: str | None = Field(default=None, alias="ENVIRONMENT")
    log_level: LogLevel = Field(default="WARNING", alias="MYSTERIO_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="MYSTERIO_LOG_JSON")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_loader_settings() -> LoaderSettings:
    """Read the loader settings from the current process environment."""
    return LoaderSettings()


def get_settings() -> Settings:
    """Read all settings from the current process environment.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    return Settings()
