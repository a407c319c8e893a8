"""Application settings powered by Pydantic BaseSettings."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gemfetch.fetch.constants import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT_SECONDS


class AppSettings(BaseSettings):
    """Environment defaults for the command line client.

    The protocol core never reads the environment; these only seed CLI
    options.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMFETCH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_redirects: Annotated[int, Field(ge=0, le=100)] = DEFAULT_MAX_REDIRECTS
    validate_certificate: bool = False
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
