"""Runtime configuration using Pydantic Settings.

Values are read from environment variables (or an optional ``.env`` file)
with the ``INJECTION_`` prefix, e.g. ``INJECTION_ABORT_ON_MISSING=true``.
Retrieve the shared instance through ``get_settings``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class InjectionSettings(BaseSettings):
    """Settings for the dependency registry and its CLI."""

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by the CLI",
    )
    abort_on_missing: bool = Field(
        default=False,
        description="Abort the process instead of raising when a strict resolve misses",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str:
        """Upper-case the level name; the Literal type rejects unknown levels."""
        return "INFO" if v is None else str(v).upper()

    model_config = SettingsConfigDict(
        env_prefix="INJECTION_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> InjectionSettings:
    """Return the cached ``InjectionSettings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object.
    """

    return InjectionSettings()


__all__ = ["InjectionSettings", "get_settings"]
