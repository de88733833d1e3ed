"""Configuration loading for headping.

This module provides centralized configuration management:
- Load defaults from HEADPING_* environment variables and .env files
- Apply command-line overrides on top of the environment
- Validate configuration using pydantic
"""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Probe configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEADPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Probe loop configuration
    wait_ms: int = Field(
        default=1000,
        description="Milliseconds to sleep after each issued probe",
    )
    timeout_ms: int = Field(
        default=1000,
        description="Milliseconds allowed per probe before it counts as a timeout",
    )
    count: int | None = Field(
        default=None,
        description="Stop after this many probes (unset = run until interrupted)",
    )

    # Logging configuration
    log_level: LogLevel | None = Field(
        default=None,
        description="Log level; overrides the level derived from -v when set",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("wait_ms")
    @classmethod
    def validate_wait(cls, v: int) -> int:
        """Ensure wait interval is non-negative."""
        if v < 0:
            raise ValueError("wait_ms must be non-negative")
        return v

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Ensure timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_ms must be positive")
        return v

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int | None) -> int | None:
        """Ensure probe count, when given, is positive."""
        if v is not None and v <= 0:
            raise ValueError("count must be positive")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v

    @property
    def wait_seconds(self) -> float:
        return self.wait_ms / 1000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def load_settings(env_file: str | None = None, **overrides: Any) -> Settings:
    """Load settings from environment, then apply explicit overrides.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.
        **overrides: Field values taken from the command line. Entries
                 whose value is None are ignored so the environment
                 default stays in effect.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    if env_file:
        return Settings(_env_file=env_file, **values)  # type: ignore[call-arg]
    return Settings(**values)


__all__ = ["LogLevel", "Settings", "load_settings"]
