"""
rbaclite configuration management.

Loads configuration from environment variables or .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RbacLiteConfig(BaseSettings):
    """
    rbaclite configuration settings.

    Can be loaded from:
    1. Environment variables (RBACLITE_DEBUG, RBACLITE_LOG_LEVEL, ...)
    2. .env file in project root
    3. Direct instantiation with kwargs

    The store itself needs no configuration; these settings drive the
    command line tools.

    Example:
        ```python
        # From environment
        config = RbacLiteConfig()

        # Direct instantiation
        config = RbacLiteConfig(debug=True, seed_file="roles.json")
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="RBACLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used when debug is off",
    )

    seed_file: Optional[Path] = Field(
        default=None,
        description="Default seed file for CLI commands",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def load_config(**kwargs) -> RbacLiteConfig:
    """
    Load rbaclite configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (RBACLITE_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        RbacLiteConfig instance

    Raises:
        ValidationError: If a value is invalid
    """
    return RbacLiteConfig(**kwargs)
