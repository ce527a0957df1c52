"""
Ambient settings for svg-less.

Uses Pydantic for type-safe, validated configuration with environment variable support.
Only logging is configured here; collector options are passed explicitly per run.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class SvgLessSettings(BaseSettings):
    """Process-wide settings for svg-less.

    Settings can be overridden via:
    1. Environment variables (prefixed with SVGLESS_)
    2. .env file in the working directory
    3. Programmatic overrides

    Example:
        export SVGLESS_LOG_LEVEL=DEBUG
        export SVGLESS_LOG_TO_FILE=true
    """

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )

    model_config = {
        "env_prefix": "SVGLESS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = SvgLessSettings()


def reload_settings() -> SvgLessSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = SvgLessSettings()
    return settings
