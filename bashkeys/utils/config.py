"""Application settings.

Settings are built from model defaults only; bk reads no config files and no
environment variables. Callers that need different display settings (tests,
embedding) construct their own ``AppConfig``.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from bashkeys import __version__


class DisplayConfig(BaseModel):
    """Pydantic model for table layout and styling."""

    indent: int = Field(default=2, ge=0)
    key_width: int = Field(default=12, ge=1)
    header_style: str = "bold"
    key_style: str = "cyan"
    description_style: str = ""


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseModel):
    """Pydantic model for overall application configuration."""

    prog: str = "bk"
    version: str = __version__
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the shared AppConfig instance"""
    global _config

    if _config is None:
        _config = AppConfig()

    return _config


def reset_config() -> None:
    """Reset the shared AppConfig instance (for testing purposes)"""
    global _config
    _config = None
