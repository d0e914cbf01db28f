"""
Centralized configuration management for the GUI pattern demos.

This module provides a singleton configuration object that loads and validates
environment variables and an optional ``.env`` file.
"""

import os
from pathlib import Path
from typing import Annotated, Optional, List, Dict, Any

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.constants import Platform, DemoDefaults
from src.core.exceptions import ConfigurationError
from src.core.logging import resolve_level


def _parse_platforms(value: Any) -> List[Platform]:
    """Parse a comma-separated string or a sequence into platforms."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [item for item in value.split(",") if item.strip()]
    return [Platform.parse(item) for item in value]


class Config(BaseSettings):
    """Main configuration class for the demos."""

    model_config = SettingsConfigDict(
        env_prefix=DemoDefaults.ENV_PREFIX,
        env_file=None,  # .env loading is handled manually in load()
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default=DemoDefaults.LOG_LEVEL, description="Logging level")
    log_format: str = Field(
        default=DemoDefaults.LOG_FORMAT, description="Log format: human or json"
    )
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    factory_platforms: Annotated[List[Platform], NoDecode] = Field(
        default_factory=lambda: list(DemoDefaults.FACTORY_PLATFORMS),
        description="Platforms run by the abstract factory demo",
    )
    dialog_platforms: Annotated[List[Platform], NoDecode] = Field(
        default_factory=lambda: list(DemoDefaults.DIALOG_PLATFORMS),
        description="Platforms run by the factory method demo",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level names a standard logging level."""
        resolve_level(v)
        return v.strip().upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure the log format is supported."""
        fmt = v.strip().lower()
        if fmt not in DemoDefaults.LOG_FORMATS:
            raise ValueError(
                f"Unknown log format: {v!r} (expected one of {DemoDefaults.LOG_FORMATS})"
            )
        return fmt

    @field_validator("factory_platforms", "dialog_platforms", mode="before")
    @classmethod
    def validate_platforms(cls, v: Any) -> List[Platform]:
        """Accept comma-separated platform names."""
        return _parse_platforms(v)

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables and optional .env file.

        Args:
            env_file: Optional path to .env file. If None, will try common locations.

        Returns:
            Config instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        env_paths = [
            Path(".env"),  # Current directory
            Path(__file__).parent.parent.parent / ".env",  # Project root
        ]

        if env_file:
            env_paths.insert(0, env_file)

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path, override=True)
                break

        prefix = DemoDefaults.ENV_PREFIX
        values: Dict[str, Any] = {
            "log_level": os.getenv(f"{prefix}LOG_LEVEL", DemoDefaults.LOG_LEVEL),
            "log_format": os.getenv(f"{prefix}LOG_FORMAT", DemoDefaults.LOG_FORMAT),
        }
        log_file = os.getenv(f"{prefix}LOG_FILE")
        if log_file:
            values["log_file"] = Path(log_file)
        factory_platforms = os.getenv(f"{prefix}FACTORY_PLATFORMS")
        if factory_platforms is not None:
            values["factory_platforms"] = factory_platforms
        dialog_platforms = os.getenv(f"{prefix}DIALOG_PLATFORMS")
        if dialog_platforms is not None:
            values["dialog_platforms"] = dialog_platforms

        try:
            return cls(**values)
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}",
                details={"error_type": type(e).__name__},
                cause=e,
            ) from e


# Singleton instance
_config: Optional[Config] = None


def get_config(env_file: Optional[Path] = None) -> Config:
    """
    Get the global configuration instance (singleton pattern).

    Args:
        env_file: Optional path to .env file

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config.load(env_file=env_file)
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
