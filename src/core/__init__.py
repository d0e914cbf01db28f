"""
Core infrastructure modules for the GUI pattern demos.

This package provides:
- Configuration management
- Logging setup
- Exception hierarchy
- Platform and action constants
"""

from src.core.config import Config, get_config, reset_config
from src.core.logging import setup_logging, get_logger
from src.core.exceptions import (
    GUIDemoError,
    ConfigurationError,
    UnknownPlatformError,
)
from src.core.constants import (
    Platform,
    Actions,
    ActionMessages,
    DemoDefaults,
)

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "setup_logging",
    "get_logger",
    "GUIDemoError",
    "ConfigurationError",
    "UnknownPlatformError",
    "Platform",
    "Actions",
    "ActionMessages",
    "DemoDefaults",
]
