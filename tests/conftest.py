"""
Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests.
"""

import pytest
from unittest.mock import Mock

from src.core.config import Config, reset_config
from src.core.constants import Platform, DemoDefaults

CONFIG_ENV_VARS = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "FACTORY_PLATFORMS",
    "DIALOG_PLATFORMS",
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Isolate tests from GUI_DEMO_* variables and .env files on the host."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(f"{DemoDefaults.ENV_PREFIX}{name}", raising=False)
    monkeypatch.setattr("src.core.config.load_dotenv", Mock(return_value=False))


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset config singleton before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def default_config() -> Config:
    """Provide a configuration with default values."""
    return Config()


@pytest.fixture
def mock_config() -> Mock:
    """Provide a mock configuration object."""
    config = Mock(spec=Config)
    config.log_level = "INFO"
    config.log_format = "human"
    config.log_file = None
    config.factory_platforms = [Platform.WINDOWS, Platform.MAC]
    config.dialog_platforms = [Platform.WINDOWS, Platform.WEB]
    return config


@pytest.fixture
def expected_full_run() -> list:
    """Provide the output lines of a full default run."""
    return [
        "Image was rendered by Windows application",
        "Event sent by Windows application",
        "Image was rendered by Mac application",
        "Event sent by Mac application",
        "Button clicked by Windows Application",
        "Button rendered by Windows Application",
        "Button clicked by Web Application",
        "Button rendered by Web Application",
    ]
