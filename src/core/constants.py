"""
Constants used throughout the GUI pattern demos.

This module centralizes platform tags, action names and the literal
message each action emits.
"""

from enum import Enum
from typing import List, Dict, Union


class Platform(str, Enum):
    """Platform families a product or creator can belong to."""

    WINDOWS = "Windows"
    MAC = "Mac"
    WEB = "Web"

    @classmethod
    def parse(cls, value: Union[str, "Platform"]) -> "Platform":
        """
        Resolve a platform from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the value does not name a platform
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for platform in cls:
            if platform.value.lower() == normalized:
                return platform
        raise ValueError(f"Unknown platform: {value!r}")


class Actions:
    """Action names recorded by product operations."""

    SEND_EVENT = "send_event"
    RENDER_IMAGE = "render_image"
    RENDER = "render"
    ON_CLICK = "on_click"

    ALL: List[str] = [SEND_EVENT, RENDER_IMAGE, RENDER, ON_CLICK]


class ActionMessages:
    """Message templates per action, formatted with the platform name."""

    TEMPLATES: Dict[str, str] = {
        Actions.SEND_EVENT: "Event sent by {platform} application",
        Actions.RENDER_IMAGE: "Image was rendered by {platform} application",
        Actions.RENDER: "Button rendered by {platform} Application",
        Actions.ON_CLICK: "Button clicked by {platform} Application",
    }

    @classmethod
    def format(cls, action: str, platform: Platform) -> str:
        """Get the message for an action performed by a platform."""
        return cls.TEMPLATES[action].format(platform=platform.value)


class DemoDefaults:
    """Default platforms each demo runs with."""

    FACTORY_PLATFORMS: List[Platform] = [Platform.WINDOWS, Platform.MAC]
    DIALOG_PLATFORMS: List[Platform] = [Platform.WINDOWS, Platform.WEB]

    ENV_PREFIX = "GUI_DEMO_"
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "human"
    LOG_FORMATS: List[str] = ["human", "json"]
