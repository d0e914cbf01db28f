"""
Creational pattern implementations.

This package provides the Abstract Factory (``GUIFactory``) and the
Factory Method creator (``Dialog``), plus lookups by platform.
"""

from src.factories.gui_factory import (
    GUIFactory,
    WindowsFactory,
    MacFactory,
    get_gui_factory,
    available_gui_platforms,
)
from src.factories.dialog import (
    Dialog,
    ButtonCreator,
    create_dialog,
    available_dialog_platforms,
)

__all__ = [
    "GUIFactory",
    "WindowsFactory",
    "MacFactory",
    "get_gui_factory",
    "available_gui_platforms",
    "Dialog",
    "ButtonCreator",
    "create_dialog",
    "available_dialog_platforms",
]
