"""
Service Layer implementation for the pattern demos.

This package provides the client applications of each creator and the
service that composes them.
"""

from src.services.gui_application import GUIApplication
from src.services.dialog_application import DialogApplication
from src.services.demo_service import DemoService

__all__ = [
    "GUIApplication",
    "DialogApplication",
    "DemoService",
]
