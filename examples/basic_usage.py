#!/usr/bin/env python3
"""
Basic Usage Examples

This module demonstrates wiring the pattern demos by hand.
"""

from src.core.logging import setup_logging
from src.factories.dialog import Dialog, create_dialog
from src.factories.gui_factory import get_gui_factory, MacFactory
from src.products.web import WebDialogButton
from src.services.demo_service import DemoService
from src.services.dialog_application import DialogApplication
from src.services.gui_application import GUIApplication


def example_abstract_factory():
    """Example: Build an application from a GUI factory."""
    for factory in (get_gui_factory("Windows"), MacFactory()):
        application = GUIApplication(factory=factory)
        print(application.render_image())
        print(application.send_event())


def example_factory_method():
    """Example: Inject a button creator into a dialog."""
    application = DialogApplication(dialog=Dialog(button_creator=WebDialogButton))
    for record in application.on_click():
        print(record)

    # Same thing through the platform lookup
    for record in DialogApplication(dialog=create_dialog("Windows")).on_click():
        print(record)


def example_default_dialog():
    """Example: A dialog without a creator emits nothing."""
    records = DialogApplication(dialog=Dialog()).on_click()
    print(f"Default dialog emitted {len(records)} record(s)")


def example_demo_service():
    """Example: Run both demos from configuration."""
    for record in DemoService().run_all():
        print(record.to_dict())


if __name__ == "__main__":
    setup_logging(level="DEBUG")
    print("Basic Usage Examples")
    print("=" * 50)

    example_abstract_factory()
    example_factory_method()
    example_default_dialog()
    example_demo_service()
