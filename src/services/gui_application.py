"""
GUI Application - client of the Abstract Factory.

The application works with its factory and products only through the
abstract types, so any factory can be passed in without changing it.
"""

from typing import Optional

from src.core.logging import get_logger
from src.factories.gui_factory import GUIFactory
from src.products.base import ActionRecord, Button, Checkbox

logger = get_logger(__name__)


class GUIApplication:
    """
    Client holding one GUI factory and the products it created.

    Products are created once, at construction, and reused for every call.
    """

    def __init__(self, factory: GUIFactory):
        """
        Initialize GUI Application.

        Args:
            factory: GUIFactory used to create this application's products
        """
        self._factory = factory
        self._button: Optional[Button] = None
        self._checkbox: Optional[Checkbox] = None
        self._setup()

    def _setup(self) -> None:
        self._button = self._factory.create_button()
        self._checkbox = self._factory.create_checkbox()
        logger.debug(f"GUIApplication set up with {self._factory!r}")

    def send_event(self) -> Optional[ActionRecord]:
        """
        Send the button's event.

        Returns:
            ActionRecord, or None if the application holds no button
        """
        if self._button is None:
            return None
        return self._button.send_event()

    def render_image(self) -> Optional[ActionRecord]:
        """
        Render the checkbox image.

        Returns:
            ActionRecord, or None if the application holds no checkbox
        """
        if self._checkbox is None:
            return None
        return self._checkbox.render_image()
