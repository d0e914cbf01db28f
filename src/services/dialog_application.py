"""
Dialog Application - client of the Factory Method creator.
"""

from typing import List

from src.core.logging import get_logger
from src.factories.dialog import Dialog
from src.products.base import ActionRecord

logger = get_logger(__name__)


class DialogApplication:
    """Client holding one dialog for its lifetime."""

    def __init__(self, dialog: Dialog):
        """
        Initialize Dialog Application.

        Args:
            dialog: Dialog whose orchestration this application triggers
        """
        self._dialog = dialog

    def on_click(self) -> List[ActionRecord]:
        """
        Trigger the dialog's render orchestration.

        Returns:
            Records emitted by the dialog's button; empty if it has none
        """
        records = self._dialog.render()
        logger.debug(f"{self._dialog!r} emitted {len(records)} record(s)")
        return records
