"""
Capability contracts for GUI products.

This module defines the abstract products each platform family implements,
and the action record every product operation returns in place of printing.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Any

from pydantic import BaseModel, ConfigDict

from src.core.constants import Platform, ActionMessages
from src.core.logging import get_logger

logger = get_logger(__name__)


class ActionRecord(BaseModel):
    """
    Observable output of a single product operation.

    Attributes:
        platform: Family of the product that performed the action
        action: Action name (see ``Actions``)
        message: Human-readable line describing the action
    """

    model_config = ConfigDict(frozen=True)

    platform: Platform
    action: str
    message: str

    def __str__(self) -> str:
        """Return the output line for this record."""
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary."""
        return {
            "platform": self.platform.value,
            "action": self.action,
            "message": self.message,
        }


class Product(ABC):
    """
    Base class for all products.

    Products are stateless. A variant only has to declare its ``platform``
    and implement its contract's operations with ``_record``.
    """

    platform: ClassVar[Platform]

    def _record(self, action: str) -> ActionRecord:
        """Build the record for ``action`` and log it."""
        record = ActionRecord(
            platform=self.platform,
            action=action,
            message=ActionMessages.format(action, self.platform),
        )
        logger.debug(
            record.message,
            extra={"platform": record.platform.value, "action": record.action},
        )
        return record

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(platform={self.platform.value!r})"


class Button(Product):
    """Button produced by a GUI factory."""

    @abstractmethod
    def send_event(self) -> ActionRecord:
        """Send the button's event."""
        pass


class Checkbox(Product):
    """Checkbox produced by a GUI factory."""

    @abstractmethod
    def render_image(self) -> ActionRecord:
        """Render the checkbox image."""
        pass


class DialogButton(Product):
    """Button produced by a dialog's factory method."""

    @abstractmethod
    def render(self) -> ActionRecord:
        """Render the button."""
        pass

    @abstractmethod
    def on_click(self) -> ActionRecord:
        """Handle a click on the button."""
        pass
