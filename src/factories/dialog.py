"""
Dialog - Factory Method creator for dialog buttons.

The creation step is injected instead of overridden: a dialog holds an
optional button creator. Without one, ``create_button`` returns ``None``
and ``render`` does nothing.
"""

from typing import Callable, Dict, List, Optional, Union

from src.core.constants import Platform
from src.core.exceptions import UnknownPlatformError
from src.core.logging import get_logger
from src.products.base import ActionRecord, DialogButton
from src.products.windows import WindowsDialogButton
from src.products.web import WebDialogButton

logger = get_logger(__name__)

ButtonCreator = Callable[[], Optional[DialogButton]]


class Dialog:
    """
    Creator whose orchestration uses the button it creates.

    ``render`` is fixed: create a button, then click it, then render it.
    Only the creation step varies between dialogs.
    """

    def __init__(self, button_creator: Optional[ButtonCreator] = None):
        """
        Initialize Dialog.

        Args:
            button_creator: Optional zero-argument callable returning the
                dialog's button. If None, the dialog creates no button.
        """
        self._button_creator = button_creator

    def create_button(self) -> Optional[DialogButton]:
        """
        Create this dialog's button.

        Returns:
            DialogButton instance, or None when no creator is configured
        """
        if self._button_creator is None:
            return None
        return self._button_creator()

    def render(self) -> List[ActionRecord]:
        """
        Create the button and run it through click and render.

        Returns:
            Records in the order produced; empty if no button was created
        """
        ok_button = self.create_button()
        if ok_button is None:
            logger.debug("Dialog created no button, nothing to render")
            return []

        return [ok_button.on_click(), ok_button.render()]

    def __repr__(self) -> str:
        creator = getattr(self._button_creator, "__name__", self._button_creator)
        return f"{self.__class__.__name__}(button_creator={creator!r})"


_BUTTON_CREATORS: Dict[Platform, ButtonCreator] = {
    Platform.WINDOWS: WindowsDialogButton,
    Platform.WEB: WebDialogButton,
}


def available_dialog_platforms() -> List[Platform]:
    """Get the platforms that have a dialog button creator."""
    return list(_BUTTON_CREATORS)


def create_dialog(platform: Union[str, Platform]) -> Dialog:
    """
    Create a dialog that builds buttons for a platform.

    Args:
        platform: Platform enum member or case-insensitive platform name

    Returns:
        Dialog configured with the platform's button creator

    Raises:
        UnknownPlatformError: If the platform has no dialog button
    """
    available = [p.value for p in _BUTTON_CREATORS]
    try:
        resolved = Platform.parse(platform)
    except ValueError as e:
        raise UnknownPlatformError(str(platform), available=available, cause=e) from e

    creator = _BUTTON_CREATORS.get(resolved)
    if creator is None:
        raise UnknownPlatformError(resolved.value, available=available)

    logger.debug(f"Created dialog for {resolved.value}")
    return Dialog(button_creator=creator)
