"""
GUI Factory - Abstract Factory for platform product families.

A GUI factory creates a button and a checkbox. Both always belong to the
factory's own platform, so products from one factory are compatible.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Type, Union

from src.core.constants import Platform
from src.core.exceptions import UnknownPlatformError
from src.core.logging import get_logger
from src.products.base import Button, Checkbox
from src.products.windows import WindowsButton, WindowsCheckbox
from src.products.mac import MacButton, MacCheckbox

logger = get_logger(__name__)


class GUIFactory(ABC):
    """
    Abstract factory for one platform's product family.

    Signatures return the abstract products; concrete factories
    instantiate the matching variants. Each call returns a fresh product.
    """

    platform: ClassVar[Platform]

    @abstractmethod
    def create_button(self) -> Button:
        """Create a button of this factory's platform."""
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        """Create a checkbox of this factory's platform."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(platform={self.platform.value!r})"


class WindowsFactory(GUIFactory):
    """Factory for Windows products."""

    platform = Platform.WINDOWS

    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    """Factory for Mac products."""

    platform = Platform.MAC

    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


_GUI_FACTORIES: Dict[Platform, Type[GUIFactory]] = {
    WindowsFactory.platform: WindowsFactory,
    MacFactory.platform: MacFactory,
}


def available_gui_platforms() -> List[Platform]:
    """Get the platforms that have a GUI factory."""
    return list(_GUI_FACTORIES)


def get_gui_factory(platform: Union[str, Platform]) -> GUIFactory:
    """
    Create the GUI factory for a platform.

    Args:
        platform: Platform enum member or case-insensitive platform name

    Returns:
        New GUIFactory instance

    Raises:
        UnknownPlatformError: If the platform has no GUI factory
    """
    available = [p.value for p in _GUI_FACTORIES]
    try:
        resolved = Platform.parse(platform)
    except ValueError as e:
        raise UnknownPlatformError(str(platform), available=available, cause=e) from e

    factory_cls = _GUI_FACTORIES.get(resolved)
    if factory_cls is None:
        raise UnknownPlatformError(resolved.value, available=available)

    logger.debug(f"Created {factory_cls.__name__} for {resolved.value}")
    return factory_cls()
