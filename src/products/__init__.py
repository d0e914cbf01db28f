"""
GUI products grouped by platform family.

Clients should depend on the contracts (``Button``, ``Checkbox``,
``DialogButton``) and never on a concrete variant.
"""

from src.products.base import (
    ActionRecord,
    Product,
    Button,
    Checkbox,
    DialogButton,
)
from src.products.windows import WindowsButton, WindowsCheckbox, WindowsDialogButton
from src.products.mac import MacButton, MacCheckbox
from src.products.web import WebDialogButton

__all__ = [
    "ActionRecord",
    "Product",
    "Button",
    "Checkbox",
    "DialogButton",
    "WindowsButton",
    "WindowsCheckbox",
    "WindowsDialogButton",
    "MacButton",
    "MacCheckbox",
    "WebDialogButton",
]
