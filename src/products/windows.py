"""Windows product family."""

from src.core.constants import Platform, Actions
from src.products.base import ActionRecord, Button, Checkbox, DialogButton


class WindowsButton(Button):
    platform = Platform.WINDOWS

    def send_event(self) -> ActionRecord:
        return self._record(Actions.SEND_EVENT)


class WindowsCheckbox(Checkbox):
    platform = Platform.WINDOWS

    def render_image(self) -> ActionRecord:
        return self._record(Actions.RENDER_IMAGE)


class WindowsDialogButton(DialogButton):
    platform = Platform.WINDOWS

    def render(self) -> ActionRecord:
        return self._record(Actions.RENDER)

    def on_click(self) -> ActionRecord:
        return self._record(Actions.ON_CLICK)
