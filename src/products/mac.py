"""Mac product family."""

from src.core.constants import Platform, Actions
from src.products.base import ActionRecord, Button, Checkbox


class MacButton(Button):
    platform = Platform.MAC

    def send_event(self) -> ActionRecord:
        return self._record(Actions.SEND_EVENT)


class MacCheckbox(Checkbox):
    platform = Platform.MAC

    def render_image(self) -> ActionRecord:
        return self._record(Actions.RENDER_IMAGE)
