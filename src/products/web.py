"""Web product family. Only dialog buttons exist for the web."""

from src.core.constants import Platform, Actions
from src.products.base import ActionRecord, DialogButton


class WebDialogButton(DialogButton):
    platform = Platform.WEB

    def render(self) -> ActionRecord:
        return self._record(Actions.RENDER)

    def on_click(self) -> ActionRecord:
        return self._record(Actions.ON_CLICK)
