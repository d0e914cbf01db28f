"""
Unit tests for the Dialog factory method creator.
"""

import pytest
from unittest.mock import Mock

from src.core.constants import Platform, Actions
from src.core.exceptions import UnknownPlatformError
from src.factories.dialog import Dialog, create_dialog, available_dialog_platforms
from src.products.base import DialogButton
from src.products.windows import WindowsDialogButton
from src.products.web import WebDialogButton


class TestDialog:
    """Test cases for Dialog."""

    def test_default_creates_no_button(self):
        """Test that a dialog without a creator returns None."""
        assert Dialog().create_button() is None

    def test_render_without_button_is_noop(self):
        """Test that rendering with no button emits nothing."""
        assert Dialog().render() == []

    def test_render_with_creator_returning_none(self):
        """Test that a creator may also return None."""
        assert Dialog(button_creator=lambda: None).render() == []

    def test_create_button_uses_creator(self):
        """Test that the injected creator is called for each button."""
        dialog = Dialog(button_creator=WindowsDialogButton)
        first = dialog.create_button()
        second = dialog.create_button()
        assert isinstance(first, WindowsDialogButton)
        assert first is not second

    def test_render_clicks_then_renders(self):
        """Test that orchestration clicks before rendering."""
        button = Mock(spec=DialogButton)
        calls = []
        button.on_click.side_effect = lambda: calls.append("on_click") or "clicked"
        button.render.side_effect = lambda: calls.append("render") or "rendered"

        records = Dialog(button_creator=lambda: button).render()

        assert calls == ["on_click", "render"]
        assert records == ["clicked", "rendered"]

    @pytest.mark.parametrize("platform", [Platform.WINDOWS, Platform.WEB])
    def test_render_records(self, platform):
        """Test the records emitted by each platform's dialog."""
        records = create_dialog(platform).render()

        assert [r.action for r in records] == [Actions.ON_CLICK, Actions.RENDER]
        assert all(r.platform is platform for r in records)


class TestCreateDialog:
    """Test cases for dialog lookup by platform."""

    @pytest.mark.parametrize(
        "platform, expected",
        [("Windows", WindowsDialogButton), ("web", WebDialogButton)],
    )
    def test_lookup(self, platform, expected):
        """Test that a platform resolves to a dialog with its button."""
        assert isinstance(create_dialog(platform).create_button(), expected)

    def test_platform_without_dialog(self):
        """Test that Mac has no dialog button."""
        with pytest.raises(UnknownPlatformError) as exc_info:
            create_dialog(Platform.MAC)
        assert exc_info.value.available == ["Windows", "Web"]

    def test_unknown_platform_name(self):
        """Test that an unknown name raises UnknownPlatformError."""
        with pytest.raises(UnknownPlatformError):
            create_dialog("Linux")

    def test_available_platforms(self):
        """Test the list of platforms with a dialog button."""
        assert available_dialog_platforms() == [Platform.WINDOWS, Platform.WEB]
