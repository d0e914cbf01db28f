"""
Unit tests for constants and exceptions.
"""

import pytest

from src.core.constants import Platform, Actions, ActionMessages
from src.core.exceptions import GUIDemoError, UnknownPlatformError


class TestPlatform:
    """Test cases for Platform enum."""

    @pytest.mark.parametrize("value", ["Windows", "windows", " WINDOWS ", Platform.WINDOWS])
    def test_parse(self, value):
        """Test that platform names are matched case-insensitively."""
        assert Platform.parse(value) is Platform.WINDOWS

    def test_parse_unknown(self):
        """Test that an unknown name raises ValueError."""
        with pytest.raises(ValueError):
            Platform.parse("Linux")

    def test_platform_is_str(self):
        """Test that platforms compare equal to their names."""
        assert Platform.MAC == "Mac"


class TestActionMessages:
    """Test cases for action message templates."""

    def test_every_action_has_a_template(self):
        """Test that each action has a message template."""
        assert set(ActionMessages.TEMPLATES) == set(Actions.ALL)

    def test_format(self):
        """Test message formatting with a platform name."""
        assert (
            ActionMessages.format(Actions.RENDER_IMAGE, Platform.MAC)
            == "Image was rendered by Mac application"
        )


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_str_includes_details(self):
        """Test that details are appended to the message."""
        error = GUIDemoError("Something failed", details={"key": "value"})
        assert str(error) == "Something failed (key=value)"

    def test_unknown_platform_error(self):
        """Test UnknownPlatformError attributes."""
        error = UnknownPlatformError("Web", available=["Windows", "Mac"])
        assert isinstance(error, GUIDemoError)
        assert error.platform == "Web"
        assert error.available == ["Windows", "Mac"]
        assert "Windows, Mac" in str(error)
