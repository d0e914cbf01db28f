"""
Custom exception hierarchy for the GUI pattern demos.

The only in-domain failure, an absent product, is not an exception:
creators return ``None`` and callers check it. These exceptions cover
configuration and platform lookup.
"""

from typing import Optional


class GUIDemoError(Exception):
    """Base exception for all demo errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return a formatted error message."""
        base_msg = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} ({details_str})"
        return base_msg


class ConfigurationError(GUIDemoError):
    """Raised when there's a configuration error."""

    pass


class UnknownPlatformError(GUIDemoError):
    """Raised when no factory or creator is registered for a platform."""

    def __init__(
        self,
        platform: str,
        available: Optional[list] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize the error.

        Args:
            platform: The platform name that could not be resolved
            available: Platforms that are registered
            cause: Optional underlying exception
        """
        super().__init__(
            f"No creator registered for platform {platform!r}",
            details={"available": ", ".join(available or [])},
            cause=cause,
        )
        self.platform = platform
        self.available = list(available or [])
