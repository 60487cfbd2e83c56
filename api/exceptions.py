"""Exceptions raised by the Forge API client."""

from typing import Optional


class ForgeError(Exception):
    """Base class for Forge client errors."""


class ConfigurationError(ForgeError):
    """The client cannot be built from the current configuration."""


class ForgeAPIError(ForgeError):
    """An upstream call failed: network error, timeout, non-2xx status or bad payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message
