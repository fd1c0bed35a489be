"""Custom exceptions for the theming context."""

from typing import Iterable, Optional


class ThemeNotFoundError(KeyError):
    """
    Exception raised when a theme name is not in the discovered set.

    Attributes:
        name: Requested theme name
        available: Theme names known at the time of the request
    """

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        self.message = f"Theme '{name}' not found. Available themes: {', '.join(self.available)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidColorError(ValueError):
    """
    Exception raised for a color that is not a 3- or 6-digit hex value.

    Attributes:
        value: The rejected color string
    """

    def __init__(self, value: Optional[str], message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid hex color: {value!r}")
