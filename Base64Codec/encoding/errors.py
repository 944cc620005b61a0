"""
Decode errors for Base64Codec.
"""

from typing import Optional, Tuple


class DecodeError(ValueError):
    """
    Base class for decode failures.

    Carries the human-readable message and the offending value, so a
    caller can unpack the failure as a ``(message, value)`` pair.
    """

    message: str = "Failed to decode base64."

    def __init__(self, value: int, message: Optional[str] = None):
        self.value = value
        if message is not None:
            self.message = message
        super().__init__(self.message, value)

    def as_tuple(self) -> Tuple[str, int]:
        return self.message, self.value

    def __str__(self) -> str:
        return f"{self.message} ({self.value})"


class InvalidSymbolError(DecodeError):
    """Raised for a byte that is neither an alphabet symbol nor padding."""

    message = "Failed to decode base64: Expected byte from charset, found invalid byte."


class InvalidPaddingError(DecodeError):
    """Raised when the pending bit count does not settle at zero."""

    message = "Failed to decode base64: Invalid padding."
