from enum import Enum
from typing import Any


class BitWidth(Enum):
    """Supported mask widths."""
    W32 = 32
    W64 = 64


DEFAULT_WIDTH = BitWidth.W64


class InvalidIdentifier(ValueError):
    """Raised when an identifier cannot be mapped to a bit position."""

    def __init__(self, identifier: Any, width: int, reason: str):
        self.identifier = identifier
        self.width = width
        self.reason = reason
        super().__init__(
            f"Invalid identifier {identifier!r} for {width}-bit mask: {reason}"
        )
