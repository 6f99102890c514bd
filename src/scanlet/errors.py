"""Exception classes for Scanlet.

The lexer itself never raises: unrecognized characters come back as
ILLEGAL tokens. These exceptions are raised by the layers built on top of
it (illegal-token policy, serialization).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scanlet.location import SourceLocation


class ScanletError(Exception):
    """Base exception for all Scanlet errors.

    Subclass this for specific error categories.
    """

    pass


class IllegalCharacterError(ScanletError):
    """Source contained a character outside the recognized grammar.

    Raised by the RAISE illegal-token policy, never by the lexer itself.
    """

    def __init__(self, char: str, location: SourceLocation | None = None) -> None:
        """Initialize with the offending character and its location.

        Args:
            char: The unrecognized character
            location: Where it was found (optional)
        """
        self.char = char
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}illegal character {char!r}")


class SerializationError(ScanletError):
    """Malformed token payload during deserialization."""

    pass
