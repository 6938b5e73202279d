"""
Error types raised while decoding GMD and ITM buffers.

Every failure is raised at the point of first violation and aborts the
enclosing decode call; no partially decoded document is ever returned.
"""

from typing import Optional


class DecodeError(Exception):
    """Base class for all decoding failures."""
    pass


class InvalidMagicError(DecodeError):
    """Raised when a buffer does not start with the expected literal tag."""

    def __init__(self, expected: bytes, found: bytes):
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid magic: expected {expected!r}, found {found!r}")


class UnsupportedLanguageCodeError(DecodeError):
    """Raised when a GMD header carries an unassigned language code."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Unsupported language code: {value}")


class UnsupportedEnumValueError(DecodeError):
    """Raised when an enumerated record field holds an unknown value."""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(f"Unsupported value for '{field}': {value}")


class UnexpectedEofError(DecodeError):
    """Raised when a read needs more bytes than the buffer has left."""

    def __init__(self, needed: int, available: int, offset: int = 0):
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(
            f"Unexpected end of data at offset {offset}: "
            f"needed {needed} bytes, {available} available"
        )


class MalformedIndexTableError(DecodeError):
    """Raised when GMD info-table indexes cannot be aligned with the strings."""

    def __init__(self, message: str, key_index: Optional[int] = None):
        self.key_index = key_index
        super().__init__(message)
