"""Low-level binary reading helpers."""

from .cursor import ByteCursor

__all__ = ["ByteCursor"]
