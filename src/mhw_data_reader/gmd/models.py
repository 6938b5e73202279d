"""
Data models for decoded GMD string tables.

Models are plain dataclasses with no parsing logic; the decoder builds them
once and hands them to the caller.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

from ..errors import UnsupportedLanguageCodeError


class Language(IntEnum):
    """Locale of a GMD string table, keyed by its raw header code.

    Codes 9 and 12-20 are unassigned.
    """

    JAPANESE = 0
    ENGLISH = 1
    FRENCH = 2
    SPANISH = 3
    GERMAN = 4
    ITALIAN = 5
    KOREAN = 6
    CHINESE_TRADITIONAL = 7
    CHINESE_SIMPLIFIED = 8
    RUSSIAN = 10
    POLISH = 11
    PORTUGUESE = 21
    ARABIC = 22

    @classmethod
    def from_raw(cls, value: int) -> "Language":
        """Convert a raw header code, rejecting unassigned values."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedLanguageCodeError(value) from None


@dataclass
class GmdHeader:
    """GMD file header.

    The four count/size fields only drive the entry parse.
    """
    version: int
    language: Language
    filename: str
    key_count: int = field(repr=False)
    string_count: int = field(repr=False)
    key_block_size: int = field(repr=False)
    string_block_size: int = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "language": self.language.name,
            "filename": self.filename,
        }


@dataclass
class GmdEntry:
    """A single string; `key` is None for strings that belong to no declared key."""
    value: str
    key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass
class GmdDocument:
    """Header plus entries in the order their strings appear in the file."""
    header: GmdHeader
    entries: List[GmdEntry] = field(default_factory=list)

    def keyed_entries(self) -> List[GmdEntry]:
        """Return only the entries that map to a declared key."""
        return [entry for entry in self.entries if entry.key is not None]

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under `key`, or None if absent."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }
