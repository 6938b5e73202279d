"""
Decoder for the GMD localized string-table format.

Layout (little-endian):
    "GMD\\0" | version u32 | language u32 | reserved 8 | key_count u32 |
    string_count u32 | key_block_size u32 | string_block_size u32 |
    filename_length u32 (ignored) | filename cstring |
    key_count x [string_index u32 | padding 28] | unknown 0x800 |
    key_count x key cstring | string_count x value cstring

A file may hold more strings than keys. The info table records, for each
key, the entry position its string lands at; strings in between get no key.
"""

import logging
from typing import List, Sequence

from ..binary import ByteCursor
from ..errors import MalformedIndexTableError
from .models import GmdDocument, GmdEntry, GmdHeader, Language

GMD_MAGIC = b"GMD\x00"
INFO_RECORD_PADDING = 28
UNKNOWN_BLOCK_SIZE = 0x800


class GmdDecoder:
    """Decodes GMD buffers into GmdDocument instances."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def decode(self, data: bytes) -> GmdDocument:
        """Decode a complete GMD buffer.

        Raises:
            InvalidMagicError: If the buffer does not start with "GMD\\0"
            UnsupportedLanguageCodeError: If the language code is unassigned
            UnexpectedEofError: If the buffer ends mid-field
            MalformedIndexTableError: If the info table cannot be aligned
        """
        cursor = ByteCursor(data)
        header = self.decode_header(cursor)
        entries = self.decode_entries(cursor, header)
        self.logger.debug(
            f"Decoded GMD '{header.filename}' ({header.language.name}): "
            f"{len(entries)} entries, {header.key_count} keyed"
        )
        return GmdDocument(header=header, entries=entries)

    def decode_header(self, cursor: ByteCursor) -> GmdHeader:
        """Read the header and leave the cursor at the info table."""
        cursor.expect_tag(GMD_MAGIC)

        version = cursor.read_u32()
        language = Language.from_raw(cursor.read_u32())
        cursor.skip(8)

        key_count = cursor.read_u32()
        string_count = cursor.read_u32()
        key_block_size = cursor.read_u32()
        string_block_size = cursor.read_u32()

        # Filename length is not trusted; the terminator is scanned for instead
        cursor.skip(4)
        filename = cursor.read_cstring()

        if string_count < key_count:
            raise MalformedIndexTableError(
                f"GMD header declares {key_count} keys but only {string_count} strings"
            )

        return GmdHeader(
            version=version,
            language=language,
            filename=filename,
            key_count=key_count,
            string_count=string_count,
            key_block_size=key_block_size,
            string_block_size=string_block_size,
        )

    def decode_entries(self, cursor: ByteCursor, header: GmdHeader) -> List[GmdEntry]:
        """Read the info table, keys and strings, then align them into entries."""
        info_indexes: List[int] = []
        for _ in range(header.key_count):
            info_indexes.append(cursor.read_u32())
            cursor.skip(INFO_RECORD_PADDING)

        cursor.skip(UNKNOWN_BLOCK_SIZE)

        keys = [cursor.read_cstring() for _ in range(header.key_count)]
        strings = [cursor.read_cstring() for _ in range(header.string_count)]

        return self.align(info_indexes, keys, strings)

    def align(
        self, info_indexes: Sequence[int], keys: Sequence[str], strings: Sequence[str]
    ) -> List[GmdEntry]:
        """Pair keys with their strings using the info-table positions.

        Strings before each key's position become keyless entries. Strings
        left over after the last key are appended as keyless entries so that
        every string in the file is represented.
        """
        entries: List[GmdEntry] = []
        # Front of the string queue
        next_string = 0

        for i, (string_index, key) in enumerate(zip(info_indexes, keys)):
            if string_index < len(entries):
                raise MalformedIndexTableError(
                    f"Info index {string_index} for key #{i} ('{key}') is behind "
                    f"the {len(entries)} entries already produced",
                    key_index=i,
                )
            if string_index >= len(strings):
                raise MalformedIndexTableError(
                    f"Info index {string_index} for key #{i} ('{key}') is past "
                    f"the end of the {len(strings)} strings",
                    key_index=i,
                )

            while len(entries) < string_index:
                entries.append(GmdEntry(value=strings[next_string]))
                next_string += 1

            entries.append(GmdEntry(value=strings[next_string], key=key))
            next_string += 1

        leftover = len(strings) - next_string
        if leftover:
            self.logger.debug(f"Appending {leftover} keyless trailing strings")
            entries.extend(GmdEntry(value=value) for value in strings[next_string:])

        return entries


def decode_gmd(data: bytes) -> GmdDocument:
    """Decode a GMD buffer into a GmdDocument."""
    return GmdDecoder().decode(data)
