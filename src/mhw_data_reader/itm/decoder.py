"""
Decoder for the ITM item-catalog format.

Layout (little-endian):
    unknown 6 | item_count u32 | item_count x 32-byte records

Record:
    id u32 | unused 1 | subtype u8 | container_type u16 | unused 1 |
    rarity u8 | carry_limit u8 | unused 1 | sort_order u16 | unused 10 |
    sell_price u32 | buy_price u32
"""

import logging

from ..binary import ByteCursor
from .models import ItemContainerType, ItemSubType, ItmDocument, ItmEntry

HEADER_SIZE = 10
RECORD_SIZE = 32


class ItmDecoder:
    """Decodes ITM buffers into ItmDocument instances."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def decode(self, data: bytes) -> ItmDocument:
        """Decode a complete ITM buffer.

        Raises:
            UnexpectedEofError: If the buffer ends mid-record
            UnsupportedEnumValueError: If subtype or container_type is unknown
        """
        cursor = ByteCursor(data)

        # Possibly a version number; not needed
        cursor.skip(6)
        item_count = cursor.read_u32()

        entries = [self.decode_entry(cursor) for _ in range(item_count)]
        self.logger.debug(f"Decoded ITM catalog with {len(entries)} items")
        return ItmDocument(entries=entries)

    def decode_entry(self, cursor: ByteCursor) -> ItmEntry:
        """Read one 32-byte record at the cursor."""
        item_id = cursor.read_u32()

        cursor.skip(1)
        subtype = ItemSubType.from_raw(cursor.read_u8())
        container_type = ItemContainerType.from_raw(cursor.read_u16())

        cursor.skip(1)
        rarity = cursor.read_u8()
        carry_limit = cursor.read_u8()

        # Duplicate of carry_limit
        cursor.skip(1)
        sort_order = cursor.read_u16()

        cursor.skip(10)
        sell_price = cursor.read_u32()
        buy_price = cursor.read_u32()

        return ItmEntry(
            id=item_id,
            subtype=subtype,
            container_type=container_type,
            rarity=rarity,
            carry_limit=carry_limit,
            sort_order=sort_order,
            sell_price=sell_price,
            buy_price=buy_price,
        )


def decode_itm(data: bytes) -> ItmDocument:
    """Decode an ITM buffer into an ItmDocument."""
    return ItmDecoder().decode(data)
