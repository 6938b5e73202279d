"""Builders for in-memory GMD and ITM test buffers."""

import struct
from typing import Optional, Sequence


def cstr(text: str) -> bytes:
    return text.encode("utf-8") + b"\x00"


def build_gmd(
    keys: Sequence[str],
    strings: Sequence[str],
    info_indexes: Optional[Sequence[int]] = None,
    version: int = 0x00010302,
    language: int = 1,
    filename: str = "item_eng",
    key_count: Optional[int] = None,
    string_count: Optional[int] = None,
    magic: bytes = b"GMD\x00",
) -> bytes:
    """Build a GMD buffer.

    `info_indexes` defaults to keys at consecutive string positions.
    `key_count` and `string_count` override the header counts.
    """
    if info_indexes is None:
        info_indexes = list(range(len(keys)))
    if key_count is None:
        key_count = len(keys)
    if string_count is None:
        string_count = len(strings)

    key_block = b"".join(cstr(key) for key in keys)
    string_block = b"".join(cstr(value) for value in strings)

    data = magic
    data += struct.pack("<II", version, language)
    data += b"\x00" * 8
    data += struct.pack(
        "<IIIII",
        key_count,
        string_count,
        len(key_block),
        len(string_block),
        len(filename),
    )
    data += cstr(filename)
    for index in info_indexes:
        data += struct.pack("<I", index) + b"\xee" * 28
    data += b"\xaa" * 0x800
    data += key_block
    data += string_block
    return data


def build_itm_record(
    item_id: int,
    subtype: int = 0,
    container_type: int = 0,
    rarity: int = 0,
    carry_limit: int = 0,
    sort_order: int = 0,
    sell_price: int = 0,
    buy_price: int = 0,
) -> bytes:
    """Build one 32-byte ITM record; unused bytes are filled with 0xff."""
    return struct.pack(
        "<IBBHBBBBH10sII",
        item_id,
        0xFF,
        subtype,
        container_type,
        0xFF,
        rarity,
        carry_limit,
        carry_limit,
        sort_order,
        b"\xff" * 10,
        sell_price,
        buy_price,
    )


def build_itm(records: Sequence[bytes], item_count: Optional[int] = None) -> bytes:
    if item_count is None:
        item_count = len(records)
    return b"\x01\x00\x00\x00\x00\x00" + struct.pack("<I", item_count) + b"".join(records)
