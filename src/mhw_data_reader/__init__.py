"""
mhw_data_reader: decoders for GMD string tables and ITM item catalogs.

Decodes the binary game-data formats into plain documents and links item
records to their localized names.
"""

__version__ = "0.1.0"
__author__ = "mhw_data_reader Contributors"

# Core decoding API
from .gmd import decode_gmd
from .itm import decode_itm, link
from .errors import (
    DecodeError,
    InvalidMagicError,
    UnsupportedLanguageCodeError,
    UnsupportedEnumValueError,
    UnexpectedEofError,
    MalformedIndexTableError,
)

# Data models
from .gmd.models import Language, GmdHeader, GmdEntry, GmdDocument
from .itm.models import ItemSubType, ItemContainerType, ItmEntry, ItmDocument
from .itm.linker import LinkResult, LinkStatus

__all__ = [
    # Decoding
    "decode_gmd",
    "decode_itm",
    "link",

    # Errors
    "DecodeError",
    "InvalidMagicError",
    "UnsupportedLanguageCodeError",
    "UnsupportedEnumValueError",
    "UnexpectedEofError",
    "MalformedIndexTableError",

    # Data models
    "Language",
    "GmdHeader",
    "GmdEntry",
    "GmdDocument",
    "ItemSubType",
    "ItemContainerType",
    "ItmEntry",
    "ItmDocument",
    "LinkResult",
    "LinkStatus",
]
