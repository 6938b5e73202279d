"""
ITM item catalogs.

Provides the data models, the decoder, and the positional name linker
that joins a catalog with a GMD string table.
"""

from .models import ItemSubType, ItemContainerType, ItmEntry, ItmDocument
from .decoder import ItmDecoder, decode_itm, RECORD_SIZE
from .linker import (
    NameLinker,
    LinkResult,
    LinkStatus,
    link,
    DEFAULT_NAME_STRIDE,
    DEFAULT_NAME_OFFSET,
)

__all__ = [
    # Models
    "ItemSubType",
    "ItemContainerType",
    "ItmEntry",
    "ItmDocument",
    # Decoding
    "ItmDecoder",
    "decode_itm",
    "RECORD_SIZE",
    # Linking
    "NameLinker",
    "LinkResult",
    "LinkStatus",
    "link",
    "DEFAULT_NAME_STRIDE",
    "DEFAULT_NAME_OFFSET",
]
