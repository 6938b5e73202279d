"""
GMD localized string tables.

Provides the data models and the decoder for the GMD binary format.
"""

from .models import Language, GmdHeader, GmdEntry, GmdDocument
from .decoder import GmdDecoder, decode_gmd, GMD_MAGIC

__all__ = [
    "Language",
    "GmdHeader",
    "GmdEntry",
    "GmdDocument",
    "GmdDecoder",
    "decode_gmd",
    "GMD_MAGIC",
]
