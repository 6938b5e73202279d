"""
File loaders for GMD and ITM documents.

Reads raw bytes from disk and hands them to the decoders; no decoding
happens here.
"""

import logging
from pathlib import Path
from typing import Union

from .gmd import GmdDocument, decode_gmd
from .itm import ItmDocument, decode_itm


class DocumentFileLoader:
    """Loads game data files and decodes them into documents."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        """Read a file fully into memory.

        Raises:
            FileNotFoundError: If the path is not an existing file
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

        data = path.read_bytes()
        self.logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    def load_gmd(self, path: Union[str, Path]) -> GmdDocument:
        """Load and decode a GMD string table."""
        self.logger.info(f"Loading GMD file: {path}")
        return decode_gmd(self.read_bytes(path))

    def load_itm(self, path: Union[str, Path]) -> ItmDocument:
        """Load and decode an ITM item catalog."""
        self.logger.info(f"Loading ITM file: {path}")
        return decode_itm(self.read_bytes(path))
