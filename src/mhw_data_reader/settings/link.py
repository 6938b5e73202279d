"""
Name-linking settings for mhw_data_reader.

The GMD position of an item's name is `id * stride + offset`. The values
are kept in settings so that data revisions with a different layout can be
read without code changes.
"""

import logging
from typing import TYPE_CHECKING, cast

from ..itm.linker import DEFAULT_NAME_OFFSET, DEFAULT_NAME_STRIDE

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class LinkSettings:
    """Manages item name linking settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    @property
    def name_stride(self) -> int:
        """Number of GMD entries per item."""
        return self._get_int("link/name_stride", DEFAULT_NAME_STRIDE)

    @name_stride.setter
    def name_stride(self, value: int) -> None:
        if value >= 1:
            self.settings.setValue("link/name_stride", value)
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid name stride: {value}, keeping current: {self.name_stride}"
            )

    @property
    def name_offset(self) -> int:
        """Position of the name within each item's group of entries."""
        return self._get_int("link/name_offset", DEFAULT_NAME_OFFSET)

    @name_offset.setter
    def name_offset(self, value: int) -> None:
        if value >= 0:
            self.settings.setValue("link/name_offset", value)
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid name offset: {value}, keeping current: {self.name_offset}"
            )
