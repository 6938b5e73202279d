"""
Attaches localized names from a GMD string table to ITM entries.

Item names are looked up by position: the string table interleaves a name
and a description per item, so item `id` finds its name at entry
`id * stride + offset` (stride 2, offset 0 for the shipped data).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..gmd.models import GmdDocument
from .models import ItmDocument

DEFAULT_NAME_STRIDE = 2
DEFAULT_NAME_OFFSET = 0


class LinkStatus(Enum):
    """Outcome of a link pass."""

    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    NO_ENTRIES_IMPORTED = "no_entries_imported"


@dataclass
class LinkResult:
    """Summary of a link pass. Informational only."""
    status: LinkStatus
    linked: int
    total: int

    def __str__(self) -> str:
        if self.status is LinkStatus.SUCCESS:
            return f"Linked names for all {self.total} items"
        if self.status is LinkStatus.PARTIAL_SUCCESS:
            return f"Linked names for {self.linked} of {self.total} items"
        return "No item names linked"


class NameLinker:
    """Positional name linker with a configurable stride and offset."""

    def __init__(self, stride: int = DEFAULT_NAME_STRIDE, offset: int = DEFAULT_NAME_OFFSET):
        if stride < 1:
            raise ValueError(f"Name stride must be positive, got {stride}")
        if offset < 0:
            raise ValueError(f"Name offset must not be negative, got {offset}")
        self.stride = stride
        self.offset = offset
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def name_index(self, item_id: int) -> int:
        """Return the GMD entry position holding the name of `item_id`."""
        return item_id * self.stride + self.offset

    def link(self, itm: ItmDocument, gmd: GmdDocument) -> LinkResult:
        """Assign names to `itm` entries in place.

        Entries whose index falls outside the string table keep their
        current name; that is a non-match, not an error.
        """
        linked = 0
        for item in itm.entries:
            index = self.name_index(item.id)
            if index < len(gmd.entries):
                item.name = gmd.entries[index].value
                linked += 1

        total = len(itm.entries)
        if linked == 0:
            status = LinkStatus.NO_ENTRIES_IMPORTED
        elif linked < total:
            status = LinkStatus.PARTIAL_SUCCESS
        else:
            status = LinkStatus.SUCCESS

        self.logger.debug(
            f"Linked {linked}/{total} items (stride={self.stride}, offset={self.offset})"
        )
        return LinkResult(status=status, linked=linked, total=total)


def link(
    itm: ItmDocument,
    gmd: GmdDocument,
    stride: int = DEFAULT_NAME_STRIDE,
    offset: int = DEFAULT_NAME_OFFSET,
) -> LinkResult:
    """Link item names from `gmd` into `itm` in place and summarize the result."""
    return NameLinker(stride=stride, offset=offset).link(itm, gmd)
