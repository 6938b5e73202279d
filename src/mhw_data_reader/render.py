"""
Textual rendering of decoded documents.

Two formats are supported: a line-per-entry text dump and JSON produced
with orjson.
"""

from typing import Any, Dict, Iterator, Tuple

import orjson

from .gmd import GmdDocument
from .itm import ItmDocument, ItmEntry

FORMATS = ("text", "json")


def item_label(entry: ItmEntry) -> str:
    """Return the dump label for an item, e.g. ITEM_00007."""
    return f"ITEM_{entry.id:05}"


def format_item(entry: ItmEntry) -> str:
    return (
        f"ItmEntry(id={entry.id}, subtype={entry.subtype.name}, "
        f"container_type={entry.container_type.name}, rarity={entry.rarity}, "
        f"carry_limit={entry.carry_limit}, sort_order={entry.sort_order}, "
        f"sell_price={entry.sell_price}, buy_price={entry.buy_price}, "
        f"name={entry.name!r})"
    )


class DocumentRenderer:
    """Renders GMD and ITM documents as text lines or JSON."""

    def __init__(self, fmt: str = "text"):
        if fmt not in FORMATS:
            raise ValueError(f"Unknown output format: {fmt}")
        self.fmt = fmt

    def gmd_pairs(self, document: GmdDocument) -> Iterator[Tuple[Any, str]]:
        for entry in document.entries:
            yield entry.key, entry.value

    def itm_pairs(self, document: ItmDocument) -> Iterator[Tuple[Any, str]]:
        for entry in document.entries:
            yield item_label(entry), format_item(entry)

    def render_gmd(self, document: GmdDocument) -> str:
        if self.fmt == "json":
            return self._dump_json(document.to_dict())
        return self._render_pairs(self.gmd_pairs(document))

    def render_itm(self, document: ItmDocument) -> str:
        if self.fmt == "json":
            return self._dump_json(document.to_dict())
        return self._render_pairs(self.itm_pairs(document))

    @staticmethod
    def _render_pairs(pairs: Iterator[Tuple[Any, str]]) -> str:
        return "\n".join(f"{key!r} = {value!r}" for key, value in pairs)

    @staticmethod
    def _dump_json(data: Dict[str, Any]) -> str:
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
