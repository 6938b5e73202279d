"""
Data models for decoded ITM item catalogs.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

from ..errors import UnsupportedEnumValueError


class ItemSubType(IntEnum):
    """Item sub-type stored as a u8 in each record."""

    NONE = 0
    AMMO = 1
    ENDEMIC_LIFE = 2
    UNKNOWN3 = 3
    COATING = 4
    UNKNOWN5 = 5

    @classmethod
    def from_raw(cls, value: int) -> "ItemSubType":
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedEnumValueError("subtype", value) from None


class ItemContainerType(IntEnum):
    """Inventory container an item is stored in (u16 in each record)."""

    ITEM = 0
    MATERIAL = 1
    ACCOUNT_ITEM = 2
    AMMO_COATING = 3
    DECORATION = 4
    FURNITURE = 5

    @classmethod
    def from_raw(cls, value: int) -> "ItemContainerType":
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedEnumValueError("container_type", value) from None


@dataclass
class ItmEntry:
    """A single 32-byte item record.

    `name` is never read from the catalog; it is filled in by the linker
    from a GMD string table.
    """
    id: int
    subtype: ItemSubType
    container_type: ItemContainerType
    rarity: int
    carry_limit: int
    sort_order: int
    sell_price: int
    buy_price: int
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "subtype": self.subtype.name,
            "container_type": self.container_type.name,
            "rarity": self.rarity,
            "carry_limit": self.carry_limit,
            "sort_order": self.sort_order,
            "sell_price": self.sell_price,
            "buy_price": self.buy_price,
            "name": self.name,
        }


@dataclass
class ItmDocument:
    """Item records in file order (not necessarily id order)."""
    entries: List[ItmEntry] = field(default_factory=list)

    def get_by_id(self, item_id: int) -> Optional[ItmEntry]:
        """Return the first entry with the given id, or None."""
        for entry in self.entries:
            if entry.id == item_id:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"entries": [entry.to_dict() for entry in self.entries]}
