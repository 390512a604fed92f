"""Item index: name -> item id resolution and item info lookups."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Protocol

from .fuzzy import FuzzyNameIndex
from .static_store import load_json_mapping

logger = logging.getLogger(__name__)

# Display name carries most of the weight, short names (e.g. "rifle.ak") help
# with typed identifiers.
ITEM_SEARCH_KEYS = {"name": 0.7, "shortname": 0.3}


@dataclass(frozen=True)
class ItemInfo:
    """Descriptive record for a single item."""
    item_id: str
    name: str
    short_name: str = ""
    description: str = ""
    raw_data: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "short_name": self.short_name,
            "description": self.description,
        }


class ItemLookup(Protocol):
    """Capability the labs database needs from an item index."""

    def resolve_item_by_name(self, name: str) -> str | None: ...

    def get_item_info(self, item_id: str) -> ItemInfo | None: ...


class ItemIndex:
    """In-memory item index keyed by item id."""

    def __init__(self, items: Mapping[str, Mapping[str, Any]]) -> None:
        self._items: dict[str, ItemInfo] = {}
        records = []
        for item_id, data in items.items():
            if not isinstance(data, Mapping):
                continue
            item_id = str(item_id)
            info = ItemInfo(
                item_id=item_id,
                name=str(data.get("name", "") or ""),
                short_name=str(data.get("shortname", "") or ""),
                description=str(data.get("description", "") or ""),
                raw_data=data,
            )
            self._items[item_id] = info
            records.append({"id": item_id, "name": info.name, "shortname": info.short_name})
        self._search = FuzzyNameIndex(records, keys=ITEM_SEARCH_KEYS)

    @classmethod
    def from_file(cls, path: Path) -> "ItemIndex":
        index = cls(load_json_mapping(path))
        logger.info("[ItemIndex] Loaded %s items", len(index))
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def resolve_item_by_name(self, name: str) -> str | None:
        """Resolve a (possibly misspelled) name or id to an item id."""
        if not isinstance(name, str) or not name.strip():
            return None

        if name in self._items:
            return name

        matches = self._search.search(name)
        if not matches:
            return None
        return str(matches[0].record["id"])

    def get_item_info(self, item_id: str) -> ItemInfo | None:
        return self._items.get(item_id)
