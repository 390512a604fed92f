"""Rust Labs query service.

Resolves free-text names to items, building blocks or other durability
subjects, and returns craft, research, recycle and durability details.

Name resolution for durability tries, in order:
1. "other" subjects (vehicles, deployables, ...)
2. building blocks
3. items (via the item index)

The first namespace with a match wins. Lookups never raise; anything that
cannot be resolved returns None.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .durability import GROUPS, ORDER_OPTIONS, WHICH, filter_and_sort, is_valid_group, is_valid_which
from .fuzzy import FuzzyNameIndex
from .items import ItemInfo, ItemLookup
from .static_store import StaticDatasetStore

logger = logging.getLogger(__name__)

NAMESPACE_ITEMS = "items"
NAMESPACE_BUILDING_BLOCKS = "buildingBlocks"
NAMESPACE_OTHER = "other"


@dataclass(frozen=True)
class ItemDetails:
    """Craft, research or recycle record for one item."""
    item_id: str
    item_info: ItemInfo | None
    record: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "item": self.item_info.to_dict() if self.item_info else None,
            "record": self.record,
        }


@dataclass(frozen=True)
class DurabilityDetails:
    """Durability entries for an item, building block or other subject.

    ``subject`` is the item info for items and the canonical name otherwise.
    """
    namespace: str
    key: str
    subject: ItemInfo | str | None
    entries: list[Mapping[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        subject = self.subject.to_dict() if isinstance(self.subject, ItemInfo) else self.subject
        return {
            "type": self.namespace,
            "key": self.key,
            "subject": subject,
            "entries": [dict(entry) for entry in self.entries],
        }


class RustLabsDatabase:
    """Read-only lookups over the static Rust Labs datasets."""

    def __init__(self, store: StaticDatasetStore, items: ItemLookup) -> None:
        self._store = store
        self._items = items
        self._other_index = FuzzyNameIndex.from_names(store.durability_namespace(NAMESPACE_OTHER).keys())
        self._building_block_index = FuzzyNameIndex.from_names(
            store.durability_namespace(NAMESPACE_BUILDING_BLOCKS).keys()
        )

    @property
    def store(self) -> StaticDatasetStore:
        return self._store

    @property
    def items(self) -> ItemLookup:
        return self._items

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    @staticmethod
    def list_durability_groups() -> list[str]:
        return list(GROUPS)

    @staticmethod
    def list_durability_which() -> list[str]:
        return list(WHICH)

    @staticmethod
    def list_order_options() -> list[str]:
        return list(ORDER_OPTIONS)

    # ------------------------------------------------------------------
    # Name resolution
    # ------------------------------------------------------------------

    def get_closest_other_name(self, name: str) -> str | None:
        return self._other_index.best(name)

    def get_closest_building_block_name(self, name: str) -> str | None:
        return self._building_block_index.best(name)

    def _item_details(self, dataset: Mapping[str, Any], item_id: Any) -> ItemDetails | None:
        if not isinstance(item_id, str) or item_id not in dataset:
            return None
        return ItemDetails(item_id, self._items.get_item_info(item_id), dataset[item_id])

    def _item_details_by_name(self, dataset: Mapping[str, Any], name: Any) -> ItemDetails | None:
        if not isinstance(name, str):
            return None
        item_id = self._items.resolve_item_by_name(name)
        if not item_id:
            return None
        logger.debug("[RustLabs] Resolved '%s' -> %s", name, item_id)
        return self._item_details(dataset, item_id)

    def _item_details_by_query(self, dataset: Mapping[str, Any], name_or_id: Any) -> ItemDetails | None:
        if isinstance(name_or_id, str) and name_or_id in dataset:
            return self._item_details(dataset, name_or_id)
        return self._item_details_by_name(dataset, name_or_id)

    # ------------------------------------------------------------------
    # Craft
    # ------------------------------------------------------------------

    def get_craft_details_by_name(self, name: str) -> ItemDetails | None:
        return self._item_details_by_name(self._store.craft, name)

    def get_craft_details_by_id(self, item_id: str) -> ItemDetails | None:
        return self._item_details(self._store.craft, item_id)

    def get_craft_details(self, name_or_id: str) -> ItemDetails | None:
        return self._item_details_by_query(self._store.craft, name_or_id)

    # ------------------------------------------------------------------
    # Research
    # ------------------------------------------------------------------

    def get_research_details_by_name(self, name: str) -> ItemDetails | None:
        return self._item_details_by_name(self._store.research, name)

    def get_research_details_by_id(self, item_id: str) -> ItemDetails | None:
        return self._item_details(self._store.research, item_id)

    def get_research_details(self, name_or_id: str) -> ItemDetails | None:
        return self._item_details_by_query(self._store.research, name_or_id)

    # ------------------------------------------------------------------
    # Recycle
    # ------------------------------------------------------------------

    def get_recycle_details_by_name(self, name: str) -> ItemDetails | None:
        return self._item_details_by_name(self._store.recycle, name)

    def get_recycle_details_by_id(self, item_id: str) -> ItemDetails | None:
        return self._item_details(self._store.recycle, item_id)

    def get_recycle_details(self, name_or_id: str) -> ItemDetails | None:
        return self._item_details_by_query(self._store.recycle, name_or_id)

    # ------------------------------------------------------------------
    # Durability
    # ------------------------------------------------------------------

    def get_durability_details_by_name(
        self,
        name: str,
        group: str | None = None,
        which: str | None = None,
        order_by: str | None = None,
    ) -> DurabilityDetails | None:
        """Durability details of an item, building block or other subject.

        When the name only resolves to an item, group, which and order_by are
        all forwarded to the by-id lookup, so ordering applies in every namespace.
        """
        if not isinstance(name, str):
            return None
        if not is_valid_group(group) or not is_valid_which(which):
            return None

        namespace = NAMESPACE_OTHER
        found_name = self.get_closest_other_name(name)

        if not found_name:
            namespace = NAMESPACE_BUILDING_BLOCKS
            found_name = self.get_closest_building_block_name(name)

        if not found_name:
            item_id = self._items.resolve_item_by_name(name)
            if not item_id:
                return None
            logger.debug("[RustLabs] Resolved durability subject '%s' -> item %s", name, item_id)
            return self.get_durability_details_by_id(item_id, group, which, order_by)

        logger.debug("[RustLabs] Resolved durability subject '%s' -> %s/%s", name, namespace, found_name)
        entries = self._store.durability_namespace(namespace)[found_name]
        content = filter_and_sort(entries, group, which, order_by)
        return DurabilityDetails(namespace, found_name, found_name, content)

    def get_durability_details_by_id(
        self,
        item_id: str,
        group: str | None = None,
        which: str | None = None,
        order_by: str | None = None,
    ) -> DurabilityDetails | None:
        """Durability details of an item by its id."""
        if not isinstance(item_id, str):
            return None
        items = self._store.durability_namespace(NAMESPACE_ITEMS)
        if item_id not in items:
            return None
        if not is_valid_group(group) or not is_valid_which(which):
            return None

        content = filter_and_sort(items[item_id], group, which, order_by)
        return DurabilityDetails(NAMESPACE_ITEMS, item_id, self._items.get_item_info(item_id), content)

    def get_durability_details(
        self,
        name_or_id: str,
        group: str | None = None,
        which: str | None = None,
        order_by: str | None = None,
    ) -> DurabilityDetails | None:
        if isinstance(name_or_id, str) and name_or_id in self._store.durability_namespace(NAMESPACE_ITEMS):
            return self.get_durability_details_by_id(name_or_id, group, which, order_by)
        return self.get_durability_details_by_name(name_or_id, group, which, order_by)
