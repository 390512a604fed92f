"""Data access for the static Rust Labs datasets."""

from .config import ServiceConfig, StaticDataConfig
from .durability import GROUPS, ORDER_OPTIONS, WHICH, OrderRule, filter_and_sort, filter_entries, order_entries
from .fuzzy import FuzzyMatch, FuzzyNameIndex
from .items import ItemIndex, ItemInfo, ItemLookup
from .labs_database import DurabilityDetails, ItemDetails, RustLabsDatabase
from .static_store import StaticDatasetStore

__all__ = [
    "ServiceConfig",
    "StaticDataConfig",
    "GROUPS",
    "ORDER_OPTIONS",
    "WHICH",
    "OrderRule",
    "filter_and_sort",
    "filter_entries",
    "order_entries",
    "FuzzyMatch",
    "FuzzyNameIndex",
    "ItemIndex",
    "ItemInfo",
    "ItemLookup",
    "DurabilityDetails",
    "ItemDetails",
    "RustLabsDatabase",
    "StaticDatasetStore",
]
