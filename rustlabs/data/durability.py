"""Durability entry filtering and ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

GROUPS = ("explosive", "melee", "throw", "guns", "torpedo", "turret")
WHICH = ("hard", "soft", "both")


@dataclass(frozen=True)
class OrderRule:
    field: str
    descending: bool


ORDER_OPTIONS: dict[str, OrderRule] = {
    "quantityHighFirst": OrderRule("quantity", descending=True),
    "quantityLowFirst": OrderRule("quantity", descending=False),
    "timeHighFirst": OrderRule("time", descending=True),
    "timeLowFirst": OrderRule("time", descending=False),
    "fuelHighFirst": OrderRule("fuel", descending=True),
    "fuelLowFirst": OrderRule("fuel", descending=False),
    "sulfurHighFirst": OrderRule("sulfur", descending=True),
    "sulfurLowFirst": OrderRule("sulfur", descending=False),
}


def is_valid_group(group: str | None) -> bool:
    return group is None or group in GROUPS


def is_valid_which(which: str | None) -> bool:
    return which is None or which in WHICH


def _to_number(value: Any) -> int | float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return float(stripped)
        except ValueError:
            return None
    return None


def filter_entries(
    entries: Iterable[Mapping[str, Any]],
    group: str | None = None,
    which: str | None = None,
) -> list[Mapping[str, Any]]:
    """Keep entries matching group and which, in input order."""
    content = []
    for entry in entries:
        if group is not None and entry.get("group") != group:
            continue
        if which is not None and entry.get("which") != which:
            continue
        content.append(entry)
    return content


def order_entries(
    entries: list[Mapping[str, Any]],
    order_by: str | None = None,
) -> list[Mapping[str, Any]]:
    """Sort entries in place by a named order option and return the same list.

    Unknown or missing order options leave the list untouched. Entries without
    a numeric value for the sort field go last in either direction.
    """
    rule = ORDER_OPTIONS.get(order_by) if isinstance(order_by, str) else None
    if rule is None:
        return entries

    def sort_key(entry: Mapping[str, Any]) -> tuple[bool, float]:
        value = _to_number(entry.get(rule.field))
        if value is None:
            return True, 0.0
        return False, -value if rule.descending else value

    entries.sort(key=sort_key)
    return entries


def filter_and_sort(
    entries: Iterable[Mapping[str, Any]],
    group: str | None = None,
    which: str | None = None,
    order_by: str | None = None,
) -> list[Mapping[str, Any]]:
    return order_entries(filter_entries(entries, group, which), order_by)
