"""Application service for Rust Labs lookups."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from rustlabs.data import GROUPS, ORDER_OPTIONS, WHICH, RustLabsDatabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabsServiceError(RuntimeError):
    message: str
    status_code: int = 400

    def __str__(self) -> str:
        return self.message


class RustLabsApplicationService:
    """Validates caller input and shapes database results for the web layer."""

    def __init__(self, *, database: RustLabsDatabase) -> None:
        self._database = database

    @staticmethod
    def _validate_query(query: str | None) -> str:
        query = (query or "").strip()
        if not query:
            raise LabsServiceError("Item name is required", status_code=400)
        return query

    @staticmethod
    def _validate_choice(label: str, value: str | None, allowed: Any) -> None:
        if value is not None and value not in allowed:
            raise LabsServiceError(
                f"Invalid {label} '{value}'. Allowed: {', '.join(allowed)}",
                status_code=400,
            )

    def get_options(self) -> dict[str, list[str]]:
        return {
            "groups": self._database.list_durability_groups(),
            "which": self._database.list_durability_which(),
            "order_by": self._database.list_order_options(),
        }

    def get_craft(self, query: str) -> dict[str, Any]:
        query = self._validate_query(query)
        details = self._database.get_craft_details(query)
        if details is None:
            raise LabsServiceError(f"No craft data found for '{query}'", status_code=404)
        logger.debug("[LabsService] craft '%s' -> %s", query, details.item_id)
        return details.to_dict()

    def get_research(self, query: str) -> dict[str, Any]:
        query = self._validate_query(query)
        details = self._database.get_research_details(query)
        if details is None:
            raise LabsServiceError(f"No research data found for '{query}'", status_code=404)
        logger.debug("[LabsService] research '%s' -> %s", query, details.item_id)
        return details.to_dict()

    def get_recycle(self, query: str) -> dict[str, Any]:
        query = self._validate_query(query)
        details = self._database.get_recycle_details(query)
        if details is None:
            raise LabsServiceError(f"No recycle data found for '{query}'", status_code=404)
        logger.debug("[LabsService] recycle '%s' -> %s", query, details.item_id)
        return details.to_dict()

    def get_durability(
        self,
        query: str,
        *,
        group: str | None = None,
        which: str | None = None,
        order_by: str | None = None,
    ) -> dict[str, Any]:
        """Unknown order_by values are rejected here with a 400; the database leaves such entries unsorted."""
        query = self._validate_query(query)
        self._validate_choice("group", group, GROUPS)
        self._validate_choice("which", which, WHICH)
        self._validate_choice("order_by", order_by, list(ORDER_OPTIONS))

        details = self._database.get_durability_details(query, group, which, order_by)
        if details is None:
            raise LabsServiceError(f"No durability data found for '{query}'", status_code=404)
        logger.debug(
            "[LabsService] durability '%s' -> %s/%s (%s entries)",
            query,
            details.namespace,
            details.key,
            len(details.entries),
        )
        return details.to_dict()
