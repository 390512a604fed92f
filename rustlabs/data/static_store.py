"""Static dataset store.

Holds the four Rust Labs datasets (craft, research, recycle, durability)
as read-only mappings. Data is loaded once and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .config import StaticDataConfig

logger = logging.getLogger(__name__)

DURABILITY_NAMESPACES = ("items", "buildingBlocks", "other")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def load_json_mapping(path: Path) -> dict[str, Any]:
    """Read a JSON object from disk, returning an empty dict on failure."""
    if not path.exists():
        logger.warning("[LabsStore] Data file not found: %s", path)
        return {}

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:
        logger.error("[LabsStore] Failed to load %s: %s", path, exc)
        return {}

    if not isinstance(raw, dict):
        logger.error("[LabsStore] Expected a JSON object in %s, got %s", path, type(raw).__name__)
        return {}
    return raw


def _freeze(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not data:
        return _EMPTY
    return MappingProxyType(dict(data))


def _freeze_durability(data: Mapping[str, Any] | None) -> Mapping[str, Mapping[str, Any]]:
    data = data or {}
    return MappingProxyType({
        namespace: _freeze(data.get(namespace))
        for namespace in DURABILITY_NAMESPACES
    })


@dataclass(frozen=True)
class StaticDatasetStore:
    """Read-only craft, research, recycle and durability mappings."""

    craft: Mapping[str, Any] = field(default_factory=dict)
    research: Mapping[str, Any] = field(default_factory=dict)
    recycle: Mapping[str, Any] = field(default_factory=dict)
    durability: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "craft", _freeze(self.craft))
        object.__setattr__(self, "research", _freeze(self.research))
        object.__setattr__(self, "recycle", _freeze(self.recycle))
        object.__setattr__(self, "durability", _freeze_durability(self.durability))

    @classmethod
    def from_dir(cls, data_dir: Path, config: StaticDataConfig | None = None) -> "StaticDatasetStore":
        config = config or StaticDataConfig(dir=data_dir)
        store = cls(
            craft=load_json_mapping(data_dir / config.craft_file),
            research=load_json_mapping(data_dir / config.research_file),
            recycle=load_json_mapping(data_dir / config.recycle_file),
            durability=load_json_mapping(data_dir / config.durability_file),
        )
        logger.info(
            "[LabsStore] Loaded %s craft, %s research, %s recycle, %s durability records",
            len(store.craft),
            len(store.research),
            len(store.recycle),
            sum(len(records) for records in store.durability.values()),
        )
        return store

    @classmethod
    def from_config(cls, config: StaticDataConfig | None = None) -> "StaticDatasetStore":
        config = config or StaticDataConfig()
        return cls.from_dir(config.dir, config)

    def durability_namespace(self, namespace: str) -> Mapping[str, Any]:
        return self.durability.get(namespace, _EMPTY)
