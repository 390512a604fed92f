"""Configuration for the static Rust Labs datasets."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

_DEFAULT_DATA_DIR = Path("data/static")
_BUNDLED_DATA_DIR = Path("data/staticFiles")

CRAFT_FILE = "rustlabsCraftData.json"
RESEARCH_FILE = "rustlabsResearchData.json"
RECYCLE_FILE = "rustlabsRecycleData.json"
DURABILITY_FILE = "rustlabsDurabilityData.json"
ITEMS_FILE = "items.json"


def _get_data_dir() -> Path:
    """Resolve the static data directory.

    Priority:
    1. Explicit `RUSTLABS_DATA_DIR` env override.
    2. Bundled repository data (`data/staticFiles`) when present.
    3. Fallback path (`data/static`).
    """
    explicit = os.getenv("RUSTLABS_DATA_DIR")
    if explicit:
        return Path(explicit)
    if _BUNDLED_DATA_DIR.exists():
        return _BUNDLED_DATA_DIR
    return _DEFAULT_DATA_DIR


@dataclass(frozen=True)
class StaticDataConfig:
    dir: Path = field(default_factory=_get_data_dir)
    craft_file: str = CRAFT_FILE
    research_file: str = RESEARCH_FILE
    recycle_file: str = RECYCLE_FILE
    durability_file: str = DURABILITY_FILE
    items_file: str = ITEMS_FILE

    @property
    def items_path(self) -> Path:
        return self.dir / self.items_file


def _get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173")
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class ServiceConfig:
    cors_origins: list[str] = field(default_factory=_get_cors_origins)
    host: str = field(default_factory=lambda: os.getenv("RUSTLABS_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("RUSTLABS_PORT", "8000")))
