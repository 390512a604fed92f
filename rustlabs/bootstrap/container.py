"""Dependency composition root."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rustlabs.application import RustLabsApplicationService
from rustlabs.data import ItemIndex, RustLabsDatabase, ServiceConfig, StaticDataConfig, StaticDatasetStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Wired application dependencies."""

    config: StaticDataConfig
    service_config: ServiceConfig
    database: RustLabsDatabase
    labs: RustLabsApplicationService


_CONTAINER: AppContainer | None = None


def build_container(config: StaticDataConfig | None = None) -> AppContainer:
    config = config or StaticDataConfig()
    store = StaticDatasetStore.from_config(config)
    items = ItemIndex.from_file(config.items_path)
    database = RustLabsDatabase(store, items)
    logger.info("[Container] Static data ready from %s", config.dir)
    return AppContainer(
        config=config,
        service_config=ServiceConfig(),
        database=database,
        labs=RustLabsApplicationService(database=database),
    )


def get_container() -> AppContainer:
    global _CONTAINER
    if _CONTAINER is not None:
        return _CONTAINER

    _CONTAINER = build_container()
    return _CONTAINER
