"""Shared fixtures: a small in-memory Rust Labs dataset."""

import pytest

from rustlabs.data import ItemIndex, RustLabsDatabase, StaticDatasetStore

AK_ID = "1545779598"
SULFUR_ID = "-1581843485"
C4_ID = "1248356124"
BANDAGE_ID = "-2072273936"
BUNK_BED_ID = "-1778897469"

ITEMS = {
    AK_ID: {"name": "Assault Rifle", "shortname": "rifle.ak", "description": "High damage machine rifle."},
    SULFUR_ID: {"name": "Sulfur", "shortname": "sulfur", "description": "Used for gunpowder."},
    C4_ID: {"name": "Timed Explosive Charge", "shortname": "explosive.timed", "description": "C4."},
    BANDAGE_ID: {"name": "Bandage", "shortname": "bandage", "description": "Stops bleeding."},
    BUNK_BED_ID: {"name": "Bunk Bed", "shortname": "bed.bunk", "description": "Two respawn points."},
}

CRAFT = {
    AK_ID: {
        "ingredients": [
            {"id": "317398316", "quantity": 50},
            {"id": "-1024507488", "quantity": 200},
        ],
        "workbench": {"type": "level3", "tier": 3},
        "time": 30,
        "timeString": "30 sec",
    },
    C4_ID: {
        "ingredients": [{"id": "-592016202", "quantity": 20}],
        "workbench": {"type": "level3", "tier": 3},
        "time": 30,
        "timeString": "30 sec",
    },
}

RESEARCH = {
    AK_ID: {"researchTable": 500, "workbench": {"type": "level3", "scrap": 500, "totalScrap": 1250}},
}

RECYCLE = {
    AK_ID: {"recycler": {"efficiency": "0.6", "yield": [{"id": "-932201673", "probability": 1, "quantity": 25}]}},
    BANDAGE_ID: {"recycler": {"efficiency": "0.6", "yield": []}},
}

WOOD_ENTRIES = [
    {"group": "explosive", "which": "hard", "name": "Timed Explosive Charge", "quantity": 1, "time": 10, "fuel": None, "sulfur": 2200},
    {"group": "melee", "which": "hard", "name": "Salvaged Hammer", "quantity": 23, "time": 460, "fuel": None, "sulfur": None},
    {"group": "melee", "which": "soft", "name": "Hatchet", "quantity": 45, "time": 900, "fuel": None, "sulfur": None},
    {"group": "guns", "which": "both", "name": "Assault Rifle", "quantity": 200, "time": 60, "fuel": None, "sulfur": 5000},
    {"group": "melee", "which": "soft", "name": "Rock", "quantity": 90, "time": 2500, "fuel": None, "sulfur": None},
    {"group": "melee", "which": "soft", "name": "Salvaged Axe", "quantity": 45, "time": 700, "fuel": None, "sulfur": None},
]

DURABILITY = {
    "items": {
        BUNK_BED_ID: [
            {"group": "explosive", "which": "both", "name": "Satchel Charge", "quantity": 2, "time": 8, "fuel": None, "sulfur": 960},
            {"group": "melee", "which": "both", "name": "Rock", "quantity": 30, "time": 800, "fuel": None, "sulfur": None},
            {"group": "guns", "which": "both", "name": "Assault Rifle", "quantity": 120, "time": 40, "fuel": None, "sulfur": 3000},
        ],
    },
    "buildingBlocks": {
        "Twig": [{"group": "melee", "which": "both", "name": "Rock", "quantity": 3, "time": 5, "fuel": None, "sulfur": None}],
        "Wood": WOOD_ENTRIES,
        "Stone": [{"group": "explosive", "which": "hard", "name": "Timed Explosive Charge", "quantity": 2, "time": 20, "fuel": None, "sulfur": 4400}],
        "Sheet Metal": [{"group": "explosive", "which": "hard", "name": "Timed Explosive Charge", "quantity": 4, "time": 40, "fuel": None, "sulfur": 8800}],
        "Armored": [{"group": "explosive", "which": "hard", "name": "Timed Explosive Charge", "quantity": 8, "time": 80, "fuel": None, "sulfur": 17600}],
    },
    "other": {
        "Tugboat": [{"group": "torpedo", "which": "both", "name": "Torpedo", "quantity": 12, "time": 60, "fuel": None, "sulfur": 1200}],
        "Minicopter": [
            {"group": "guns", "which": "both", "name": "Assault Rifle", "quantity": 150, "time": 45, "fuel": None, "sulfur": 3750},
            {"group": "explosive", "which": "both", "name": "Rocket", "quantity": 2, "time": 12, "fuel": None, "sulfur": 2800},
        ],
        "Auto Turret": [{"group": "turret", "which": "both", "name": "Auto Turret", "quantity": 60, "time": 30, "fuel": None, "sulfur": None}],
    },
}


@pytest.fixture
def store() -> StaticDatasetStore:
    return StaticDatasetStore(
        craft=CRAFT,
        research=RESEARCH,
        recycle=RECYCLE,
        durability=DURABILITY,
    )


@pytest.fixture
def item_index() -> ItemIndex:
    return ItemIndex(ITEMS)


@pytest.fixture
def labs_db(store: StaticDatasetStore, item_index: ItemIndex) -> RustLabsDatabase:
    return RustLabsDatabase(store, item_index)
