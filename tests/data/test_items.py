"""Tests for the item index."""

import json
import logging

import pytest

from rustlabs.data.items import ItemIndex, ItemInfo


@pytest.mark.parametrize("query, expected", [
    ("Assault Rifle", "1545779598"),
    ("assault rifle", "1545779598"),
    ("asault rifle", "1545779598"),
    ("rifle.ak", "1545779598"),
    ("Sulfur", "-1581843485"),
    ("bandage", "-2072273936"),
    ("Bunk Bed", "-1778897469"),
])
def test_resolve_item_by_name(item_index, query, expected):
    assert item_index.resolve_item_by_name(query) == expected


def test_resolve_item_by_id(item_index):
    assert item_index.resolve_item_by_name("1248356124") == "1248356124"


@pytest.mark.parametrize("query", ["zzzznonexistent", "", "  ", None, 42])
def test_unresolvable(item_index, query):
    assert item_index.resolve_item_by_name(query) is None


def test_get_item_info(item_index):
    info = item_index.get_item_info("1545779598")
    assert isinstance(info, ItemInfo)
    assert info.name == "Assault Rifle"
    assert info.short_name == "rifle.ak"
    assert info.to_dict() == {
        "id": "1545779598",
        "name": "Assault Rifle",
        "short_name": "rifle.ak",
        "description": "High damage machine rifle.",
    }


def test_get_item_info_unknown(item_index):
    assert item_index.get_item_info("0") is None


def test_len_and_contains(item_index):
    assert len(item_index) == 5
    assert "1545779598" in item_index
    assert "0" not in item_index


def test_from_file(tmp_path, caplog):
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"1": {"name": "Rock", "shortname": "rock"}, "bad": "skip"}), encoding="utf-8")

    with caplog.at_level(logging.INFO):
        index = ItemIndex.from_file(path)

    assert len(index) == 1
    assert index.resolve_item_by_name("rok") == "1"
    assert "Loaded 1 items" in caplog.text


def test_from_missing_file(tmp_path):
    index = ItemIndex.from_file(tmp_path / "missing.json")
    assert len(index) == 0
    assert index.resolve_item_by_name("rock") is None
