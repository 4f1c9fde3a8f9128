import json
from pathlib import Path
from typing import Any

import pytest

from arenaprep.models.card import ExtractedCard
from arenaprep.models.overrides import OverrideConfigError
from arenaprep.parsers.client_data import (
    ExtractionError,
    build_localization_index,
    extract_set,
    load_extracted_sets,
    write_extracted_set,
)


@pytest.fixture
def data_loc() -> list[dict[str, Any]]:
    return [
        {
            "langkey": "EN",
            "keys": [
                {"id": 1001, "text": "Voldaren Bloodcaster"},
                {"id": 1002, "text": "Edgar, Charmed Groom"},
                {"id": 1003, "text": "Blood"},
            ],
        },
        {"langkey": "DE", "keys": [{"id": 1001, "text": "Blutwirkerin der Voldaren"}]},
    ]


@pytest.fixture
def data_cards() -> list[dict[str, Any]]:
    return [
        {"grpid": 79001, "titleId": 1001, "collectorNumber": "122", "set": "VOW"},
        {"grpid": 79002, "titleId": 1002, "collectorNumber": 236, "set": "VOW"},
        {"grpid": 79003, "titleId": 1003, "collectorNumber": "1", "set": "VOW", "isToken": True},
        {
            "grpid": 79004,
            "titleId": 1001,
            "collectorNumber": "122",
            "set": "VOW",
            "isSecondaryCard": True,
        },
        {"grpid": 76001, "titleId": 1002, "collectorNumber": "300", "set": "MID"},
    ]


class TestExtractSet:
    def test_extracts_cards_for_set(
        self, data_cards: list[dict[str, Any]], data_loc: list[dict[str, Any]]
    ) -> None:
        cards = extract_set(data_cards, data_loc, "vow")

        assert cards == [
            ExtractedCard(arena_id=79001, name="Voldaren Bloodcaster", collector_number="122", set="vow"),
            ExtractedCard(arena_id=79002, name="Edgar, Charmed Groom", collector_number="236", set="vow"),
        ]

    def test_unknown_set_is_empty(
        self, data_cards: list[dict[str, Any]], data_loc: list[dict[str, Any]]
    ) -> None:
        assert extract_set(data_cards, data_loc, "neo") == []

    def test_missing_title_raises(self, data_loc: list[dict[str, Any]]) -> None:
        cards = [{"grpid": 1, "titleId": 9999, "collectorNumber": "1", "set": "VOW"}]

        with pytest.raises(ExtractionError, match="No localized title"):
            extract_set(cards, data_loc, "VOW")

    def test_localization_uses_english(self, data_loc: list[dict[str, Any]]) -> None:
        assert build_localization_index(data_loc)[1001] == "Voldaren Bloodcaster"

    def test_empty_localization_raises(self) -> None:
        with pytest.raises(ExtractionError):
            build_localization_index([])


class TestExtractedSetFiles:
    def test_write_then_load(self, tmp_path: Path) -> None:
        cards = [ExtractedCard(arena_id=79001, name="Voldaren Bloodcaster", collector_number="122", set="vow")]

        path = write_extracted_set(cards, tmp_path, "VOW")

        assert path.name == "vow.json"
        assert json.loads(path.read_text(encoding="utf-8"))[0]["arenaId"] == 79001
        assert load_extracted_sets(tmp_path) == {"vow": cards}

    def test_write_nothing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="No data found"):
            write_extracted_set([], tmp_path, "vow")

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert load_extracted_sets(tmp_path / "nope") == {}

    def test_exact_duplicates_are_dropped(self, tmp_path: Path) -> None:
        entry = {"arenaId": 1, "name": "Island", "collector_number": "270", "set": "vow"}
        (tmp_path / "vow.json").write_text(json.dumps([entry, entry]), encoding="utf-8")

        assert len(load_extracted_sets(tmp_path)["vow"]) == 1

    def test_conflicting_duplicates_fail_fast(self, tmp_path: Path) -> None:
        entries = [
            {"arenaId": 1, "name": "Island", "collector_number": "270", "set": "vow"},
            {"arenaId": 2, "name": "Island", "collector_number": "270", "set": "vow"},
        ]
        (tmp_path / "vow.json").write_text(json.dumps(entries), encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Conflicting arena ids"):
            load_extracted_sets(tmp_path)

    def test_invalid_entry(self, tmp_path: Path) -> None:
        (tmp_path / "vow.json").write_text(json.dumps([{"name": "Island"}]), encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Invalid extracted set"):
            load_extracted_sets(tmp_path)
