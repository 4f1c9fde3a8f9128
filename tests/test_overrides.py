import json
from pathlib import Path

import pytest

from arenaprep.config import settings
from arenaprep.models.overrides import (
    CardCorrection,
    OverrideConfig,
    OverrideConfigError,
    load_overrides,
)


class TestPackagedOverrides:
    def test_loads_shipped_tables(self) -> None:
        overrides = load_overrides(settings.overrides_path)

        assert overrides.multi_origin_sets["j21"] == ("j21", "mh1", "mh2")
        assert "Lightning Bolt" in overrides.set_exceptions["j21"]
        assert overrides.keep_all_variants_set == "sta"
        assert overrides.drop_promos_set == "pdom"
        assert 75382 in overrides.problem_arena_ids
        assert "507" in overrides.excluded_collector_numbers["neo"]

    def test_correction_keys_are_arena_ids(self) -> None:
        overrides = load_overrides(settings.overrides_path)

        correction = overrides.corrections[29535]
        assert correction.patch() == {"set": "shm", "collector_number": "237"}

    def test_set_corrections(self) -> None:
        overrides = load_overrides(settings.overrides_path)

        assert overrides.set_corrections["ajmp"].patch() == {"set": "jmp", "booster": True}


class TestLoadOverrides:
    def test_duplicate_keys_fail_fast(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(
            '{"corrections": {"29535": {"set": "shm"}, "29535": {"set": "m13"}}}',
            encoding="utf-8",
        )

        with pytest.raises(OverrideConfigError, match="29535"):
            load_overrides(path)

    def test_invalid_table_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"problem_arena_ids": ["not-an-id"]}), encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Invalid override tables"):
            load_overrides(path)

    def test_duplicate_named_replacement(self, tmp_path: Path) -> None:
        entry = {"name": "Fast // Furious", "set": "j21", "img": "https://img.example/a.jpg"}
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"extra_replacements": [entry, entry]}), encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Duplicate extra replacement"):
            load_overrides(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_overrides(tmp_path / "missing.json")


class TestOverrideConfig:
    def test_empty_defaults(self) -> None:
        overrides = OverrideConfig()

        assert not overrides.is_set_exception("j21")
        assert overrides.find_named_replacement("Fast // Furious", "j21") is None

    def test_frozen(self) -> None:
        overrides = OverrideConfig()

        with pytest.raises(ValueError):
            overrides.drop_promos_set = "pdom"  # type: ignore[misc]

    def test_tables_are_read_only(self) -> None:
        overrides = load_overrides(settings.overrides_path)

        with pytest.raises(TypeError):
            overrides.corrections[1] = CardCorrection(set="m21")  # type: ignore[index]
        with pytest.raises(TypeError):
            overrides.set_exceptions["neo"] = frozenset()  # type: ignore[index]

    def test_constructed_tables_are_read_only(self) -> None:
        overrides = OverrideConfig(replacement_images={1: "https://img.example/a.jpg"})

        with pytest.raises(TypeError):
            overrides.replacement_images[2] = "https://img.example/b.jpg"  # type: ignore[index]
        assert overrides.replacement_images[1] == "https://img.example/a.jpg"

    def test_correction_patch_skips_unset_fields(self) -> None:
        assert CardCorrection(booster=True).patch() == {"booster": True}
