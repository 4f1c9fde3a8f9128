"""
Override Configuration.

Hand-maintained tables that correct known defects in the Scryfall catalog
for Arena purposes. Loaded ONCE at startup and passed explicitly into every
pipeline stage.

INVARIANTS:
- Tables are read-only after load (frozen models)
- Duplicate keys in the source file are a load-time error, not first-wins
"""

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


_MAPPING_FIELDS = (
    "set_exceptions",
    "multi_origin_sets",
    "excluded_collector_numbers",
    "replacement_images",
    "corrections",
    "set_corrections",
)


class OverrideConfigError(Exception):
    """Raised when override or extracted data is inconsistent."""

    pass


class CardCorrection(BaseModel):
    """Partial field patch for a known-bad card."""

    model_config = ConfigDict(frozen=True)

    set: str | None = None
    collector_number: str | None = None
    booster: bool | None = None

    def patch(self) -> dict[str, Any]:
        """Fields this correction overwrites."""
        return self.model_dump(exclude_none=True)


class NamedImageReplacement(BaseModel):
    """Replacement image for a card without an Arena id."""

    model_config = ConfigDict(frozen=True)

    name: str
    set: str
    img: str


class OverrideConfig(BaseModel):
    """All override tables for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    # Sets included even without arena ids -> names known to be wrongly included
    set_exceptions: Mapping[str, frozenset[str]] = Field(default_factory=dict)

    # Sets whose cards were reprinted from several client sets -> those sets
    multi_origin_sets: Mapping[str, tuple[str, ...]] = Field(default_factory=dict)

    # Duplicate / erroneous arena ids
    problem_arena_ids: frozenset[int] = frozenset()

    # set -> collector numbers to drop (duplicate basic land arts etc.)
    excluded_collector_numbers: Mapping[str, frozenset[str]] = Field(default_factory=dict)

    # Every variant in this set is a distinct Arena card
    keep_all_variants_set: str | None = None

    # Every card in this set is dropped once past the id checks
    drop_promos_set: str | None = None

    undesirable_promo_types: frozenset[str] = frozenset()

    # arena id -> image url
    replacement_images: Mapping[int, str] = Field(default_factory=dict)

    extra_replacements: tuple[NamedImageReplacement, ...] = ()

    corrections: Mapping[int, CardCorrection] = Field(default_factory=dict)

    set_corrections: Mapping[str, CardCorrection] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _freeze_tables(self) -> "OverrideConfig":
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        return self

    @model_validator(mode="after")
    def _unique_named_replacements(self) -> "OverrideConfig":
        seen: set[tuple[str, str]] = set()
        for replacement in self.extra_replacements:
            key = (replacement.name, replacement.set)
            if key in seen:
                raise ValueError(f"Duplicate extra replacement for {key[0]!r} ({key[1]})")
            seen.add(key)
        return self

    def is_set_exception(self, set_code: str | None) -> bool:
        return set_code in self.set_exceptions

    def find_named_replacement(self, name: str | None, set_code: str | None) -> str | None:
        """Image url for a name + set keyed replacement, if any."""
        for replacement in self.extra_replacements:
            if replacement.name == name and replacement.set == set_code:
                return replacement.img
        return None


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise OverrideConfigError(f"Duplicate key in override tables: {key!r}")
        result[key] = value
    return result


def load_overrides(path: Path) -> OverrideConfig:
    """
    Load override tables from a JSON file.

    Args:
        path: Path to the overrides JSON

    Returns:
        Validated, frozen OverrideConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        OverrideConfigError: If keys are duplicated or the tables are invalid
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f, object_pairs_hook=_reject_duplicate_keys)

    try:
        return OverrideConfig.model_validate(raw)
    except ValidationError as e:
        raise OverrideConfigError(f"Invalid override tables in {path}: {e}") from e
