"""
Arena client data extraction.

Scryfall is slow to add arena ids for new sets, so ids are pulled directly
from the game files instead:

    <MTGA install>/MTGA_Data/Downloads/Data/data_cards_*.mtga
    <MTGA install>/MTGA_Data/Downloads/Data/data_loc_*.mtga

Both files are JSON; copy them out and rename to .json. Extracted sets are
written one file per set (``<set>.json``) and loaded back by the
preprocessing job for identifier backfill.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from arenaprep.models.card import ExtractedCard
from arenaprep.models.overrides import OverrideConfigError

logger = logging.getLogger(__name__)

# data_loc holds one entry per language; English is first
_ENGLISH_LOC_INDEX = 0

ExtractedSets = Mapping[str, Sequence[ExtractedCard]]


class ExtractionError(Exception):
    """Raised when client data can't produce an extracted set."""

    pass


def build_localization_index(data_loc: list[dict[str, Any]]) -> dict[int, str]:
    """
    Build text id -> English text lookup from the client localization dump.

    Raises:
        ExtractionError: If the dump has no English entry
    """
    try:
        keys = data_loc[_ENGLISH_LOC_INDEX]["keys"]
    except (IndexError, KeyError, TypeError) as e:
        raise ExtractionError("Localization data has no English keys") from e

    return {entry["id"]: entry["text"] for entry in keys}


def extract_set(
    data_cards: list[dict[str, Any]],
    data_loc: list[dict[str, Any]],
    set_code: str,
) -> list[ExtractedCard]:
    """
    Extract arena ids for one set from the client card dump.

    Tokens and secondary cards (meld backs, adventure halves) are skipped.

    Args:
        data_cards: Parsed data_cards dump
        data_loc: Parsed data_loc dump
        set_code: Set code, any case

    Returns:
        Extracted cards in dump order

    Raises:
        ExtractionError: If a card's title is missing from the localization data
    """
    client_set = set_code.upper()
    text_by_id = build_localization_index(data_loc)

    extracted: list[ExtractedCard] = []
    for card in data_cards:
        if card.get("set") != client_set:
            continue
        if card.get("isSecondaryCard") is True or card.get("isToken") is True:
            continue

        title_id = card.get("titleId")
        name = text_by_id.get(title_id) if title_id is not None else None
        if name is None:
            raise ExtractionError(f"No localized title for grpid {card.get('grpid')} ({title_id})")

        extracted.append(
            ExtractedCard(
                arena_id=card["grpid"],
                name=name,
                collector_number=card.get("collectorNumber", ""),
                set=card["set"],
            )
        )

    logger.info("Extracted %d cards for %s", len(extracted), client_set)
    return extracted


def write_extracted_set(cards: list[ExtractedCard], output_dir: Path, set_code: str) -> Path:
    """
    Write an extracted set to ``<output_dir>/<set>.json``.

    Raises:
        ExtractionError: If there is nothing to write
    """
    if not cards:
        raise ExtractionError(f"No data found for set {set_code.upper()}")

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{set_code.lower()}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump([card.to_json() for card in cards], f)
    return path


def _validate_unique(set_code: str, cards: list[ExtractedCard]) -> list[ExtractedCard]:
    """Drop exact duplicates; conflicting duplicates are a load error."""
    by_key: dict[tuple[str, str, str], ExtractedCard] = {}
    unique: list[ExtractedCard] = []

    for card in cards:
        key = (card.name, card.collector_number, card.set)
        existing = by_key.get(key)
        if existing is None:
            by_key[key] = card
            unique.append(card)
        elif existing.arena_id != card.arena_id:
            raise OverrideConfigError(
                f"Conflicting arena ids in extracted set {set_code} for "
                f"{card.name} #{card.collector_number}: {existing.arena_id} vs {card.arena_id}"
            )

    return unique


def load_extracted_sets(directory: Path) -> dict[str, list[ExtractedCard]]:
    """
    Load every extracted set in a directory.

    Args:
        directory: Directory of ``<set>.json`` files

    Returns:
        Dict mapping set code (file stem) to its cards, sorted by set code.
        Empty if the directory doesn't exist.

    Raises:
        OverrideConfigError: If a file is invalid or holds conflicting ids
    """
    if not directory.is_dir():
        logger.warning(
            "Extracted sets directory %s not found, no ids will be backfilled", directory
        )
        return {}

    extracted: dict[str, list[ExtractedCard]] = {}
    for path in sorted(directory.glob("*.json")):
        set_code = path.stem.lower()
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)

        try:
            cards = [ExtractedCard.model_validate(entry) for entry in raw]
        except (ValidationError, TypeError) as e:
            raise OverrideConfigError(f"Invalid extracted set file {path}: {e}") from e

        extracted[set_code] = _validate_unique(set_code, cards)

    return extracted
