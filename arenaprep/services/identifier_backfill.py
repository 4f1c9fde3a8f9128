"""
Identifier backfill.

Assigns arena ids to catalog entries that Scryfall hasn't linked yet, using
sets extracted from the game client.

Two matching paths:
- Multi-origin sets (e.g. j21 reprints cards from mh1 and mh2): search the
  union of the configured client sets by name only. Collector numbers are
  reused across those sets and the set code differs, so neither is a key.
- Everything else: search all extracted sets by name + collector number +
  set code.

Both paths fall back to the first face's name for multi-faced cards.
First match in iteration order wins.
"""

from collections.abc import Iterable

from arenaprep.models.card import ExtractedCard, ScryfallCard
from arenaprep.models.overrides import OverrideConfig
from arenaprep.parsers.client_data import ExtractedSets


def _candidate_names(card: ScryfallCard) -> list[str]:
    names = [card.get("name")]
    faces = card.get("card_faces")
    if faces:
        names.append(faces[0].get("name"))
    return [name for name in names if name]


def _find_by_name(card: ScryfallCard, pool: Iterable[ExtractedCard]) -> ExtractedCard | None:
    names = _candidate_names(card)
    for candidate in pool:
        if candidate.name in names:
            return candidate
    return None


def _find_by_printing(card: ScryfallCard, pool: Iterable[ExtractedCard]) -> ExtractedCard | None:
    names = _candidate_names(card)
    collector_number = card.get("collector_number")
    set_code = card.get("set")

    for candidate in pool:
        if (
            candidate.name in names
            and candidate.collector_number == collector_number
            and candidate.set == set_code
        ):
            return candidate
    return None


def _union(extracted: ExtractedSets, set_codes: Iterable[str]) -> list[ExtractedCard]:
    pool: list[ExtractedCard] = []
    for set_code in set_codes:
        pool.extend(extracted.get(set_code, ()))
    return pool


def find_extracted_match(
    card: ScryfallCard,
    overrides: OverrideConfig,
    extracted: ExtractedSets,
) -> ExtractedCard | None:
    """
    Find the extracted client card matching a catalog entry.

    Args:
        card: Catalog entry
        overrides: Override tables (multi-origin set table)
        extracted: Extracted client sets keyed by set code

    Returns:
        The first matching extracted card, or None
    """
    origin_sets = overrides.multi_origin_sets.get(card.get("set", ""))
    if origin_sets is not None:
        # Multi-origin sets never fall through to the general path
        return _find_by_name(card, _union(extracted, origin_sets))

    return _find_by_printing(card, _union(extracted, extracted.keys()))


def add_arena_id(
    card: ScryfallCard,
    overrides: OverrideConfig,
    extracted: ExtractedSets,
) -> tuple[ScryfallCard, bool]:
    """
    Backfill a missing arena id from extracted client data.

    The input card is never mutated.

    Returns:
        (card, True) with arena_id set on a copy when a match is found,
        (card, False) with the original card otherwise.
    """
    match = find_extracted_match(card, overrides, extracted)
    if match is None:
        return card, False

    return {**card, "arena_id": match.arena_id}, True
