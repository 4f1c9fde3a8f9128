"""
Eligibility filter.

Decides whether a (possibly backfilled) catalog entry belongs in the Arena
card list. Checks run in a fixed order and stop at the first rejection.

INVARIANTS:
- Pure: never mutates the card
- An entry without an arena id never survives
- Allow-listed sets still have to clear every later check
"""

import re

from arenaprep.config import settings
from arenaprep.models.card import ScryfallCard
from arenaprep.models.outcome import SkipReason
from arenaprep.models.overrides import OverrideConfig

# Canonical (front) half of a meld pair, e.g. "123a"
# TODO: revisit if Scryfall changes its meld collector-number convention
CANONICAL_MELD_PATTERN = re.compile(r"^\d{3}a$")

_LETTER = re.compile(r"[A-Za-z]")


def _is_token(card: ScryfallCard) -> bool:
    return card.get("layout") == "token" or card.get("set_type") == "token"


def check_eligibility(
    card: ScryfallCard,
    overrides: OverrideConfig,
    primary_language: str | None = None,
) -> SkipReason | None:
    """
    Run every exclusion check against a catalog entry.

    Args:
        card: Catalog entry, after any identifier backfill
        overrides: Override tables
        primary_language: Language code to keep, defaults to settings.primary_language

    Returns:
        The first failed check, or None if the card is kept.
    """
    if primary_language is None:
        primary_language = settings.primary_language

    set_code = card.get("set")
    arena_id = card.get("arena_id")
    is_exception_set = overrides.is_set_exception(set_code)

    if arena_id is None:
        return SkipReason.BACKFILL_FAILED if is_exception_set else SkipReason.MISSING_ARENA_ID

    if is_exception_set and card.get("name") in overrides.set_exceptions[set_code]:
        return SkipReason.EXCLUDED_BY_NAME

    lang = card.get("lang")
    if lang and lang != primary_language:
        return SkipReason.NON_PRIMARY_LANGUAGE

    if _is_token(card):
        return SkipReason.TOKEN

    if arena_id in overrides.problem_arena_ids:
        return SkipReason.PROBLEM_ARENA_ID

    collector_number = card.get("collector_number") or ""
    if collector_number in overrides.excluded_collector_numbers.get(set_code, frozenset()):
        return SkipReason.EXCLUDED_COLLECTOR_NUMBER

    # Alternate arts here are all distinct Arena cards
    if set_code == overrides.keep_all_variants_set:
        return None

    if set_code == overrides.drop_promos_set:
        return SkipReason.DROPPED_PROMO_SET

    promo_types = card.get("promo_types")
    if promo_types:
        if overrides.undesirable_promo_types.isdisjoint(promo_types):
            return None
        return SkipReason.UNDESIRABLE_PROMO

    # Letters mark rebalanced ("A-"), specialize, and meld variants
    if _LETTER.search(collector_number) and not CANONICAL_MELD_PATTERN.match(collector_number):
        return SkipReason.VARIANT_COLLECTOR_NUMBER

    return None


def is_eligible(
    card: ScryfallCard,
    overrides: OverrideConfig,
    primary_language: str | None = None,
) -> bool:
    """Boolean form of check_eligibility."""
    return check_eligibility(card, overrides, primary_language) is None
