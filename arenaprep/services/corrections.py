"""
Correction application.

Last pipeline stage: patches set code, collector number, and booster flag
for cards the catalog gets wrong for Arena (Brawl exclusives, reprinted
basic lands, Arena-only Jumpstart, Mystical Archive).

INVARIANTS:
- Set-level patches apply first, arena id patches last; the id patch wins
- Fields are overwritten, never removed
- Applying the same corrections twice is a no-op
"""

from arenaprep.models.card import ArenaCard
from arenaprep.models.overrides import OverrideConfig


def apply_corrections(card: ArenaCard, overrides: OverrideConfig) -> ArenaCard:
    """
    Apply set-level and arena id keyed corrections.

    Args:
        card: Projected card
        overrides: Override tables

    Returns:
        The corrected card (a new dict when anything changed).
    """
    patch: dict[str, object] = {}

    set_correction = overrides.set_corrections.get(card.get("set", ""))
    if set_correction is not None:
        patch.update(set_correction.patch())

    arena_id = card.get("arenaId")
    if arena_id is not None:
        id_correction = overrides.corrections.get(arena_id)
        if id_correction is not None:
            patch.update(id_correction.patch())

    if not patch:
        return card

    return {**card, **patch}  # type: ignore[typeddict-item]
