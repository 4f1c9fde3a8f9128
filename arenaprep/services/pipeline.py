"""
Card preprocessing pipeline.

Streams catalog entries through:

    identifier backfill -> eligibility filter -> projection -> corrections

Each entry yields one RecordOutcome. Per-card problems are recovered by
skipping the card; only an unusable catalog stops a run.
"""

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from arenaprep.models.card import ArenaCard, ScryfallCard
from arenaprep.models.outcome import PipelineResult, RecordOutcome, SkipReason
from arenaprep.models.overrides import OverrideConfig
from arenaprep.parsers.client_data import ExtractedSets
from arenaprep.services.corrections import apply_corrections
from arenaprep.services.eligibility import check_eligibility
from arenaprep.services.identifier_backfill import add_arena_id
from arenaprep.services.projection import MalformedCardError, project_card

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "arenaCards"


def _card_label(card: Any) -> str:
    name = card.get("name") if isinstance(card, dict) else None
    return str(name) if name else repr(card)


def _malformed(label: str, reason: str) -> RecordOutcome:
    logger.warning(
        "card_skipped_malformed",
        extra={"card_name": label, "reason": reason},
    )
    return RecordOutcome.skip(label, SkipReason.MALFORMED, reason)


def process_card(
    card: ScryfallCard,
    overrides: OverrideConfig,
    extracted: ExtractedSets,
    primary_language: str | None = None,
) -> tuple[RecordOutcome, bool]:
    """
    Run one catalog entry through every stage.

    Any error raised while handling the entry skips it as MALFORMED;
    it never propagates.

    Returns:
        (outcome, backfilled) where backfilled is True if an arena id
        was assigned from extracted client data.
    """
    label = _card_label(card)
    backfilled = False

    if not isinstance(card, dict):
        return _malformed(label, "catalog entry is not an object"), backfilled

    try:
        # Only allow-listed sets are eligible for backfill
        if card.get("arena_id") is None and overrides.is_set_exception(card.get("set")):
            card, backfilled = add_arena_id(card, overrides, extracted)

        reason = check_eligibility(card, overrides, primary_language)
        if reason is not None:
            return RecordOutcome.skip(label, reason), backfilled

        projected = project_card(card, overrides, backfilled)
        corrected = apply_corrections(projected, overrides)
    except MalformedCardError as e:
        return _malformed(label, e.reason), backfilled
    except Exception as e:
        return _malformed(label, f"{type(e).__name__}: {e}"), backfilled

    return RecordOutcome.keep(label, corrected), backfilled


def run_pipeline(
    cards: Iterable[ScryfallCard],
    overrides: OverrideConfig,
    extracted: ExtractedSets,
    primary_language: str | None = None,
) -> PipelineResult:
    """
    Preprocess a whole catalog.

    Args:
        cards: Catalog entries
        overrides: Override tables
        extracted: Extracted client sets for identifier backfill
        primary_language: Language code to keep (defaults to settings)

    Returns:
        PipelineResult with kept cards and every skip outcome.
    """
    result = PipelineResult()

    for card in cards:
        outcome, backfilled = process_card(card, overrides, extracted, primary_language)
        result.add(outcome)
        if backfilled:
            result.backfilled_count += 1

    logger.info(
        "cards_preprocessed",
        extra={
            "total_count": result.total_count,
            "kept_count": len(result.cards),
            "backfilled_count": result.backfilled_count,
            "skip_counts": {reason.value: n for reason, n in result.skip_counts().items()},
        },
    )
    return result


def output_filename(now: datetime | None = None) -> str:
    """
    Timestamped output file name, e.g. arenaCards20210412090313.json.
    """
    if now is None:
        now = datetime.now(UTC)
    return f"{OUTPUT_PREFIX}{now.strftime('%Y%m%d%H%M%S')}.json"


def write_cards(cards: list[ArenaCard], output_dir: Path, now: datetime | None = None) -> Path:
    """
    Write the projected cards as one compact JSON array.

    Returns:
        Path to the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / output_filename(now)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(cards, f, separators=(",", ":"), ensure_ascii=False)
    return path
