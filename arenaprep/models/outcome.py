"""
Per-card pipeline outcomes.

Every catalog entry produces exactly one RecordOutcome: either a kept
ArenaCard or a classified skip. Callers collect skip reasons in one pass
instead of relying on thrown-and-caught control flow.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from arenaprep.models.card import ArenaCard


class SkipReason(str, Enum):
    """Why a catalog entry was left out of the output."""

    # Identifier checks
    MISSING_ARENA_ID = "missing_arena_id"
    BACKFILL_FAILED = "backfill_failed"
    EXCLUDED_BY_NAME = "excluded_by_name"

    # Catalog kind checks
    NON_PRIMARY_LANGUAGE = "non_primary_language"
    TOKEN = "token"

    # Known duplicates
    PROBLEM_ARENA_ID = "problem_arena_id"
    EXCLUDED_COLLECTOR_NUMBER = "excluded_collector_number"

    # Variant heuristics
    DROPPED_PROMO_SET = "dropped_promo_set"
    UNDESIRABLE_PROMO = "undesirable_promo"
    VARIANT_COLLECTOR_NUMBER = "variant_collector_number"

    # Structural defect found while projecting
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class RecordOutcome:
    """
    Result of running one catalog entry through the pipeline.

    Attributes:
        name: Card name (or a repr of the raw entry when unnamed)
        card: Projected card when kept
        skip_reason: Classification when skipped
        detail: Extra context for skips (e.g. the projection error)
    """

    name: str
    card: ArenaCard | None = None
    skip_reason: SkipReason | None = None
    detail: str | None = None

    @property
    def kept(self) -> bool:
        return self.card is not None

    @classmethod
    def keep(cls, name: str, card: ArenaCard) -> "RecordOutcome":
        return cls(name=name, card=card)

    @classmethod
    def skip(cls, name: str, reason: SkipReason, detail: str | None = None) -> "RecordOutcome":
        return cls(name=name, skip_reason=reason, detail=detail)


@dataclass
class PipelineResult:
    """Accumulated output of one preprocessing run."""

    cards: list[ArenaCard] = field(default_factory=list)
    skipped: list[RecordOutcome] = field(default_factory=list)
    backfilled_count: int = 0

    def add(self, outcome: RecordOutcome) -> None:
        if outcome.card is not None:
            self.cards.append(outcome.card)
        else:
            self.skipped.append(outcome)

    @property
    def total_count(self) -> int:
        return len(self.cards) + len(self.skipped)

    def skip_counts(self) -> dict[SkipReason, int]:
        """Number of skipped entries per reason."""
        counts = Counter(
            outcome.skip_reason for outcome in self.skipped if outcome.skip_reason is not None
        )
        return dict(counts)

    def malformed(self) -> list[RecordOutcome]:
        return [o for o in self.skipped if o.skip_reason == SkipReason.MALFORMED]
