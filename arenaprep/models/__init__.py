from arenaprep.models.card import (
    ArenaCard,
    CardFace,
    CardImages,
    ExtractedCard,
    ScryfallCard,
)
from arenaprep.models.outcome import PipelineResult, RecordOutcome, SkipReason
from arenaprep.models.overrides import (
    CardCorrection,
    NamedImageReplacement,
    OverrideConfig,
    OverrideConfigError,
    load_overrides,
)

__all__ = [
    "ArenaCard",
    "CardCorrection",
    "CardFace",
    "CardImages",
    "ExtractedCard",
    "NamedImageReplacement",
    "OverrideConfig",
    "OverrideConfigError",
    "PipelineResult",
    "RecordOutcome",
    "ScryfallCard",
    "SkipReason",
    "load_overrides",
]
