from arenaprep.services.corrections import apply_corrections
from arenaprep.services.eligibility import check_eligibility, is_eligible
from arenaprep.services.identifier_backfill import add_arena_id, find_extracted_match
from arenaprep.services.pipeline import (
    output_filename,
    process_card,
    run_pipeline,
    write_cards,
)
from arenaprep.services.projection import MalformedCardError, project_card

__all__ = [
    "MalformedCardError",
    "add_arena_id",
    "apply_corrections",
    "check_eligibility",
    "find_extracted_match",
    "is_eligible",
    "output_filename",
    "process_card",
    "project_card",
    "run_pipeline",
    "write_cards",
]
