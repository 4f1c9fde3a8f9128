from arenaprep.parsers.client_data import (
    ExtractedSets,
    ExtractionError,
    extract_set,
    load_extracted_sets,
    write_extracted_set,
)
from arenaprep.parsers.scryfall import CatalogError, load_bulk_cards

__all__ = [
    "CatalogError",
    "ExtractedSets",
    "ExtractionError",
    "extract_set",
    "load_bulk_cards",
    "load_extracted_sets",
    "write_extracted_set",
]
