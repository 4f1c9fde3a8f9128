"""
Scryfall bulk data loader.

Reads the "default cards" bulk JSON that an external fetch step saved to
disk. The catalog is the only input whose absence stops a run.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

import json
from pathlib import Path

from arenaprep.models.card import ScryfallCard


class CatalogError(Exception):
    """Raised when the bulk catalog cannot be used at all."""

    pass


def load_bulk_cards(bulk_data_path: Path) -> list[ScryfallCard]:
    """
    Load every card entry from a Scryfall bulk JSON file.

    Args:
        bulk_data_path: Path to downloaded Scryfall bulk JSON

    Returns:
        Card entries in file order

    Raises:
        CatalogError: If the file is missing, unparseable, or not a JSON array
    """
    if not bulk_data_path.exists():
        raise CatalogError(f"Card catalog not found at {bulk_data_path}")

    try:
        with open(bulk_data_path, encoding="utf-8") as f:
            cards = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(f"Card catalog at {bulk_data_path} is not valid UTF-8 JSON: {e}") from e

    if not isinstance(cards, list):
        raise CatalogError(
            f"Card catalog at {bulk_data_path} must be a JSON array, got {type(cards).__name__}"
        )

    return cards
