"""
Extract arena ids for one set from the game client files.

Usage:
    python -m arenaprep.jobs.extract_set --set VOW \
        --cards data/client/data_cards.json --loc data/client/data_loc.json
"""

import argparse
import json
import logging
from pathlib import Path

from arenaprep.config import settings
from arenaprep.parsers.client_data import extract_set, write_extracted_set

logger = logging.getLogger(__name__)


def run_extract(set_code: str, cards_path: Path, loc_path: Path, output_dir: Path) -> Path:
    """
    Extract one set and write it to ``<output_dir>/<set>.json``.

    Raises:
        ExtractionError: If no cards were found for the set
    """
    with open(cards_path, encoding="utf-8") as f:
        data_cards = json.load(f)
    with open(loc_path, encoding="utf-8") as f:
        data_loc = json.load(f)

    cards = extract_set(data_cards, data_loc, set_code)
    path = write_extracted_set(cards, output_dir, set_code)
    logger.info("Wrote %d cards to %s", len(cards), path)
    return path


def main() -> None:
    """CLI entry point."""
    client_dir = settings.data_dir / "client"

    parser = argparse.ArgumentParser(description="Extract arena ids from game client data")
    parser.add_argument("--set", required=True, dest="set_code", help="Set code (e.g., VOW)")
    parser.add_argument(
        "--cards",
        type=Path,
        default=client_dir / "data_cards.json",
        help="Client card dump renamed to .json",
    )
    parser.add_argument(
        "--loc",
        type=Path,
        default=client_dir / "data_loc.json",
        help="Client localization dump renamed to .json",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.extracted_sets_dir,
        help=f"Directory for extracted sets (default: {settings.extracted_sets_dir})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_extract(args.set_code, args.cards, args.loc, args.output_dir)


if __name__ == "__main__":
    main()
