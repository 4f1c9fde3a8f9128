"""
Preprocess the Scryfall catalog into the Arena card list.

Usage:
    python -m arenaprep.jobs.preprocess_cards --catalog data/default-cards.json
"""

import argparse
import logging
from pathlib import Path

from arenaprep.config import settings
from arenaprep.models.outcome import PipelineResult
from arenaprep.models.overrides import load_overrides
from arenaprep.parsers.client_data import load_extracted_sets
from arenaprep.parsers.scryfall import load_bulk_cards
from arenaprep.services.pipeline import run_pipeline, write_cards

logger = logging.getLogger(__name__)


def run_preprocess(
    catalog_path: Path,
    extracted_dir: Path,
    overrides_path: Path,
    output_dir: Path,
    primary_language: str | None = None,
) -> tuple[Path, PipelineResult]:
    """
    Load every input, run the pipeline, and write the output file.

    Returns:
        (output path, pipeline result)

    Raises:
        CatalogError: If the catalog is missing or unusable
        OverrideConfigError: If override or extracted data is inconsistent
    """
    overrides = load_overrides(overrides_path)
    extracted = load_extracted_sets(extracted_dir)
    logger.info("Loaded %d extracted sets from %s", len(extracted), extracted_dir)

    cards = load_bulk_cards(catalog_path)
    logger.info("Loaded %d catalog entries from %s", len(cards), catalog_path)

    result = run_pipeline(cards, overrides, extracted, primary_language)
    path = write_cards(result.cards, output_dir)

    logger.info("Wrote %d cards to %s", len(result.cards), path)
    for outcome in result.malformed():
        logger.warning("Unable to process %s (%s), skipped", outcome.name, outcome.detail)

    return path, result


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Preprocess Scryfall bulk data for Arena")
    parser.add_argument(
        "--catalog",
        type=Path,
        required=True,
        help="Scryfall default-cards bulk JSON",
    )
    parser.add_argument(
        "--extracted-dir",
        type=Path,
        default=settings.extracted_sets_dir,
        help=f"Directory of extracted client sets (default: {settings.extracted_sets_dir})",
    )
    parser.add_argument(
        "--overrides",
        type=Path,
        default=settings.overrides_path,
        help="Override tables JSON (default: packaged tables)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help=f"Directory for the output file (default: {settings.output_dir})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_preprocess(
        args.catalog,
        args.extracted_dir,
        args.overrides,
        args.output_dir,
        primary_language=settings.primary_language,
    )


if __name__ == "__main__":
    main()
