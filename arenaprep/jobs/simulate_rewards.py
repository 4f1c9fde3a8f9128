"""
Build an expected-reward lookup table for a draft event.

Usage:
    python -m arenaprep.jobs.simulate_rewards --event quick --trials 1000000
"""

import argparse
import json
import logging
from pathlib import Path

from arenaprep.config import settings
from arenaprep.simulation.events import EVENTS, EventConfig
from arenaprep.simulation.rewards import DEFAULT_STEP, sweep_win_rates

logger = logging.getLogger(__name__)


def run_simulation(
    event: EventConfig,
    trials: int,
    output_path: Path,
    step: float = DEFAULT_STEP,
    seed: int | None = None,
) -> Path:
    """Sweep win rates for an event and write the lookup table as JSON."""
    logger.info("Simulating %s draft, %d trials per win rate", event.name, trials)
    lookup = sweep_win_rates(event, trials, step=step, seed=seed)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(lookup, f)

    logger.info("Wrote %d win rates to %s", len(lookup), output_path)
    return output_path


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Simulate draft event rewards")
    parser.add_argument(
        "--event",
        default="quick",
        choices=sorted(EVENTS),
        help="Event type (default: quick)",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=settings.simulation_trials,
        help=f"Events simulated per win rate (default: {settings.simulation_trials})",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=DEFAULT_STEP,
        help=f"Win rate spacing (default: {DEFAULT_STEP})",
    )
    parser.add_argument("--seed", type=int, default=settings.simulation_seed)
    parser.add_argument("--output", type=Path, default=None, help="Output JSON path")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    output = args.output or settings.output_dir / f"{args.event}Lookup.json"
    run_simulation(EVENTS[args.event], args.trials, output, step=args.step, seed=args.seed)


if __name__ == "__main__":
    main()
