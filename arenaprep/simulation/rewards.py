"""
Monte-Carlo draft reward simulator.

Estimates the expected gems and packs an event pays out at a given match
win rate. Trials are independent, so they are simulated in vectorized
batches and reduced with a plain sum.
"""

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from arenaprep.simulation.events import EventConfig

# Trials per vectorized batch; bounds memory at large trial counts
BATCH_SIZE = 100_000

DEFAULT_STEP = 0.01
MIN_STEP = 0.01


@dataclass(frozen=True, slots=True)
class EventResult:
    """Outcome of a single simulated event."""

    gems: int
    packs: int
    wins: int
    losses: int


@dataclass(frozen=True, slots=True)
class ExpectedRewards:
    """Average payout over many simulated events."""

    average_gems: float
    average_packs: float
    trials: int

    def to_json(self) -> dict[str, float]:
        return {"averageCurrency": self.average_gems, "averagePacks": self.average_packs}


def simulate_event(config: EventConfig, win_rate: float, rng: np.random.Generator) -> EventResult:
    """
    Play one event to completion.

    Args:
        config: Event structure and prizes
        win_rate: Probability of winning each match, 0..1
        rng: Random source

    Returns:
        Prize and record for the event
    """
    wins = losses = 0
    while (
        wins < config.max_wins
        and losses < config.max_losses
        and wins + losses < config.max_games
    ):
        if rng.random() < win_rate:
            wins += 1
        else:
            losses += 1

    tier = config.rewards[wins]
    packs = tier.packs
    if tier.bonus_pack_chance is not None and rng.random() < tier.bonus_pack_chance:
        packs += 1

    return EventResult(gems=tier.gems, packs=packs, wins=wins, losses=losses)


def _simulate_batch(
    config: EventConfig,
    win_rate: float,
    trials: int,
    rng: np.random.Generator,
) -> tuple[int, int]:
    """Total gems and packs over a batch of independent events."""
    won = rng.random((trials, config.max_games)) < win_rate
    wins_so_far = np.cumsum(won, axis=1)
    losses_so_far = np.arange(1, config.max_games + 1) - wins_so_far

    finished = (wins_so_far >= config.max_wins) | (losses_so_far >= config.max_losses)
    # Games cap: the last column always ends the event
    finished[:, -1] = True
    last_game = finished.argmax(axis=1)

    final_wins = wins_so_far[np.arange(trials), last_game]

    gems_by_wins = np.array([tier.gems for tier in config.rewards])
    packs_by_wins = np.array([tier.packs for tier in config.rewards])
    bonus_by_wins = np.array([tier.bonus_pack_chance or 0.0 for tier in config.rewards])

    bonus = rng.random(trials) < bonus_by_wins[final_wins]
    gems = gems_by_wins[final_wins]
    packs = packs_by_wins[final_wins] + bonus

    return int(gems.sum()), int(packs.sum())


def expected_rewards(
    config: EventConfig,
    win_rate: float,
    trials: int,
    rng: np.random.Generator,
) -> ExpectedRewards:
    """
    Average payout over ``trials`` simulated events.

    Raises:
        ValueError: If trials < 1 or win_rate is outside 0..1
    """
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials}")
    if not 0.0 <= win_rate <= 1.0:
        raise ValueError(f"win_rate must be between 0 and 1, got {win_rate}")

    total_gems = total_packs = 0
    remaining = trials
    while remaining > 0:
        batch = min(remaining, BATCH_SIZE)
        gems, packs = _simulate_batch(config, win_rate, batch, rng)
        total_gems += gems
        total_packs += packs
        remaining -= batch

    return ExpectedRewards(
        average_gems=total_gems / trials,
        average_packs=total_packs / trials,
        trials=trials,
    )


def sweep_win_rates(
    config: EventConfig,
    trials: int,
    step: float = DEFAULT_STEP,
    seed: int | None = None,
) -> dict[str, dict[str, Any]]:
    """
    Build the expected-value lookup table for win rates 0.00 through 1.00.

    Args:
        config: Event to simulate
        trials: Events simulated per win rate
        step: Spacing between sampled win rates
        seed: Seed for reproducible tables

    Returns:
        Dict mapping two-decimal win rate ("0.50") to
        {"averageCurrency": ..., "averagePacks": ...}

    Raises:
        ValueError: If step is below 0.01, not a multiple of 0.01,
            or does not divide 1 evenly
    """
    # Keys carry two decimals, so finer steps would collide
    if not MIN_STEP <= step <= 1.0:
        raise ValueError(f"step must be between {MIN_STEP} and 1, got {step}")
    if not math.isclose(round(step, 2), step, abs_tol=1e-9):
        raise ValueError(f"step must be a multiple of {MIN_STEP}, got {step}")
    intervals = round(1.0 / step)
    if not math.isclose(intervals * step, 1.0, abs_tol=1e-9):
        raise ValueError(f"step must divide 1 evenly, got {step}")

    rng = np.random.default_rng(seed)
    samples = intervals + 1
    lookup: dict[str, dict[str, Any]] = {}

    for win_rate in np.linspace(0.0, 1.0, samples):
        rate = float(win_rate)
        lookup[f"{rate:.2f}"] = expected_rewards(config, rate, trials, rng).to_json()

    return lookup
