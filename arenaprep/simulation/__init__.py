from arenaprep.simulation.events import (
    EVENTS,
    PREMIER_DRAFT,
    QUICK_DRAFT,
    TRADITIONAL_DRAFT,
    EventConfig,
    RewardTier,
)
from arenaprep.simulation.rewards import (
    EventResult,
    ExpectedRewards,
    expected_rewards,
    simulate_event,
    sweep_win_rates,
)

__all__ = [
    "EVENTS",
    "EventConfig",
    "EventResult",
    "ExpectedRewards",
    "PREMIER_DRAFT",
    "QUICK_DRAFT",
    "RewardTier",
    "TRADITIONAL_DRAFT",
    "expected_rewards",
    "simulate_event",
    "sweep_win_rates",
]
