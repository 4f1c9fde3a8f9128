"""
Draft event configurations.

Each event ends when the player reaches max wins, max losses, or max games,
whichever comes first. Rewards are indexed by final win count.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RewardTier(BaseModel):
    """Prize for finishing an event with a given number of wins."""

    model_config = ConfigDict(frozen=True)

    gems: int = Field(..., ge=0)
    packs: int = Field(..., ge=0)
    bonus_pack_chance: float | None = Field(default=None, ge=0.0, le=1.0)


class EventConfig(BaseModel):
    """Structure and prize table of a repeated-match event."""

    model_config = ConfigDict(frozen=True)

    name: str
    max_wins: int = Field(..., ge=1)
    max_losses: int = Field(..., ge=1)
    max_games: int = Field(..., ge=1)
    rewards: tuple[RewardTier, ...]

    @model_validator(mode="after")
    def _one_tier_per_win_count(self) -> "EventConfig":
        if len(self.rewards) != self.max_wins + 1:
            raise ValueError(
                f"Event {self.name!r} needs {self.max_wins + 1} reward tiers "
                f"(0..{self.max_wins} wins), got {len(self.rewards)}"
            )
        return self


PREMIER_DRAFT = EventConfig(
    name="premier",
    max_wins=7,
    max_losses=3,
    max_games=9,
    rewards=(
        RewardTier(gems=50, packs=1),
        RewardTier(gems=100, packs=1),
        RewardTier(gems=250, packs=2),
        RewardTier(gems=1000, packs=2),
        RewardTier(gems=1400, packs=3),
        RewardTier(gems=1600, packs=4),
        RewardTier(gems=1800, packs=5),
        RewardTier(gems=2200, packs=6),
    ),
)

TRADITIONAL_DRAFT = EventConfig(
    name="traditional",
    max_wins=3,
    max_losses=3,
    max_games=3,
    rewards=(
        RewardTier(gems=0, packs=1),
        RewardTier(gems=0, packs=1),
        RewardTier(gems=1000, packs=4),
        RewardTier(gems=3000, packs=6),
    ),
)

QUICK_DRAFT = EventConfig(
    name="quick",
    max_wins=7,
    max_losses=3,
    max_games=9,
    rewards=(
        RewardTier(gems=50, packs=1, bonus_pack_chance=0.20),
        RewardTier(gems=100, packs=1, bonus_pack_chance=0.22),
        RewardTier(gems=200, packs=1, bonus_pack_chance=0.24),
        RewardTier(gems=300, packs=1, bonus_pack_chance=0.26),
        RewardTier(gems=450, packs=1, bonus_pack_chance=0.30),
        RewardTier(gems=650, packs=1, bonus_pack_chance=0.35),
        RewardTier(gems=850, packs=1, bonus_pack_chance=0.40),
        RewardTier(gems=950, packs=1, bonus_pack_chance=1.00),
    ),
)

EVENTS: dict[str, EventConfig] = {
    event.name: event for event in (PREMIER_DRAFT, TRADITIONAL_DRAFT, QUICK_DRAFT)
}
