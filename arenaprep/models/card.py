"""
Card shapes flowing through the preprocessing pipeline.

- ScryfallCard: raw catalog entry, UNTRUSTED, never mutated in place
- ExtractedCard: Arena id record pulled out of the game client files
- ArenaCard: the compact output shape written for downstream consumers
"""

from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Raw Scryfall card as parsed from the bulk JSON
ScryfallCard = dict[str, Any]


class ExtractedCard(BaseModel):
    """
    Card entry extracted from the game client.

    Authoritative source of Arena ids for printings the catalog
    has not been updated with yet.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    arena_id: int = Field(..., alias="arenaId")
    name: str
    collector_number: str
    set: str

    @field_validator("collector_number", mode="before")
    @classmethod
    def _collector_number_as_text(cls, value: Any) -> str:
        # Client dumps store some collector numbers as integers
        return str(value)

    @field_validator("set")
    @classmethod
    def _lowercase_set(cls, value: str) -> str:
        return value.lower()

    def to_json(self) -> dict[str, Any]:
        """Serialize using the on-disk key names."""
        return self.model_dump(by_alias=True)


class CardImages(TypedDict, total=False):
    front: str
    back: str


class CardFace(TypedDict, total=False):
    name: str
    oracle_text: str
    mana_cost: str
    type_line: str


class ArenaCard(TypedDict, total=False):
    """Projected card written to the output file."""

    arenaId: int
    name: str
    color_identity: list[str]
    cmc: float
    set: str
    rarity: str
    type_line: str
    oracle_text: str
    layout: str
    keywords: list[str]
    collector_number: str
    booster: bool
    promo_types: list[str]
    printed_name: str
    imgs: CardImages
    legalities: dict[str, str]
    card_faces: list[CardFace]
