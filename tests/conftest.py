from collections.abc import Callable
from typing import Any

import pytest

from arenaprep.models.card import ExtractedCard
from arenaprep.models.overrides import (
    CardCorrection,
    NamedImageReplacement,
    OverrideConfig,
)

CardFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def overrides() -> OverrideConfig:
    """Small override tables mirroring the shipped ones."""
    return OverrideConfig(
        set_exceptions={"j21": frozenset({"Lightning Bolt"}), "vow": frozenset()},
        multi_origin_sets={"j21": ("j21", "mh1", "mh2")},
        problem_arena_ids=frozenset({75382}),
        excluded_collector_numbers={"mid": frozenset({"385", "386"})},
        keep_all_variants_set="sta",
        drop_promos_set="pdom",
        undesirable_promo_types=frozenset({"boosterfun", "promopack"}),
        replacement_images={70001: "https://img.example/replacement.jpg"},
        extra_replacements=(
            NamedImageReplacement(
                name="Fast // Furious",
                set="j21",
                img="https://img.example/fast-furious.jpg",
            ),
        ),
        corrections={
            29535: CardCorrection(set="shm", collector_number="237"),
        },
        set_corrections={
            "ajmp": CardCorrection(set="jmp", booster=True),
            "sta": CardCorrection(booster=True),
        },
    )


@pytest.fixture
def extracted() -> dict[str, list[ExtractedCard]]:
    """Extracted client sets keyed by set code."""
    return {
        "j21": [
            ExtractedCard(arena_id=77001, name="Davriel's Withering", collector_number="5", set="j21"),
        ],
        "mh1": [
            ExtractedCard(arena_id=77101, name="Ranger-Captain of Eos", collector_number="21", set="mh1"),
        ],
        "mh2": [
            ExtractedCard(arena_id=77201, name="Fast", collector_number="5", set="mh2"),
        ],
        "vow": [
            ExtractedCard(arena_id=79001, name="Voldaren Bloodcaster", collector_number="122", set="vow"),
            ExtractedCard(arena_id=79002, name="Edgar, Charmed Groom", collector_number="236", set="vow"),
        ],
    }


@pytest.fixture
def make_card() -> CardFactory:
    """Build a Scryfall card that passes every eligibility check by default."""

    def _make_card(**fields: Any) -> dict[str, Any]:
        card: dict[str, Any] = {
            "name": "Sheoldred, the Apocalypse",
            "arena_id": 82377,
            "lang": "en",
            "set": "dmu",
            "set_type": "expansion",
            "collector_number": "107",
            "layout": "normal",
            "color_identity": ["B"],
            "cmc": 4.0,
            "rarity": "mythic",
            "type_line": "Legendary Creature — Phyrexian Praetor",
            "oracle_text": "Deathtouch",
            "keywords": ["Deathtouch"],
            "booster": True,
            "image_uris": {
                "normal": "https://img.example/normal/sheoldred.jpg",
                "border_crop": "https://img.example/border/sheoldred.jpg",
            },
            "legalities": {
                "standard": "legal",
                "historic": "legal",
                "modern": "legal",
                "brawl": "not_legal",
            },
        }
        card.update(fields)
        return {key: value for key, value in card.items() if value is not None}

    return _make_card


@pytest.fixture
def transform_card(make_card: CardFactory) -> dict[str, Any]:
    """Double-faced card with an image per face."""
    card = make_card(
        name="Edgar, Charmed Groom // Edgar Markov's Coffin",
        arena_id=79002,
        set="vow",
        collector_number="236",
        layout="transform",
        image_uris=None,
        oracle_text=None,
    )
    card["card_faces"] = [
        {
            "object": "card_face",
            "name": "Edgar, Charmed Groom",
            "mana_cost": "{2}{W}{B}",
            "type_line": "Legendary Creature — Vampire Noble",
            "oracle_text": "Other Vampires you control get +1/+1.",
            "artist": "Volkan Baǵa",
            "image_uris": {"border_crop": "https://img.example/border/edgar-front.jpg"},
        },
        {
            "object": "card_face",
            "name": "Edgar Markov's Coffin",
            "mana_cost": "",
            "type_line": "Legendary Artifact",
            "flavor_text": "A coffin.",
            "image_uris": {"border_crop": "https://img.example/border/edgar-back.jpg"},
        },
    ]
    return card
