"""
Field projection and reshape.

Turns an eligible catalog entry into the compact ArenaCard shape:
whitelisted fields only, images flattened to imgs.front / imgs.back,
legalities restricted to Arena formats, and faces trimmed.
"""

from collections.abc import Mapping
from typing import Any

from arenaprep.config import (
    DESIRED_FACE_PROPERTIES,
    DESIRED_LEGALITIES,
    DESIRED_PROPERTIES,
    IMAGE_SIZE,
)
from arenaprep.models.card import ArenaCard, CardFace, CardImages, ScryfallCard
from arenaprep.models.overrides import OverrideConfig


class MalformedCardError(Exception):
    """Raised when a catalog entry is missing structure the output needs."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"{name}: {reason}")


def _image_url(image_uris: Any, name: str, where: str) -> str:
    if not isinstance(image_uris, Mapping) or IMAGE_SIZE not in image_uris:
        raise MalformedCardError(name, f"{where} has no {IMAGE_SIZE} image")
    return str(image_uris[IMAGE_SIZE])


def _faces(card: ScryfallCard, name: str) -> list[Mapping[str, Any]]:
    faces = card.get("card_faces") or []
    if not isinstance(faces, list):
        raise MalformedCardError(name, "card_faces is not a list")
    for index, face in enumerate(faces):
        if not isinstance(face, Mapping):
            raise MalformedCardError(name, f"face {index} is not an object")
    return faces


def _project_face(face: Mapping[str, Any]) -> CardFace:
    projected: dict[str, Any] = {}
    for prop in DESIRED_FACE_PROPERTIES:
        if prop in face:
            projected[prop] = face[prop]
    return projected  # type: ignore[return-value]


def _project_legalities(card: ScryfallCard, name: str) -> dict[str, str]:
    source = card.get("legalities") or {}
    if not isinstance(source, Mapping):
        raise MalformedCardError(name, "legalities is not an object")
    return {fmt: "legal" for fmt in DESIRED_LEGALITIES if source.get(fmt) == "legal"}


def _replacement_image(
    card: ScryfallCard, overrides: OverrideConfig, backfilled: bool
) -> str | None:
    arena_id = card.get("arena_id")
    if arena_id is not None and arena_id in overrides.replacement_images:
        return overrides.replacement_images[arena_id]

    # Name + set entries cover cards Scryfall has no arena id for
    if backfilled or arena_id is None:
        return overrides.find_named_replacement(card.get("name"), card.get("set"))
    return None


def project_card(
    card: ScryfallCard,
    overrides: OverrideConfig,
    backfilled: bool = False,
) -> ArenaCard:
    """
    Project a catalog entry into the output shape.

    Args:
        card: Eligible catalog entry
        overrides: Override tables (replacement images)
        backfilled: Whether the arena id came from extracted client data

    Returns:
        New ArenaCard. Absent source fields are omitted, never nulled.

    Raises:
        MalformedCardError: If nested image, legality, or face data has the
            wrong shape, or a multi-faced card has no usable front image
    """
    name = str(card.get("name") or card)
    projected: dict[str, Any] = {}

    if card.get("arena_id") is not None:
        projected["arenaId"] = card["arena_id"]

    for prop in DESIRED_PROPERTIES:
        if prop in card:
            projected[prop] = card[prop]

    images: CardImages = {}
    if card.get("image_uris"):
        images["front"] = _image_url(card["image_uris"], name, "card")

    projected["legalities"] = _project_legalities(card, name)

    faces = _faces(card, name)
    if len(faces) > 1:
        # Split cards carry images at the top level, transform cards per face
        if "front" not in images:
            images["front"] = _image_url(faces[0].get("image_uris"), name, "first face")
        if faces[1].get("image_uris"):
            images["back"] = _image_url(faces[1]["image_uris"], name, "second face")
        projected["card_faces"] = [_project_face(face) for face in faces]

    replacement = _replacement_image(card, overrides, backfilled)
    if replacement is not None:
        images["front"] = replacement

    if images:
        projected["imgs"] = images

    return projected  # type: ignore[return-value]
