from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARENAPREP_")

    data_dir: Path = Path("data")

    # Hand-maintained override tables shipped with the package
    overrides_path: Path = PACKAGE_DIR / "data" / "overrides.json"

    # One <set>.json per set, written by the extract_set job
    extracted_sets_dir: Path = Path("data/extracted")

    output_dir: Path = Path("data/output")

    primary_language: str = "en"

    simulation_trials: int = 100_000
    simulation_seed: int | None = None


settings = Settings()


# =============================================================================
# OUTPUT SHAPE
# =============================================================================

# Image size used for imgs.front / imgs.back
IMAGE_SIZE = "border_crop"

# Fields copied verbatim from the catalog when present
DESIRED_PROPERTIES = (
    "name",
    "color_identity",
    "cmc",
    "set",
    "rarity",
    "type_line",
    "oracle_text",
    "layout",
    "keywords",
    "collector_number",
    "booster",
    "promo_types",
    "printed_name",
)

# Formats kept in the output legalities mapping
DESIRED_LEGALITIES = (
    "standard",
    "historic",
    "brawl",
    "historicbrawl",
    "future",
    "alchemy",
    "explorer",
)

# Fields kept on each entry of card_faces
DESIRED_FACE_PROPERTIES = (
    "name",
    "oracle_text",
    "mana_cost",
    "type_line",
)
