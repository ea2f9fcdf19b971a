from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List

import pandas as pd
from pydantic.alias_generators import to_camel

from ..matching.models import NEUTRAL_TRAIT, TRAIT_NAMES, BreedCharacteristics, BreedProfile
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

RAW_COLUMNS: List[str] = [
    "id",
    "name",
    "breed_group",
    "size_category",
    "breed_type",
]

SIZE_LABELS = {
    "toy": "Toy",
    "small": "Small",
    "medium": "Medium",
    "large": "Large",
    "giant": "Giant",
}
DEFAULT_SIZE_LABEL = "Medium"

GROUP_LABELS = {
    "sporting": "Sporting",
    "hound": "Hound",
    "working": "Working",
    "terrier": "Terrier",
    "toy": "Toy",
    "non-sporting": "Non-Sporting",
    "herding": "Herding",
    "mixed": "Mixed",
}
DEFAULT_GROUP_LABEL = "Mixed"

# Base stats per breed group: (energy, friendly, train, groom, kids, pets).
GROUP_STATS: dict[str, tuple[int, int, int, int, int, int]] = {
    "sporting": (8, 9, 8, 6, 9, 7),
    "hound": (7, 8, 6, 4, 8, 6),
    "working": (8, 7, 9, 6, 7, 6),
    "terrier": (9, 6, 7, 5, 6, 5),
    "toy": (6, 8, 7, 7, 7, 6),
    "non-sporting": (6, 8, 7, 6, 8, 7),
    "herding": (9, 8, 9, 7, 8, 7),
    "mixed": (7, 8, 7, 6, 8, 7),
}
DEFAULT_GROUP = "mixed"

SMALL_SIZE_CATEGORIES = frozenset({"toy", "small"})
HYBRID_BREED_TYPES = frozenset({"hybrid", "designer"})


def _text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip()


def _normalize_size(size: str) -> str:
    return SIZE_LABELS.get(size.lower(), DEFAULT_SIZE_LABEL)


def _normalize_group(group: str) -> str:
    return GROUP_LABELS.get(group.lower(), DEFAULT_GROUP_LABEL)


def _trait_value(value: Any) -> int | float | None:
    """Parse an explicit trait cell; blanks mean "derive from the group"."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    number = float(value)
    return int(number) if number.is_integer() else number


def _group_traits(group: str, size_category: str, breed_type: str) -> dict[str, int]:
    energy, friendly, train, groom, kids, pets = GROUP_STATS.get(
        group.lower(), GROUP_STATS[DEFAULT_GROUP]
    )

    if size_category.lower() in SMALL_SIZE_CATEGORIES:
        energy = max(1, energy - 1)
        kids = max(1, kids - 1)

    if breed_type.lower() in HYBRID_BREED_TYPES:
        friendly = min(10, friendly + 1)
        train = min(10, train + 1)

    return {
        "energy_level": energy,
        "friendliness": friendly,
        "trainability": train,
        "grooming_needs": groom,
        "good_with_kids": kids,
        "good_with_dogs": pets,
        "good_with_cats": pets,
    }


def derive_characteristics(
    group: str,
    size_category: str = "",
    breed_type: str = "",
    overrides: Mapping[str, Any] | None = None,
) -> BreedCharacteristics:
    """
    Build a characteristic vector from a breed group.

    The group supplies energy, friendliness, trainability, grooming, kid and pet
    stats (unknown groups use the mixed-breed stats). Toy and small breeds lose a
    point of energy and kid-friendliness; hybrid and designer breeds gain a point
    of friendliness and trainability. Traits the group does not cover stay at 5.

    ``overrides`` may carry explicit trait values keyed by either the snake_case
    or camelCase trait name; they win over the derived values.
    """
    traits: dict[str, int | float] = {name: NEUTRAL_TRAIT for name in TRAIT_NAMES}
    traits.update(_group_traits(group, size_category, breed_type))

    for name in TRAIT_NAMES:
        for key in (name, to_camel(name)):
            if overrides and key in overrides:
                value = _trait_value(overrides[key])
                if value is not None:
                    traits[name] = value

    return BreedCharacteristics(**traits)


def transform_breed(record: Mapping[str, Any]) -> BreedProfile:
    """Map one raw catalog record onto the canonical BreedProfile schema."""
    name = _text(record.get("name"))
    if not name:
        raise ValueError(f"Breed record {record.get('id')!r} has no name")

    group = _text(record.get("breed_group"))
    size_category = _text(record.get("size_category"))
    breed_type = _text(record.get("breed_type"))

    return BreedProfile(
        id=f"breed-{_text(record.get('id'))}",
        name=name,
        size=_normalize_size(size_category),
        category=_normalize_group(group),
        breed_type=breed_type or None,
        characteristics=derive_characteristics(group, size_category, breed_type, record),
    )


def load_breeds(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[BreedProfile]:
    """
    Read the catalog CSV and return its breeds in file order.

    Rows that cannot be turned into a BreedProfile are skipped with a warning so
    that one bad record does not empty the catalog.
    """
    df = pd.read_csv(config.catalog_path, dtype={"id": str})

    missing = [c for c in RAW_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Catalog {config.catalog_path} is missing columns: {missing}")

    breeds: list[BreedProfile] = []
    for position, record in enumerate(df.to_dict(orient="records")):
        try:
            breeds.append(transform_breed(record))
        except ValueError:
            logger.warning("Skipping malformed catalog row %d", position, exc_info=True)

    logger.info("Loaded %d breeds from %s", len(breeds), config.catalog_path)
    return breeds
