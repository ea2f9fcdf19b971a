from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ACTIVITY_LEVELS: Mapping[str, int] = MappingProxyType({
    "low": 3,
    "moderate": 6,
    "high": 9,
})
DEFAULT_ACTIVITY_LEVEL = 5

EXPERIENCE_LEVELS: Mapping[str, int] = MappingProxyType({
    "first-time": 2,
    "some-experience": 4,
    "experienced": 7,
    "very-experienced": 9,
})
DEFAULT_EXPERIENCE_LEVEL = 5

LIVING_SPACE_LEVELS: Mapping[str, int] = MappingProxyType({
    "apartment": 2,
    "house-small": 4,
    "house-medium": 7,
    "house-large": 10,
})
DEFAULT_LIVING_SPACE_LEVEL = 5

# Breed sizes that fit each kind of home.
SUITABLE_SIZES: Mapping[str, frozenset[str]] = MappingProxyType({
    "apartment": frozenset({"toy", "small"}),
    "house-small": frozenset({"toy", "small", "medium"}),
    "house-medium": frozenset({"small", "medium", "large"}),
    "house-large": frozenset({"small", "medium", "large", "giant"}),
})
DEFAULT_SUITABLE_SIZES = frozenset({"small", "medium", "large"})

# How much room a breed of a given size takes up, on the same 1-10 scale as living space.
SIZE_SPACE_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "giant": 9,
    "large": 7,
    "medium": 5,
})
DEFAULT_SIZE_SPACE_WEIGHT = 3

BREED_SIZE_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "Toy": "toy",
    "Small": "small",
    "Medium": "medium",
    "Large": "large",
    "Giant": "giant",
})

YOUNG_CHILDREN = frozenset({"infants", "toddlers"})
ADULTS_ONLY = "adults-only"
ANY_SIZE = "any"
LARGE_FAMILIES = frozenset({"small-family", "large-family"})


def lookup(table: Mapping[str, T], key: str | None, default: T) -> T:
    """Return ``table[key]``, or ``default`` when the token is missing or not recognised."""
    try:
        return table[key]
    except KeyError:
        logger.debug("Unrecognised token %r, using default %r", key, default)
        return default


def normalize_breed_size(size: str) -> str:
    """Map a catalog size label such as ``"Large"`` to its lowercase token."""
    return BREED_SIZE_CATEGORIES.get(size) or size.lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
