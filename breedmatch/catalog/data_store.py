from __future__ import annotations

from ..matching.models import BreedProfile
from .config import DEFAULT_CATALOG_CONFIG
from .ingest import load_breeds

_breeds: list[BreedProfile] | None = None


def get_breeds() -> list[BreedProfile]:
    """Return the in-memory breed catalog, loading it on first call."""
    global _breeds
    if _breeds is None:
        _breeds = load_breeds(DEFAULT_CATALOG_CONFIG)
    return _breeds


def clear_breeds() -> None:
    global _breeds
    _breeds = None
