from __future__ import annotations

import logging
from collections.abc import Iterable

from ..catalog.data_store import get_breeds
from .combiner import compute_score
from .config import DEFAULT_MATCHING_CONFIG, TIE_BREAK_CATALOG, TIE_BREAK_NAME, MatchingConfig
from .models import BreedProfile, BreedScore, Preferences, RankedBreed

logger = logging.getLogger(__name__)


def rank_breeds(
    preferences: Preferences,
    breeds: Iterable[BreedProfile],
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> list[RankedBreed]:
    """
    Score every breed and order them best match first.

    Equal totals are ordered according to ``config.tie_break``. The sort is
    stable, so repeated runs over the same input give the same order.
    """
    if config.tie_break not in (TIE_BREAK_CATALOG, TIE_BREAK_NAME):
        raise ValueError(f"Unknown tie-break rule: {config.tie_break!r}")

    scored: list[tuple[BreedProfile, BreedScore]] = [
        (breed, compute_score(breed, preferences)) for breed in breeds
    ]

    if config.tie_break == TIE_BREAK_NAME:
        scored.sort(key=lambda pair: (-pair[1].total, pair[0].name.casefold()))
    else:
        scored.sort(key=lambda pair: pair[1].total, reverse=True)

    ranked = [
        RankedBreed(rank=position, breed=breed, score=score)
        for position, (breed, score) in enumerate(scored, start=1)
    ]

    if ranked:
        logger.info(
            "Ranked %d breeds, top match %s (%s)",
            len(ranked), ranked[0].breed.name, ranked[0].score.total,
        )
    return ranked


def top_matches(
    preferences: Preferences,
    breeds: Iterable[BreedProfile] | None = None,
    limit: int | None = None,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> list[RankedBreed]:
    """Return the best ``limit`` matches (``config.top_n`` by default) from ``breeds`` or the loaded catalog."""
    limit = config.top_n if limit is None else limit
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    if breeds is None:
        breeds = get_breeds()

    return rank_breeds(preferences, breeds, config=config)[:limit]
