from __future__ import annotations

from .models import BreedProfile, BreedScore, Preferences, ScoreBreakdown
from .scorers import (
    score_energy_match,
    score_grooming_needs,
    score_kid_friendliness,
    score_size_match,
    score_social_compatibility,
    score_space_requirements,
    score_trainability,
)


def compute_score(breed: BreedProfile, preferences: Preferences) -> BreedScore:
    """
    Score one breed against one set of preferences.

    The total is the plain sum of the seven sub-scores; their caps already
    encode relative importance. Match reasons are concatenated in the fixed
    order energy, size, kids, trainability, space, grooming, social, and are
    never deduplicated.
    """
    energy, energy_reasons = score_energy_match(breed, preferences)
    size, size_reasons = score_size_match(breed, preferences)
    kids, kids_reasons = score_kid_friendliness(breed, preferences)
    train, train_reasons = score_trainability(breed, preferences)
    space, space_reasons = score_space_requirements(breed, preferences)
    groom, groom_reasons = score_grooming_needs(breed, preferences)
    social, social_reasons = score_social_compatibility(breed, preferences)

    breakdown = ScoreBreakdown(
        energy_match=energy,
        size_match=size,
        kid_friendliness=kids,
        trainability=train,
        space_requirements=space,
        grooming_needs=groom,
        social_compatibility=social,
    )

    return BreedScore(
        total=breakdown.total(),
        breakdown=breakdown,
        match_reasons=[
            *energy_reasons,
            *size_reasons,
            *kids_reasons,
            *train_reasons,
            *space_reasons,
            *groom_reasons,
            *social_reasons,
        ],
    )


def get_match_reasons(breed: BreedProfile, preferences: Preferences) -> list[str]:
    return compute_score(breed, preferences).match_reasons
