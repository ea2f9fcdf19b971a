"""
The seven sub-scorers behind a breed's compatibility score.

Each one is a pure function of ``(breed, preferences)`` returning a bounded
score together with the match reasons its own thresholds produced:

    energy        0-20     space        0-15
    size          3-15     grooming     2-10
    kids          0-15     social       1-10
    trainability  0-15
"""
from __future__ import annotations

from .models import BreedProfile, Preferences
from .tables import (
    ACTIVITY_LEVELS,
    ADULTS_ONLY,
    ANY_SIZE,
    DEFAULT_ACTIVITY_LEVEL,
    DEFAULT_EXPERIENCE_LEVEL,
    DEFAULT_LIVING_SPACE_LEVEL,
    DEFAULT_SIZE_SPACE_WEIGHT,
    DEFAULT_SUITABLE_SIZES,
    EXPERIENCE_LEVELS,
    LARGE_FAMILIES,
    LIVING_SPACE_LEVELS,
    SIZE_SPACE_WEIGHTS,
    SUITABLE_SIZES,
    YOUNG_CHILDREN,
    lookup,
    normalize_breed_size,
    round_half_up,
)

SubScore = tuple[float, list[str]]

_ENERGY_MATCH_REASONS = {
    "high": "Great energy level for active families",
    "low": "Calm temperament suits your relaxed lifestyle",
}
_BALANCED_ENERGY_REASON = "Well-balanced energy for your moderate lifestyle"


def score_energy_match(breed: BreedProfile, preferences: Preferences) -> SubScore:
    user_energy = lookup(ACTIVITY_LEVELS, preferences.activity_level, DEFAULT_ACTIVITY_LEVEL)
    breed_energy = breed.characteristics.energy_level
    diff = abs(user_energy - breed_energy)
    score = max(0, 20 - diff * 3)
    reasons: list[str] = []

    if diff <= 1:
        reasons.append(
            _ENERGY_MATCH_REASONS.get(preferences.activity_level, _BALANCED_ENERGY_REASON)
        )
    elif breed_energy > user_energy + 2:
        reasons.append("Higher energy than your preference — needs more exercise")
    elif breed_energy < user_energy - 2:
        reasons.append("Lower energy — may not keep up with your active lifestyle")

    return score, reasons


def score_size_match(breed: BreedProfile, preferences: Preferences) -> SubScore:
    breed_size = normalize_breed_size(breed.size)

    if not preferences.size or ANY_SIZE in preferences.size:
        return 15, [f"{breed.size} size works well for your preferences"]

    if breed_size in preferences.size:
        return 15, [f"Perfect size match — {breed.size} is exactly what you're looking for"]

    return 3, [f"{breed.size} size doesn't match your preference"]


def score_kid_friendliness(breed: BreedProfile, preferences: Preferences) -> SubScore:
    traits = breed.characteristics
    ages = set(preferences.children_ages)
    has_kids = bool(ages) and ADULTS_ONLY not in ages
    has_young_kids = bool(ages & YOUNG_CHILDREN)
    reasons: list[str] = []

    if not has_kids:
        score = round_half_up(traits.friendliness / 10 * 15)
        if traits.friendliness >= 7:
            reasons.append("Friendly and sociable companion")
        return score, reasons

    if has_young_kids:
        weighted = traits.good_with_kids * 0.4 + traits.gentle * 0.3 + traits.patient * 0.3
        score = round_half_up(weighted / 10 * 15)
        if traits.good_with_kids >= 8 and traits.gentle >= 7:
            reasons.append("Excellent with young children — gentle and patient")
        elif traits.good_with_kids < 5:
            reasons.append("May not be ideal around very young children")
    else:
        weighted = traits.good_with_kids * 0.6 + traits.patient * 0.4
        score = round_half_up(weighted / 10 * 15)
        if traits.good_with_kids >= 7:
            reasons.append("Great with kids of all ages")

    return score, reasons


def training_difficulty(breed: BreedProfile) -> int:
    """How hard a breed is to train, on the same scale as owner experience."""
    traits = breed.characteristics
    return round_half_up((10 - traits.trainability + traits.stubborn + traits.independent) / 3)


def score_trainability(breed: BreedProfile, preferences: Preferences) -> SubScore:
    experience = lookup(EXPERIENCE_LEVELS, preferences.experience_level, DEFAULT_EXPERIENCE_LEVEL)
    trainability = breed.characteristics.trainability
    reasons: list[str] = []

    if experience >= training_difficulty(breed):
        score = round_half_up(trainability / 10 * 15)
        if trainability >= 8:
            reasons.append("Highly trainable — eager to learn")
        elif trainability >= 5:
            reasons.append("Trainable with consistent effort")
    else:
        score = max(3, round_half_up((trainability * 0.5 + experience * 0.5) / 10 * 15))
        reasons.append("May be challenging for your experience level")

    return score, reasons


def score_space_requirements(breed: BreedProfile, preferences: Preferences) -> SubScore:
    space_level = lookup(LIVING_SPACE_LEVELS, preferences.living_space, DEFAULT_LIVING_SPACE_LEVEL)
    suitable = lookup(SUITABLE_SIZES, preferences.living_space, DEFAULT_SUITABLE_SIZES)
    breed_size = normalize_breed_size(breed.size)
    size_ok = breed_size in suitable

    size_weight = SIZE_SPACE_WEIGHTS.get(breed_size, DEFAULT_SIZE_SPACE_WEIGHT)
    space_need = (breed.characteristics.exercise_needs + size_weight) / 2
    space_diff = space_level - space_need

    if size_ok and space_diff >= 0:
        score = 15
        reasons = ["Great fit for your living space"]
    elif size_ok:
        score = max(5, 15 + round_half_up(space_diff * 2))
        reasons = ["Adequate space, but more room would be ideal"]
    else:
        score = max(2, 15 + round_half_up(space_diff * 3))
        reasons = ["Your living space may be tight for this breed"]

    return min(15, score), reasons


def score_grooming_needs(breed: BreedProfile, preferences: Preferences) -> SubScore:
    traits = breed.characteristics
    demand = (traits.grooming_needs + traits.shedding) / 2
    score = round_half_up((10 - demand + 5) / 15 * 10)
    reasons: list[str] = []

    if demand <= 3:
        reasons.append("Low maintenance grooming")
    elif demand >= 7:
        reasons.append("Higher grooming needs than average")

    return min(10, max(2, score)), reasons


def score_social_compatibility(breed: BreedProfile, preferences: Preferences) -> SubScore:
    traits = breed.characteristics
    is_large_family = preferences.family_size in LARGE_FAMILIES

    if is_large_family:
        social_score = (
            traits.good_with_dogs * 0.2
            + traits.good_with_strangers * 0.3
            + traits.social * 0.3
            + traits.adaptable * 0.2
        )
    else:
        social_score = traits.good_with_dogs * 0.3 + traits.social * 0.3 + traits.adaptable * 0.4

    score = round_half_up(social_score / 10 * 10)
    reasons: list[str] = []

    if social_score >= 7:
        reasons.append(
            "Thrives in busy family environments"
            if is_large_family
            else "Sociable and adaptable companion"
        )
    elif social_score <= 4:
        reasons.append("Prefers quieter environments with fewer people")

    return min(10, max(1, score)), reasons
