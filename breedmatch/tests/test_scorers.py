from __future__ import annotations

import pytest

from breedmatch.matching.models import BreedCharacteristics, BreedProfile, Preferences
from breedmatch.matching.scorers import (
    score_energy_match,
    score_grooming_needs,
    score_kid_friendliness,
    score_size_match,
    score_social_compatibility,
    score_space_requirements,
    score_trainability,
    training_difficulty,
)


def _breed(size: str = "Medium", **traits) -> BreedProfile:
    return BreedProfile(
        id="breed-test",
        name="Test Breed",
        size=size,
        characteristics=BreedCharacteristics(**traits),
    )


def _prefs(**overrides) -> Preferences:
    defaults = {
        "activity_level": "moderate",
        "living_space": "house-medium",
        "family_size": "couple",
        "children_ages": [],
        "experience_level": "experienced",
        "size": [],
    }
    defaults.update(overrides)
    return Preferences(**defaults)


# ── Energy ───────────────────────────────────────────────────────────────


class TestEnergyMatch:
    def test_exact_match_for_active_owner(self):
        score, reasons = score_energy_match(_breed(energy_level=9), _prefs(activity_level="high"))
        assert score == 20
        assert reasons == ["Great energy level for active families"]

    def test_exact_match_for_relaxed_owner(self):
        score, reasons = score_energy_match(_breed(energy_level=3), _prefs(activity_level="low"))
        assert score == 20
        assert reasons == ["Calm temperament suits your relaxed lifestyle"]

    def test_near_match_for_moderate_owner(self):
        score, reasons = score_energy_match(_breed(energy_level=7), _prefs(activity_level="moderate"))
        assert score == 17
        assert reasons == ["Well-balanced energy for your moderate lifestyle"]

    def test_breed_much_more_energetic(self):
        score, reasons = score_energy_match(_breed(energy_level=10), _prefs(activity_level="moderate"))
        assert score == 8
        assert reasons == ["Higher energy than your preference — needs more exercise"]

    def test_breed_much_calmer(self):
        score, reasons = score_energy_match(_breed(energy_level=2), _prefs(activity_level="high"))
        assert score == 0
        assert reasons == ["Lower energy — may not keep up with your active lifestyle"]

    def test_gap_of_two_adds_no_reason(self):
        score, reasons = score_energy_match(_breed(energy_level=8), _prefs(activity_level="moderate"))
        assert score == 14
        assert reasons == []

    @pytest.mark.parametrize("energy", [1, 2])
    def test_large_gap_floors_at_zero(self, energy):
        score, _ = score_energy_match(_breed(energy_level=energy), _prefs(activity_level="high"))
        assert score == 0

    def test_unknown_activity_level_uses_neutral_default(self):
        score, reasons = score_energy_match(_breed(energy_level=5), _prefs(activity_level="extreme"))
        assert score == 20
        assert reasons == ["Well-balanced energy for your moderate lifestyle"]

    def test_missing_activity_level_uses_neutral_default(self):
        score, reasons = score_energy_match(_breed(energy_level=5), _prefs(activity_level=None))
        assert score == 20
        assert reasons == ["Well-balanced energy for your moderate lifestyle"]


# ── Size ─────────────────────────────────────────────────────────────────


class TestSizeMatch:
    @pytest.mark.parametrize("label", ["Toy", "Small", "Medium", "Large", "Giant"])
    def test_any_size_always_scores_full(self, label):
        score, reasons = score_size_match(_breed(size=label), _prefs(size=["any"]))
        assert score == 15
        assert reasons == [f"{label} size works well for your preferences"]

    def test_no_size_preference_scores_full(self):
        score, _ = score_size_match(_breed(size="Giant"), _prefs(size=[]))
        assert score == 15

    def test_preferred_size(self):
        score, reasons = score_size_match(_breed(size="Large"), _prefs(size=["medium", "large"]))
        assert score == 15
        assert reasons == ["Perfect size match — Large is exactly what you're looking for"]

    def test_lowercase_size_label_is_matched(self):
        score, _ = score_size_match(_breed(size="large"), _prefs(size=["large"]))
        assert score == 15

    def test_size_mismatch(self):
        score, reasons = score_size_match(_breed(size="Large"), _prefs(size=["small"]))
        assert score == 3
        assert reasons == ["Large size doesn't match your preference"]


# ── Kid-friendliness ─────────────────────────────────────────────────────


class TestKidFriendliness:
    def test_no_children_uses_friendliness(self):
        score, reasons = score_kid_friendliness(_breed(friendliness=8), _prefs(children_ages=[]))
        assert score == 12
        assert reasons == ["Friendly and sociable companion"]

    def test_adults_only_counts_as_no_children(self):
        score, reasons = score_kid_friendliness(
            _breed(friendliness=5), _prefs(children_ages=["adults-only"])
        )
        # 7.5 rounds half up
        assert score == 8
        assert reasons == []

    def test_halves_round_up(self):
        score, _ = score_kid_friendliness(_breed(friendliness=3), _prefs())
        assert score == 5

    def test_toddlers_with_gentle_breed(self):
        breed = _breed(good_with_kids=9, gentle=8, patient=7)
        score, reasons = score_kid_friendliness(breed, _prefs(children_ages=["toddlers"]))
        assert score == 12
        assert reasons == ["Excellent with young children — gentle and patient"]

    def test_infants_with_poor_kid_breed(self):
        breed = _breed(good_with_kids=4, gentle=5, patient=5)
        score, reasons = score_kid_friendliness(breed, _prefs(children_ages=["infants", "teens"]))
        assert score == 7
        assert reasons == ["May not be ideal around very young children"]

    def test_older_children(self):
        breed = _breed(good_with_kids=8, patient=6)
        score, reasons = score_kid_friendliness(breed, _prefs(children_ages=["school-age"]))
        assert score == 11
        assert reasons == ["Great with kids of all ages"]

    def test_older_children_with_average_breed(self):
        breed = _breed(good_with_kids=6, patient=4)
        score, reasons = score_kid_friendliness(breed, _prefs(children_ages=["teens"]))
        assert score == 8
        assert reasons == []


# ── Trainability ─────────────────────────────────────────────────────────


class TestTrainability:
    def test_difficulty(self):
        assert training_difficulty(_breed(trainability=3, stubborn=8, independent=7)) == 7
        assert training_difficulty(_breed(trainability=9, stubborn=2, independent=3)) == 2

    def test_first_time_owner_with_stubborn_breed(self):
        breed = _breed(trainability=3, stubborn=8, independent=7)
        score, reasons = score_trainability(breed, _prefs(experience_level="first-time"))
        assert score == 4
        assert reasons == ["May be challenging for your experience level"]

    def test_highly_trainable_breed(self):
        breed = _breed(trainability=9, stubborn=2, independent=3)
        score, reasons = score_trainability(breed, _prefs(experience_level="experienced"))
        assert score == 14
        assert reasons == ["Highly trainable — eager to learn"]

    def test_moderately_trainable_breed(self):
        breed = _breed(trainability=6, stubborn=5, independent=5)
        score, reasons = score_trainability(breed, _prefs(experience_level="experienced"))
        assert score == 9
        assert reasons == ["Trainable with consistent effort"]

    def test_low_trainability_within_reach_adds_no_reason(self):
        breed = _breed(trainability=4, stubborn=3, independent=3)
        score, reasons = score_trainability(breed, _prefs(experience_level="experienced"))
        assert score == 6
        assert reasons == []

    def test_fallback_score_has_floor_of_three(self):
        breed = _breed(trainability=1, stubborn=10, independent=10)
        score, _ = score_trainability(breed, _prefs(experience_level="first-time"))
        assert score == 3

    def test_unknown_experience_level_uses_neutral_default(self):
        breed = _breed(trainability=5, stubborn=5, independent=5)
        score, reasons = score_trainability(breed, _prefs(experience_level="guru"))
        assert score == 8
        assert reasons == ["Trainable with consistent effort"]

    def test_missing_experience_level_uses_neutral_default(self):
        breed = _breed(trainability=5, stubborn=5, independent=5)
        score, reasons = score_trainability(breed, _prefs(experience_level=None))
        assert score == 8
        assert reasons == ["Trainable with consistent effort"]


# ── Space ────────────────────────────────────────────────────────────────


class TestSpaceRequirements:
    def test_giant_breed_in_apartment(self):
        score, reasons = score_space_requirements(
            _breed(size="Giant", exercise_needs=5), _prefs(living_space="apartment")
        )
        assert score <= 2
        assert reasons == ["Your living space may be tight for this breed"]

    def test_small_calm_breed_in_apartment(self):
        score, reasons = score_space_requirements(
            _breed(size="Small", exercise_needs=1), _prefs(living_space="apartment")
        )
        assert score == 15
        assert reasons == ["Great fit for your living space"]

    def test_small_active_breed_in_apartment(self):
        score, reasons = score_space_requirements(
            _breed(size="Small", exercise_needs=8), _prefs(living_space="apartment")
        )
        assert score == 8
        assert reasons == ["Adequate space, but more room would be ideal"]

    def test_giant_breed_in_large_house(self):
        score, _ = score_space_requirements(
            _breed(size="Giant", exercise_needs=10), _prefs(living_space="house-large")
        )
        assert score == 15

    def test_unsuitable_size_with_spare_room_is_capped(self):
        score, reasons = score_space_requirements(
            _breed(size="Toy", exercise_needs=1), _prefs(living_space="house-medium")
        )
        assert score == 15
        assert reasons == ["Your living space may be tight for this breed"]

    def test_unknown_living_space_uses_defaults(self):
        score, reasons = score_space_requirements(
            _breed(size="Medium", exercise_needs=5), _prefs(living_space="boat")
        )
        assert score == 15
        assert reasons == ["Great fit for your living space"]


# ── Grooming ─────────────────────────────────────────────────────────────


class TestGroomingNeeds:
    def test_low_maintenance(self):
        score, reasons = score_grooming_needs(_breed(grooming_needs=2, shedding=2), _prefs())
        assert score == 9
        assert reasons == ["Low maintenance grooming"]

    def test_high_maintenance(self):
        score, reasons = score_grooming_needs(_breed(grooming_needs=9, shedding=9), _prefs())
        assert score == 4
        assert reasons == ["Higher grooming needs than average"]

    def test_average_maintenance(self):
        score, reasons = score_grooming_needs(_breed(grooming_needs=5, shedding=5), _prefs())
        assert score == 7
        assert reasons == []

    def test_stays_within_bounds(self):
        assert score_grooming_needs(_breed(grooming_needs=10, shedding=10), _prefs())[0] >= 2
        assert score_grooming_needs(_breed(grooming_needs=1, shedding=1), _prefs())[0] <= 10


# ── Social ───────────────────────────────────────────────────────────────


class TestSocialCompatibility:
    def test_sociable_breed_for_couple(self):
        breed = _breed(good_with_dogs=8, social=8, adaptable=8)
        score, reasons = score_social_compatibility(breed, _prefs(family_size="couple"))
        assert score == 8
        assert reasons == ["Sociable and adaptable companion"]

    def test_sociable_breed_for_large_family(self):
        breed = _breed(good_with_dogs=9, good_with_strangers=9, social=9, adaptable=9)
        score, reasons = score_social_compatibility(breed, _prefs(family_size="large-family"))
        assert score == 9
        assert reasons == ["Thrives in busy family environments"]

    def test_strangers_only_count_for_families(self):
        breed = _breed(good_with_dogs=5, good_with_strangers=1, social=5, adaptable=5)
        single, _ = score_social_compatibility(breed, _prefs(family_size="single"))
        family, _ = score_social_compatibility(breed, _prefs(family_size="small-family"))
        assert single == 5
        assert family < single

    def test_reserved_breed(self):
        breed = _breed(good_with_dogs=2, social=2, adaptable=2)
        score, reasons = score_social_compatibility(breed, _prefs(family_size="single"))
        assert score == 2
        assert reasons == ["Prefers quieter environments with fewer people"]

    def test_floor_of_one(self):
        breed = _breed(good_with_dogs=1, good_with_strangers=1, social=1, adaptable=1)
        score, _ = score_social_compatibility(breed, _prefs(family_size="large-family"))
        assert score == 1
