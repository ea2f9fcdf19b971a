from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TRAIT_MIN = 1
TRAIT_MAX = 10
NEUTRAL_TRAIT = 5

Trait = int | float


class _CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BreedCharacteristics(_CamelModel):
    """The 30-trait characteristic vector of a breed, each on a 1-10 scale.

    Traits a catalog record leaves out take the neutral value 5. Values outside
    ``[1, 10]`` are clamped on construction.
    """

    model_config = ConfigDict(frozen=True)

    energy_level: Trait = NEUTRAL_TRAIT
    trainability: Trait = NEUTRAL_TRAIT
    friendliness: Trait = NEUTRAL_TRAIT
    grooming_needs: Trait = NEUTRAL_TRAIT
    exercise_needs: Trait = NEUTRAL_TRAIT
    barking: Trait = NEUTRAL_TRAIT
    shedding: Trait = NEUTRAL_TRAIT
    good_with_kids: Trait = NEUTRAL_TRAIT
    good_with_dogs: Trait = NEUTRAL_TRAIT
    good_with_cats: Trait = NEUTRAL_TRAIT
    good_with_strangers: Trait = NEUTRAL_TRAIT
    protective: Trait = NEUTRAL_TRAIT
    playful: Trait = NEUTRAL_TRAIT
    calm: Trait = NEUTRAL_TRAIT
    intelligent: Trait = NEUTRAL_TRAIT
    independent: Trait = NEUTRAL_TRAIT
    affectionate: Trait = NEUTRAL_TRAIT
    social: Trait = NEUTRAL_TRAIT
    confident: Trait = NEUTRAL_TRAIT
    gentle: Trait = NEUTRAL_TRAIT
    patient: Trait = NEUTRAL_TRAIT
    energetic: Trait = NEUTRAL_TRAIT
    loyal: Trait = NEUTRAL_TRAIT
    alert: Trait = NEUTRAL_TRAIT
    brave: Trait = NEUTRAL_TRAIT
    stubborn: Trait = NEUTRAL_TRAIT
    sensitive: Trait = NEUTRAL_TRAIT
    adaptable: Trait = NEUTRAL_TRAIT
    vocal: Trait = NEUTRAL_TRAIT
    territorial: Trait = NEUTRAL_TRAIT

    @field_validator("*")
    @classmethod
    def _clamp(cls, value: Trait) -> Trait:
        return min(TRAIT_MAX, max(TRAIT_MIN, value))


TRAIT_NAMES: tuple[str, ...] = tuple(BreedCharacteristics.model_fields)


class BreedProfile(_CamelModel):
    """Read-only reference record for one breed, as supplied by the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    size: str = Field(..., description='Size label, e.g. "Large" or "toy"')
    category: str | None = Field(default=None, description="Breed group label")
    breed_type: str | None = None
    characteristics: BreedCharacteristics = Field(default_factory=BreedCharacteristics)


class Preferences(_CamelModel):
    """A prospective owner's lifestyle, as produced by the intake flow.

    Enum-like fields are plain strings: an unrecognised or missing token is
    accepted and falls back to a neutral default inside the affected
    sub-scorer. A null age or size list is read as empty.
    """

    activity_level: str | None = Field(default=None, description="low | moderate | high")
    living_space: str | None = Field(
        default=None, description="apartment | house-small | house-medium | house-large"
    )
    family_size: str | None = Field(
        default=None, description="single | couple | small-family | large-family"
    )
    children_ages: list[str] = Field(default_factory=list)
    experience_level: str | None = Field(
        default=None, description="first-time | some-experience | experienced | very-experienced"
    )
    size: list[str] = Field(
        default_factory=list, description='Desired size tokens, or ["any"]'
    )

    @field_validator("children_ages", "size", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ScoreBreakdown(_CamelModel):
    energy_match: Trait = Field(..., ge=0, le=20)
    size_match: int = Field(..., ge=0, le=15)
    kid_friendliness: int = Field(..., ge=0, le=15)
    trainability: int = Field(..., ge=0, le=15)
    space_requirements: int = Field(..., ge=0, le=15)
    grooming_needs: int = Field(..., ge=2, le=10)
    social_compatibility: int = Field(..., ge=1, le=10)

    def total(self) -> Trait:
        return (
            self.energy_match
            + self.size_match
            + self.kid_friendliness
            + self.trainability
            + self.space_requirements
            + self.grooming_needs
            + self.social_compatibility
        )


class BreedScore(_CamelModel):
    total: Trait = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    match_reasons: list[str] = Field(default_factory=list)


class RankedBreed(_CamelModel):
    rank: int = Field(..., ge=1)
    breed: BreedProfile
    score: BreedScore
