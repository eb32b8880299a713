"""Typed reference data records for races, classes and backgrounds.

Reference data arrives as loosely shaped JSON (seed files, homebrew
uploads). It is resolved into these records once at the data-access
boundary so the engines only ever see validated, typed structures.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from dnd_forge.core.constants import DEFAULT_SPEED, VALID_HIT_DICE
from dnd_forge.models.character import ForgeModel
from dnd_forge.models.enums import Ability, Size, Skill


def _parse_abilities(values: Any) -> Any:
    if isinstance(values, list):
        return [Ability.parse(v) if isinstance(v, str) else v for v in values]
    return values


class ReferenceRecord(ForgeModel):
    """Common base for reference records; unknown JSON keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, max_length=100)

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.strip().casefold()


class RaceDefinition(ReferenceRecord):
    """A playable race.

    Attributes:
        name: Race name (e.g., 'Dwarf').
        ability_score_increase: Additive bonus per ability.
        traits: Racial trait names.
        size: Creature size.
        speed: Walking speed in feet.
    """

    ability_score_increase: dict[Ability, int] = Field(default_factory=dict)
    traits: list[str] = Field(default_factory=list)
    size: Size = Size.MEDIUM
    speed: int = Field(default=DEFAULT_SPEED, ge=0)

    @field_validator("ability_score_increase", mode="before")
    @classmethod
    def parse_ability_keys(cls, value: Any) -> Any:
        """Accept full names or shorthands ('con') as keys."""
        if isinstance(value, dict):
            return {
                Ability.parse(k) if isinstance(k, str) else k: v for k, v in value.items()
            }
        return value

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ClassDefinition(ReferenceRecord):
    """A character class.

    Attributes:
        name: Class name (e.g., 'Fighter').
        hit_die: Hit die size.
        primary_ability: Abilities the class relies on.
        saving_throws: Saving throw proficiencies.
    """

    hit_die: int
    primary_ability: list[Ability] = Field(default_factory=list)
    saving_throws: list[Ability] = Field(default_factory=list)

    @field_validator("hit_die", mode="after")
    @classmethod
    def validate_hit_die(cls, value: int) -> int:
        if value not in VALID_HIT_DICE:
            msg = f"hit_die must be one of {VALID_HIT_DICE}, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("primary_ability", "saving_throws", mode="before")
    @classmethod
    def parse_abilities(cls, value: Any) -> Any:
        return _parse_abilities(value)


class BackgroundDefinition(ReferenceRecord):
    """A character background.

    Attributes:
        name: Background name (e.g., 'Sage').
        skill_proficiencies: Skills granted by the background.
    """

    skill_proficiencies: list[Skill] = Field(default_factory=list)

    @field_validator("skill_proficiencies", mode="before")
    @classmethod
    def parse_skills(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [Skill.parse(v) if isinstance(v, str) else v for v in value]
        return value


__all__ = [
    "ReferenceRecord",
    "RaceDefinition",
    "ClassDefinition",
    "BackgroundDefinition",
]
