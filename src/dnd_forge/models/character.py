"""Pydantic V2 schemas for character creation.

Ability scores, the point-buy validation result and the derived numbers
that appear on a new character sheet. Field names serialize in camelCase
(``pointsUsed``, ``finalStats``) so the records can be handed to the web
layer as JSON unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from dnd_forge.core.constants import MAX_ABILITY_SCORE, MIN_ABILITY_SCORE
from dnd_forge.core.exceptions import MalformedInputError
from dnd_forge.models.enums import Ability


ScoreField = Annotated[int, Field(ge=MIN_ABILITY_SCORE, le=MAX_ABILITY_SCORE)]


def require_int(value: Any, name: str) -> int:
    """Return value if it is a plain integer.

    Raises:
        MalformedInputError: If value is not an int (bool counts as not).
    """
    # bool is an int subclass but never a valid game number
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(
            f"{name} must be an integer",
            field_name=name,
            invalid_value=value,
        )
    return value


def normalize_scores(scores: Mapping[Any, Any] | AbilityScores) -> dict[Ability, int]:
    """Normalize an ability score mapping to one integer per Ability.

    Keys may be Ability members, full names or three-letter shorthands,
    in any case. Values are not range checked here.

    Args:
        scores: An AbilityScores instance or a mapping of six scores.

    Returns:
        Dictionary with exactly one entry per Ability.

    Raises:
        MalformedInputError: On a missing, duplicate or unknown key, or a
            value that is not an integer.
    """
    if isinstance(scores, AbilityScores):
        return scores.as_dict()
    if not isinstance(scores, Mapping):
        raise MalformedInputError(
            "Ability scores must be a mapping",
            invalid_value=type(scores).__name__,
        )

    normalized: dict[Ability, int] = {}
    for key, value in scores.items():
        try:
            ability = key if isinstance(key, Ability) else Ability.parse(str(key))
        except ValueError as exc:
            raise MalformedInputError(
                f"Unknown ability score key: {key!r}",
                field_name=str(key),
            ) from exc
        if ability in normalized:
            raise MalformedInputError(
                f"Duplicate ability score key: {key!r}",
                field_name=ability.value,
            )
        normalized[ability] = require_int(value, ability.value)

    missing = [ability.value for ability in Ability if ability not in normalized]
    if missing:
        raise MalformedInputError(
            f"Missing ability scores: {', '.join(missing)}",
            details={"missing": missing},
        )
    return normalized


class ForgeModel(BaseModel):
    """Base model: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump the model with camelCase keys in JSON-compatible types."""
        return self.model_dump(mode="json", by_alias=True)


class AbilityScores(ForgeModel):
    """The six ability scores of a character.

    Attributes:
        strength: Strength score (1-30).
        dexterity: Dexterity score (1-30).
        constitution: Constitution score (1-30).
        intelligence: Intelligence score (1-30).
        wisdom: Wisdom score (1-30).
        charisma: Charisma score (1-30).
    """

    model_config = ConfigDict(frozen=True, strict=True)

    strength: ScoreField = Field(description="Strength score")
    dexterity: ScoreField = Field(description="Dexterity score")
    constitution: ScoreField = Field(description="Constitution score")
    intelligence: ScoreField = Field(description="Intelligence score")
    wisdom: ScoreField = Field(description="Wisdom score")
    charisma: ScoreField = Field(description="Charisma score")

    @classmethod
    def from_mapping(cls, scores: Mapping[Any, Any] | AbilityScores) -> AbilityScores:
        """Build scores from a loose mapping (shorthand keys allowed).

        Raises:
            MalformedInputError: If the mapping is incomplete, non-integer,
                or a score falls outside 1-30.
        """
        if isinstance(scores, AbilityScores):
            return scores
        normalized = normalize_scores(scores)
        try:
            return cls(**{ability.value: value for ability, value in normalized.items()})
        except PydanticValidationError as exc:
            raise MalformedInputError(
                f"Ability scores out of range: {exc.error_count()} error(s)",
                details={"errors": [err["msg"] for err in exc.errors()]},
            ) from exc

    @classmethod
    def uniform(cls, score: int) -> AbilityScores:
        """All six abilities set to the same score."""
        return cls(**{ability.value: score for ability in Ability})

    def get(self, ability: Ability) -> int:
        """Get the score for one ability."""
        return getattr(self, ability.value)

    def modifier(self, ability: Ability) -> int:
        """Calculate the ability modifier: (score - 10) // 2."""
        return (self.get(ability) - 10) // 2

    def modifiers(self) -> dict[Ability, int]:
        """Modifiers for all six abilities."""
        return {ability: self.modifier(ability) for ability in Ability}

    def as_dict(self) -> dict[Ability, int]:
        """Scores keyed by Ability."""
        return {ability: self.get(ability) for ability in Ability}

    def total(self) -> int:
        """Sum of all six scores."""
        return sum(self.as_dict().values())


class PointBuyErrorKind(StrEnum):
    """Why a point-buy spread was rejected."""

    INVALID_SCORE = "invalid_score"
    BUDGET_EXCEEDED = "budget_exceeded"
    BUDGET_UNSPENT = "budget_unspent"


class PointBuyResult(ForgeModel):
    """Outcome of validating a point-buy spread.

    Recomputed on every score change; never stored.

    Attributes:
        valid: Whether the spread satisfies the rules.
        points_used: Total points spent.
        points_remaining: Budget minus points used (negative when over).
        max_score: Highest of the six scores.
        min_score: Lowest of the six scores.
        error: Player-facing message when invalid.
        error_kind: Machine-readable reason when invalid.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    points_used: int
    points_remaining: int
    max_score: int
    min_score: int
    error: str | None = None
    error_kind: PointBuyErrorKind | None = None


class HitPoints(ForgeModel):
    """Current and maximum hit points."""

    model_config = ConfigDict(frozen=True)

    current: int
    max: int = Field(ge=1)


class CharacterCalculations(ForgeModel):
    """Numbers computed for a new character sheet.

    Attributes:
        final_stats: Ability scores after racial bonuses.
        hp: Hit points (current equals max at creation).
        proficiency_bonus: Level-based proficiency bonus.
        ac: Unarmored armor class.
    """

    model_config = ConfigDict(frozen=True)

    final_stats: AbilityScores
    hp: HitPoints
    proficiency_bonus: int = Field(ge=2, le=6)
    ac: int


__all__ = [
    "require_int",
    "normalize_scores",
    "ForgeModel",
    "AbilityScores",
    "PointBuyErrorKind",
    "PointBuyResult",
    "HitPoints",
    "CharacterCalculations",
]
