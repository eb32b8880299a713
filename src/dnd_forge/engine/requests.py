"""Validated roll requests for the gameplay API.

The web layer hands over a JSON body; this module checks it against the
API's bounds and dispatches it to the dice engine. A body with a ``type``
field ("ability_check", "skill_check", "saving_throw", "attack",
"damage", "initiative") asks for a derived roll; a body without one is
a plain roll of ``diceType``.

Example:
    >>> outcome = execute_roll({"type": "attack", "abilityScore": 16})
    >>> outcome.roll.purpose
    'Attack roll'
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from dnd_forge.core.config import get_settings
from dnd_forge.core.constants import (
    DEFAULT_PROFICIENCY_BONUS,
    DEFAULT_ROLL_PURPOSE,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
)
from dnd_forge.core.exceptions import ValidationError
from dnd_forge.core.logging import get_logger
from dnd_forge.engine.dice import DiceRoller, format_roll, get_default_roller
from dnd_forge.models.character import ForgeModel
from dnd_forge.models.dice import DiceRoll
from dnd_forge.models.enums import DiceType


logger = get_logger(__name__)

AbilityScoreField = Annotated[int, Field(ge=MIN_ABILITY_SCORE, le=MAX_ABILITY_SCORE)]
ProficiencyField = Annotated[int, Field(ge=0, le=10)]
PurposeField = Annotated[str | None, Field(max_length=100)]


class RollRequest(ForgeModel):
    """Base for all roll requests; unknown body keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @abstractmethod
    def execute(self, roller: DiceRoller) -> DiceRoll:
        """Roll this request with the given roller."""


class D20RollRequest(RollRequest):
    """A d20 roll that may have advantage or disadvantage (never both)."""

    advantage: bool = False
    disadvantage: bool = False

    @model_validator(mode="after")
    def validate_roll_mode(self) -> "D20RollRequest":
        if self.advantage and self.disadvantage:
            msg = "advantage and disadvantage cannot both be set"
            raise ValueError(msg)
        return self


class DiceCountMixin(RollRequest):
    """Count and modifier bounds shared by plain and damage rolls."""

    count: int = Field(default=1, ge=1)
    modifier: int = 0

    @field_validator("count", mode="after")
    @classmethod
    def validate_count(cls, value: int) -> int:
        limit = get_settings().dice.max_dice_count
        if value > limit:
            msg = f"count must be at most {limit}"
            raise ValueError(msg)
        return value

    @field_validator("modifier", mode="after")
    @classmethod
    def validate_modifier(cls, value: int) -> int:
        limit = get_settings().dice.max_modifier
        if abs(value) > limit:
            msg = f"modifier must be between -{limit} and {limit}"
            raise ValueError(msg)
        return value


class SimpleRollRequest(D20RollRequest, DiceCountMixin):
    """Plain roll of any die."""

    dice_type: DiceType
    purpose: PurposeField = None
    skill: str | None = Field(default=None, max_length=50)

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.roll(
            self.dice_type,
            count=self.count,
            modifier=self.modifier,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
            purpose=self.purpose or DEFAULT_ROLL_PURPOSE,
            skill=self.skill,
        )


class AbilityCheckRequest(D20RollRequest):
    type: Literal["ability_check"]
    ability_score: AbilityScoreField
    proficiency_bonus: ProficiencyField = 0
    purpose: PurposeField = None

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.ability_check(
            self.ability_score,
            self.proficiency_bonus,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
            purpose=self.purpose,
        )


class SkillCheckRequest(D20RollRequest):
    type: Literal["skill_check"]
    skill_name: str = Field(min_length=1, max_length=50)
    ability_score: AbilityScoreField
    is_proficient: bool = False
    proficiency_bonus: ProficiencyField = DEFAULT_PROFICIENCY_BONUS

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.skill_check(
            self.skill_name,
            self.ability_score,
            self.is_proficient,
            self.proficiency_bonus,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
        )


class SavingThrowRequest(D20RollRequest):
    type: Literal["saving_throw"]
    ability_score: AbilityScoreField
    is_proficient: bool = False
    proficiency_bonus: ProficiencyField = DEFAULT_PROFICIENCY_BONUS
    purpose: PurposeField = None

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.saving_throw(
            self.ability_score,
            self.is_proficient,
            self.proficiency_bonus,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
            purpose=self.purpose,
        )


class AttackRequest(D20RollRequest):
    type: Literal["attack"]
    ability_score: AbilityScoreField
    proficiency_bonus: ProficiencyField = DEFAULT_PROFICIENCY_BONUS

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.attack_roll(
            self.ability_score,
            self.proficiency_bonus,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
        )


class DamageRequest(DiceCountMixin):
    type: Literal["damage"]
    dice_type: DiceType
    damage_type: str = Field(default="damage", max_length=50)

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.damage_roll(self.dice_type, self.count, self.modifier, self.damage_type)


class InitiativeRequest(D20RollRequest):
    type: Literal["initiative"]
    dexterity_score: AbilityScoreField

    def execute(self, roller: DiceRoller) -> DiceRoll:
        return roller.initiative_roll(
            self.dexterity_score,
            advantage=self.advantage,
            disadvantage=self.disadvantage,
        )


DerivedRollRequest = Annotated[
    AbilityCheckRequest
    | SkillCheckRequest
    | SavingThrowRequest
    | AttackRequest
    | DamageRequest
    | InitiativeRequest,
    Field(discriminator="type"),
]

_derived_adapter: TypeAdapter[DerivedRollRequest] = TypeAdapter(DerivedRollRequest)


class RollOutcome(ForgeModel):
    """A completed roll and its display text."""

    model_config = ConfigDict(frozen=True)

    roll: DiceRoll
    formatted: str


def parse_roll_request(payload: Mapping[str, Any]) -> RollRequest:
    """Validate a request body into a typed roll request.

    Raises:
        ValidationError: With every validation message joined, if the body
            is not a valid roll request.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Roll request must be a JSON object")
    try:
        if "type" in payload:
            return _derived_adapter.validate_python(dict(payload))
        return SimpleRollRequest.model_validate(dict(payload))
    except PydanticValidationError as exc:
        messages = [error["msg"] for error in exc.errors()]
        raise ValidationError(
            f"Validation error: {', '.join(messages)}",
            field_name=str(payload.get("type", "roll")),
            details={"errors": messages},
        ) from exc


def execute_roll(
    payload: Mapping[str, Any] | RollRequest,
    roller: DiceRoller | None = None,
) -> RollOutcome:
    """Validate a roll request, roll it and format the result.

    Args:
        payload: Request body or an already-parsed request.
        roller: Roller to use; defaults to the shared roller.

    Returns:
        RollOutcome with the roll and its formatted text.

    Raises:
        ValidationError: If the request is invalid.
    """
    request = payload if isinstance(payload, RollRequest) else parse_roll_request(payload)
    if roller is None:
        roller = get_default_roller()
    result = request.execute(roller)
    logger.debug("Roll request executed", request=type(request).__name__, roll_id=result.id)
    return RollOutcome(roll=result, formatted=format_roll(result))


__all__ = [
    "RollRequest",
    "D20RollRequest",
    "SimpleRollRequest",
    "AbilityCheckRequest",
    "SkillCheckRequest",
    "SavingThrowRequest",
    "AttackRequest",
    "DamageRequest",
    "InitiativeRequest",
    "DerivedRollRequest",
    "RollOutcome",
    "parse_roll_request",
    "execute_roll",
]
