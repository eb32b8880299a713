"""Pydantic V2 schema for a single dice roll event."""

from __future__ import annotations

from uuid import uuid4

from pydantic import ConfigDict, Field, model_validator

from dnd_forge.models.character import ForgeModel
from dnd_forge.models.enums import DiceType


def new_roll_id() -> str:
    """Generate a fresh opaque roll identifier."""
    return f"roll_{uuid4().hex}"


class DiceRoll(ForgeModel):
    """One roll event, immutable once returned.

    Attributes:
        id: Opaque unique identifier.
        type: The die that was rolled.
        count: Number of dice (1 when advantage/disadvantage applied).
        modifier: Flat modifier added to the dice sum.
        result: Faces that contributed to the total.
        total: sum(result) + modifier.
        purpose: What the roll was for (e.g. 'Attack roll').
        skill: Skill label for skill checks.
        advantage: Advantage was requested.
        disadvantage: Disadvantage was requested.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_roll_id)
    type: DiceType
    count: int = Field(ge=1)
    modifier: int = 0
    result: tuple[int, ...] = Field(min_length=1)
    total: int
    purpose: str
    skill: str | None = None
    advantage: bool = False
    disadvantage: bool = False

    @model_validator(mode="after")
    def validate_total(self) -> "DiceRoll":
        """Ensure faces are on the die and the total adds up."""
        sides = self.type.sides
        if any(not 1 <= face <= sides for face in self.result):
            msg = f"Face values must be between 1 and {sides}"
            raise ValueError(msg)
        if self.total != sum(self.result) + self.modifier:
            msg = "total must equal sum(result) + modifier"
            raise ValueError(msg)
        return self

    @property
    def natural(self) -> int | None:
        """The kept d20 face for single-d20 rolls, otherwise None."""
        if self.type is DiceType.D20 and len(self.result) == 1:
            return self.result[0]
        return None

    @property
    def is_critical(self) -> bool:
        """A natural 20 on a d20."""
        return self.natural == 20

    @property
    def is_fumble(self) -> bool:
        """A natural 1 on a d20."""
        return self.natural == 1


__all__ = [
    "DiceRoll",
    "new_roll_id",
]
