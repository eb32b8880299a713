"""Pydantic V2 schemas for the D&D 5E character forge.

Submodules:
    enums: Ability, Skill, Size and DiceType enumerations.
    character: AbilityScores, PointBuyResult, CharacterCalculations.
    dice: DiceRoll.

Example:
    >>> from dnd_forge.models import AbilityScores, Ability
    >>> scores = AbilityScores.uniform(10)
    >>> scores.modifier(Ability.STR)
    0
"""

from __future__ import annotations

from dnd_forge.models.character import (
    AbilityScores,
    CharacterCalculations,
    ForgeModel,
    HitPoints,
    PointBuyErrorKind,
    PointBuyResult,
    normalize_scores,
)
from dnd_forge.models.dice import DiceRoll, new_roll_id
from dnd_forge.models.enums import Ability, DiceType, Size, Skill


__all__ = [
    # Enumerations
    "Ability",
    "Skill",
    "Size",
    "DiceType",
    # Character
    "ForgeModel",
    "AbilityScores",
    "PointBuyErrorKind",
    "PointBuyResult",
    "HitPoints",
    "CharacterCalculations",
    "normalize_scores",
    # Dice
    "DiceRoll",
    "new_roll_id",
]
