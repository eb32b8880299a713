"""Dice rolling mechanics for D&D 5E.

All randomness goes through the d20 library. Plain rolls sum ``count``
dice of one type; d20 rolls with advantage or disadvantage roll two dice
and keep the higher or lower (``2d20kh1`` / ``2d20kl1``), reporting only
the kept face. The derived rolls (checks, saves, attacks, damage,
initiative, hit-die recovery) turn character numbers into a modifier and
delegate to roll().

Example:
    >>> roller = DiceRoller()
    >>> attack = roller.attack_roll(16, proficiency_bonus=2, advantage=True)
    >>> format_roll(attack)  # doctest: +SKIP
    '1d20+5: 14 = 19 (Advantage)'
"""

from __future__ import annotations

import random

import d20

from dnd_forge.core.config import get_settings
from dnd_forge.core.constants import DEFAULT_PROFICIENCY_BONUS, DEFAULT_ROLL_PURPOSE
from dnd_forge.core.exceptions import DiceRollError
from dnd_forge.core.logging import get_logger
from dnd_forge.engine.stats import (
    ability_modifier,
    initiative_bonus,
    saving_throw_modifier,
    skill_modifier,
)
from dnd_forge.models.dice import DiceRoll
from dnd_forge.models.enums import DiceType


logger = get_logger(__name__)


def parse_dice_type(dice_type: DiceType | str) -> DiceType:
    """Resolve 'd20', 'D20' or DiceType.D20 to a DiceType.

    Raises:
        DiceRollError: If the dice type is not a standard die.
    """
    if isinstance(dice_type, DiceType):
        return dice_type
    try:
        return DiceType(str(dice_type).strip().lower())
    except ValueError as exc:
        raise DiceRollError(
            f"Unknown dice type: {dice_type!r}",
            expression=str(dice_type),
        ) from exc


def _require_dice_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DiceRollError(f"{name} must be an integer", details={name: value})
    return value


class DiceRoller:
    """Dice rolling with D&D 5E mechanics.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> result = roller.roll("d20", modifier=5)
        >>> 6 <= result.total <= 25
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls. d20 draws from
                the process-wide random generator, so seeding is global.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    # -------------------------------------------------------------------------
    # Core primitive
    # -------------------------------------------------------------------------

    def roll(
        self,
        dice_type: DiceType | str,
        *,
        count: int = 1,
        modifier: int = 0,
        advantage: bool = False,
        disadvantage: bool = False,
        purpose: str = DEFAULT_ROLL_PURPOSE,
        skill: str | None = None,
    ) -> DiceRoll:
        """Roll dice of one type and add a flat modifier.

        Advantage and disadvantage only change the mechanics of d20 rolls.
        When both are set they cancel out and a single d20 is rolled.

        Args:
            dice_type: The die to roll.
            count: Number of dice to sum (ignored when advantage or
                disadvantage applies).
            modifier: Flat modifier added to the dice sum.
            advantage: Roll two d20 and keep the higher.
            disadvantage: Roll two d20 and keep the lower.
            purpose: What the roll is for.
            skill: Optional skill label.

        Returns:
            DiceRoll with the contributing faces and the total.

        Raises:
            DiceRollError: On an unknown dice type or a count below 1.
        """
        die = parse_dice_type(dice_type)
        count = _require_dice_int(count, "count")
        modifier = _require_dice_int(modifier, "modifier")
        if count < 1:
            raise DiceRollError("Dice count must be at least 1", details={"count": count})

        keep_one = die is DiceType.D20 and advantage != disadvantage
        if keep_one:
            expression = "2d20kh1" if advantage else "2d20kl1"
            count = 1
        else:
            expression = f"{count}d{die.sides}"

        faces = self._roll_faces(expression)
        result = DiceRoll(
            type=die,
            count=count,
            modifier=modifier,
            result=tuple(faces),
            total=sum(faces) + modifier,
            purpose=purpose,
            skill=skill,
            advantage=advantage,
            disadvantage=disadvantage,
        )

        logger.info(
            "Dice rolled",
            expression=expression,
            modifier=modifier,
            total=result.total,
            purpose=purpose,
        )
        return result

    def _roll_faces(self, expression: str) -> list[int]:
        """Roll a d20 expression and return the kept die faces."""
        try:
            rolled = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc
        return self._extract_dice_values(rolled.expr)

    def _extract_dice_values(self, expr: object) -> list[int]:
        """Extract kept dice values from a d20 expression tree."""
        values: list[int] = []

        def traverse(node: object) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            else:
                for child in getattr(node, "children", ()):
                    traverse(child)

        traverse(expr)
        return values

    # -------------------------------------------------------------------------
    # Derived rolls
    # -------------------------------------------------------------------------

    def ability_check(
        self,
        ability_score: int,
        proficiency_bonus: int = 0,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
        purpose: str | None = None,
        skill: str | None = None,
    ) -> DiceRoll:
        """Roll an ability check: d20 + ability modifier + proficiency bonus.

        Raises:
            MalformedInputError: If the score or bonus is not an integer.
        """
        return self.roll(
            DiceType.D20,
            modifier=skill_modifier(ability_score, proficiency_bonus, is_proficient=True),
            advantage=advantage,
            disadvantage=disadvantage,
            purpose=purpose or f"{skill or 'Ability'} check",
            skill=skill,
        )

    def skill_check(
        self,
        skill_name: str,
        ability_score: int,
        is_proficient: bool = False,
        proficiency_bonus: int = DEFAULT_PROFICIENCY_BONUS,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll a skill check: d20 + ability modifier (+ proficiency if trained)."""
        modifier = skill_modifier(ability_score, proficiency_bonus, is_proficient)
        return self.roll(
            DiceType.D20,
            modifier=modifier,
            advantage=advantage,
            disadvantage=disadvantage,
            purpose=f"{skill_name} check",
            skill=skill_name,
        )

    def saving_throw(
        self,
        ability_score: int,
        is_proficient: bool = False,
        proficiency_bonus: int = DEFAULT_PROFICIENCY_BONUS,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
        purpose: str | None = None,
    ) -> DiceRoll:
        """Roll a saving throw: d20 + ability modifier (+ proficiency if proficient)."""
        modifier = saving_throw_modifier(ability_score, proficiency_bonus, is_proficient)
        return self.roll(
            DiceType.D20,
            modifier=modifier,
            advantage=advantage,
            disadvantage=disadvantage,
            purpose=purpose or "Saving throw",
        )

    def attack_roll(
        self,
        ability_score: int,
        proficiency_bonus: int = DEFAULT_PROFICIENCY_BONUS,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll an attack: d20 + ability modifier + proficiency bonus.

        The attacker is always treated as proficient with the weapon.
        """
        return self.roll(
            DiceType.D20,
            modifier=skill_modifier(ability_score, proficiency_bonus, is_proficient=True),
            advantage=advantage,
            disadvantage=disadvantage,
            purpose="Attack roll",
        )

    def damage_roll(
        self,
        dice_type: DiceType | str,
        count: int = 1,
        modifier: int = 0,
        damage_type: str = "damage",
    ) -> DiceRoll:
        """Roll damage dice plus a flat modifier, labeled with the damage type."""
        return self.roll(
            dice_type,
            count=count,
            modifier=modifier,
            purpose=f"{damage_type} damage",
        )

    def initiative_roll(
        self,
        dexterity_score: int,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll initiative: d20 + Dexterity modifier."""
        return self.roll(
            DiceType.D20,
            modifier=initiative_bonus(dexterity_score),
            advantage=advantage,
            disadvantage=disadvantage,
            purpose="Initiative",
        )

    def hit_die_recovery(
        self,
        hit_die_type: DiceType | str,
        constitution_score: int,
        *,
        count: int = 1,
    ) -> DiceRoll:
        """Spend a hit die to heal during a short rest.

        The Constitution modifier is floored at +1, so a hit die always
        recovers at least 2 HP.
        """
        return self.roll(
            hit_die_type,
            count=count,
            modifier=max(1, ability_modifier(constitution_score)),
            purpose="Hit die recovery",
        )


# =============================================================================
# Presentation helpers
# =============================================================================


def check_success(roll: DiceRoll, difficulty_class: int) -> bool:
    """True if the roll meets or beats the difficulty class."""
    return roll.total >= difficulty_class


def format_roll(roll: DiceRoll) -> str:
    """Render a roll for display.

    Example:
        '1d20+3: 14 = 17', '2d6+2: [4, 6] = 12', '1d20: 12 (Advantage)'
    """
    modifier_str = f"{roll.modifier:+d}" if roll.modifier else ""
    if len(roll.result) > 1:
        faces = f"[{', '.join(str(face) for face in roll.result)}]"
    else:
        faces = str(roll.result[0])
    total_str = f" = {roll.total}" if modifier_str or len(roll.result) > 1 else ""

    mode_str = ""
    if roll.type is DiceType.D20 and roll.advantage != roll.disadvantage:
        mode_str = " (Advantage)" if roll.advantage else " (Disadvantage)"

    return f"{roll.count}{roll.type}{modifier_str}: {faces}{total_str}{mode_str}"


def dc_description(difficulty_class: int) -> str:
    """Describe a difficulty class in words (DMG p.238)."""
    if difficulty_class <= 5:
        return "Very Easy"
    if difficulty_class <= 10:
        return "Easy"
    if difficulty_class <= 15:
        return "Medium"
    if difficulty_class <= 20:
        return "Hard"
    if difficulty_class <= 25:
        return "Very Hard"
    return "Nearly Impossible"


# =============================================================================
# Module-level convenience roller
# =============================================================================

_default_roller: DiceRoller | None = None


def get_default_roller() -> DiceRoller:
    """Get the shared roller, seeded from the ``dice.seed`` setting."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        _default_roller = DiceRoller(seed=get_settings().dice.seed)
    return _default_roller


def roll(
    dice_type: DiceType | str,
    *,
    count: int = 1,
    modifier: int = 0,
    advantage: bool = False,
    disadvantage: bool = False,
    purpose: str = DEFAULT_ROLL_PURPOSE,
    skill: str | None = None,
) -> DiceRoll:
    """Convenience function to roll dice with the shared roller.

    Example:
        >>> result = roll("d20", modifier=5)
        >>> 6 <= result.total <= 25
        True
    """
    return get_default_roller().roll(
        dice_type,
        count=count,
        modifier=modifier,
        advantage=advantage,
        disadvantage=disadvantage,
        purpose=purpose,
        skill=skill,
    )


__all__ = [
    "DiceRoller",
    "parse_dice_type",
    "check_success",
    "format_roll",
    "dc_description",
    "get_default_roller",
    "roll",
]
