"""Derived character statistics for D&D 5E.

Combines validated base scores with race and class reference data to
produce the numbers printed on a new character sheet: final ability
scores, hit points, armor class and proficiency bonus.

Missing reference data never fails character creation. An unknown race
grants no bonuses and an unknown class uses a d8 hit die; both are
logged as ``reference_data_missing``.

Example:
    >>> calcs = calculate_character_stats(
    ...     {"str": 15, "dex": 13, "con": 14, "int": 10, "wis": 12, "cha": 8},
    ...     "Dwarf",
    ...     "Fighter",
    ... )
    >>> calcs.hp.max, calcs.ac
    (13, 11)
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from dnd_forge.core.config import get_settings
from dnd_forge.core.constants import (
    BASE_ARMOR_CLASS,
    BASE_PASSIVE_SCORE,
    BASE_SPELL_DC,
    MAX_CHARACTER_LEVEL,
    MIN_CHARACTER_LEVEL,
    VALID_HIT_DICE,
)
from dnd_forge.core.exceptions import MalformedInputError
from dnd_forge.core.logging import get_logger
from dnd_forge.models.character import (
    AbilityScores,
    CharacterCalculations,
    HitPoints,
    require_int,
)
from dnd_forge.models.enums import Ability
from dnd_forge.reference.catalog import ReferenceCatalog, get_catalog


logger = get_logger(__name__)


# =============================================================================
# Modifiers
# =============================================================================


def ability_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    The modifier is floor((score - 10) / 2), rounding toward negative
    infinity, so a 9 gives -1 rather than 0.

    Example:
        >>> ability_modifier(10)
        0
        >>> ability_modifier(9)
        -1
        >>> ability_modifier(20)
        5

    Raises:
        MalformedInputError: If score is not an integer.
    """
    return (require_int(score, "score") - 10) // 2


def ability_modifiers(scores: AbilityScores | Mapping[Any, Any]) -> dict[Ability, int]:
    """Modifiers for all six abilities."""
    return AbilityScores.from_mapping(scores).modifiers()


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a character level.

    +2 at levels 1-4, rising by one every four levels to +6 at 17-20.

    Raises:
        MalformedInputError: If level is outside 1-20.
    """
    _validate_level(level)
    return math.ceil(level / 4) + 1


def skill_modifier(
    ability_score: int,
    proficiency_bonus: int,
    is_proficient: bool,
    has_expertise: bool = False,
) -> int:
    """Total modifier for a skill check.

    Expertise adds the proficiency bonus a second time.
    """
    proficiency_bonus = require_int(proficiency_bonus, "proficiency_bonus")
    proficiency = proficiency_bonus if is_proficient else 0
    expertise = proficiency_bonus if has_expertise else 0
    return ability_modifier(ability_score) + proficiency + expertise


def saving_throw_modifier(
    ability_score: int,
    proficiency_bonus: int,
    is_proficient: bool,
    has_expertise: bool = False,
) -> int:
    """Total modifier for a saving throw."""
    return skill_modifier(ability_score, proficiency_bonus, is_proficient, has_expertise)


def initiative_bonus(dexterity_score: int) -> int:
    """Initiative bonus (the Dexterity modifier)."""
    return ability_modifier(dexterity_score)


def passive_perception(wisdom_score: int, proficiency_bonus: int, is_proficient: bool) -> int:
    """Passive Wisdom (Perception): 10 + the Perception modifier."""
    return BASE_PASSIVE_SCORE + skill_modifier(wisdom_score, proficiency_bonus, is_proficient)


def spell_save_dc(ability_score: int, proficiency_bonus: int) -> int:
    """Spell save DC: 8 + proficiency bonus + spellcasting modifier."""
    return BASE_SPELL_DC + spell_attack_bonus(ability_score, proficiency_bonus)


def spell_attack_bonus(ability_score: int, proficiency_bonus: int) -> int:
    """Spell attack bonus: proficiency bonus + spellcasting modifier."""
    return require_int(proficiency_bonus, "proficiency_bonus") + ability_modifier(ability_score)


# =============================================================================
# Character Sheet Numbers
# =============================================================================


def _validate_level(level: int) -> None:
    require_int(level, "level")
    if not MIN_CHARACTER_LEVEL <= level <= MAX_CHARACTER_LEVEL:
        raise MalformedInputError(
            f"Level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}",
            field_name="level",
            invalid_value=level,
        )


def apply_racial_bonuses(
    base_scores: AbilityScores | Mapping[Any, Any],
    racial_bonuses: Mapping[Ability | str, int],
) -> AbilityScores:
    """Add racial ability score increases to base scores.

    Args:
        base_scores: Scores after point buy.
        racial_bonuses: Bonus per ability; absent abilities get 0.

    Returns:
        The final ability scores.

    Raises:
        MalformedInputError: If a bonus names an unknown ability, is not an
            integer, or a final score leaves the 1-30 range.
    """
    base = AbilityScores.from_mapping(base_scores).as_dict()
    bonuses: dict[Ability, int] = {}
    for key, bonus in racial_bonuses.items():
        try:
            ability = key if isinstance(key, Ability) else Ability.parse(str(key))
        except ValueError as exc:
            raise MalformedInputError(
                f"Unknown ability in racial bonuses: {key!r}",
                field_name=str(key),
            ) from exc
        bonuses[ability] = bonuses.get(ability, 0) + require_int(bonus, ability.value)

    return AbilityScores.from_mapping(
        {ability: score + bonuses.get(ability, 0) for ability, score in base.items()}
    )


def max_hit_points(hit_die: int, level: int, constitution_modifier: int) -> int:
    """Maximum hit points using the fixed average per level.

    Level 1 takes the full hit die; every later level adds the die's
    average rounded up (hit_die // 2 + 1). Constitution applies each level.
    The result is never below 1.

    Raises:
        MalformedInputError: If hit_die is not a real die size, level is
            outside 1-20, or constitution_modifier is not an integer.
    """
    if require_int(hit_die, "hit_die") not in VALID_HIT_DICE:
        raise MalformedInputError(
            f"Hit die must be one of {VALID_HIT_DICE}",
            field_name="hit_die",
            invalid_value=hit_die,
        )
    _validate_level(level)
    constitution_modifier = require_int(constitution_modifier, "constitution_modifier")
    first_level_hp = hit_die + constitution_modifier
    additional_levels_hp = (level - 1) * (hit_die // 2 + 1 + constitution_modifier)
    return max(1, first_level_hp + additional_levels_hp)


def base_armor_class(dexterity_modifier: int) -> int:
    """Unarmored armor class: 10 + Dexterity modifier."""
    return BASE_ARMOR_CLASS + require_int(dexterity_modifier, "dexterity_modifier")


def calculate_character_stats(
    base_scores: AbilityScores | Mapping[Any, Any],
    race_name: str,
    class_name: str,
    level: int = 1,
    *,
    catalog: ReferenceCatalog | None = None,
) -> CharacterCalculations:
    """Compute the derived numbers for a new character.

    Args:
        base_scores: Scores after point buy (not re-validated here).
        race_name: Race name, matched case-insensitively.
        class_name: Class name, matched case-insensitively.
        level: Character level (1-20).
        catalog: Reference data; defaults to the shared catalog.

    Returns:
        CharacterCalculations with current HP equal to max HP.

    Raises:
        MalformedInputError: On malformed scores or an invalid level.
    """
    _validate_level(level)
    if catalog is None:
        catalog = get_catalog()

    racial_bonuses = catalog.racial_bonuses(race_name)
    if racial_bonuses is None:
        logger.warning("reference_data_missing", kind="race", name=race_name)
        racial_bonuses = {}

    hit_die = catalog.class_hit_die(class_name)
    if hit_die is None:
        hit_die = get_settings().rules.default_hit_die
        logger.warning(
            "reference_data_missing",
            kind="class",
            name=class_name,
            default_hit_die=hit_die,
        )

    final_stats = apply_racial_bonuses(base_scores, racial_bonuses)
    constitution_modifier = final_stats.modifier(Ability.CON)
    dexterity_modifier = final_stats.modifier(Ability.DEX)

    max_hp = max_hit_points(hit_die, level, constitution_modifier)
    calculations = CharacterCalculations(
        final_stats=final_stats,
        hp=HitPoints(current=max_hp, max=max_hp),
        proficiency_bonus=proficiency_bonus(level),
        ac=base_armor_class(dexterity_modifier),
    )

    logger.debug(
        "Character stats calculated",
        race=race_name,
        character_class=class_name,
        level=level,
        max_hp=max_hp,
        ac=calculations.ac,
    )
    return calculations


__all__ = [
    "ability_modifier",
    "ability_modifiers",
    "proficiency_bonus",
    "skill_modifier",
    "saving_throw_modifier",
    "initiative_bonus",
    "passive_perception",
    "spell_save_dc",
    "spell_attack_bonus",
    "apply_racial_bonuses",
    "max_hit_points",
    "base_armor_class",
    "calculate_character_stats",
]
