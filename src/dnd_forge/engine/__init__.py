"""Rules engines: point buy, derived stats and dice.

Submodules:
    point_buy: Point-buy costing and validation.
    stats: Modifiers, proficiency, hit points, armor class.
    dice: Dice roller and derived rolls.
    requests: Validated roll requests for the gameplay API.
"""

from __future__ import annotations

from dnd_forge.engine.dice import (
    DiceRoller,
    check_success,
    dc_description,
    format_roll,
    get_default_roller,
    parse_dice_type,
    roll,
)
from dnd_forge.engine.point_buy import (
    can_decrease,
    can_increase,
    cost_of_score,
    increment_cost,
    is_complete_build,
    remaining_points,
    total_cost,
    validate,
    validate_submission,
)
from dnd_forge.engine.requests import RollOutcome, execute_roll, parse_roll_request
from dnd_forge.engine.stats import (
    ability_modifier,
    ability_modifiers,
    apply_racial_bonuses,
    base_armor_class,
    calculate_character_stats,
    initiative_bonus,
    max_hit_points,
    passive_perception,
    proficiency_bonus,
    saving_throw_modifier,
    skill_modifier,
    spell_attack_bonus,
    spell_save_dc,
)


__all__ = [
    # Point buy
    "cost_of_score",
    "total_cost",
    "remaining_points",
    "increment_cost",
    "can_increase",
    "can_decrease",
    "validate",
    "validate_submission",
    "is_complete_build",
    # Stats
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
    # Dice
    "DiceRoller",
    "parse_dice_type",
    "check_success",
    "format_roll",
    "dc_description",
    "get_default_roller",
    "roll",
    # Requests
    "RollOutcome",
    "execute_roll",
    "parse_roll_request",
]
