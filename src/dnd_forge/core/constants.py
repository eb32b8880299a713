"""D&D 5E rules constants used by the character forge engines."""

from __future__ import annotations

# =============================================================================
# Ability Score Bounds
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score for any creature (RAW D&D 5E)."""

# =============================================================================
# Point Buy Constants (PHB p.13)
# =============================================================================

POINT_BUY_TOTAL = 27
"""Total points available for point buy character creation."""

POINT_BUY_MIN = 8
"""Minimum ability score in point buy."""

POINT_BUY_MAX = 15
"""Maximum ability score in point buy (before racial bonuses)."""

POINT_BUY_COSTS = {
    8: 0,
    9: 1,
    10: 2,
    11: 3,
    12: 4,
    13: 5,
    14: 7,
    15: 9,
}
"""Cumulative cost to raise a single score from 8."""

STANDARD_ARRAY = (15, 14, 13, 12, 10, 8)
"""Standard array values for ability scores (spends exactly 27 points)."""

# =============================================================================
# Character Constants
# =============================================================================

MIN_CHARACTER_LEVEL = 1
MAX_CHARACTER_LEVEL = 20

DEFAULT_HIT_DIE = 8
"""Hit die used when a class is missing from the reference data."""

VALID_HIT_DICE = (4, 6, 8, 10, 12)

BASE_ARMOR_CLASS = 10
BASE_SPELL_DC = 8
BASE_PASSIVE_SCORE = 10

DEFAULT_PROFICIENCY_BONUS = 2
"""Proficiency bonus assumed for rolls when the caller does not supply one."""

DEFAULT_SPEED = 30
"""Default walking speed in feet (most medium creatures)."""

# =============================================================================
# Dice Constants
# =============================================================================

DEFAULT_ROLL_PURPOSE = "General roll"

MAX_DICE_COUNT = 20
"""Largest number of dice the gameplay API accepts in one request."""

MAX_ROLL_MODIFIER = 50
"""Largest absolute flat modifier the gameplay API accepts."""


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "POINT_BUY_TOTAL",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "POINT_BUY_COSTS",
    "STANDARD_ARRAY",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "DEFAULT_HIT_DIE",
    "VALID_HIT_DICE",
    "BASE_ARMOR_CLASS",
    "BASE_SPELL_DC",
    "BASE_PASSIVE_SCORE",
    "DEFAULT_PROFICIENCY_BONUS",
    "DEFAULT_SPEED",
    "DEFAULT_ROLL_PURPOSE",
    "MAX_DICE_COUNT",
    "MAX_ROLL_MODIFIER",
]
