"""DnD Forge - D&D 5E character creation and dice rules engine.

The deterministic core behind a character builder and an AI-narrated
campaign player. The LLM narrates; these modules decide the numbers.

Example:
    >>> from dnd_forge import calculate_character_stats, validate_point_buy
    >>> base = {"str": 15, "dex": 13, "con": 14, "int": 10, "wis": 12, "cha": 8}
    >>> validate_point_buy(base).valid
    True
    >>> calculate_character_stats(base, "Dwarf", "Fighter").hp.max
    13

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas (AbilityScores, DiceRoll, ...).
    reference: Race, class and background reference data.
    engine: Point buy, derived stats, dice and roll requests.
"""

from __future__ import annotations

from dnd_forge.core.config import Settings, get_settings
from dnd_forge.core.exceptions import DndForgeError, MalformedInputError
from dnd_forge.core.logging import configure_logging, get_logger
from dnd_forge.engine.dice import DiceRoller, check_success, format_roll
from dnd_forge.engine.point_buy import validate as validate_point_buy
from dnd_forge.engine.requests import execute_roll
from dnd_forge.engine.stats import ability_modifier, calculate_character_stats
from dnd_forge.models import (
    Ability,
    AbilityScores,
    CharacterCalculations,
    DiceRoll,
    DiceType,
    PointBuyResult,
    Skill,
)
from dnd_forge.reference import ReferenceCatalog, get_catalog


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "DndForgeError",
    "MalformedInputError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "Skill",
    "DiceType",
    "AbilityScores",
    "PointBuyResult",
    "CharacterCalculations",
    "DiceRoll",
    # Reference data
    "ReferenceCatalog",
    "get_catalog",
    # Engines
    "validate_point_buy",
    "ability_modifier",
    "calculate_character_stats",
    "DiceRoller",
    "check_success",
    "format_roll",
    "execute_roll",
]
