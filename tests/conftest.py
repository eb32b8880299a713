"""Pytest configuration and shared fixtures.

This module provides common fixtures for all tests in the
character forge test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings and catalog caches before and after each test."""
    from dnd_forge.core.config import clear_settings_cache
    from dnd_forge.reference.catalog import clear_catalog_cache

    clear_settings_cache()
    clear_catalog_cache()
    yield
    clear_settings_cache()
    clear_catalog_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_FORGE_DEBUG": "true",
        "DND_FORGE_LOG_LEVEL": "DEBUG",
        "DND_FORGE_RULES_REQUIRE_FULL_POINT_SPEND": "false",
        "DND_FORGE_DICE_SEED": "7",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Ability Score Fixtures
# =============================================================================


@pytest.fixture
def baseline_scores() -> dict[str, int]:
    """All abilities at the point-buy minimum (0 points spent)."""
    return {
        "strength": 8,
        "dexterity": 8,
        "constitution": 8,
        "intelligence": 8,
        "wisdom": 8,
        "charisma": 8,
    }


@pytest.fixture
def fighter_scores() -> dict[str, int]:
    """A full 27-point Fighter spread (9+5+7+2+4+0)."""
    return {
        "str": 15,
        "dex": 13,
        "con": 14,
        "int": 10,
        "wis": 12,
        "cha": 8,
    }


@pytest.fixture
def average_scores() -> Any:
    """AbilityScores with every ability at 10."""
    from dnd_forge.models.character import AbilityScores

    return AbilityScores.uniform(10)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> Any:
    """Create a DiceRoller with a fixed seed for reproducible tests.

    Returns:
        DiceRoller instance with fixed seed.
    """
    from dnd_forge.engine.dice import DiceRoller

    return DiceRoller(seed=42)


@pytest.fixture
def catalog() -> Any:
    """The built-in SRD reference catalog."""
    from dnd_forge.reference.catalog import ReferenceCatalog

    return ReferenceCatalog.default()


@pytest.fixture
def make_roll() -> Any:
    """Factory for hand-built d20 DiceRoll records."""
    from dnd_forge.models.dice import DiceRoll
    from dnd_forge.models.enums import DiceType

    def _make_roll(
        face: int,
        modifier: int = 0,
        *,
        dice_type: DiceType = DiceType.D20,
        **kwargs: Any,
    ) -> DiceRoll:
        faces = face if isinstance(face, tuple) else (face,)
        return DiceRoll(
            type=dice_type,
            count=len(faces),
            modifier=modifier,
            result=faces,
            total=sum(faces) + modifier,
            purpose=kwargs.pop("purpose", "Test roll"),
            **kwargs,
        )

    return _make_roll
