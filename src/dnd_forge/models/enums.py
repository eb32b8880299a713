"""Enumeration types for the D&D 5E character forge.

Abilities, skills, creature sizes and dice types. These enums are the
vocabulary shared by the point-buy, stat derivation and dice engines.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name

    @classmethod
    def parse(cls, name: str) -> Ability:
        """Resolve a full name or shorthand ('str', 'Dex') to an Ability.

        Args:
            name: Ability name in any case.

        Returns:
            The matching Ability.

        Raises:
            ValueError: If the name matches no ability.
        """
        key = name.strip().lower()
        for ability in cls:
            if key in (ability.value, ability.name.lower()):
                return ability
        msg = f"Unknown ability: {name!r}"
        raise ValueError(msg)


class Skill(StrEnum):
    """D&D 5E skills and their associated abilities."""

    # Strength skills
    ATHLETICS = "athletics"

    # Dexterity skills
    ACROBATICS = "acrobatics"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"

    # Intelligence skills
    ARCANA = "arcana"
    HISTORY = "history"
    INVESTIGATION = "investigation"
    NATURE = "nature"
    RELIGION = "religion"

    # Wisdom skills
    ANIMAL_HANDLING = "animal_handling"
    INSIGHT = "insight"
    MEDICINE = "medicine"
    PERCEPTION = "perception"
    SURVIVAL = "survival"

    # Charisma skills
    DECEPTION = "deception"
    INTIMIDATION = "intimidation"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"

    @property
    def ability(self) -> Ability:
        """Get the primary ability score for this skill.

        Returns:
            The Ability enum value associated with this skill.
        """
        return _SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get the skill name as printed on a character sheet.

        Returns:
            Title-cased name (e.g., 'Sleight Of Hand').
        """
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, name: str) -> Skill:
        """Resolve 'Sleight of Hand', 'sleightOfHand' or 'sleight_of_hand'.

        Raises:
            ValueError: If the name matches no skill.
        """
        key = "".join(ch for ch in name.lower() if ch.isalpha())
        for skill in cls:
            if skill.value.replace("_", "") == key:
                return skill
        msg = f"Unknown skill: {name!r}"
        raise ValueError(msg)


_SKILL_ABILITIES: dict[Skill, Ability] = {
    # Strength
    Skill.ATHLETICS: Ability.STR,
    # Dexterity
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    # Intelligence
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    # Wisdom
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    # Charisma
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


class Size(StrEnum):
    """D&D 5E creature sizes."""

    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GARGANTUAN = "gargantuan"


class DiceType(StrEnum):
    """Standard polyhedral dice."""

    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def sides(self) -> int:
        """Number of faces on the die."""
        return int(self.value[1:])

    @classmethod
    def from_sides(cls, sides: int) -> DiceType:
        """Get the die with the given number of faces.

        Raises:
            ValueError: If no standard die has that many faces.
        """
        return cls(f"d{sides}")


__all__ = [
    "Ability",
    "Skill",
    "Size",
    "DiceType",
]
