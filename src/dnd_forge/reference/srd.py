"""Built-in SRD reference data.

Records are kept in the same shape as the JSON seed files so both go
through the same validation in ReferenceCatalog.
"""

from __future__ import annotations

from typing import Any


SRD_RACES: list[dict[str, Any]] = [
    {
        "name": "Human",
        "abilityScoreIncrease": {
            "strength": 1,
            "dexterity": 1,
            "constitution": 1,
            "intelligence": 1,
            "wisdom": 1,
            "charisma": 1,
        },
        "traits": ["Extra Language"],
    },
    {
        "name": "Dwarf",
        "abilityScoreIncrease": {"constitution": 2},
        "traits": ["Darkvision", "Dwarven Resilience", "Stonecunning"],
        "speed": 25,
    },
    {
        "name": "Elf",
        "abilityScoreIncrease": {"dexterity": 2},
        "traits": ["Darkvision", "Keen Senses", "Fey Ancestry", "Trance"],
    },
    {
        "name": "Halfling",
        "abilityScoreIncrease": {"dexterity": 2},
        "traits": ["Lucky", "Brave", "Halfling Nimbleness"],
        "size": "small",
        "speed": 25,
    },
    {
        "name": "Dragonborn",
        "abilityScoreIncrease": {"strength": 2, "charisma": 1},
        "traits": ["Draconic Ancestry", "Breath Weapon", "Damage Resistance"],
    },
    {
        "name": "Gnome",
        "abilityScoreIncrease": {"intelligence": 2},
        "traits": ["Darkvision", "Gnome Cunning"],
        "size": "small",
        "speed": 25,
    },
    {
        # The two floating +1s are chosen by the player, not applied here
        "name": "Half-Elf",
        "abilityScoreIncrease": {"charisma": 2},
        "traits": ["Darkvision", "Fey Ancestry", "Skill Versatility"],
    },
    {
        "name": "Half-Orc",
        "abilityScoreIncrease": {"strength": 2, "constitution": 1},
        "traits": ["Darkvision", "Menacing", "Relentless Endurance", "Savage Attacks"],
    },
    {
        "name": "Tiefling",
        "abilityScoreIncrease": {"charisma": 2, "intelligence": 1},
        "traits": ["Darkvision", "Hellish Resistance", "Infernal Legacy"],
    },
]

SRD_CLASSES: list[dict[str, Any]] = [
    {"name": "Barbarian", "hitDie": 12, "primaryAbility": ["str"], "savingThrows": ["str", "con"]},
    {"name": "Bard", "hitDie": 8, "primaryAbility": ["cha"], "savingThrows": ["dex", "cha"]},
    {"name": "Cleric", "hitDie": 8, "primaryAbility": ["wis"], "savingThrows": ["wis", "cha"]},
    {"name": "Druid", "hitDie": 8, "primaryAbility": ["wis"], "savingThrows": ["int", "wis"]},
    {"name": "Fighter", "hitDie": 10, "primaryAbility": ["str", "dex"], "savingThrows": ["str", "con"]},
    {"name": "Monk", "hitDie": 8, "primaryAbility": ["dex", "wis"], "savingThrows": ["str", "dex"]},
    {"name": "Paladin", "hitDie": 10, "primaryAbility": ["str", "cha"], "savingThrows": ["wis", "cha"]},
    {"name": "Ranger", "hitDie": 10, "primaryAbility": ["dex", "wis"], "savingThrows": ["str", "dex"]},
    {"name": "Rogue", "hitDie": 8, "primaryAbility": ["dex"], "savingThrows": ["dex", "int"]},
    {"name": "Sorcerer", "hitDie": 6, "primaryAbility": ["cha"], "savingThrows": ["con", "cha"]},
    {"name": "Warlock", "hitDie": 8, "primaryAbility": ["cha"], "savingThrows": ["wis", "cha"]},
    {"name": "Wizard", "hitDie": 6, "primaryAbility": ["int"], "savingThrows": ["int", "wis"]},
]

SRD_BACKGROUNDS: list[dict[str, Any]] = [
    {"name": "Acolyte", "skillProficiencies": ["insight", "religion"]},
    {"name": "Charlatan", "skillProficiencies": ["deception", "sleight_of_hand"]},
    {"name": "Criminal", "skillProficiencies": ["deception", "stealth"]},
    {"name": "Entertainer", "skillProficiencies": ["acrobatics", "performance"]},
    {"name": "Folk Hero", "skillProficiencies": ["animal_handling", "survival"]},
    {"name": "Guild Artisan", "skillProficiencies": ["insight", "persuasion"]},
    {"name": "Hermit", "skillProficiencies": ["medicine", "religion"]},
    {"name": "Noble", "skillProficiencies": ["history", "persuasion"]},
    {"name": "Outlander", "skillProficiencies": ["athletics", "survival"]},
    {"name": "Sage", "skillProficiencies": ["arcana", "history"]},
    {"name": "Sailor", "skillProficiencies": ["athletics", "perception"]},
    {"name": "Soldier", "skillProficiencies": ["athletics", "intimidation"]},
    {"name": "Urchin", "skillProficiencies": ["sleight_of_hand", "stealth"]},
]


__all__ = [
    "SRD_RACES",
    "SRD_CLASSES",
    "SRD_BACKGROUNDS",
]
