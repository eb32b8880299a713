"""Tests for the reference data catalog."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from dnd_forge.core.exceptions import ReferenceDataError
from dnd_forge.models.enums import Ability, Size, Skill
from dnd_forge.reference.catalog import ReferenceCatalog, get_catalog
from dnd_forge.reference.definitions import ClassDefinition, RaceDefinition


class TestDefaultCatalog:
    """Tests for the built-in SRD data."""

    def test_races(self, catalog: ReferenceCatalog) -> None:
        assert "Dwarf" in catalog.race_names
        assert len(catalog.race_names) == 9

    def test_classes(self, catalog: ReferenceCatalog) -> None:
        assert len(catalog.class_names) == 12
        assert catalog.class_hit_die("Barbarian") == 12
        assert catalog.class_hit_die("wizard") == 6

    def test_racial_bonuses(self, catalog: ReferenceCatalog) -> None:
        assert catalog.racial_bonuses("Dwarf") == {Ability.CON: 2}
        assert catalog.racial_bonuses("half-orc") == {Ability.STR: 2, Ability.CON: 1}

    def test_race_details(self, catalog: ReferenceCatalog) -> None:
        halfling = catalog.get_race("Halfling")

        assert halfling is not None
        assert halfling.size is Size.SMALL
        assert halfling.speed == 25
        assert catalog.get_race("Human").speed == 30  # type: ignore[union-attr]

    def test_saving_throws_parsed(self, catalog: ReferenceCatalog) -> None:
        fighter = catalog.get_class("Fighter")

        assert fighter is not None
        assert fighter.saving_throws == [Ability.STR, Ability.CON]

    def test_background_skills(self, catalog: ReferenceCatalog) -> None:
        assert catalog.default_skills("Criminal") == [Skill.DECEPTION, Skill.STEALTH]
        assert catalog.default_skills("urchin") == [Skill.SLEIGHT_OF_HAND, Skill.STEALTH]


class TestMissingReferences:
    """Tests for names absent from the catalog."""

    def test_unknown_lookups(self, catalog: ReferenceCatalog) -> None:
        assert catalog.get_race("Warforged") is None
        assert catalog.racial_bonuses("Warforged") is None
        assert catalog.class_hit_die("Artificer") is None
        assert catalog.get_background("Haunted One") is None

    def test_unknown_background_logs_warning(self, catalog: ReferenceCatalog) -> None:
        """Test an unknown background grants nothing and is logged."""
        with capture_logs() as logs:
            skills = catalog.default_skills("Haunted One")

        assert skills == []
        assert logs[0]["event"] == "reference_data_missing"
        assert logs[0]["kind"] == "background"
        assert logs[0]["log_level"] == "warning"


class TestFromData:
    """Tests for building catalogs from raw data."""

    def test_mapping_records(self) -> None:
        """Test id -> record mappings use the id as the name."""
        catalog = ReferenceCatalog.from_data(
            {
                "races": {"Goliath": {"abilityScoreIncrease": {"str": 2, "con": 1}}},
                "classes": {"Artificer": {"hitDie": 8, "primaryAbility": ["int"]}},
            }
        )

        assert catalog.racial_bonuses("goliath") == {Ability.STR: 2, Ability.CON: 1}
        assert catalog.class_hit_die("Artificer") == 8
        assert catalog.background_names == []

    def test_unknown_keys_ignored(self) -> None:
        race = RaceDefinition.model_validate(
            {"name": "Elf", "abilityScoreIncrease": {"dex": 2}, "languages": ["Elvish"]}
        )

        assert race.ability_score_increase == {Ability.DEX: 2}

    def test_invalid_hit_die(self) -> None:
        with pytest.raises(ReferenceDataError) as exc_info:
            ReferenceCatalog.from_data({"classes": [{"name": "Oddball", "hitDie": 7}]})

        assert exc_info.value.details["record"] == "Oddball"

    def test_invalid_ability_key(self) -> None:
        with pytest.raises(ReferenceDataError):
            ReferenceCatalog.from_data(
                {"races": [{"name": "Odd", "abilityScoreIncrease": {"luck": 2}}]}
            )

    def test_invalid_section_shape(self) -> None:
        with pytest.raises(ReferenceDataError):
            ReferenceCatalog.from_data({"races": "Dwarf"})

        with pytest.raises(ReferenceDataError):
            ReferenceCatalog.from_data({"races": {"Dwarf": 2}})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ReferenceDataError):
            ReferenceCatalog.from_data(["races"])  # type: ignore[arg-type]

    def test_direct_construction(self) -> None:
        catalog = ReferenceCatalog(classes=[ClassDefinition(name="Sidekick", hit_die=8)])

        assert catalog.class_names == ["Sidekick"]


class TestFromJson:
    """Tests for loading reference data files."""

    def test_load(self, tmp_path: Path) -> None:
        data_file = tmp_path / "reference.json"
        data_file.write_text(
            json.dumps({"races": [{"name": "Kenku", "abilityScoreIncrease": {"dex": 2}}]}),
            encoding="utf-8",
        )

        catalog = ReferenceCatalog.from_json(data_file)

        assert catalog.race_names == ["Kenku"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ReferenceDataError) as exc_info:
            ReferenceCatalog.from_json(tmp_path / "missing.json")

        assert "missing.json" in exc_info.value.details["source"]

    def test_invalid_json(self, tmp_path: Path) -> None:
        data_file = tmp_path / "broken.json"
        data_file.write_text("{races: ", encoding="utf-8")

        with pytest.raises(ReferenceDataError):
            ReferenceCatalog.from_json(data_file)


class TestSharedCatalog:
    """Tests for the cached shared catalog."""

    def test_defaults_to_srd(self) -> None:
        assert get_catalog().class_hit_die("Fighter") == 10

    def test_cached(self) -> None:
        assert get_catalog() is get_catalog()

    def test_configured_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the reference data path setting replaces the SRD data."""
        data_file = tmp_path / "homebrew.json"
        data_file.write_text(
            json.dumps({"classes": [{"name": "Gunslinger", "hitDie": 10}]}),
            encoding="utf-8",
        )
        monkeypatch.setenv("DND_FORGE_RULES_REFERENCE_DATA_PATH", str(data_file))

        catalog = get_catalog()

        assert catalog.class_names == ["Gunslinger"]
        assert catalog.get_class("Fighter") is None
