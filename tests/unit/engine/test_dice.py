"""Tests for the dice engine."""

from __future__ import annotations

from collections import Counter
from typing import Any

import pytest

from dnd_forge.core.exceptions import DiceRollError, MalformedInputError
from dnd_forge.engine import dice as dice_module
from dnd_forge.engine.dice import (
    DiceRoller,
    check_success,
    dc_description,
    format_roll,
    get_default_roller,
    parse_dice_type,
    roll,
)
from dnd_forge.models.enums import DiceType


class TestParseDiceType:
    """Tests for dice type parsing."""

    @pytest.mark.parametrize("value", ["d20", "D20", " d20 ", DiceType.D20])
    def test_accepts_variants(self, value: Any) -> None:
        """Test case and whitespace are ignored."""
        assert parse_dice_type(value) is DiceType.D20

    @pytest.mark.parametrize("value", ["d7", "20", "", "2d6"])
    def test_unknown_raises(self, value: str) -> None:
        """Test non-standard dice are rejected."""
        with pytest.raises(DiceRollError):
            parse_dice_type(value)


class TestRoll:
    """Tests for the core roll primitive."""

    def test_single_die(self, dice_roller: DiceRoller) -> None:
        """Test a single d20 with a modifier."""
        result = dice_roller.roll("d20", modifier=5)

        assert result.type is DiceType.D20
        assert result.count == 1
        assert len(result.result) == 1
        assert 1 <= result.result[0] <= 20
        assert result.total == result.result[0] + 5
        assert result.purpose == "General roll"

    def test_multiple_dice(self, dice_roller: DiceRoller) -> None:
        """Test several dice are summed."""
        result = dice_roller.roll(DiceType.D6, count=4, modifier=-2)

        assert result.count == 4
        assert len(result.result) == 4
        assert all(1 <= face <= 6 for face in result.result)
        assert result.total == sum(result.result) - 2

    @pytest.mark.parametrize("dice_type", list(DiceType))
    def test_faces_within_range(self, dice_roller: DiceRoller, dice_type: DiceType) -> None:
        """Test every die type stays on its faces."""
        for _ in range(50):
            result = dice_roller.roll(dice_type, count=2)
            assert all(1 <= face <= dice_type.sides for face in result.result)

    def test_unique_ids(self, dice_roller: DiceRoller) -> None:
        """Test each roll gets its own identifier."""
        ids = {dice_roller.roll("d20").id for _ in range(20)}

        assert len(ids) == 20

    def test_zero_count_raises(self, dice_roller: DiceRoller) -> None:
        """Test a count below 1 is a programmer error."""
        with pytest.raises(DiceRollError):
            dice_roller.roll("d6", count=0)

    def test_unknown_type_raises(self, dice_roller: DiceRoller) -> None:
        """Test an unknown die is a programmer error."""
        with pytest.raises(DiceRollError) as exc_info:
            dice_roller.roll("d3")

        assert exc_info.value.details["expression"] == "d3"

    def test_seed_reproducible(self) -> None:
        """Test the same seed yields the same sequence."""
        first = DiceRoller(seed=1234)
        first_totals = [first.roll("d20").total for _ in range(10)]
        second = DiceRoller(seed=1234)
        second_totals = [second.roll("d20").total for _ in range(10)]

        assert first_totals == second_totals

    def test_d6_roughly_uniform(self, dice_roller: DiceRoller) -> None:
        """Test 6000 d6 rolls hit every face about equally."""
        counts = Counter(dice_roller.roll("d6").result[0] for _ in range(6000))

        assert set(counts) == {1, 2, 3, 4, 5, 6}
        for face in range(1, 7):
            assert 750 <= counts[face] <= 1250


class TestAdvantage:
    """Tests for advantage and disadvantage."""

    def test_advantage_reports_one_die(self, dice_roller: DiceRoller) -> None:
        """Test only the kept face is reported."""
        result = dice_roller.roll("d20", advantage=True)

        assert result.count == 1
        assert len(result.result) == 1
        assert result.advantage is True
        assert result.disadvantage is False

    def test_advantage_ignores_count(self, dice_roller: DiceRoller) -> None:
        """Test advantage on a d20 always keeps a single die."""
        result = dice_roller.roll("d20", count=3, disadvantage=True)

        assert result.count == 1
        assert len(result.result) == 1

    def test_advantage_raises_average(self, dice_roller: DiceRoller) -> None:
        """Test advantage beats a plain roll on average and disadvantage trails it."""
        trials = 3000
        plain = sum(dice_roller.roll("d20").total for _ in range(trials)) / trials
        high = sum(dice_roller.roll("d20", advantage=True).total for _ in range(trials)) / trials
        low = sum(dice_roller.roll("d20", disadvantage=True).total for _ in range(trials)) / trials

        assert high > plain + 1
        assert low < plain - 1

    def test_both_flags_cancel(self, dice_roller: DiceRoller) -> None:
        """Test advantage and disadvantage together roll one plain d20."""
        result = dice_roller.roll("d20", advantage=True, disadvantage=True)

        assert len(result.result) == 1
        assert format_roll(result).endswith(str(result.result[0]))

    def test_non_d20_ignores_advantage(self, dice_roller: DiceRoller) -> None:
        """Test advantage does not change damage dice."""
        result = dice_roller.roll("d6", count=2, advantage=True)

        assert result.count == 2
        assert len(result.result) == 2
        assert "Advantage" not in format_roll(result)


class TestDerivedRolls:
    """Tests for checks, saves, attacks and damage."""

    def test_ability_check(self, dice_roller: DiceRoller) -> None:
        """Test ability check modifier and default purpose."""
        result = dice_roller.ability_check(16, 2)

        assert result.modifier == 5
        assert result.purpose == "Ability check"

    def test_ability_check_with_skill(self, dice_roller: DiceRoller) -> None:
        """Test a skill label shapes the default purpose."""
        result = dice_roller.ability_check(12, skill="Athletics")

        assert result.modifier == 1
        assert result.purpose == "Athletics check"
        assert result.skill == "Athletics"

    def test_skill_check_proficient(self, dice_roller: DiceRoller) -> None:
        """Test a proficient skill check."""
        result = dice_roller.skill_check("Stealth", 14, is_proficient=True, proficiency_bonus=3)

        assert result.modifier == 5
        assert result.purpose == "Stealth check"
        assert result.skill == "Stealth"

    def test_skill_check_untrained(self, dice_roller: DiceRoller) -> None:
        """Test an untrained skill check skips proficiency."""
        result = dice_roller.skill_check("Arcana", 8)

        assert result.modifier == -1

    def test_saving_throw(self, dice_roller: DiceRoller) -> None:
        """Test saving throw modifier and purpose."""
        result = dice_roller.saving_throw(14, is_proficient=True, disadvantage=True)

        assert result.modifier == 4
        assert result.purpose == "Saving throw"
        assert result.disadvantage is True

    def test_attack_roll(self, dice_roller: DiceRoller) -> None:
        """Test an attack always adds proficiency."""
        result = dice_roller.attack_roll(16, proficiency_bonus=2)

        assert result.modifier == 5
        assert result.purpose == "Attack roll"

    def test_damage_roll(self, dice_roller: DiceRoller) -> None:
        """Test damage dice are labeled with the damage type."""
        result = dice_roller.damage_roll("d8", count=2, modifier=3, damage_type="fire")

        assert result.type is DiceType.D8
        assert len(result.result) == 2
        assert result.purpose == "fire damage"

    def test_initiative(self, dice_roller: DiceRoller) -> None:
        """Test initiative uses the Dexterity modifier."""
        result = dice_roller.initiative_roll(18)

        assert result.modifier == 4
        assert result.purpose == "Initiative"

    def test_hit_die_recovery_minimum(self, dice_roller: DiceRoller) -> None:
        """Test a hit die heals at least 2 even with poor Constitution."""
        for _ in range(100):
            result = dice_roller.hit_die_recovery("d6", 6)
            assert result.modifier == 1
            assert result.total >= 2

    def test_hit_die_recovery_uses_con(self, dice_roller: DiceRoller) -> None:
        """Test a good Constitution adds its modifier."""
        result = dice_roller.hit_die_recovery(DiceType.D10, 16, count=2)

        assert result.modifier == 3
        assert len(result.result) == 2
        assert result.purpose == "Hit die recovery"

    @pytest.mark.parametrize("score", [True, 15.5, "14"])
    def test_non_integer_scores_raise(self, dice_roller: DiceRoller, score: Any) -> None:
        """Test every derived roll rejects a score that is not an integer."""
        with pytest.raises(MalformedInputError):
            dice_roller.ability_check(score)
        with pytest.raises(MalformedInputError):
            dice_roller.skill_check("Stealth", score)
        with pytest.raises(MalformedInputError):
            dice_roller.saving_throw(score)
        with pytest.raises(MalformedInputError):
            dice_roller.attack_roll(score)
        with pytest.raises(MalformedInputError):
            dice_roller.initiative_roll(score)
        with pytest.raises(MalformedInputError):
            dice_roller.hit_die_recovery("d8", score)

    @pytest.mark.parametrize("bonus", [True, 2.0, "2"])
    def test_non_integer_proficiency_raises(self, dice_roller: DiceRoller, bonus: Any) -> None:
        """Test a proficiency bonus that is not an integer is rejected."""
        with pytest.raises(MalformedInputError):
            dice_roller.ability_check(14, bonus)
        with pytest.raises(MalformedInputError):
            dice_roller.attack_roll(14, proficiency_bonus=bonus)


class TestCheckSuccess:
    """Tests for DC comparisons."""

    def test_meets_dc(self, make_roll: Any) -> None:
        """Test meeting the DC exactly is a success."""
        assert check_success(make_roll(12, 3), 15) is True

    def test_below_dc(self, make_roll: Any) -> None:
        """Test falling one short is a failure."""
        assert check_success(make_roll(11, 3), 15) is False


class TestFormatRoll:
    """Tests for roll display text."""

    def test_single_with_modifier(self, make_roll: Any) -> None:
        assert format_roll(make_roll(14, 3)) == "1d20+3: 14 = 17"

    def test_negative_modifier(self, make_roll: Any) -> None:
        assert format_roll(make_roll(5, -1)) == "1d20-1: 5 = 4"

    def test_single_without_modifier(self, make_roll: Any) -> None:
        assert format_roll(make_roll(12)) == "1d20: 12"

    def test_multiple_dice(self, make_roll: Any) -> None:
        roll_ = make_roll((4, 6), 2, dice_type=DiceType.D6)

        assert format_roll(roll_) == "2d6+2: [4, 6] = 12"

    def test_multiple_dice_without_modifier(self, make_roll: Any) -> None:
        roll_ = make_roll((3, 4), dice_type=DiceType.D6)

        assert format_roll(roll_) == "2d6: [3, 4] = 7"

    def test_advantage_suffix(self, make_roll: Any) -> None:
        assert format_roll(make_roll(12, advantage=True)) == "1d20: 12 (Advantage)"

    def test_disadvantage_suffix(self, make_roll: Any) -> None:
        assert format_roll(make_roll(3, 2, disadvantage=True)) == "1d20+2: 3 = 5 (Disadvantage)"

    def test_both_flags_no_suffix(self, make_roll: Any) -> None:
        assert format_roll(make_roll(10, advantage=True, disadvantage=True)) == "1d20: 10"


class TestDcDescription:
    """Tests for DC descriptions."""

    @pytest.mark.parametrize(
        ("dc", "expected"),
        [
            (5, "Very Easy"),
            (10, "Easy"),
            (15, "Medium"),
            (20, "Hard"),
            (25, "Very Hard"),
            (30, "Nearly Impossible"),
        ],
    )
    def test_descriptions(self, dc: int, expected: str) -> None:
        assert dc_description(dc) == expected


class TestDefaultRoller:
    """Tests for the shared module-level roller."""

    def test_shared_instance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default roller is created once."""
        monkeypatch.setattr(dice_module, "_default_roller", None)

        assert get_default_roller() is get_default_roller()

    def test_seeded_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the dice seed setting makes module-level rolls reproducible."""
        monkeypatch.setenv("DND_FORGE_DICE_SEED", "99")

        monkeypatch.setattr(dice_module, "_default_roller", None)
        first = [roll("d20").total for _ in range(5)]
        monkeypatch.setattr(dice_module, "_default_roller", None)
        second = [roll("d20").total for _ in range(5)]

        assert first == second

    def test_module_roll(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the convenience function passes its arguments through."""
        monkeypatch.setattr(dice_module, "_default_roller", None)

        result = roll("d8", count=2, modifier=1, purpose="Healing")

        assert result.type is DiceType.D8
        assert result.purpose == "Healing"
        assert result.total == sum(result.result) + 1
