"""
Unit tests for the Player entity state transitions.
"""
import pytest

from wizard_battle.core.data import WarningType
from wizard_battle.core.data.data_structures import PlayerData
from wizard_battle.game.entities.player import Player
from tests.conftest import TestDataBuilder


class TestPlayerBasics:
    """Test construction and comparisons."""

    def test_from_data_and_snapshot(self):
        data = PlayerData(name="Harry", team_number=1, power=250, is_visible=False)
        player = Player.from_data(data)

        assert player.snapshot() == data
        assert not player.is_frozen

    def test_zero_power_is_frozen(self):
        assert TestDataBuilder.player(power=0).is_frozen

    def test_equality_is_identity(self):
        a = TestDataBuilder.player("Harry")
        b = TestDataBuilder.player("Harry")
        assert a != b
        assert a.same_stats(b)

    def test_same_stats_ignores_name(self):
        a = TestDataBuilder.player("Harry", team=0, power=10)
        b = TestDataBuilder.player("Ron", team=0, power=10)
        c = TestDataBuilder.player("Ron", team=0, power=11)
        assert a.same_stats(b)
        assert not a.same_stats(c)


class TestAttack:
    """Test the attack rules."""

    def test_stronger_attacker_wins(self):
        a = TestDataBuilder.player("Harry", power=300)
        b = TestDataBuilder.player("Draco", team=1, power=100)

        assert a.attack(b).is_valid
        assert (a.power, b.power) == (500, 0)

    def test_stronger_target_wins(self):
        a = TestDataBuilder.player("Harry", power=100)
        b = TestDataBuilder.player("Draco", team=1, power=300)

        assert a.attack(b).is_valid
        assert (a.power, b.power) == (0, 500)

    def test_equal_powers_freeze_both(self):
        a = TestDataBuilder.player("Harry", power=500)
        b = TestDataBuilder.player("Draco", team=1, power=500)

        assert a.attack(b).is_valid
        assert (a.power, b.power) == (0, 0)

    def test_winner_power_is_capped(self):
        a = TestDataBuilder.player("Harry", power=900)
        b = TestDataBuilder.player("Draco", team=1, power=100)

        a.attack(b)
        assert (a.power, b.power) == (1000, 0)

    def test_hidden_target_wastes_attack(self):
        a = TestDataBuilder.player("Harry", power=300)
        b = TestDataBuilder.player("Draco", team=1, power=100, visible=False)

        assert a.attack(b).is_valid
        assert (a.power, b.power) == (0, 100)

    def test_hidden_attacker_cannot_play(self):
        a = TestDataBuilder.player("Harry", power=300, visible=False)
        b = TestDataBuilder.player("Draco", team=1, power=100)

        result = a.attack(b)
        assert result.reason == WarningType.CANNOT_PLAY
        assert (a.power, b.power) == (300, 100)

    def test_frozen_attacker(self):
        a = TestDataBuilder.player("Harry", power=0)
        b = TestDataBuilder.player("Draco", team=1, power=100)

        result = a.attack(b)
        assert result.reason == WarningType.PLAYER_FROZEN
        assert b.power == 100

    def test_hidden_check_comes_before_frozen(self):
        a = TestDataBuilder.player("Harry", power=0, visible=False)
        b = TestDataBuilder.player("Draco", team=1, power=100)

        assert a.attack(b).reason == WarningType.CANNOT_PLAY

    def test_self_attack_freezes(self):
        a = TestDataBuilder.player("Harry", power=400)

        assert a.attack(a).is_valid
        assert a.power == 0

    def test_frozen_target_is_beaten(self):
        a = TestDataBuilder.player("Harry", power=200)
        b = TestDataBuilder.player("Draco", team=1, power=0)

        a.attack(b)
        assert (a.power, b.power) == (400, 0)


class TestHeal:
    """Test the heal rules."""

    def test_heal_example(self):
        a = TestDataBuilder.player("Harry", power=401)
        b = TestDataBuilder.player("Ron", power=10)

        assert a.heal(b).is_valid
        assert (a.power, b.power) == (201, 211)

    def test_heal_even_power(self):
        a = TestDataBuilder.player("Harry", power=400)
        b = TestDataBuilder.player("Ron", power=10)

        a.heal(b)
        assert (a.power, b.power) == (200, 210)

    def test_heal_of_one_power(self):
        a = TestDataBuilder.player("Harry", power=1)
        b = TestDataBuilder.player("Ron", power=0)

        a.heal(b)
        assert (a.power, b.power) == (1, 1)

    def test_heal_is_capped(self):
        a = TestDataBuilder.player("Harry", power=1000)
        b = TestDataBuilder.player("Ron", power=900)

        a.heal(b)
        assert (a.power, b.power) == (500, 1000)

    def test_heal_hidden_target_allowed(self):
        a = TestDataBuilder.player("Harry", power=100)
        b = TestDataBuilder.player("Ron", power=10, visible=False)

        assert a.heal(b).is_valid
        assert b.power == 60

    @pytest.mark.parametrize("healer, reason", [
        (dict(visible=False), WarningType.CANNOT_PLAY),
        (dict(power=0), WarningType.PLAYER_FROZEN),
    ])
    def test_healer_must_be_able_to_act(self, healer, reason):
        a = TestDataBuilder.player("Harry", **healer)
        b = TestDataBuilder.player("Ron", power=10)

        assert a.heal(b).reason == reason
        assert b.power == 10

    def test_different_team(self):
        a = TestDataBuilder.player("Harry", power=100)
        b = TestDataBuilder.player("Draco", team=1, power=10)

        assert a.heal(b).reason == WarningType.DIFFERENT_TEAM
        assert (a.power, b.power) == (100, 10)

    def test_cannot_heal_self(self):
        a = TestDataBuilder.player("Harry", power=100)

        assert a.heal(a).reason == WarningType.CANNOT_HEAL_SELF
        assert a.power == 100

    def test_identical_teammate_counts_as_self(self):
        a = TestDataBuilder.player("Harry", power=100)
        b = TestDataBuilder.player("Ron", power=100)

        assert a.heal(b).reason == WarningType.CANNOT_HEAL_SELF
        assert (a.power, b.power) == (100, 100)


class TestFlipVisibility:
    """Test visibility toggling."""

    def test_flip_toggles(self):
        a = TestDataBuilder.player(power=10)

        assert a.flip_visibility().is_valid
        assert a.is_visible is False

    def test_flip_twice_restores_state(self):
        a = TestDataBuilder.player(power=10, visible=False)
        before = a.snapshot()

        a.flip_visibility()
        a.flip_visibility()
        assert a.snapshot() == before

    def test_frozen_cannot_flip(self):
        a = TestDataBuilder.player(power=0, visible=False)

        assert a.flip_visibility().reason == WarningType.PLAYER_FROZEN
        assert a.is_visible is False
