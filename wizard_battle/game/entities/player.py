"""Player entity: one combatant and its state transitions.

A player's state is just its power (0..1000) and visibility. Behaviour
branches on two conditions:

- **frozen**: ``power == 0``; the player cannot act
- **hidden**: ``is_visible`` is False; the player cannot attack or heal,
  but can still be targeted

Every operation checks its rules before mutating anything and reports a
violation through :class:`ActionValidation`, leaving both players untouched.
"""

from dataclasses import dataclass

from ...core.data import MAX_POWER, PlayerData, WarningType, clamp_power
from ...core.engine.actions import ActionValidation


@dataclass(eq=False)
class Player:
    """Mutable record of one combatant.

    Equality is identity; use :meth:`same_stats` to compare field values.
    """

    name: str
    team_number: int
    power: int
    is_visible: bool

    def __post_init__(self):
        self.power = clamp_power(self.power)

    @classmethod
    def from_data(cls, data: PlayerData) -> "Player":
        return cls(
            name=data.name,
            team_number=data.team_number,
            power=data.power,
            is_visible=data.is_visible,
        )

    def snapshot(self) -> PlayerData:
        """Immutable copy of the current state."""
        return PlayerData(
            name=self.name,
            team_number=self.team_number,
            power=self.power,
            is_visible=self.is_visible,
        )

    @property
    def is_frozen(self) -> bool:
        return self.power == 0

    def same_stats(self, other: "Player") -> bool:
        """True when team, power and visibility all match."""
        return (
            self.team_number == other.team_number
            and self.power == other.power
            and self.is_visible == other.is_visible
        )

    def _can_act(self) -> ActionValidation:
        if not self.is_visible:
            return ActionValidation.invalid(WarningType.CANNOT_PLAY)
        if self.is_frozen:
            return ActionValidation.invalid(WarningType.PLAYER_FROZEN)
        return ActionValidation.valid()

    def attack(self, target: "Player") -> ActionValidation:
        """Attack ``target``.

        Attacking a hidden target wastes the attacker's power. Otherwise the
        stronger side ends with ``min(1000, 2 * stronger - weaker)`` and the
        weaker side freezes; equal powers freeze both. Attacking oneself
        lands in the equal-power branch.
        """
        validation = self._can_act()
        if not validation.is_valid:
            return validation

        if not target.is_visible:
            self.power = 0
            return ActionValidation.valid()

        if self.power > target.power:
            self.power = min(MAX_POWER, self.power + self.power - target.power)
            target.power = 0
        elif self.power < target.power:
            target.power = min(MAX_POWER, target.power + target.power - self.power)
            self.power = 0
        else:
            self.power = 0
            target.power = 0

        return ActionValidation.valid()

    def heal(self, target: "Player") -> ActionValidation:
        """Give half of this player's power (rounded up) to a teammate.

        The healer keeps only the half it gave away.
        """
        validation = self._can_act()
        if not validation.is_valid:
            return validation

        if self.team_number != target.team_number:
            return ActionValidation.invalid(WarningType.DIFFERENT_TEAM)

        # Matching stats count as healing oneself, even across two names
        if self.same_stats(target):
            return ActionValidation.invalid(WarningType.CANNOT_HEAL_SELF)

        heal_points = (self.power + 1) // 2
        self.power = heal_points
        target.power = min(MAX_POWER, target.power + heal_points)

        return ActionValidation.valid()

    def flip_visibility(self) -> ActionValidation:
        if self.is_frozen:
            return ActionValidation.invalid(WarningType.PLAYER_FROZEN)

        self.is_visible = not self.is_visible
        return ActionValidation.valid()
