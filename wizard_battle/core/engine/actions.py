"""Command actions for the battle script.

Each command keyword maps to an :class:`Action` subclass. An action first
resolves the players it names against the roster (unknown names are fatal),
then delegates the rule checks and state change to the player entity or the
roster. Rule violations come back as an :class:`ActionValidation` instead of
an exception, so the interpreter can record a warning and move on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Optional

from ..data import CommandType, WarningType, WARNING_MESSAGES
from ..events.events import (
    GameEvent,
    PlayerAttacked,
    PlayerHealed,
    PlayersMerged,
    VisibilityFlipped,
)

if TYPE_CHECKING:
    from ...game.roster import Roster
    from .game_state import GameSession


class ActionResult(Enum):
    """Results of action execution."""

    SUCCESS = auto()  # State changed (or the attack was wasted on a hidden target)
    FAILED = auto()  # Rule violation, recorded as a warning


@dataclass(frozen=True)
class ActionValidation:
    """Result of a rule check: valid, or invalid with the violated rule."""

    is_valid: bool
    reason: Optional[WarningType] = None

    @classmethod
    def valid(cls) -> "ActionValidation":
        """Create a valid result."""
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: WarningType) -> "ActionValidation":
        """Create an invalid result with reason."""
        return cls(is_valid=False, reason=reason)

    @property
    def message(self) -> str:
        if self.reason is None:
            return ""
        return WARNING_MESSAGES[self.reason]


EventEmitter = Callable[[GameEvent], None]


class Action(ABC):
    """Base class for all battle commands.

    Subclasses declare their keyword and arity; ``execute`` resolves names,
    applies the rules and returns the validation that decided the outcome.
    """

    command_type: CommandType
    arity: int

    def __init__(self, names: list[str]):
        self.names = names

    @abstractmethod
    def execute(
        self,
        session: "GameSession",
        event_emitter: Optional[EventEmitter] = None,
    ) -> ActionValidation:
        """Execute the action against the session.

        Raises:
            InvalidInputError: if a named player is not in the roster
        """

    def describe(self) -> str:
        return " ".join([self.command_type.value, *self.names])

    @staticmethod
    def _emit(event_emitter: Optional[EventEmitter], event: GameEvent) -> None:
        if event_emitter is not None:
            event_emitter(event)


class AttackAction(Action):
    """``attack A B``: the stronger side doubles its margin, the weaker freezes."""

    command_type = CommandType.ATTACK
    arity = 2

    def execute(self, session, event_emitter=None):
        attacker, target = session.roster.acquire(self.names[0], self.names[1])
        validation = attacker.attack(target)
        if validation.is_valid:
            self._emit(event_emitter, PlayerAttacked(
                turn=session.turn,
                attacker=self.names[0],
                target=self.names[1],
                attacker_power=attacker.power,
                target_power=target.power,
            ))
        return validation


class HealAction(Action):
    """``heal A B``: A pays half its power (rounded up) and gives it to B."""

    command_type = CommandType.HEAL
    arity = 2

    def execute(self, session, event_emitter=None):
        healer, target = session.roster.acquire(self.names[0], self.names[1])
        validation = healer.heal(target)
        if validation.is_valid:
            self._emit(event_emitter, PlayerHealed(
                turn=session.turn,
                healer=self.names[0],
                target=self.names[1],
                healer_power=healer.power,
                target_power=target.power,
            ))
        return validation


class FlipVisibilityAction(Action):
    """``flip_visibility A``: toggle whether A can be seen."""

    command_type = CommandType.FLIP_VISIBILITY
    arity = 1

    def execute(self, session, event_emitter=None):
        (player,) = session.roster.acquire(self.names[0])
        validation = player.flip_visibility()
        if validation.is_valid:
            self._emit(event_emitter, VisibilityFlipped(
                turn=session.turn,
                name=self.names[0],
                is_visible=player.is_visible,
            ))
        return validation


class SuperAction(Action):
    """``super A B``: replace two teammates with one merged player."""

    command_type = CommandType.SUPER
    arity = 2

    def validate(self, roster: "Roster") -> ActionValidation:
        """Check the merge rules against snapshots of both players."""
        first_name, second_name = self.names
        first = roster.snapshot(first_name)
        second = roster.snapshot(second_name)

        if not first.is_visible:
            return ActionValidation.invalid(WarningType.CANNOT_PLAY)
        if first.power == 0:
            return ActionValidation.invalid(WarningType.PLAYER_FROZEN)
        if first.team_number != second.team_number:
            return ActionValidation.invalid(WarningType.DIFFERENT_TEAM)
        if first_name == second_name:
            return ActionValidation.invalid(WarningType.CANNOT_SUPER_SELF)
        return ActionValidation.valid()

    def execute(self, session, event_emitter=None):
        validation = self.validate(session.roster)
        if not validation.is_valid:
            return validation

        merged = session.roster.merge(self.names[0], self.names[1], session.next_merged_name())
        self._emit(event_emitter, PlayersMerged(
            turn=session.turn,
            first=self.names[0],
            second=self.names[1],
            merged_name=merged.name,
            power=merged.power,
            team_number=merged.team_number,
        ))
        return validation


ACTION_CLASSES: dict[CommandType, type[Action]] = {
    CommandType.ATTACK: AttackAction,
    CommandType.HEAL: HealAction,
    CommandType.FLIP_VISIBILITY: FlipVisibilityAction,
    CommandType.SUPER: SuperAction,
}


def create_action(command_type: CommandType, names: list[str]) -> Action:
    """Create an action for a command keyword and its player names."""
    return ACTION_CLASSES[command_type](names)
