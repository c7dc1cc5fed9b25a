"""
Command interpreter for the battle script.

Each line is split on single spaces into a keyword and player names::

    attack <name> <name>
    heal <name> <name>
    flip_visibility <name>
    super <name> <name>

A line with the wrong shape, an unknown keyword or an unknown player name is
fatal and raises :class:`InvalidInputError`. A well-formed command that breaks
a game rule is skipped and its warning is appended to the session, in command
order.
"""

from typing import Optional

from ..core.data import CommandType
from ..core.data.game_info import MAX_COMMAND_TOKENS, MIN_COMMAND_TOKENS
from ..core.engine.actions import Action, ActionResult, create_action
from ..core.engine.game_state import GameSession
from ..core.errors import InvalidInputError
from ..core.events.event_manager import EventManager
from ..core.events.events import DebugMessage, GameEvent, RuleViolated
from .line_io import LineSource


class CommandInterpreter:
    """Parses command lines and applies them to a session."""

    def __init__(self, session: GameSession, event_manager: Optional[EventManager] = None):
        self.session = session
        self.event_manager = event_manager

    def _emit(self, event: GameEvent) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source="CommandInterpreter")

    @staticmethod
    def parse(line: str) -> Action:
        """Turn one command line into an action.

        Raises:
            InvalidInputError: for a malformed line or unknown keyword
        """
        tokens = line.split(" ")
        if not MIN_COMMAND_TOKENS <= len(tokens) <= MAX_COMMAND_TOKENS:
            raise InvalidInputError(f"Malformed command: {line!r}")

        command_type = CommandType.from_keyword(tokens[0])
        if command_type is None:
            raise InvalidInputError(f"Unknown command: {tokens[0]!r}")

        action = create_action(command_type, tokens[1:])
        if len(action.names) != action.arity:
            raise InvalidInputError(f"Wrong number of players for {tokens[0]}")
        return action

    def execute_line(self, line: str) -> ActionResult:
        """Parse and run one command.

        Raises:
            InvalidInputError: for malformed commands or unknown players
        """
        turn = self.session.next_turn()
        action = self.parse(line)
        self._emit(DebugMessage(turn=turn, message=f"Executing '{line}'", source="CommandInterpreter"))

        validation = action.execute(self.session, event_emitter=self._emit)
        if self.event_manager is not None:
            self.event_manager.process_events()

        if validation.reason is None:
            return ActionResult.SUCCESS

        self.session.record_warning(validation.reason)
        self._emit(RuleViolated(turn=turn, command=action.describe(), message=validation.message))
        if self.event_manager is not None:
            self.event_manager.process_events()
        return ActionResult.FAILED

    def run(self, source: LineSource) -> int:
        """Run commands until the input ends.

        Returns:
            Number of commands executed
        """
        self.session.begin_commands()
        executed = 0
        for line in source:
            self.execute_line(line)
            executed += 1
        return executed
