"""
Main game orchestration.

A run has three phases over one :class:`GameSession`:

1. setup: teams and players are read and validated
2. commands: every remaining line is interpreted in order
3. outcome: team powers are summed and a winner (or a tie) is reported

A fatal input error in any phase discards all warnings and reduces the
report to the single error message.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..core.engine.game_state import GameSession
from ..core.errors import InvalidInputError
from ..core.events.event_manager import EventManager
from ..core.events.events import GameAborted, GameEnded, GameStarted, LogMessage
from .command_interpreter import CommandInterpreter
from .config_loader import RunConfig
from .line_io import LineSink, LineSource
from .log_manager import LogLevel, LogManager
from .outcome_evaluator import Outcome, OutcomeEvaluator
from .setup_loader import SetupLoader


@dataclass
class GameReport:
    """Everything a finished run produced."""
    session: GameSession
    outcome: Optional[Outcome] = None
    error: Optional[InvalidInputError] = None
    lines: list[str] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return self.error is not None


class Game:
    """Runs battle scripts and renders their reports."""

    def __init__(self, config: Optional[RunConfig] = None):
        self.config = config or RunConfig()
        self.event_manager = EventManager(enable_debug_logging=self.config.debug)
        self.log_manager = LogManager(
            self.event_manager,
            max_messages=self.config.max_log_messages,
            default_level=LogLevel.DEBUG if self.config.debug else LogLevel.INFO,
            log_dir=self.config.log_dir,
        )
        if self.config.debug:
            self.event_manager.set_debug_callback(self.log_manager.debug)

    def play(self, source: LineSource) -> GameReport:
        """Run a whole battle script from ``source``."""
        session = GameSession()
        report = GameReport(session=session)

        try:
            SetupLoader(event_emitter=self.event_manager.publish).load(source, session)
            self.event_manager.publish(GameStarted(
                turn=0, team_count=session.team_count, player_count=len(session.roster)
            ))
            self.event_manager.process_events()

            CommandInterpreter(session, self.event_manager).run(source)
        except InvalidInputError as e:
            session.abort()
            report.error = e
            report.lines = [e.message]
            self.event_manager.process_events()
            self.event_manager.publish_immediate(GameAborted(turn=session.turn, reason=e.detail or e.message))
            return report

        session.finish()
        outcome = OutcomeEvaluator.evaluate(session.roster, session.team_count)
        report.outcome = outcome
        report.lines = [*session.warning_messages, outcome.format(session.teams)]

        self.event_manager.publish(GameEnded(
            turn=session.turn,
            winner=outcome.winner_name(session.teams),
            warning_count=len(session.warnings),
        ))
        self.event_manager.process_events()
        return report

    def play_text(self, text: str) -> GameReport:
        return self.play(LineSource.from_text(text))

    def play_file(self, input_file: Union[str, Path]) -> GameReport:
        with open(input_file, "rb") as f:
            return self.play(LineSource(f))

    def run(self, input_file: Union[str, Path], output_file: Union[str, Path]) -> GameReport:
        """Read ``input_file``, write the report to ``output_file``."""
        self.event_manager.publish_immediate(LogMessage(turn=0, message=f"Reading {input_file}"))
        report = self.play_file(input_file)

        sink = LineSink()
        sink.extend(report.lines)
        sink.write_to(output_file)
        self.log_manager.system(f"Report written to {output_file}")

        if self.config.save_log:
            self.log_manager.save_log_to_file()
        return report


def solution(input_file: Union[str, Path], output_file: Union[str, Path],
             config: Optional[RunConfig] = None) -> GameReport:
    """Play the script in ``input_file`` and write its report to ``output_file``."""
    return Game(config).run(input_file, output_file)
