"""Run-scoped game state.

:class:`GameSession` is the aggregate root of one run: the team list, the
roster of players, the ordered warning log and the merge-name counter. It is
created once per run and passed explicitly to every phase; nothing here is
module level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..data import GamePhase, TeamData, WarningType, WARNING_MESSAGES
from ..data.game_info import MERGED_PLAYER_PREFIX

if TYPE_CHECKING:
    from ...game.roster import Roster


def _new_roster() -> "Roster":
    from ...game.roster import Roster
    return Roster()


@dataclass
class GameSession:
    """State shared by the setup, command and outcome phases."""

    teams: list[TeamData] = field(default_factory=list)
    roster: "Roster" = field(default_factory=_new_roster)
    warnings: list[WarningType] = field(default_factory=list)
    merge_counter: int = 0
    phase: GamePhase = GamePhase.SETUP
    turn: int = 0

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def add_team(self, name: str) -> TeamData:
        if self.phase != GamePhase.SETUP:
            raise RuntimeError("Teams can only be added during setup")
        team = TeamData(index=len(self.teams), name=name)
        self.teams.append(team)
        return team

    @property
    def team_count(self) -> int:
        return len(self.teams)

    # ------------------------------------------------------------------
    # Warnings and merges
    # ------------------------------------------------------------------
    def record_warning(self, warning: WarningType) -> None:
        self.warnings.append(warning)

    @property
    def warning_messages(self) -> list[str]:
        return [WARNING_MESSAGES[warning] for warning in self.warnings]

    def next_merged_name(self) -> str:
        """Reserve the next ``S_<n>`` name; numbers are never reused."""
        name = f"{MERGED_PLAYER_PREFIX}{self.merge_counter}"
        self.merge_counter += 1
        return name

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def begin_commands(self) -> None:
        self.phase = GamePhase.COMMANDS

    def next_turn(self) -> int:
        self.turn += 1
        return self.turn

    def finish(self) -> None:
        self.phase = GamePhase.FINISHED

    def abort(self) -> None:
        self.phase = GamePhase.ABORTED
        self.warnings.clear()
