"""
Outcome evaluation: sum power per team and pick the unique strongest.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.data import TIE_MESSAGE, WINNER_TEMPLATE, TeamData
from .roster import Roster


@dataclass(frozen=True)
class Outcome:
    """Per-team power totals and the winning team index, if unique."""

    team_powers: tuple[int, ...]
    winner_index: Optional[int]

    @property
    def is_tie(self) -> bool:
        return self.winner_index is None

    def winner_name(self, teams: list[TeamData]) -> Optional[str]:
        if self.winner_index is None:
            return None
        return teams[self.winner_index].name

    def format(self, teams: list[TeamData]) -> str:
        """The report line announcing the result."""
        name = self.winner_name(teams)
        if name is None:
            return TIE_MESSAGE
        return WINNER_TEMPLATE.format(team=name)


class OutcomeEvaluator:
    """Determines the winner from the final roster."""

    @staticmethod
    def team_powers(roster: Roster, team_count: int) -> np.ndarray:
        """Total power per team index; teams without players total 0."""
        totals = np.zeros(team_count, dtype=np.int64)
        players = list(roster)
        if players:
            team_numbers = np.fromiter((p.team_number for p in players), dtype=np.int64, count=len(players))
            powers = np.fromiter((p.power for p in players), dtype=np.int64, count=len(players))
            np.add.at(totals, team_numbers, powers)
        return totals

    @staticmethod
    def evaluate(roster: Roster, team_count: int) -> Outcome:
        """A team wins only if no other team matches its total."""
        totals = OutcomeEvaluator.team_powers(roster, team_count)
        if totals.size == 0:
            return Outcome(team_powers=(), winner_index=None)

        leaders = np.flatnonzero(totals == totals.max())
        winner = int(leaders[0]) if leaders.size == 1 else None
        return Outcome(team_powers=tuple(int(t) for t in totals), winner_index=winner)
