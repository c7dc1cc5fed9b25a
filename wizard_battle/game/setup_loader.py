"""
Setup phase: read teams and players into a fresh session.

Input layout, one value per line::

    <team count>
    <team name>          x team count
    <player count>
    <name>               \
    <team number>         | x player count
    <power>               |
    <True|False>         /
"""

from typing import Callable, Optional

from ..core.data import PlayerData
from ..core.engine.game_state import GameSession
from ..core.events.events import GameEvent, PlayerSpawned, TeamRegistered
from .line_io import LineSource
from . import validators


class SetupLoader:
    """Reads and validates the setup section of a battle script."""

    def __init__(self, event_emitter: Optional[Callable[[GameEvent], None]] = None):
        self.event_emitter = event_emitter

    def _emit(self, event: GameEvent) -> None:
        if self.event_emitter is not None:
            self.event_emitter(event)

    def load(self, source: LineSource, session: GameSession) -> GameSession:
        """Fill ``session`` with teams and players.

        Raises:
            InvalidInputError: on the first malformed or missing field
        """
        team_count = validators.validate_team_count(source.next_line())

        for _ in range(team_count):
            team = session.add_team(validators.validate_name(source.next_line()))
            self._emit(TeamRegistered(turn=0, team_index=team.index, team_name=team.name))

        player_count = validators.validate_player_count(source.next_line(), team_count)

        for _ in range(player_count):
            data = self.read_player(source, team_count)
            session.roster.add_from_data(data)
            self._emit(PlayerSpawned(turn=0, **data.to_dict()))

        return session

    @staticmethod
    def read_player(source: LineSource, team_count: int) -> PlayerData:
        name = validators.validate_name(source.next_line())
        team_number = validators.validate_team_number(source.next_line(), team_count)
        power = validators.validate_power(source.next_line())
        is_visible = validators.validate_visibility(source.next_line())
        return PlayerData(
            name=name,
            team_number=team_number,
            power=power,
            is_visible=is_visible,
        )
