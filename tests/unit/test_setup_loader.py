"""
Unit tests for the setup phase.
"""
import pytest

from wizard_battle.core.engine.game_state import GameSession
from wizard_battle.core.errors import InvalidInputError
from wizard_battle.core.events.events import EventType
from wizard_battle.game.line_io import LineSource
from wizard_battle.game.setup_loader import SetupLoader


def load(lines, event_emitter=None):
    session = GameSession()
    SetupLoader(event_emitter).load(LineSource(lines), session)
    return session


class TestSetupLoader:
    """Test reading teams and players."""

    def test_loads_teams_and_players(self):
        session = load(["2", "Red", "Blue", "2",
                        "Alice", "0", "10", "True",
                        "Bob", "1", "20", "False"])

        assert [team.name for team in session.teams] == ["Red", "Blue"]
        assert session.roster.get("Alice").power == 10
        assert session.roster.get("Bob").is_visible is False

    def test_leaves_command_lines_unread(self):
        source = LineSource(["1", "Red", "1", "Alice", "0", "10", "True", "flip_visibility Alice"])
        SetupLoader().load(source, GameSession())

        assert list(source) == ["flip_visibility Alice"]

    def test_emits_setup_events(self):
        events = []
        load(["1", "Red", "1", "Alice", "0", "10", "True"], events.append)

        assert [event.event_type for event in events] == [
            EventType.TEAM_REGISTERED,
            EventType.PLAYER_SPAWNED,
        ]
        assert events[1].name == "Alice"

    @pytest.mark.parametrize("lines", [
        [],
        ["0"],
        ["11"],
        ["1", "red", "1", "Alice", "0", "10", "True"],
        ["2", "Red", "Blue", "1", "Alice", "0", "10", "True"],
        ["1", "Red", "1", "Alice", "1", "10", "True"],
        ["1", "Red", "1", "Alice", "0", "1001", "True"],
        ["1", "Red", "1", "Alice", "0", "10", "yes"],
        ["1", "Red", "2", "Alice", "0", "10", "True"],
        ["1", "Red", "1", "Alice", "0", "10"],
    ])
    def test_invalid_setup_is_fatal(self, lines):
        with pytest.raises(InvalidInputError):
            load(lines)
