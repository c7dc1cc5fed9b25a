"""
Basic test fixtures for the wizard battle test suite.
"""

import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from wizard_battle.core.engine.game_state import GameSession
from wizard_battle.core.events.event_manager import EventManager
from wizard_battle.game.entities.player import Player
from wizard_battle.game.roster import Roster


class TestDataBuilder:
    """Builders for common test objects."""

    @staticmethod
    def player(name: str = "Alice", team: int = 0, power: int = 100, visible: bool = True) -> Player:
        return Player(name=name, team_number=team, power=power, is_visible=visible)

    @staticmethod
    def session(team_names: list[str], players: list[Player]) -> GameSession:
        session = GameSession()
        for team_name in team_names:
            session.add_team(team_name)
        for player in players:
            session.roster.add(player)
        session.begin_commands()
        return session

    @staticmethod
    def script(teams: list[str], players: list[tuple[str, int, int, bool]], commands: list[str]) -> str:
        lines = [str(len(teams)), *teams, str(len(players))]
        for name, team, power, visible in players:
            lines.extend([name, str(team), str(power), "True" if visible else "False"])
        lines.extend(commands)
        return "\n".join(lines) + "\n"


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def roster():
    """Create an empty roster."""
    return Roster()


@pytest.fixture
def two_team_session():
    """Two teams, two players each, all visible."""
    return TestDataBuilder.session(
        ["Gryffindor", "Slytherin"],
        [
            TestDataBuilder.player("Harry", 0, 300),
            TestDataBuilder.player("Ron", 0, 100),
            TestDataBuilder.player("Draco", 1, 100),
            TestDataBuilder.player("Goyle", 1, 50),
        ],
    )
