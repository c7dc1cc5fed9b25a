"""Plain record types for teams and raw player setup data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TeamData:
    """A named faction; ``index`` is its position in the team list."""
    index: int
    name: str


@dataclass(frozen=True)
class PlayerData:
    """Validated setup fields for one player, before it joins the roster."""
    name: str
    team_number: int
    power: int
    is_visible: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "team_number": self.team_number,
            "power": self.power,
            "is_visible": self.is_visible,
        }
