"""
Roster: the name-keyed store of every player in a run.

Players live in integer slots; a name index maps each current name to its
slot. Callers acquire all the players a command needs in one call, so both
handles exist before either is mutated. Two different names never share a
slot; repeating a name hands back the same record twice, which callers that
forbid self-targeting must detect themselves.
"""

from typing import Iterator, Optional

from ..core.data import MAX_POWER, PlayerData
from ..core.errors import InvalidInputError
from .entities.player import Player


class Roster:
    """Collection of named players with exclusive per-command access."""

    def __init__(self):
        self._slots: dict[int, Player] = {}
        self._index: dict[str, int] = {}
        self._next_slot = 0

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._slots.values()))

    @property
    def names(self) -> list[str]:
        return list(self._index)

    def _slot_of(self, name: str) -> int:
        slot = self._index.get(name)
        if slot is None:
            raise InvalidInputError(f"Unknown player: {name}")
        return slot

    def add(self, player: Player) -> None:
        """Insert a player; a repeated name replaces the earlier record."""
        previous = self._index.get(player.name)
        if previous is not None:
            del self._slots[previous]
        slot = self._next_slot
        self._next_slot += 1
        self._slots[slot] = player
        self._index[player.name] = slot

    def add_from_data(self, data: PlayerData) -> Player:
        player = Player.from_data(data)
        self.add(player)
        return player

    def get(self, name: str) -> Optional[Player]:
        slot = self._index.get(name)
        return None if slot is None else self._slots[slot]

    def snapshot(self, name: str) -> PlayerData:
        """Read-only copy of a player's current state.

        Raises:
            InvalidInputError: if no player has this name
        """
        return self._slots[self._slot_of(name)].snapshot()

    def acquire(self, *names: str) -> tuple[Player, ...]:
        """Resolve every name before handing out any record.

        Raises:
            InvalidInputError: if any name is unknown; nothing is returned
        """
        slots = [self._slot_of(name) for name in names]
        return tuple(self._slots[slot] for slot in slots)

    def merge(self, first: str, second: str, merged_name: str) -> Player:
        """Replace two players with one visible player of their combined power.

        The merged player takes ``first``'s team. Both names are resolved
        before anything is removed, so a failed lookup leaves the roster as
        it was.
        """
        if first == second:
            raise ValueError("Cannot merge a player with itself")
        first_slot = self._slot_of(first)
        second_slot = self._slot_of(second)
        if merged_name in self._index:
            raise ValueError(f"Player name already taken: {merged_name}")

        a = self._slots[first_slot]
        b = self._slots[second_slot]
        merged = Player(
            name=merged_name,
            team_number=a.team_number,
            power=min(MAX_POWER, a.power + b.power),
            is_visible=True,
        )

        del self._slots[first_slot]
        del self._slots[second_slot]
        del self._index[first]
        del self._index[second]
        self.add(merged)
        return merged
