"""Game entities.

- player.py: the Player record and its attack/heal/flip transitions
"""

from .player import Player

__all__ = ["Player"]
