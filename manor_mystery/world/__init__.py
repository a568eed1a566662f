from .rooms import Direction, Room
from .casefile import World

__all__ = ["Direction", "Room", "World"]
