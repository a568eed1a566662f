import logging
from pathlib import Path
from typing import Optional, Union

from manor_mystery.io.loader import load_world
from manor_mystery.world.casefile import World
from .state import GameState

logger = logging.getLogger(__name__)


def new_game(world: World) -> GameState:
    """A fresh game on ``world``: untouched rooms, empty inventory, at the start."""
    gs = GameState(world=world, rooms=world.fresh_rooms(), current=world.start)
    logger.debug("New game in '%s', %d clues to find", world.start, world.total_clues)
    return gs


def bootstrap_game(world_path: Optional[Union[str, Path]] = None) -> GameState:
    return new_game(load_world(world_path))
