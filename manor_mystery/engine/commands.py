import re
from enum import Enum
from typing import Dict, Optional

from manor_mystery.world.rooms import Direction


class Command(Enum):
    MOVE = "move"
    GET_CLUE = "get clue"
    INTERROGATE = "interrogate"
    QUIT = "quit"


COMMANDS: Dict[str, Command] = {c.value: c for c in Command}

DIRECTIONS: Dict[str, Direction] = {d.value.lower(): d for d in Direction}


def _clean(s: str) -> str:
    # lowercase, trimmed, inner runs of whitespace collapsed
    return re.sub(r"\s+", " ", s.strip().lower())


def parse_command(raw: str) -> Optional[Command]:
    """None means the line is not a command we know."""
    return COMMANDS.get(_clean(raw))


def parse_direction(raw: str) -> Optional[Direction]:
    return DIRECTIONS.get(_clean(raw))
