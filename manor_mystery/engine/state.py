# engine/state.py
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional

from manor_mystery.world.casefile import World
from manor_mystery.world.rooms import Room


class Status(Enum):
    RUNNING = auto()
    TERMINATED = auto()


class Ending(Enum):
    VICTORY = auto()
    DEFEAT = auto()
    QUIT = auto()


@dataclass
class Outcome:
    """What a handler reports back to the loop."""
    messages: List[str] = field(default_factory=list)
    clue: Optional[str] = None
    ending: Optional[Ending] = None
    warning: bool = False


@dataclass
class GameState:
    world: World
    rooms: Dict[str, Room]
    current: str
    inventory: List[str] = field(default_factory=list)
    status: Status = Status.RUNNING
    ending: Optional[Ending] = None

    # ---------- Location ----------
    @property
    def current_room(self) -> Room:
        return self.rooms[self.current]

    def move_to(self, name: str) -> Room:
        self.current = name
        return self.current_room

    # ---------- Inventory ----------
    def collect(self, clue: str) -> None:
        self.inventory.append(clue)

    def has_all_clues(self) -> bool:
        return len(self.inventory) == self.world.total_clues

    # ---------- Ending ----------
    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    def finish(self, ending: Ending) -> None:
        self.ending = ending
        self.status = Status.TERMINATED
