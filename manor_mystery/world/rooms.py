from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"


@dataclass
class Room:
    name: str
    description: str = ""
    clue: Optional[str] = None
    suspect: Optional[str] = None
    interrogation_clue: Optional[str] = None

    def take_clue(self) -> Optional[str]:
        clue, self.clue = self.clue, None
        return clue

    def take_interrogation_clue(self) -> Optional[str]:
        clue, self.interrogation_clue = self.interrogation_clue, None
        return clue

    def clue_count(self) -> int:
        count = 1 if self.clue is not None else 0
        if self.suspect is not None and self.interrogation_clue is not None:
            count += 1
        return count
