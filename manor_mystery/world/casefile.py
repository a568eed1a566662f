from collections import deque
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Set

from manor_mystery.errors import WorldDataError
from .rooms import Direction, Room


@dataclass(frozen=True)
class World:
    """
    The immutable manor: room templates, exits, the start room and the
    murderer sentinel. Each game works on copies of the rooms (see
    ``fresh_rooms``), so consumed clues never leak between games.
    """
    rooms: Dict[str, Room]
    adjacency: Dict[str, Dict[Direction, str]]
    start: str
    murderer: str = "The Murderer"

    # ---------- Lookups ----------
    def room(self, name: str) -> Room:
        return self.rooms[name]

    def destination(self, name: str, direction: Direction) -> Optional[str]:
        return self.adjacency.get(name, {}).get(direction)

    def exits(self, name: str) -> Dict[Direction, str]:
        return dict(self.adjacency.get(name, {}))

    @property
    def murderer_rooms(self) -> List[str]:
        return [r.name for r in self.rooms.values() if r.suspect == self.murderer]

    @property
    def total_clues(self) -> int:
        """Clues a player can actually pick up, derived from the room table."""
        return sum(r.clue_count() for r in self.rooms.values())

    def fresh_rooms(self) -> Dict[str, Room]:
        return {name: replace(room) for name, room in self.rooms.items()}

    # ---------- Graph ----------
    def reachable_from(self, name: str, avoid: Iterable[str] = ()) -> Set[str]:
        blocked = set(avoid)
        seen = {name}
        queue = deque([name])
        while queue:
            current = queue.popleft()
            for nxt in self.adjacency.get(current, {}).values():
                if nxt in seen:
                    continue
                seen.add(nxt)
                # a blocked room is reached but never walked through
                if nxt not in blocked:
                    queue.append(nxt)
        return seen

    def shortest_path(self, a: str, b: str) -> List[str]:
        """Room names from ``a`` to ``b`` inclusive, or [] when unreachable."""
        if a == b:
            return [a]
        previous: Dict[str, str] = {}
        queue = deque([a])
        seen = {a}
        while queue:
            current = queue.popleft()
            for nxt in self.adjacency.get(current, {}).values():
                if nxt in seen:
                    continue
                seen.add(nxt)
                previous[nxt] = current
                if nxt == b:
                    path = [b]
                    while path[-1] != a:
                        path.append(previous[path[-1]])
                    return list(reversed(path))
                queue.append(nxt)
        return []


def validate_world(world: World) -> None:
    """Raise WorldDataError if the world cannot be played to a fair end."""
    if world.start not in world.rooms:
        raise WorldDataError(f"Start room '{world.start}' is not defined")

    for name, exits in world.adjacency.items():
        if name not in world.rooms:
            raise WorldDataError(f"Exits declared for unknown room '{name}'")
        for direction, target in exits.items():
            if target not in world.rooms:
                raise WorldDataError(
                    f"Exit {direction.value} from '{name}' leads to unknown room '{target}'"
                )

    murderer_rooms = world.murderer_rooms
    if len(murderer_rooms) != 1:
        raise WorldDataError(
            f"Expected exactly one room holding '{world.murderer}', found {len(murderer_rooms)}"
        )
    lair = world.rooms[murderer_rooms[0]]
    if lair.clue is not None or lair.interrogation_clue is not None:
        raise WorldDataError(f"'{lair.name}' holds the murderer and cannot hold clues")

    seen_clues: Set[str] = set()
    for room in world.rooms.values():
        if room.interrogation_clue is not None and room.suspect is None:
            raise WorldDataError(f"'{room.name}' has an interrogation clue but no suspect")
        for clue in (room.clue, room.interrogation_clue):
            if clue is None:
                continue
            if clue in seen_clues:
                raise WorldDataError(f"Clue '{clue}' appears more than once")
            seen_clues.add(clue)

    if lair.name == world.start:
        raise WorldDataError("The game cannot start in the murderer's room")

    # Every other room must be reachable without walking into the murderer.
    safe = world.reachable_from(world.start, avoid=[lair.name])
    missing = sorted(set(world.rooms) - safe - {lair.name})
    if missing:
        raise WorldDataError(f"Rooms unreachable from '{world.start}': {', '.join(missing)}")

    # ...and lead back to the start, so no room is a trap the player cannot leave.
    trapped = sorted(
        name for name in safe - {lair.name}
        if world.start not in world.reachable_from(name, avoid=[lair.name])
    )
    if trapped:
        raise WorldDataError(
            f"Rooms with no way back to '{world.start}': {', '.join(trapped)}"
        )

    if not world.shortest_path(world.start, lair.name):
        raise WorldDataError(f"'{lair.name}' cannot be reached from '{world.start}'")
