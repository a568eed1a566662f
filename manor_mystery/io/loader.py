import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from manor_mystery.errors import WorldDataError
from manor_mystery.utils.validators import ensure_keys, optional_text, required_text
from manor_mystery.world.casefile import World, validate_world
from manor_mystery.world.rooms import Direction, Room

logger = logging.getLogger(__name__)

DEFAULT_WORLD_FILE = Path(__file__).resolve().parents[1] / "data" / "manor.yaml"


def load_yaml(p: Path):
    try:
        return yaml.safe_load(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise WorldDataError(f"World file not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise WorldDataError(f"Could not read {p}: {e}") from e
    except yaml.YAMLError as e:
        raise WorldDataError(f"Could not parse {p}: {e}") from e


def _build_rooms(raw_rooms: List[Dict[str, Any]]) -> Dict[str, Room]:
    rooms: Dict[str, Room] = {}
    for i, raw in enumerate(raw_rooms):
        ctx = f"rooms[{i}]"
        ensure_keys(raw, ["name"], ctx)
        name = required_text(raw, "name", ctx)
        if name in rooms:
            raise WorldDataError(f"Room '{name}' is defined twice")
        rooms[name] = Room(
            name=name,
            description=optional_text(raw, "description", ctx) or "",
            clue=optional_text(raw, "clue", ctx),
            suspect=optional_text(raw, "suspect", ctx),
            interrogation_clue=optional_text(raw, "interrogation_clue", ctx),
        )
    return rooms


def _build_adjacency(raw_exits: List[Dict[str, Any]]) -> Dict[str, Dict[Direction, str]]:
    adjacency: Dict[str, Dict[Direction, str]] = {}
    for i, raw in enumerate(raw_exits):
        ctx = f"exits[{i}]"
        ensure_keys(raw, ["room", "direction", "destination"], ctx)
        room = required_text(raw, "room", ctx)
        symbol = str(raw["direction"]).strip().upper()
        try:
            direction = Direction(symbol)
        except ValueError as e:
            raise WorldDataError(f"Unknown direction '{raw['direction']}' in {ctx}") from e
        exits = adjacency.setdefault(room, {})
        if direction in exits:
            raise WorldDataError(f"Exit {symbol} from '{room}' is declared twice")
        exits[direction] = required_text(raw, "destination", ctx)
    return adjacency


def parse_world(data: Any) -> World:
    ensure_keys(data, ["start", "rooms", "exits"], "world file")
    if not isinstance(data["rooms"], list) or not isinstance(data["exits"], list):
        raise WorldDataError("'rooms' and 'exits' must be lists")

    world = World(
        rooms=_build_rooms(data["rooms"]),
        adjacency=_build_adjacency(data["exits"]),
        start=required_text(data, "start", "world file"),
        murderer=optional_text(data, "murderer", "world file") or "The Murderer",
    )
    validate_world(world)
    return world


def load_world(path: Optional[Union[str, Path]] = None) -> World:
    p = Path(path) if path else DEFAULT_WORLD_FILE
    world = parse_world(load_yaml(p))
    logger.info(
        "Loaded %d rooms and %d clues from %s", len(world.rooms), world.total_clues, p
    )
    return world
