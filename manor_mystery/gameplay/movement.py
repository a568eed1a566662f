import logging

from manor_mystery.engine.state import GameState, Outcome
from manor_mystery.world.rooms import Direction
from .endings import resolve_encounter

logger = logging.getLogger(__name__)

BLOCKED_TEXT = "You cannot go that way!"


def move(gs: GameState, direction: Direction) -> Outcome:
    target = gs.world.destination(gs.current, direction)
    if target is None:
        logger.debug("No exit %s from '%s'", direction.value, gs.current)
        return Outcome(messages=[BLOCKED_TEXT])

    logger.debug("Moving %s from '%s' to '%s'", direction.value, gs.current, target)
    room = gs.move_to(target)
    messages = [f"You are now in the {room.name}."]
    if room.description:
        messages.append(room.description)

    if room.suspect == gs.world.murderer:
        encounter = resolve_encounter(gs)
        messages.extend(encounter.messages)
        return Outcome(messages=messages, ending=encounter.ending)
    return Outcome(messages=messages)
