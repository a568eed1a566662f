import logging

from manor_mystery.engine.state import GameState, Outcome

logger = logging.getLogger(__name__)

NOBODY_TEXT = "There is no one to interrogate in this room!"


def interrogate(gs: GameState) -> Outcome:
    """
    Question whoever is in the current room. A suspect gives up their
    interrogation clue the first time only; after that, or when they never
    had one, they reveal nothing.
    """
    room = gs.current_room
    if room.suspect is None:
        return Outcome(messages=[NOBODY_TEXT])

    messages = [f"You are interrogating {room.suspect}."]
    clue = room.take_interrogation_clue()
    if clue is None:
        messages.append(f"{room.suspect} didn't reveal any new clues.")
        return Outcome(messages=messages)

    gs.collect(clue)
    logger.debug("%s revealed '%s' (%d/%d)",
                 room.suspect, clue, len(gs.inventory), gs.world.total_clues)
    messages.append(f"You obtained a clue from the interrogation: {clue}")
    return Outcome(messages=messages, clue=clue)
