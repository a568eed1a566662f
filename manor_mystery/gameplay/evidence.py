import logging

from manor_mystery.engine.state import GameState, Outcome

logger = logging.getLogger(__name__)

NO_CLUE_TEXT = "There is no clue in this room!"


def get_clue(gs: GameState) -> Outcome:
    """Pick up the room's clue, if it still has one. Each clue can be taken once."""
    clue = gs.current_room.take_clue()
    if clue is None:
        return Outcome(messages=[NO_CLUE_TEXT])

    gs.collect(clue)
    logger.debug("Collected '%s' in '%s' (%d/%d)",
                 clue, gs.current, len(gs.inventory), gs.world.total_clues)
    return Outcome(messages=[f"You have collected the clue: {clue}"], clue=clue)
