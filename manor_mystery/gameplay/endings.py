import logging
from typing import List

from manor_mystery.engine.state import Ending, GameState, Outcome

logger = logging.getLogger(__name__)

VICTORY_TEXT = "Congratulations! You have confronted the murderer and solved the mystery!"
DEFEAT_TEXT = "You have encountered the murderer before collecting all clues. Game Over!"
FAREWELL_TEXT = "Thanks for playing! See you next time."


def resolve_encounter(gs: GameState) -> Outcome:
    """
    Called once the player has walked into the murderer's room. Having every
    clue in the world wins the game; anything less loses it. Either way the
    game is over.
    """
    if gs.has_all_clues():
        gs.finish(Ending.VICTORY)
        text = VICTORY_TEXT
    else:
        gs.finish(Ending.DEFEAT)
        text = DEFEAT_TEXT
    logger.info(
        "Game ended (%s) in '%s' with %d/%d clues",
        gs.ending.name, gs.current, len(gs.inventory), gs.world.total_clues,
    )
    return Outcome(messages=[text], ending=gs.ending)


def quit_game(gs: GameState) -> Outcome:
    gs.finish(Ending.QUIT)
    logger.info("Player quit in '%s' with %d/%d clues",
                gs.current, len(gs.inventory), gs.world.total_clues)
    return Outcome(messages=[FAREWELL_TEXT], ending=Ending.QUIT)


def case_summary(gs: GameState) -> List[str]:
    lines = [f"Clues collected: {len(gs.inventory)}/{gs.world.total_clues}"]
    if gs.inventory:
        lines.extend(f" - {clue}" for clue in gs.inventory)
    else:
        lines.append(" (none)")
    return lines
