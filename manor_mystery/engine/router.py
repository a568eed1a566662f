import logging
from typing import Callable, Optional

from manor_mystery.gameplay.endings import case_summary, quit_game
from manor_mystery.gameplay.evidence import get_clue
from manor_mystery.gameplay.interrogations import interrogate
from manor_mystery.gameplay.movement import move
from manor_mystery.io.printer import ConsolePrinter
from .commands import Command, parse_command, parse_direction
from .state import Ending, GameState, Outcome

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "What would you like to do? (Move/Get Clue/Interrogate/Quit) "
DIRECTION_PROMPT = "Which direction? (N/E/S/W) "

INVALID_COMMAND_TEXT = "Invalid command! Please try again."
INVALID_DIRECTION_TEXT = "Invalid direction! Please choose N, E, S or W."

ReadLine = Callable[[str], str]


def dispatch(gs: GameState, raw: str, read_line: ReadLine) -> Outcome:
    """
    Turn one command line into an outcome. ``move`` reads a second line for
    the direction; running out of input there counts as quitting.
    """
    command = parse_command(raw)
    if command is None:
        logger.debug("Unrecognized command %r", raw)
        return Outcome(messages=[INVALID_COMMAND_TEXT], warning=True)

    if command is Command.MOVE:
        try:
            raw_direction = read_line(DIRECTION_PROMPT)
        except EOFError:
            return quit_game(gs)
        direction = parse_direction(raw_direction)
        if direction is None:
            logger.debug("Invalid direction %r", raw_direction)
            return Outcome(messages=[INVALID_DIRECTION_TEXT], warning=True)
        return move(gs, direction)

    if command is Command.GET_CLUE:
        return get_clue(gs)
    if command is Command.INTERROGATE:
        return interrogate(gs)
    return quit_game(gs)


def run(gs: GameState, read_line: Optional[ReadLine] = None,
        printer: Optional[ConsolePrinter] = None) -> Ending:
    read_line = read_line or input
    printer = printer or ConsolePrinter()

    while gs.running:
        printer.location(gs.current)
        try:
            raw = read_line(COMMAND_PROMPT)
        except EOFError:
            logger.debug("Input closed, quitting")
            printer.outcome(quit_game(gs))
            break
        printer.outcome(dispatch(gs, raw, read_line))

    printer.summary(case_summary(gs))
    return gs.ending
