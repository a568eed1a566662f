from typing import Callable, Iterable

from colorama import Fore, Style

from manor_mystery.engine.state import Ending, Outcome

ENDING_COLORS = {
    Ending.VICTORY: Fore.GREEN,
    Ending.DEFEAT: Fore.RED,
    Ending.QUIT: Fore.YELLOW,
}


class ConsolePrinter:
    def __init__(self, write: Callable[[str], None] = print, use_color: bool = True):
        self.write = write
        self.use_color = use_color

    def _paint(self, color: str, text: str, bright: bool = False) -> str:
        if not self.use_color:
            return text
        return (Style.BRIGHT if bright else "") + color + text + Style.RESET_ALL

    def banner(self):
        self.write(self._paint(Fore.YELLOW, "=== Welcome to the Manor Mystery! ===", bright=True))
        self.write("Your goal is to collect all clues and interrogate all suspects to find the murderer!")
        self.write("Good luck! And stay safe!")

    def location(self, room_name: str):
        self.write(self._paint(Fore.CYAN, f"\nYou are currently in the {room_name}."))

    def outcome(self, outcome: Outcome):
        last = len(outcome.messages) - 1
        for i, line in enumerate(outcome.messages):
            if outcome.ending is not None and i == last:
                self.write(self._paint(ENDING_COLORS[outcome.ending], line, bright=True))
            elif outcome.clue is not None and outcome.clue in line:
                self.write(self._paint(Fore.GREEN, line, bright=True))
            elif outcome.warning:
                self.write(self._paint(Fore.YELLOW, line))
            else:
                self.write(line)

    def summary(self, lines: Iterable[str]):
        for line in lines:
            self.write(self._paint(Fore.MAGENTA, line))
