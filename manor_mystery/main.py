import logging
import sys
from typing import Optional

from colorama import Fore, Style, init as colorama_init
from dotenv import load_dotenv

from manor_mystery.config import Settings
from manor_mystery.engine.router import run
from manor_mystery.engine.setup import bootstrap_game
from manor_mystery.errors import WorldDataError
from manor_mystery.io.printer import ConsolePrinter

logger = logging.getLogger("manor_mystery")


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def log_handler(settings: Settings) -> logging.Handler:
    # stdout is the game itself, so logs go to a file or stderr
    if settings.log_file:
        try:
            return logging.FileHandler(settings.log_file, encoding="utf-8")
        except OSError as e:
            print(f"Cannot open log file {settings.log_file}: {e}", file=sys.stderr)
    return logging.StreamHandler(sys.stderr)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=resolve_level(settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[log_handler(settings)],
    )


def main(settings: Optional[Settings] = None) -> int:
    load_dotenv()  # .env may set MANOR_WORLD_FILE, MANOR_LOG_LEVEL, ...
    settings = settings or Settings.from_env()
    configure_logging(settings)
    colorama_init()

    try:
        gs = bootstrap_game(settings.world_file)
    except WorldDataError as e:
        logger.error("Invalid world data: %s", e)
        print(Fore.RED + f"Cannot start the game: {e}" + Style.RESET_ALL, file=sys.stderr)
        return 1

    printer = ConsolePrinter(use_color=settings.use_color)
    printer.banner()
    ending = run(gs, printer=printer)
    logger.info("Session over: %s", ending.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
