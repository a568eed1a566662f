import logging

from manor_mystery import main as entry
from manor_mystery.config import Settings


def _no_colorama(monkeypatch):
    monkeypatch.setattr(entry, "colorama_init", lambda: None)


def test_main_plays_until_quit(monkeypatch, capsys):
    _no_colorama(monkeypatch)
    answers = iter(["move", "e", "get clue", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert entry.main(Settings(use_color=False)) == 0
    out = capsys.readouterr().out
    assert "Welcome to the Manor Mystery!" in out
    assert "You have collected the clue: Bloody Knife" in out
    assert "Thanks for playing! See you next time." in out


def test_main_rejects_broken_world(monkeypatch, capsys, tmp_path):
    _no_colorama(monkeypatch)
    broken = tmp_path / "manor.yaml"
    broken.write_text("start: Hall\nrooms: []\nexits: []\n", encoding="utf-8")

    assert entry.main(Settings(world_file=str(broken), use_color=False)) == 1
    assert "Cannot start the game" in capsys.readouterr().err


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MANOR_WORLD_FILE", "other.yaml")
    monkeypatch.setenv("MANOR_USE_COLOR", "0")
    monkeypatch.setenv("MANOR_LOG_LEVEL", "debug")
    monkeypatch.delenv("MANOR_LOG_FILE", raising=False)

    settings = Settings.from_env()
    assert settings.world_file == "other.yaml"
    assert settings.use_color is False
    assert settings.log_level == "DEBUG"
    assert settings.log_file is None


def _answers(monkeypatch, *lines):
    pending = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(pending))


def test_main_victory_exits_cleanly(monkeypatch, capsys):
    _no_colorama(monkeypatch)
    _answers(
        monkeypatch,
        "move", "e", "get clue", "interrogate",
        "move", "e", "get clue",
        "move", "w", "move", "s", "get clue",
        "move", "w", "get clue",
        "move", "s", "interrogate",
        "move", "n", "move", "e", "move", "s",
    )

    assert entry.main(Settings(use_color=False)) == 0
    out = capsys.readouterr().out
    assert "solved the mystery" in out
    assert "Clues collected: 6/6" in out


def test_main_defeat_exits_cleanly(monkeypatch, capsys):
    _no_colorama(monkeypatch)
    _answers(monkeypatch, "move", "e", "move", "s", "move", "s")

    assert entry.main(Settings(use_color=False)) == 0
    assert "Game Over!" in capsys.readouterr().out


def test_main_rejects_directory_as_world(monkeypatch, capsys, tmp_path):
    _no_colorama(monkeypatch)

    assert entry.main(Settings(world_file=str(tmp_path), use_color=False)) == 1
    assert "Cannot start the game" in capsys.readouterr().err


def test_resolve_level():
    assert entry.resolve_level("info") == logging.INFO
    assert entry.resolve_level(" DEBUG ") == logging.DEBUG
    assert entry.resolve_level("getLogger") == logging.WARNING
    assert entry.resolve_level("") == logging.WARNING


def test_log_handler_falls_back_to_stderr(tmp_path, capsys):
    handler = entry.log_handler(Settings(log_file=str(tmp_path / "missing" / "game.log")))
    assert not isinstance(handler, logging.FileHandler)
    assert "Cannot open log file" in capsys.readouterr().err

    handler = entry.log_handler(Settings(log_file=str(tmp_path / "game.log")))
    try:
        assert isinstance(handler, logging.FileHandler)
    finally:
        handler.close()
