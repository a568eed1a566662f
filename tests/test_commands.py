from manor_mystery.engine.commands import Command, parse_command, parse_direction
from manor_mystery.world.rooms import Direction


def test_resolve_commands():
    assert parse_command("move") is Command.MOVE
    assert parse_command("MOVE") is Command.MOVE
    assert parse_command("Get Clue") is Command.GET_CLUE
    assert parse_command("  get   clue ") is Command.GET_CLUE
    assert parse_command("Interrogate") is Command.INTERROGATE
    assert parse_command("quit\n") is Command.QUIT


def test_unknown_commands():
    for raw in ("", "go north", "getclue", "clue", "exit", "move n"):
        assert parse_command(raw) is None


def test_resolve_directions():
    assert parse_direction("n") is Direction.N
    assert parse_direction("E") is Direction.E
    assert parse_direction(" s ") is Direction.S
    assert parse_direction("w") is Direction.W


def test_invalid_directions():
    for raw in ("", "north", "x", "ne", "up"):
        assert parse_direction(raw) is None
