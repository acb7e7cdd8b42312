# tests/test_play_cli.py
import json
import random

from apps.cli.play_cli import WallClockTicker, handle, parse_command, render
from sudoku_engine.grid import empty_cells
from sudoku_engine.session import GameSession


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_parse_command():
    assert parse_command("5") == ("place", [5])
    assert parse_command("  del ") == ("clear", [])
    assert parse_command("0") == ("clear", [])
    assert parse_command("s 1 9") == ("select", [0, 8])
    assert parse_command("h") == ("hint", [])
    assert parse_command("n hard") == ("new", ["hard"])
    assert parse_command("save /tmp/x.json") == ("save", ["/tmp/x.json"])
    assert parse_command("") == ("noop", [])
    assert parse_command("q") == ("quit", [])
    assert parse_command("s one two")[0] == "unknown"
    assert parse_command("55")[0] == "unknown"


def test_ticker_delivers_whole_seconds():
    clock = FakeClock()
    ticker = WallClockTicker(clock=clock)
    s = GameSession("easy", rng=random.Random(1))
    clock.now += 2.6
    assert ticker.pump(s) == 2
    clock.now += 0.5
    assert ticker.pump(s) == 1
    assert s.elapsed == 3


def test_handle_and_render(tmp_path):
    s = GameSession("easy", mode="anchored", rng=random.Random(2))
    ticker = WallClockTicker(clock=FakeClock())
    r, c = empty_cells(s.grid)[0]
    assert handle(s, ticker, "select", [r, c]) == ""
    wrong = s.solution[r][c] % 9 + 1
    assert handle(s, ticker, "place", [wrong]).startswith("Incorrect")
    assert "!" in render(s)
    assert handle(s, ticker, "hint", []).startswith("Try")

    path = tmp_path / "game.json"
    handle(s, ticker, "save", [str(path)])
    assert json.loads(path.read_text(encoding="utf-8"))["mode"] == "anchored"

    assert handle(s, ticker, "new", ["medium"]) == "New puzzle."
    assert s.difficulty.value == "medium"
    assert handle(s, ticker, "new", ["bogus"]).startswith("Unknown difficulty")


def test_save_to_missing_directory_reports_error(tmp_path):
    s = GameSession("easy", rng=random.Random(3))
    ticker = WallClockTicker(clock=FakeClock())
    target = tmp_path / "missing" / "x.json"
    msg = handle(s, ticker, "save", [str(target)])
    assert msg.startswith(f"Could not save {target}")
    assert not target.exists()


def test_edits_after_solve_say_puzzle_is_finished():
    s = GameSession("easy", mode="anchored", rng=random.Random(4))
    ticker = WallClockTicker(clock=FakeClock())
    cells = empty_cells(s.grid)
    for r, c in cells:
        handle(s, ticker, "select", [r, c])
        msg = handle(s, ticker, "place", [s.solution[r][c]])
    assert msg.startswith("Solved in")
    assert handle(s, ticker, "place", [5]).startswith("The puzzle is finished")
    assert handle(s, ticker, "clear", []).startswith("The puzzle is finished")
