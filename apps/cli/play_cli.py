"""Terminal front end: renders the board and turns typed commands into session calls."""

# play_cli.py
# Commands (rows/cols are 1-based on screen):
#   s R C          select a cell
#   1..9           write a digit into the selected cell
#   0 | x | del    clear the selected cell
#   h              hint
#   n [LEVEL]      new puzzle (easy/medium/hard/expert)
#   save PATH      write a snapshot as JSON
#   load PATH      restore a snapshot
#   q              quit
#
# Usage:
#   python apps/cli/play_cli.py --difficulty hard --mode anchored --seed 7

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from sudoku_engine import GameSession, SnapshotError, load_config
from sudoku_engine.grid import format_grid

CLEAR_WORDS = {"0", "x", "del", "delete", "backspace"}


def parse_command(line: str):
    """Map one input line to (command, args). Unknown input gives ('unknown', [line])."""
    parts = line.strip().split()
    if not parts:
        return "noop", []
    head = parts[0].lower()
    if len(head) == 1 and head in "123456789" and len(parts) == 1:
        return "place", [int(head)]
    if head in CLEAR_WORDS and len(parts) == 1:
        return "clear", []
    if head in ("s", "sel", "select") and len(parts) == 3:
        try:
            return "select", [int(parts[1]) - 1, int(parts[2]) - 1]
        except ValueError:
            return "unknown", [line]
    if head in ("h", "hint") and len(parts) == 1:
        return "hint", []
    if head in ("n", "new") and len(parts) <= 2:
        return "new", parts[1:]
    if head in ("save", "load") and len(parts) == 2:
        return head, [parts[1]]
    if head in ("q", "quit", "exit"):
        return "quit", []
    return "unknown", [line]


class WallClockTicker:
    """Delivers one tick per whole wall-clock second since the last pump."""

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.last = clock()

    def pump(self, session: GameSession) -> int:
        now = self.clock()
        whole = int(now - self.last)
        for _ in range(whole):
            session.tick()
        self.last += whole
        return whole

    def restart(self):
        self.last = self.clock()


def render(session: GameSession) -> str:
    v = session.view()
    sel = v["selected"]
    sel_txt = f"r{sel[0] + 1}c{sel[1] + 1}" if sel else "-"
    mins, secs = divmod(v["elapsed"], 60)
    head = f"{v['difficulty']} | {v['mode']} | {mins:02d}:{secs:02d} | selected {sel_txt} | {v['state']}"
    return head + "\n" + format_grid(v["grid"], v["given"], v["errors"])


def handle(session: GameSession, ticker: WallClockTicker, cmd: str, args: list) -> str:
    """Run one command; returns the text to show (may be empty)."""
    if cmd == "select":
        if not session.select(*args):
            return "Cannot select that cell."
        return ""
    if cmd == "place":
        res = session.place(args[0])
        if not res["accepted"]:
            if res["state"] == "solved":
                return "The puzzle is finished; type n for a new one."
            return "Select an editable cell first."
        if res["state"] == "solved":
            return f"Solved in {session.elapsed} s!"
        return res["message"]
    if cmd == "clear":
        res = session.clear()
        if res["accepted"]:
            return ""
        if res["state"] == "solved":
            return "The puzzle is finished; type n for a new one."
        return "Select an editable cell first."
    if cmd == "hint":
        return session.hint()["message"]
    if cmd == "new":
        try:
            session.reset(args[0] if args else None)
        except ValueError as e:
            return str(e)
        ticker.restart()
        return "New puzzle."
    if cmd == "save":
        try:
            Path(args[0]).write_text(json.dumps(session.to_snapshot(), indent=2), encoding="utf-8")
        except OSError as e:
            return f"Could not save {args[0]}: {e}"
        return f"Saved to {args[0]}"
    if cmd == "unknown":
        return f"Unknown command: {args[0]!r}"
    return ""


def main(args):
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    config = load_config(args.config, difficulty=args.difficulty, mode=args.mode, seed=args.seed)
    session = GameSession(config=config)
    ticker = WallClockTicker()
    print(render(session))
    for line in sys.stdin:
        ticker.pump(session)
        cmd, cargs = parse_command(line)
        if cmd == "quit":
            break
        if cmd == "load":
            try:
                session = GameSession.from_snapshot(Path(cargs[0]).read_text(encoding="utf-8"), config=config)
                ticker.restart()
                msg = f"Loaded {cargs[0]}"
            except (OSError, SnapshotError) as e:
                msg = f"Could not load {cargs[0]}: {e}"
        else:
            msg = handle(session, ticker, cmd, cargs)
        print(render(session))
        if msg:
            print(msg)


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, default=None, help="YAML engine config")
    ap.add_argument("--difficulty", type=str, default=None, choices=["easy", "medium", "hard", "expert"])
    ap.add_argument("--mode", type=str, default=None, choices=["local", "anchored"])
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    main(args)
