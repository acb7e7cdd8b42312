# tests/test_snapshot.py
import json
import random

import pytest

from sudoku_engine.errors import SnapshotError
from sudoku_engine.grid import empty_cells
from sudoku_engine.session import GameSession, SessionState


def test_local_snapshot_round_trip():
    s = GameSession("medium", rng=random.Random(21))
    r, c = empty_cells(s.grid)[0]
    s.select(r, c)
    s.place(7)
    s.tick()
    s.tick()
    snap = s.to_snapshot()
    assert snap["solution"] is None
    assert snap["mode"] == "local"
    json.dumps(snap)

    back = GameSession.from_snapshot(snap)
    assert back.view() == s.view()


def test_anchored_snapshot_keeps_solution_and_errors():
    s = GameSession("easy", mode="anchored", rng=random.Random(22))
    r, c = empty_cells(s.grid)[0]
    wrong = s.solution[r][c] % 9 + 1
    s.select(r, c)
    s.place(wrong)
    back = GameSession.from_snapshot(s.to_json())
    assert back.solution == s.solution
    assert back.errors == {(r, c)}
    assert back.hint() == s.hint()


def test_solved_snapshot_stays_solved():
    s = GameSession("easy", mode="anchored", rng=random.Random(23))
    for r, c in empty_cells(s.grid):
        s.select(r, c)
        s.place(s.solution[r][c])
    back = GameSession.from_snapshot(s.to_snapshot())
    assert back.state is SessionState.SOLVED
    assert back.tick() == {"elapsed": 0}


@pytest.mark.parametrize(
    "patch",
    [
        {"grid": [[0] * 9] * 8},
        {"elapsed": -1},
        {"difficulty": "nightmare"},
        {"mode": "anchored", "solution": None},
        {"version": 99},
        {"selected": [9, 9]},
    ],
)
def test_bad_snapshots_rejected(patch):
    snap = GameSession("easy", rng=random.Random(24)).to_snapshot()
    snap.update(patch)
    with pytest.raises(SnapshotError):
        GameSession.from_snapshot(snap)


def test_given_cell_must_be_filled():
    snap = GameSession("easy", rng=random.Random(25)).to_snapshot()
    r, c = next((r, c) for r in range(9) for c in range(9) if snap["given"][r][c])
    snap["grid"][r][c] = 0
    with pytest.raises(SnapshotError):
        GameSession.from_snapshot(snap)
