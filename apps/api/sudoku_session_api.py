# sudoku_session_api.py
# FastAPI wrapper around GameSession. One independent session per id;
# calls are serialized so each session sees one event at a time.
# Run with: uvicorn apps.api.sudoku_session_api:app --reload
import threading
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sudoku_engine import EngineConfig, GameSession, SnapshotError, compute_candidates
from sudoku_engine.grid import cell_label, is_well_formed

app = FastAPI(title="Sudoku Session API")

_sessions: Dict[str, GameSession] = {}
_lock = threading.RLock()
_config: EngineConfig = EngineConfig()


def configure(config: EngineConfig):
    """Swap the defaults used for sessions created from now on."""
    global _config
    _config = config


class NewSessionRequest(BaseModel):
    difficulty: Optional[str] = None
    mode: Optional[str] = None


class SelectRequest(BaseModel):
    row: int
    col: int


class PlaceRequest(BaseModel):
    digit: int


class ResetRequest(BaseModel):
    difficulty: Optional[str] = None


class GridModel(BaseModel):
    grid: List[List[int]]


class RestoreRequest(BaseModel):
    snapshot: dict = Field(default_factory=dict)


def _get(session_id: str) -> GameSession:
    with _lock:
        session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"unknown session {session_id}")
    return session


def _register(session: GameSession) -> dict:
    session_id = uuid.uuid4().hex
    with _lock:
        _sessions[session_id] = session
    return {"session_id": session_id, **session.view()}


@app.post("/sessions")
def api_new_session(req: NewSessionRequest):
    try:
        session = GameSession(difficulty=req.difficulty, mode=req.mode, config=_config)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _register(session)


@app.post("/sessions/restore")
def api_restore(req: RestoreRequest):
    try:
        session = GameSession.from_snapshot(req.snapshot, config=_config)
    except SnapshotError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _register(session)


@app.get("/sessions/{session_id}")
def api_view(session_id: str):
    with _lock:
        return _get(session_id).view()


@app.delete("/sessions/{session_id}")
def api_drop(session_id: str):
    with _lock:
        dropped = _sessions.pop(session_id, None)
    if dropped is None:
        raise HTTPException(status_code=404, detail=f"unknown session {session_id}")
    return {"deleted": session_id}


@app.post("/sessions/{session_id}/select")
def api_select(session_id: str, req: SelectRequest):
    with _lock:
        session = _get(session_id)
        ok = session.select(req.row, req.col)
        return {"result": "ok" if ok else "rejected", "selected": session.selected}


@app.post("/sessions/{session_id}/place")
def api_place(session_id: str, req: PlaceRequest):
    with _lock:
        return _get(session_id).place(req.digit)


@app.post("/sessions/{session_id}/clear")
def api_clear(session_id: str):
    with _lock:
        return _get(session_id).clear()


@app.post("/sessions/{session_id}/tick")
def api_tick(session_id: str):
    with _lock:
        return _get(session_id).tick()


@app.get("/sessions/{session_id}/hint")
def api_hint(session_id: str):
    with _lock:
        return _get(session_id).hint()


@app.post("/sessions/{session_id}/reset")
def api_reset(session_id: str, req: ResetRequest):
    with _lock:
        session = _get(session_id)
        try:
            return session.reset(req.difficulty)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))


@app.get("/sessions/{session_id}/snapshot")
def api_snapshot(session_id: str):
    with _lock:
        return _get(session_id).to_snapshot()


@app.post("/candidates")
def api_cands(payload: GridModel):
    if not is_well_formed(payload.grid):
        raise HTTPException(status_code=422, detail="grid must be 9x9 with values in 0..9")
    cands = compute_candidates(payload.grid)
    return {"candidates": {cell_label(r, c): opts for (r, c), opts in cands.items()}}
