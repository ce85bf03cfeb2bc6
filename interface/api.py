"""FastAPI REST interface for the engine."""

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from engine.config import CONFIG
from engine.core.board import GameStatus
from engine.core.errors import EngineError
from engine.core.utils import setup_logging
from engine.main import Engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(CONFIG.log_level)
    yield


app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0", lifespan=lifespan)

# Shared game, one at a time.
engine = Engine()
_engine_lock = threading.Lock()


class MoveRequest(BaseModel):
    slot: int
    player: Optional[str] = None  # defaults to the human player


class PlayRequest(BaseModel):
    slot: int


class SearchRequest(BaseModel):
    player: Optional[str] = None  # defaults to the computer player


def _status_json(status: Optional[GameStatus]):
    if status is None:
        return None
    return {
        "result": status.result.name.lower(),
        "player": status.player,
        "line": list(status.line) if status.line else None,
    }


def _play(slot: int, player: str) -> GameStatus:
    try:
        return engine.play(slot, player)
    except EngineError as e:
        logger.info("rejected move %s for %s: %s", slot, player, e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/board")
def get_board():
    with _engine_lock:
        status = engine.board.classify()
        return {
            "cells": engine.cells,
            "available_slots": engine.available_slots(),
            "is_terminal": engine.is_terminal,
            "status": _status_json(status),
            "human": engine.human_player,
            "computer": engine.computer_player,
        }


@app.post("/move")
def make_move(req: MoveRequest):
    with _engine_lock:
        player = req.player or engine.human_player
        status = _play(req.slot, player)
        return {"cells": engine.cells, "slot": req.slot, "status": _status_json(status)}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _engine_lock:
        if engine.is_terminal:
            raise HTTPException(status_code=400, detail="Game is already over")
        player = req.player or engine.computer_player
        if player not in (engine.human_player, engine.computer_player):
            raise HTTPException(status_code=400, detail=f"Unknown player: {player}")
        best, score = engine.get_best_move(player)
        return {"best_slot": best, "score": score, "player": player}


@app.post("/play")
def play_turn(req: PlayRequest):
    """Human move followed by the computer's reply."""
    with _engine_lock:
        try:
            status, reply, reply_status = engine.play_human_turn(req.slot)
        except EngineError as e:
            logger.info("rejected move %s: %s", req.slot, e)
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "cells": engine.cells,
            "status": _status_json(status),
            "computer_slot": reply,
            "computer_status": _status_json(reply_status),
        }


@app.post("/reset")
def reset_board():
    with _engine_lock:
        engine.reset()
        return {"cells": engine.cells}
