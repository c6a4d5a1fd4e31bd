"""FastAPI entry point for the trivia board."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import BackgroundTasks, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .errors import BoardNotReadyError
from .game_manager import GameController
from .page import GAME_PAGE

# Game controller
controller: Optional[GameController] = None


def get_controller() -> GameController:
    global controller
    if controller is None:
        controller = GameController.from_settings()
    return controller


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    if controller is not None:
        await controller.aclose()


app = FastAPI(title="Jeopardy Board", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Response Models
# ============================================================

class StateResponse(BaseModel):
    phase: str
    loading: bool
    button_label: str
    error: Optional[str] = None
    board: Optional[Dict[str, Any]] = None


class CellResponse(BaseModel):
    row: int
    column: int
    text: Optional[str] = None
    state: Optional[str] = None
    hoverable: bool
    changed: bool


# ============================================================
# API Endpoints
# ============================================================

@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    """Game page"""
    return GAME_PAGE


@app.get("/api/state", response_model=StateResponse)
async def get_state() -> Dict[str, Any]:
    """Get lifecycle phase and the rendered board"""
    return get_controller().snapshot()


@app.post("/api/start", response_model=StateResponse)
async def start_game(background_tasks: BackgroundTasks) -> Dict[str, Any]:
    """Start or restart: clear the board now, load the new one in the background"""
    c = get_controller()
    generation = c.begin_loading()
    background_tasks.add_task(c.load_board, generation)
    return c.snapshot()


@app.post("/api/cells/{row}/{column}", response_model=CellResponse)
async def activate_cell(row: int, column: int) -> Dict[str, Any]:
    """Reveal the next step of a clue"""
    try:
        update = get_controller().activate_cell(row, column)
    except BoardNotReadyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return update.to_dict()


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
