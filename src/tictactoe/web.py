import logging
import re
from dataclasses import dataclass
from json import JSONDecodeError
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, field_validator

from .board import BOARD_SIZE
from .engine import Player, TurnEngine, TurnResult, line_type
from .screen import SnapshotScreen


router = APIRouter()
logger = logging.getLogger(__name__)

INDEX_PATH = Path(__file__).resolve().parent / "static" / "index.html"
GAME_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

MOVE_NOTES = {
    TurnResult.ACCEPTED: "Move accepted.",
    TurnResult.INVALID: "Move ignored. Square already assigned.",
    TurnResult.WIN: "Game over: win.",
    TurnResult.TIE: "Game over: tie.",
    TurnResult.REFUSED: "Move ignored. Game already finished.",
}


def _strip_non_empty(value):
    if not isinstance(value, str):
        raise ValueError("must be a string")
    stripped = value.strip()
    if stripped == "":
        raise ValueError("must not be empty")
    return stripped


class NewGamePayload(BaseModel):
    game_id: str
    player_one: Optional[str] = None
    player_two: Optional[str] = None

    @field_validator("game_id", mode="before")
    @classmethod
    def validate_and_strip_id(cls, value):
        stripped = _strip_non_empty(value)
        # used as a single URL path segment
        if not GAME_ID_PATTERN.match(stripped):
            raise ValueError("must contain only letters, digits, '_' and '-'")
        return stripped

    @field_validator("player_one", "player_two", mode="before")
    @classmethod
    def validate_and_strip_optional_name(cls, value):
        if value is None:
            return None
        return _strip_non_empty(value)


class MovePayload(BaseModel):
    row: int = Field(ge=0, le=BOARD_SIZE - 1)
    col: int = Field(ge=0, le=BOARD_SIZE - 1)


@dataclass
class GameSession:
    game_id: str
    engine: TurnEngine
    screen: SnapshotScreen
    connected: bool = False


def create_session(game_id, players):
    screen = SnapshotScreen()
    engine = TurnEngine(players=players, screen=screen)
    return GameSession(game_id=game_id, engine=engine, screen=screen)


def state_message(session, note=""):
    engine = session.engine
    if engine.winner is not None:
        game_status = "win"
    elif engine.is_tie:
        game_status = "tie"
    else:
        game_status = "ongoing"

    payload = {
        "board": session.screen.board,
        "status": session.screen.status,
        "game_status": game_status,
        "active_player": engine.active_player.name,
        "move_count": engine.move_count,
        "interactive": session.screen.interactive,
    }
    if game_status == "win":
        line = engine.winning_line()
        payload["winner"] = engine.winner.name
        payload["line_type"] = line_type(line)
        payload["cells"] = [list(cell) for cell in line]
    if note:
        payload["message"] = note
    return payload


def play_move(session, row, col):
    result = session.engine.play_turn(row, col)
    if result is not TurnResult.REFUSED:
        logger.info("[game %s] %s", session.game_id, session.screen.status)
    return result


def websocket_is_open(websocket):
    return getattr(getattr(websocket, "client_state", None), "name", "") != "DISCONNECTED"


def games_of(app):
    return app.state.games


def get_session(request: Request, game_id: str):
    session = games_of(request.app).get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    return session


@router.get("/", response_class=HTMLResponse)
async def index():
    return INDEX_PATH.read_text(encoding="utf-8")


@router.post("/games")
async def new_game(payload: NewGamePayload, request: Request):
    games = games_of(request.app)
    if payload.game_id in games:
        raise HTTPException(status_code=400, detail="game_id must be unique")
    if len(games) >= request.app.state.settings.max_games:
        raise HTTPException(status_code=503, detail="Too many active games.")

    default_one, default_two = request.app.state.settings.players()
    players = (
        Player(payload.player_one or default_one.name, default_one.mark),
        Player(payload.player_two or default_two.name, default_two.mark),
    )
    if players[0].name == players[1].name:
        raise HTTPException(status_code=400, detail="player names must be different")

    session = create_session(payload.game_id, players)
    games[payload.game_id] = session
    logger.info("[game %s] created: %s vs %s", payload.game_id, players[0].name, players[1].name)
    return {
        "game_id": payload.game_id,
        "ws_path": f"/ws/{payload.game_id}",
        "state": state_message(session),
    }


@router.get("/games/{game_id}")
async def game_state(game_id: str, request: Request):
    return state_message(get_session(request, game_id))


@router.post("/games/{game_id}/moves")
async def game_move(game_id: str, payload: MovePayload, request: Request):
    session = get_session(request, game_id)
    result = play_move(session, payload.row, payload.col)
    return {"result": result.value, "state": state_message(session, MOVE_NOTES[result])}


@router.post("/games/{game_id}/reset")
async def game_reset(game_id: str, request: Request):
    session = get_session(request, game_id)
    session.engine.reset()
    logger.info("[game %s] reset", game_id)
    return state_message(session, "Game restarted.")


@router.delete("/games/{game_id}")
async def game_delete(game_id: str, request: Request):
    get_session(request, game_id)
    del games_of(request.app)[game_id]
    logger.info("[game %s] deleted", game_id)
    return {"deleted": game_id}


def handle_message(session, raw):
    if not isinstance(raw, dict):
        return "Invalid payload. Use JSON object with row and col."

    if raw.get("action") == "reset":
        session.engine.reset()
        logger.info("[game %s] reset", session.game_id)
        return "Game restarted."

    h = raw.get("row")
    w = raw.get("col")
    if type(h) is not int or type(w) is not int:
        return "Invalid payload. row and col must be integers."
    if not (0 <= h < BOARD_SIZE and 0 <= w < BOARD_SIZE):
        return "Coordinates must be between 0 and 2."
    return MOVE_NOTES[play_move(session, h, w)]


@router.websocket("/ws/{game_id}")
async def websocket_game(websocket: WebSocket, game_id: str):
    await websocket.accept()
    session = games_of(websocket.app).get(game_id)
    if session is None:
        await websocket.send_json({"error": "Game not found."})
        await websocket.close()
        return
    if session.connected:
        await websocket.send_json({"error": "Game already has an active connection."})
        await websocket.close()
        return

    session.connected = True
    try:
        await websocket.send_json(
            state_message(session, "Connected. Send moves as {'row': 0, 'col': 0}.")
        )
        while True:
            try:
                raw = await websocket.receive_json()
            except JSONDecodeError:
                await websocket.send_json(
                    state_message(session, "Invalid JSON payload. Use JSON object with row and col.")
                )
                continue
            await websocket.send_json(state_message(session, handle_message(session, raw)))

    except WebSocketDisconnect:
        logger.debug("[game %s] websocket disconnected", game_id)
    except Exception as exc:
        logger.exception("Backend error for game_id=%s: %s", game_id, exc)
        if websocket_is_open(websocket):
            await websocket.close()
    finally:
        # a game played over a websocket ends with its connection
        games = games_of(websocket.app)
        if games.get(game_id) is session:
            del games[game_id]
            logger.info("[game %s] closed", game_id)
