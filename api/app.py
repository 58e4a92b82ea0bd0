"""HTTP API entrypoint for driving a puzzle session from a web UI."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from infra.logger import configure_logging, get_logger
from infra.paths import DEFAULT_TILE_LIBRARY
from puzzle_engine.mechanics.objectives import TileAtPositionObjective, TilesAdjacentObjective
from puzzle_engine.tiles.definitions import TileDefinition, TileLibrary
from runtime.session import GameSession, SessionConfig

configure_logging()
log = get_logger(__name__)

app = FastAPI()
session: GameSession | None = None


# Allow the browser-based board (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class Placement(BaseModel):
    type_key: str
    x: int
    y: int


class ObjectiveSpec(BaseModel):
    kind: str = "tile_at"
    type_key: str
    x: Optional[int] = None
    y: Optional[int] = None
    other_type_key: Optional[str] = None
    include_diagonals: bool = False


class StartRequest(BaseModel):
    width: int = 8
    height: int = 8
    tiles: List[TileDefinition] | None = None
    placements: List[Placement] | None = None
    formation_columns: int = 3
    formation_rows: int = 2
    seed: Optional[int] = None
    objectives: List[ObjectiveSpec] = Field(default_factory=list)


class CellRequest(BaseModel):
    x: int
    y: int


def _require_session() -> GameSession:
    if session is None:
        raise HTTPException(400, "No active game")
    return session


def _build_objective(objective: ObjectiveSpec):
    if objective.kind == "tile_at":
        if objective.x is None or objective.y is None:
            raise ValueError("tile_at objective requires x and y")
        return TileAtPositionObjective(objective.type_key, (objective.x, objective.y))
    if objective.kind == "adjacent":
        if not objective.other_type_key:
            raise ValueError("adjacent objective requires other_type_key")
        return TilesAdjacentObjective(objective.type_key, objective.other_type_key, objective.include_diagonals)
    raise ValueError(f"Unknown objective kind '{objective.kind}'")


@app.post("/start")
def start(request: StartRequest):
    global session
    try:
        library = (
            TileLibrary(request.tiles)
            if request.tiles is not None
            else TileLibrary.load_json(DEFAULT_TILE_LIBRARY)
        )
        if request.placements is not None:
            new_session = GameSession.from_placements(
                request.width,
                request.height,
                library,
                [(p.type_key, (p.x, p.y)) for p in request.placements],
            )
        else:
            config = SessionConfig(
                width=request.width,
                height=request.height,
                formation_columns=request.formation_columns,
                formation_rows=request.formation_rows,
                seed=request.seed,
            )
            new_session = GameSession.from_config(config, library)
        for objective in request.objectives:
            new_session.add_objective(_build_objective(objective))
    except (KeyError, ValueError, ValidationError) as exc:
        raise HTTPException(400, str(exc)) from exc

    session = new_session
    log.info("Started session on %s", session.board)
    return {"success": True, "state": session.to_dict()}


@app.post("/select")
def select(request: CellRequest):
    current = _require_session()
    selected = current.select((request.x, request.y))
    return {
        "selected": selected,
        "options": [option.to_dict() for option in current.preview()],
    }


@app.get("/preview")
def preview():
    current = _require_session()
    return {"options": [option.to_dict() for option in current.preview()]}


@app.post("/move")
def move(request: CellRequest):
    current = _require_session()
    result = current.move_selected_to((request.x, request.y))
    return {"result": result.to_dict(), "won": current.is_won}


@app.get("/state")
def state():
    if session is None:
        return {"active": False}
    return {"active": True, **session.to_dict()}


@app.post("/stop")
def stop():
    global session
    _require_session()
    session = None
    return {"success": True, "message": "Game stopped"}
