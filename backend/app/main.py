import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from backend.app.core.config import settings
from connect4.core.api import best_move
from connect4.core.errors import GameError
from connect4.core.schemas import MoveRequest, MoveResponse

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- LIFESPAN MANAGER (process logging on startup) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Connect Four engine ready")
    yield


app = FastAPI(title="Connect Four Engine", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(GameError)
async def game_error_handler(request, exc: GameError):
    """Every engine failure is the caller's fault: 400 with the message as body."""
    logger.info("Rejected %s: %s", request.url.query, exc)
    return PlainTextResponse(str(exc), status_code=400)


# Plain def: FastAPI runs the CPU-bound search in its threadpool
@app.get("/api/move", response_model=MoveResponse)
def get_move(position: str, level: int):
    """Best column for the side to move after 'position', searched 'level' plies deep."""
    move = best_move(MoveRequest(position=position, level=level))
    return JSONResponse(
        content=move.model_dump(),
        headers={"Cache-Control": "no-store"},
    )


# Mounted last so /api routes take precedence
if settings.static_dir and Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="web")
    logger.info("Serving web client from %s", settings.static_dir)


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port)
