import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from expanse.config import settings
from expanse.errors import GameError, InsufficientFunds, NotYourTurn
from expanse.routers import games, research, ships

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Expanse",
    description="Authoritative simulation core for a turn-based hex 4X strategy game",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(games.router)
app.include_router(research.router)
app.include_router(ships.router)


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    code = status.HTTP_409_CONFLICT if isinstance(exc, NotYourTurn) else status.HTTP_400_BAD_REQUEST
    content = {"code": exc.code, "detail": exc.message}
    if isinstance(exc, InsufficientFunds):
        content["resource"] = exc.resource
    return JSONResponse(status_code=code, content=content)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
