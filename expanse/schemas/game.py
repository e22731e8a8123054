from typing import Optional

from pydantic import BaseModel, field_validator

from expanse.models.event import GameEvent
from expanse.models.game import GameState
from expanse.services.movement_service import MovePlan


class GameCreate(BaseModel):
    player_count: int = 2
    seed: Optional[int] = None

    @field_validator("player_count")
    @classmethod
    def validate_player_count(cls, v: int) -> int:
        if v < 1 or v > 4:
            raise ValueError("player_count must be between 1 and 4")
        return v


class GameResponse(BaseModel):
    id: int
    final_round: bool
    state: GameState


class ActionResponse(BaseModel):
    game_id: int
    state: GameState
    events: list[GameEvent] = []
    move_plan: Optional[MovePlan] = None


class ErrorResponse(BaseModel):
    code: str
    detail: str
    # Set for insufficient_funds: "Money", "Science" or "Materials"
    resource: Optional[str] = None
