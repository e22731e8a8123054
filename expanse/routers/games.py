from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from expanse.registry import GameRegistry, get_registry
from expanse.schemas.actions import ActionRequest, InitGame
from expanse.schemas.game import ActionResponse, ErrorResponse, GameCreate, GameResponse
from expanse.services.game_service import GameStore
from expanse.services.turn_engine import is_final_round

router = APIRouter(prefix="/games", tags=["games"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def get_store(game_id: int, registry: GameRegistry = Depends(get_registry)) -> GameStore:
    store = registry.get(game_id)
    if store is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return store


def _game_response(game_id: int, store: GameStore) -> GameResponse:
    return GameResponse(id=game_id, final_round=is_final_round(store.state), state=store.state)


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game_endpoint(
    data: GameCreate,
    registry: GameRegistry = Depends(get_registry),
):
    game_id, store = registry.create(seed=data.seed)
    store.dispatch(InitGame(player_count=data.player_count))
    return _game_response(game_id, store)


@router.get("/{game_id}", response_model=GameResponse, responses=_ERROR_RESPONSES)
async def get_game_endpoint(game_id: int, store: GameStore = Depends(get_store)):
    return _game_response(game_id, store)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game_endpoint(game_id: int, registry: GameRegistry = Depends(get_registry)):
    if not registry.remove(game_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")


@router.post("/{game_id}/actions", response_model=ActionResponse, responses=_ERROR_RESPONSES)
async def submit_action_endpoint(
    game_id: int,
    data: ActionRequest,
    player_id: Optional[int] = None,
    store: GameStore = Depends(get_store),
):
    """Apply one action as player_id (if given).

    Rule violations come back as 400 {code, detail}; acting out of turn is 409.
    """
    try:
        result = store.dispatch(data.root, player_id=player_id)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.args[0]) from exc
    return ActionResponse(
        game_id=game_id, state=result.state, events=result.events, move_plan=result.move_plan
    )
