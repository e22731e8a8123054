"""Research router — GET /games/{game_id}/players/{player_id}/technologies."""

from fastapi import APIRouter, Depends, HTTPException, status

from expanse.models.player import Player
from expanse.routers.games import get_store
from expanse.schemas.research import PlayerTechnologyResponse
from expanse.services.game_service import GameStore
from expanse.services.research_service import tech_status

router = APIRouter(prefix="/games", tags=["research"])


def get_player(player_id: int, store: GameStore = Depends(get_store)) -> Player:
    try:
        return store.state.get_player(player_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Player not found in this game",
        ) from None


@router.get(
    "/{game_id}/players/{player_id}/technologies",
    response_model=list[PlayerTechnologyResponse],
)
async def get_player_technologies_endpoint(player: Player = Depends(get_player)):
    """Return the player's technology tree with each tech's locked/available/completed status."""
    return [
        PlayerTechnologyResponse(
            id=tech.id,
            name=tech.name,
            category=tech.category,
            cost=tech.cost,
            description=tech.description,
            prerequisite=tech.prerequisite,
            unlocked=tech.unlocked,
            status=tech_status(player, tech),
        )
        for tech in player.techs
    ]
