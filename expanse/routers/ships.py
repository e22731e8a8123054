"""Ships router — GET /games/{game_id}/players/{player_id}/blueprints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from expanse.models.player import Player
from expanse.routers.research import get_player
from expanse.schemas.ships import (
    BlueprintResponse,
    BlueprintSpecialsResponse,
    BlueprintStatsResponse,
)
from expanse.services.ship_service import compute_specials, compute_stats

router = APIRouter(prefix="/games", tags=["ships"])


@router.get(
    "/{game_id}/players/{player_id}/blueprints",
    response_model=list[BlueprintResponse],
)
async def get_blueprints_endpoint(player: Player = Depends(get_player)):
    """Return every blueprint of the player with its computed stats and specials."""
    return [
        BlueprintResponse(
            type=bp.type,
            slots=bp.slots,
            installed_parts=list(bp.installed_parts),
            cost=bp.cost,
            stats=BlueprintStatsResponse(**asdict(compute_stats(bp))),
            specials=BlueprintSpecialsResponse(**asdict(compute_specials(bp))),
        )
        for bp in player.blueprints.values()
    ]
