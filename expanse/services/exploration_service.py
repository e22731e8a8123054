"""Exploration and influence actions.

EXPLORE reveals every hidden sector adjacent to a hex the player controls, for
1 Money.  CLAIM places an influence disc on an unowned, peaceful sector and
RECALL takes one back, returning whatever the player had built there.

All three operate on the working copy handed in by game_service and validate
everything before the first mutation.
"""

import logging

from expanse.errors import InsufficientInfluence, InvalidTarget, NoSelection
from expanse.models.event import GameEvent, info, success
from expanse.models.game import GameState
from expanse.models.hex_tile import Structure
from expanse.models.player import Player, ResourceType
from expanse.services.hex_grid import neighbors_of
from expanse.services.resource_service import debit, require

logger = logging.getLogger(__name__)

EXPLORE_COST = 1
# Starbase inventory cap; recalled starbases beyond it are lost
MAX_STARBASES = 4


def explore(state: GameState, player: Player, hex_id: str | None) -> list[GameEvent]:
    """Reveal the unrevealed neighbours of hex_id for EXPLORE_COST Money.

    Raises NoSelection if no hex is given or the player does not control it,
    InsufficientMoney if the player cannot pay.  When every neighbour is
    already revealed nothing is charged and an info event is returned.
    """
    if not hex_id:
        raise NoSelection("Select a sector to explore from")
    origin = state.get_hex(hex_id)
    if origin.owner_id != player.id:
        raise NoSelection(f"You do not control {origin.name}")
    require(player, ResourceType.money, EXPLORE_COST)

    hidden = [h for h in neighbors_of(origin, state.hexes) if not h.revealed]
    if not hidden:
        return [info(f"No unexplored sectors around {origin.name}")]

    for hex_tile in hidden:
        hex_tile.revealed = True
    debit(player, ResourceType.money, EXPLORE_COST)
    logger.debug("Player %s revealed %s", player.id, [h.id for h in hidden])
    return [success(f"Scanned {len(hidden)} new sector{'s' if len(hidden) != 1 else ''}")]


def claim_sector(state: GameState, player: Player, hex_id: str) -> list[GameEvent]:
    """Place an influence disc on hex_id.

    Raises InsufficientInfluence if the player has no discs left, then
    InvalidTarget if the hex already has an owner or holds hostiles.
    """
    hex_tile = state.get_hex(hex_id)
    if player.influence.current < 1:
        raise InsufficientInfluence("No influence discs available")
    if hex_tile.owner_id is not None:
        raise InvalidTarget(f"{hex_tile.name} is already claimed")
    if hex_tile.is_hostile:
        raise InvalidTarget(f"{hex_tile.name} is held by hostile forces")

    hex_tile.owner_id = player.id
    player.influence.current -= 1
    player.victory_points += 1
    return [success(f"Claimed {hex_tile.name}")]


def recall_influence(state: GameState, player: Player, hex_id: str) -> list[GameEvent]:
    """Withdraw the player's influence disc from hex_id.

    Population cubes go back to the supply, a Starbase goes back to inventory
    (up to MAX_STARBASES), the disc goes back to the influence track and the
    claim's victory point is removed.
    """
    hex_tile = state.get_hex(hex_id)
    if hex_tile.owner_id != player.id:
        raise InvalidTarget(f"You do not own {hex_tile.name}")

    player.inventory.population += hex_tile.population
    if hex_tile.structure == Structure.starbase:
        player.inventory.starbases = min(player.inventory.starbases + 1, MAX_STARBASES)
    player.influence.current = min(player.influence.current + 1, player.influence.max)
    player.victory_points = max(player.victory_points - 1, 0)

    hex_tile.owner_id = None
    hex_tile.structure = None
    hex_tile.population = 0
    return [info(f"Influence recalled from {hex_tile.name}")]
