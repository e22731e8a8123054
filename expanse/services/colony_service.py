"""Colony actions: building starbases and landing colony ships on owned sectors."""

from expanse.errors import CapacityExceeded, InvalidTarget, NotAvailable
from expanse.models.event import GameEvent, success
from expanse.models.game import GameState
from expanse.models.hex_tile import Hex, Structure
from expanse.models.player import Player, ResourceType
from expanse.services.resource_service import debit

STARBASE_COST = 3


def _owned_hex(state: GameState, player: Player, hex_id: str) -> Hex:
    hex_tile = state.get_hex(hex_id)
    if hex_tile.owner_id != player.id:
        raise InvalidTarget(f"You do not own {hex_tile.name}")
    return hex_tile


def build_starbase(state: GameState, player: Player, hex_id: str) -> list[GameEvent]:
    """Place a Starbase from inventory on an owned sector for STARBASE_COST Materials.

    Raises InvalidTarget (not owned), CapacityExceeded (sector already has a
    structure), NotAvailable (no starbase left in inventory) and
    InsufficientMaterials, checked in that order.
    """
    hex_tile = _owned_hex(state, player, hex_id)
    if hex_tile.structure is not None:
        raise CapacityExceeded(f"{hex_tile.name} already has a {hex_tile.structure.value}")
    if player.inventory.starbases < 1:
        raise NotAvailable("No starbases left in inventory")
    debit(player, ResourceType.materials, STARBASE_COST)

    player.inventory.starbases -= 1
    hex_tile.structure = Structure.starbase
    return [success(f"Starbase constructed at {hex_tile.name}")]


def colonize(state: GameState, player: Player, hex_id: str) -> list[GameEvent]:
    """Spend a colony ship and a population cube to fill one slot of an owned sector."""
    hex_tile = _owned_hex(state, player, hex_id)
    if player.inventory.colony_ships < 1:
        raise NotAvailable("No colony ships available")
    if player.inventory.population < 1:
        raise NotAvailable("No population cubes left in supply")
    if hex_tile.population >= len(hex_tile.resources):
        raise CapacityExceeded(f"{hex_tile.name} has no free population slots")

    player.inventory.colony_ships -= 1
    player.inventory.population -= 1
    hex_tile.population += 1
    return [success(f"Colony established on {hex_tile.name}")]
