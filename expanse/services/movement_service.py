"""Movement service — fleet bookkeeping and the MOVE actions.

Movement rules:
- A group of ships moves as one; its range is the lowest computed movement
  among the ship types in the group.
- Any hex within that many steps (hex distance) can be reached directly;
  there are no wormholes or blocked hexes.
- Ships leave the source fleet and join (or create) the player's fleet at the
  destination.  A fleet with no ships left is removed.
"""

from dataclasses import dataclass, field

from expanse.data.ship_parts import ShipType
from expanse.errors import InvalidTarget, NoSelection
from expanse.models.event import GameEvent, info, success, warning
from expanse.models.fleet import Fleet, empty_ship_counts
from expanse.models.game import GameState
from expanse.models.player import Player
from expanse.models.ship_blueprint import ShipBlueprint
from expanse.services.hex_grid import reachable_set
from expanse.services.ship_service import compute_stats


@dataclass
class MovePlan:
    """Result of PLAN_MOVE: the group's range and the cost to reach each hex."""
    source_hex_id: str
    move_range: int
    reachable: dict[str, int] = field(default_factory=dict)


def _selected(ship_counts: dict[ShipType, int]) -> dict[ShipType, int]:
    return {ShipType(t): n for t, n in ship_counts.items() if n > 0}


def describe_ships(ship_counts: dict[ShipType, int]) -> str:
    parts = [f"{n} {t.value}{'' if n == 1 else 's'}" for t, n in _selected(ship_counts).items()]
    return ", ".join(parts) if parts else "no ships"


def fleet_range(blueprints: dict[ShipType, ShipBlueprint], ship_counts: dict[ShipType, int]) -> int:
    """Return the lowest movement among the selected ship types (0 if none selected)."""
    movements = [compute_stats(blueprints[t]).movement for t in _selected(ship_counts)]
    return min(movements) if movements else 0


# ---------------------------------------------------------------------------
# Fleet bookkeeping
# ---------------------------------------------------------------------------

def add_ships(
    state: GameState, owner_id: int | str, hex_id: str, ship_counts: dict[ShipType, int]
) -> Fleet:
    """Merge ship_counts into owner's fleet at hex_id, creating the fleet if needed."""
    fleet = state.find_fleet(owner_id, hex_id)
    if fleet is None:
        fleet = Fleet(id=state.next_fleet_id(), owner_id=owner_id, hex_id=hex_id,
                      ships=empty_ship_counts())
        state.fleets.append(fleet)
    for ship_type, count in _selected(ship_counts).items():
        fleet.ships[ship_type] = fleet.ships.get(ship_type, 0) + count
    return fleet


def move_ships(
    state: GameState, owner_id: int | str, source_hex_id: str, dest_hex_id: str,
    ship_counts: dict[ShipType, int],
) -> Fleet:
    """Transfer ships between two of owner's fleets.  Returns the destination fleet."""
    source = state.find_fleet(owner_id, source_hex_id)
    if source is None:
        raise InvalidTarget("No fleet at the source sector")
    counts = _selected(ship_counts)
    for ship_type, count in counts.items():
        source.ships[ship_type] -= count
    if source.total_ships == 0:
        state.fleets.remove(source)
    return add_ships(state, owner_id, dest_hex_id, counts)


# ---------------------------------------------------------------------------
# MOVE actions
# ---------------------------------------------------------------------------

def plan_move(
    state: GameState, player: Player, ship_counts: dict[ShipType, int], source_hex_id: str
) -> MovePlan:
    """Validate a ship selection at source_hex_id and return where it can go.

    Raises InvalidTarget if the player has no fleet there, the selection asks
    for more ships than the fleet holds or nothing is in range, and
    NoSelection if the selection has no movement.
    """
    source_hex = state.get_hex(source_hex_id)
    fleet = state.find_fleet(player.id, source_hex_id)
    if fleet is None:
        raise InvalidTarget(f"You have no fleet at {source_hex.name}")
    counts = _selected(ship_counts)
    for ship_type, count in counts.items():
        if count > fleet.ships.get(ship_type, 0):
            raise InvalidTarget(f"Not enough {ship_type.value}s at {source_hex.name}")

    move_range = fleet_range(player.blueprints, counts)
    if move_range == 0:
        raise NoSelection("Select ships to move")
    reachable = reachable_set(source_hex, state.hexes, move_range)
    if not reachable:
        raise InvalidTarget(f"No sectors in range of {source_hex.name}")
    return MovePlan(source_hex_id=source_hex_id, move_range=move_range, reachable=reachable)


def execute_move(
    state: GameState,
    player: Player,
    source_hex_id: str,
    dest_hex_id: str,
    ship_counts: dict[ShipType, int],
) -> list[GameEvent]:
    plan = plan_move(state, player, ship_counts, source_hex_id)
    dest = state.get_hex(dest_hex_id)
    if dest_hex_id not in plan.reachable:
        raise InvalidTarget(f"{dest.name} is out of range")

    move_ships(state, player.id, source_hex_id, dest_hex_id, ship_counts)
    moved = describe_ships(ship_counts)
    if dest.is_hostile:
        return [warning(f"{moved} entered hostile sector {dest.name}")]
    if dest.owner_id is not None and dest.owner_id != player.id:
        return [info(f"{moved} entered foreign territory at {dest.name}")]
    return [success(f"{moved} deployed to {dest.name}")]
