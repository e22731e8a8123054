"""Ship service — manages ship blueprints, BUILD actions, and UPGRADE actions.

Responsibilities:
  - Initialize default ship blueprints for each player on game start
  - Compute a blueprint's effective stats and combat specials
  - Validate and process stat upgrades and part installation
  - Validate BUILD orders and place the new ships at a shipyard
"""

from dataclasses import dataclass

from expanse.data.ship_parts import (
    COLONY_SHIP_COST,
    SpecialAbility,
    ShipType,
    get_hull,
    get_part,
)
from expanse.errors import InvalidSlot, InvalidTarget, NoSelection, PartLocked
from expanse.models.event import GameEvent, success
from expanse.models.game import GameState
from expanse.models.hex_tile import SectorType, Structure
from expanse.models.player import Player, ResourceType
from expanse.models.ship_blueprint import ShipBlueprint
from expanse.services.research_service import unlocked_ids
from expanse.services.resource_service import debit

# Materials per +1 on a base stat
UPGRADE_COSTS: dict[str, int] = {
    "hull": 2,
    "initiative": 3,
    "movement": 3,
}


@dataclass(frozen=True)
class BlueprintStats:
    hull: int
    initiative: int
    movement: int
    damage: int


@dataclass(frozen=True)
class BlueprintSpecials:
    has_shields: bool = False
    has_ion: bool = False
    has_missiles: bool = False
    has_plasma: bool = False


# ---------------------------------------------------------------------------
# Blueprint initialization
# ---------------------------------------------------------------------------

def create_blueprint(ship_type: ShipType) -> ShipBlueprint:
    hull = get_hull(ship_type)
    return ShipBlueprint(
        type=ship_type,
        slots=hull.slot_count,
        installed_parts=[None] * hull.slot_count,
        base_hull=hull.base_hull,
        base_initiative=hull.base_initiative,
        base_movement=hull.base_movement,
        base_damage=hull.base_damage,
        cost=hull.cost,
    )


def create_blueprints() -> dict[ShipType, ShipBlueprint]:
    """Return one empty default blueprint per ship type."""
    return {ship_type: create_blueprint(ship_type) for ship_type in ShipType}


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

def compute_stats(bp: ShipBlueprint) -> BlueprintStats:
    """Return base stats plus the deltas of every installed part.

    A blueprint with no base damage still deals 1.
    """
    hull = bp.base_hull
    initiative = bp.base_initiative
    movement = bp.base_movement
    damage = bp.base_damage or 1
    for part_id in bp.installed_parts:
        if part_id is None:
            continue
        part = get_part(part_id)
        hull += part.hull
        initiative += part.initiative
        movement += part.movement
        damage += part.damage
    return BlueprintStats(hull=hull, initiative=initiative, movement=movement, damage=damage)


def compute_specials(bp: ShipBlueprint) -> BlueprintSpecials:
    specials = {get_part(p).special for p in bp.installed_parts if p is not None}
    return BlueprintSpecials(
        has_shields=SpecialAbility.shield in specials,
        has_ion=SpecialAbility.ion in specials,
        has_missiles=SpecialAbility.missile in specials,
        has_plasma=SpecialAbility.plasma in specials,
    )


# ---------------------------------------------------------------------------
# UPGRADE actions
# ---------------------------------------------------------------------------

def _check_slot(bp: ShipBlueprint, slot: int) -> None:
    if not 0 <= slot < bp.slots:
        raise InvalidSlot(f"{bp.type.value} has no slot {slot} (slots 0-{bp.slots - 1})")


def upgrade_blueprint(player: Player, ship_type: ShipType, stat: str) -> list[GameEvent]:
    """Raise one base stat of a blueprint by 1 for its UPGRADE_COSTS price in Materials."""
    try:
        cost = UPGRADE_COSTS[stat]
    except KeyError:
        raise ValueError(f"Unknown upgrade stat: '{stat}'") from None
    bp = player.blueprints[ShipType(ship_type)]
    debit(player, ResourceType.materials, cost)

    field_name = f"base_{stat}"
    setattr(bp, field_name, getattr(bp, field_name) + 1)
    return [success(f"{bp.type.value} {stat} upgraded")]


def install_part(player: Player, ship_type: ShipType, slot: int, part_id: str) -> list[GameEvent]:
    """Install part_id into a blueprint slot, replacing whatever was there.

    Raises KeyError for an unknown part, then InvalidSlot, PartLocked (the
    part's tech is not unlocked) and InsufficientMaterials in that order.
    The replaced part is not refunded.
    """
    part = get_part(part_id)
    bp = player.blueprints[ShipType(ship_type)]
    _check_slot(bp, slot)
    if part.requires_tech is not None and part.requires_tech not in unlocked_ids(player):
        raise PartLocked(f"{part.name} requires technology '{part.requires_tech}'")
    debit(player, ResourceType.materials, part.cost)

    bp.installed_parts[slot] = part.part_id
    return [success(f"{part.name} installed on {bp.type.value}")]


def uninstall_part(player: Player, ship_type: ShipType, slot: int) -> list[GameEvent]:
    bp = player.blueprints[ShipType(ship_type)]
    _check_slot(bp, slot)
    bp.installed_parts[slot] = None
    return [success(f"{bp.type.value} slot {slot} cleared")]


# ---------------------------------------------------------------------------
# BUILD action
# ---------------------------------------------------------------------------

def build_cost(player: Player, ship_counts: dict[ShipType, int], colony_ship_count: int) -> int:
    """Return the total Materials cost of a build order."""
    warships = sum(player.blueprints[t].cost * n for t, n in ship_counts.items())
    return warships + COLONY_SHIP_COST * colony_ship_count


def queue_build(
    state: GameState,
    player: Player,
    ship_counts: dict[ShipType, int],
    colony_ship_count: int,
    hex_id: str,
) -> list[GameEvent]:
    """Build ships at an owned shipyard (a Starbase sector or the home sector).

    Warships spawn into (or merge with) the player's fleet at hex_id, colony
    ships go to inventory.  Raises InvalidTarget if the hex cannot build,
    NoSelection for an empty order and InsufficientMaterials.
    """
    from expanse.services.movement_service import add_ships

    hex_tile = state.get_hex(hex_id)
    if hex_tile.owner_id != player.id:
        raise InvalidTarget(f"You do not own {hex_tile.name}")
    if hex_tile.structure != Structure.starbase and hex_tile.sector_type != SectorType.start:
        raise InvalidTarget(f"{hex_tile.name} has no shipyard")
    counts = {ShipType(t): n for t, n in ship_counts.items() if n > 0}
    if not counts and colony_ship_count <= 0:
        raise NoSelection("Select at least one ship to build")
    cost = build_cost(player, counts, max(colony_ship_count, 0))
    debit(player, ResourceType.materials, cost)
    if colony_ship_count > 0:
        player.inventory.colony_ships += colony_ship_count
    if counts:
        add_ships(state, player.id, hex_id, counts)
    return [success(f"Construction complete at {hex_tile.name} ({cost} Materials)")]
