"""Static definitions for ship parts and ship hull types.

Parts are divided into categories:
  WEAPON   - Adds damage; may carry a combat special (Plasma, Ion, Missile)
  DEFENSE  - Adds hull points; the Shield Generator carries the Shield special
  SUPPORT  - Adds initiative
  DRIVE    - Adds movement range

Ship types:
  Interceptor  - Fast and cheap; 2 part slots
  Cruiser      - Balanced; 4 part slots
  Dreadnought  - Heavy capital ship; 6 part slots, 4 base hull

Tech rule:
  Parts with requires_tech != None can only be installed once the player has
  unlocked that technology.  The stat deltas of a part are added to the base
  stats of every blueprint it is installed on.

Special abilities (see combat_service):
  Shield  - absorbs 2 damage from every hit unless the attacker has Ion
  Ion     - ignores the defender's Shield
  Missile - +1 to the hit roll (never to damage or criticals)
  Plasma  - no rule of its own; the part's damage delta is the bonus
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ShipType(str, enum.Enum):
    interceptor = "Interceptor"
    cruiser = "Cruiser"
    dreadnought = "Dreadnought"


class PartCategory(str, enum.Enum):
    weapon = "Weapon"
    defense = "Defense"
    support = "Support"
    drive = "Drive"


class SpecialAbility(str, enum.Enum):
    missile = "Missile"
    ion = "Ion"
    plasma = "Plasma"
    shield = "Shield"


@dataclass(frozen=True)
class ShipPart:
    """Definition of a single installable ship part."""
    part_id: str
    name: str
    category: PartCategory
    cost: int                           # Materials
    requires_tech: str | None = None    # tech_id from technologies.py, or None
    # Stat deltas
    hull: int = 0
    initiative: int = 0
    movement: int = 0
    damage: int = 0
    special: SpecialAbility | None = None
    description: str = ""


@dataclass(frozen=True)
class ShipHull:
    """Base chassis for a ship type; the starting point of every blueprint."""
    ship_type: ShipType
    slot_count: int
    base_hull: int
    base_initiative: int
    base_movement: int
    base_damage: int
    cost: int                           # Materials per ship built


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------

_WEAPONS: list[ShipPart] = [
    ShipPart("plasma_cannon", "Plasma Cannon", PartCategory.weapon, cost=2,
             requires_tech="m1", damage=2, special=SpecialAbility.plasma,
             description="+2 Damage"),
    ShipPart("ion_cannon", "Ion Cannon", PartCategory.weapon, cost=2,
             requires_tech="m2", damage=1, special=SpecialAbility.ion,
             description="Bypasses Shields"),
    ShipPart("missile_launcher", "Missile Launcher", PartCategory.weapon, cost=3,
             requires_tech="m3", damage=1, special=SpecialAbility.missile,
             description="+1 Accuracy"),
]

_DEFENSES: list[ShipPart] = [
    ShipPart("shield_gen", "Shield Generator", PartCategory.defense, cost=3,
             requires_tech="g3", hull=1, special=SpecialAbility.shield,
             description="Absorbs 2 Dmg"),
    ShipPart("reinforced_hull", "Reinforced Plating", PartCategory.defense, cost=2,
             requires_tech="n1", hull=3, description="+3 Hull Integrity"),
]

_SUPPORT: list[ShipPart] = [
    ShipPart("target_comp", "Targeting Comp", PartCategory.support, cost=2,
             requires_tech="g2", initiative=2, description="+2 Initiative"),
    ShipPart("fusion_reactor", "Fusion Reactor", PartCategory.support, cost=2,
             requires_tech="g1", initiative=1, description="+1 Init (Power)"),
]

_DRIVES: list[ShipPart] = [
    ShipPart("warp_drive", "Warp Drive", PartCategory.drive, cost=3,
             requires_tech="g4", movement=1, description="+1 Movement Range"),
]

ALL_PARTS: list[ShipPart] = _WEAPONS + _DEFENSES + _SUPPORT + _DRIVES

_PART_INDEX: dict[str, ShipPart] = {p.part_id: p for p in ALL_PARTS}


# ---------------------------------------------------------------------------
# Hulls
# ---------------------------------------------------------------------------

SHIP_HULLS: dict[ShipType, ShipHull] = {
    ShipType.interceptor: ShipHull(
        ShipType.interceptor, slot_count=2, base_hull=1, base_initiative=3,
        base_movement=2, base_damage=1, cost=1,
    ),
    ShipType.cruiser: ShipHull(
        ShipType.cruiser, slot_count=4, base_hull=2, base_initiative=2,
        base_movement=2, base_damage=1, cost=3,
    ),
    ShipType.dreadnought: ShipHull(
        ShipType.dreadnought, slot_count=6, base_hull=4, base_initiative=1,
        base_movement=1, base_damage=1, cost=6,
    ),
}

# Materials per colony ship ordered alongside warships in a build
COLONY_SHIP_COST = 2


def get_part(part_id: str) -> ShipPart:
    """Return the ShipPart for part_id.  Raises KeyError if not found."""
    try:
        return _PART_INDEX[part_id]
    except KeyError:
        raise KeyError(f"Unknown ship part: '{part_id}'") from None


def parts_unlocked_by(tech_id: str) -> list[ShipPart]:
    """Return the parts whose installation is gated on tech_id."""
    return [p for p in ALL_PARTS if p.requires_tech == tech_id]


def get_hull(ship_type: ShipType | str) -> ShipHull:
    """Return the ShipHull for a ship type.  Raises KeyError if not found."""
    try:
        return SHIP_HULLS[ShipType(ship_type)]
    except ValueError:
        raise KeyError(f"Unknown ship type: '{ship_type}'") from None
