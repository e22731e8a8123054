"""Static definitions for the technology tiles.

Technologies are organized into 3 parallel tracks:
  Military   - Weapon systems (plasma, ion, missiles)
  Grid       - Power, targeting, shields and propulsion
  Nano       - Hull materials and civil engineering

Within each track the technologies form a linear chain: every tile after the
first names the previous tile as its prerequisite.  Costs are in Science and
are not discounted.

This catalog is shared read-only by every player; each player receives an
independent, fully locked tree built from it (see research_service).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TechCategory(str, enum.Enum):
    military = "Military"
    grid = "Grid"
    nano = "Nano"


@dataclass(frozen=True)
class Technology:
    tech_id: str
    name: str
    category: TechCategory
    cost: int                        # Science
    description: str
    prerequisite: str | None = None  # tech_id that must be unlocked first


# ── MILITARY ──────────────────────────────────────────────────────────────────

_MILITARY_TECHS: list[Technology] = [
    Technology("m1", "Plasma Physics", TechCategory.military, 3,
               "Unlock Plasma Cannons (Dmg Bonus)"),
    Technology("m2", "Ballistics", TechCategory.military, 4,
               "Unlock Ion Cannons (Anti-Shield)", prerequisite="m1"),
    Technology("m3", "Missile Tech", TechCategory.military, 5,
               "Unlock Guided Missiles (+1 Accuracy)", prerequisite="m2"),
    Technology("m4", "Antimatter", TechCategory.military, 8,
               "Unlock Mass Bombardment", prerequisite="m3"),
]

# ── GRID ──────────────────────────────────────────────────────────────────────

_GRID_TECHS: list[Technology] = [
    Technology("g1", "Power Sources", TechCategory.grid, 3,
               "Unlock Fusion Reactor (Energy)"),
    Technology("g2", "Quantum Comp", TechCategory.grid, 4,
               "Unlock Target Comp (Initiative)", prerequisite="g1"),
    Technology("g3", "Deflectors", TechCategory.grid, 5,
               "Unlock Shield Generators", prerequisite="g2"),
    Technology("g4", "Warp Drives", TechCategory.grid, 6,
               "Unlock Warp Drive (+1 Move)", prerequisite="g3"),
]

# ── NANO ──────────────────────────────────────────────────────────────────────

_NANO_TECHS: list[Technology] = [
    Technology("n1", "Materials Sci", TechCategory.nano, 3,
               "Unlock Reinforced Hull (+HP)"),
    Technology("n2", "Civil Eng", TechCategory.nano, 4,
               "Mining Bonus (+Materials)", prerequisite="n1"),
    Technology("n3", "Xenobiology", TechCategory.nano, 5,
               "Terraforming (+Pop Cap)", prerequisite="n2"),
    Technology("n4", "Logistics", TechCategory.nano, 6,
               "Field Repairs", prerequisite="n3"),
]

ALL_TECHNOLOGIES: list[Technology] = _MILITARY_TECHS + _GRID_TECHS + _NANO_TECHS

_TECH_INDEX: dict[str, Technology] = {t.tech_id: t for t in ALL_TECHNOLOGIES}


def get_technology(tech_id: str) -> Technology:
    """Return the Technology for tech_id.  Raises KeyError if not found."""
    try:
        return _TECH_INDEX[tech_id]
    except KeyError:
        raise KeyError(f"Unknown technology: '{tech_id}'") from None


def list_technologies() -> list[Technology]:
    return list(ALL_TECHNOLOGIES)


def list_technologies_by_category(category: TechCategory) -> list[Technology]:
    """Return a track's technologies in prerequisite order."""
    return [t for t in ALL_TECHNOLOGIES if t.category == category]
