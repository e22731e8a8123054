"""
Static definitions for the sector map.

Layout at session start (axial coordinates):
  (0,0)   Galactic Center, guarded by the GCDS and holding an artifact
  ring 1  six inner sectors, unrevealed
  start   one start sector per player, taken from START_SLOTS in order
"""

from dataclasses import dataclass, field

from expanse.models.hex_tile import SectorType
from expanse.models.player import ResourceType

MONEY = ResourceType.money
SCIENCE = ResourceType.science
MATERIALS = ResourceType.materials


@dataclass(frozen=True)
class SectorTile:
    tile_id: str
    name: str
    q: int
    r: int
    sector_type: SectorType
    resources: list[ResourceType] = field(default_factory=list)
    has_enemy: bool = False
    has_artifact: bool = False
    is_gcds: bool = False
    description: str | None = None


@dataclass(frozen=True)
class StartSlot:
    tile_id: str
    q: int
    r: int


# ---------------------------------------------------------------------------
# Galactic Center
# ---------------------------------------------------------------------------

GALACTIC_CENTER = SectorTile(
    tile_id="001",
    name="Galactic Center",
    q=0,
    r=0,
    sector_type=SectorType.core,
    has_enemy=True,
    has_artifact=True,
    is_gcds=True,
    description="GCDS Omega Level Threat",
)

# ---------------------------------------------------------------------------
# Inner ring (radius 1 around the Galactic Center)
# ---------------------------------------------------------------------------

INNER_RING_TILES: list[SectorTile] = [
    SectorTile("i1", "Alpha Centauri", 1, 0, SectorType.inner, [MONEY, MATERIALS]),
    SectorTile("i2", "Barnard Star", 1, -1, SectorType.inner, [MATERIALS, MATERIALS]),
    SectorTile("i3", "Luyten 726-8", 0, -1, SectorType.inner, [SCIENCE, SCIENCE]),
    SectorTile("i4", "Wolf 359", -1, 0, SectorType.inner, [MONEY]),
    SectorTile("i5", "Ross 128", -1, 1, SectorType.inner, [SCIENCE, MATERIALS]),
    SectorTile("i6", "Epsilon Eridani", 0, 1, SectorType.inner, [MONEY, SCIENCE, MATERIALS]),
]

STATIC_TILES: list[SectorTile] = [GALACTIC_CENTER] + INNER_RING_TILES

# ---------------------------------------------------------------------------
# Player start sectors
# ---------------------------------------------------------------------------

# Player i starts on START_SLOTS[i]
START_SLOTS: list[StartSlot] = [
    StartSlot("start1", 0, 2),
    StartSlot("start2", 0, -2),
    StartSlot("start3", 2, -1),
    StartSlot("start4", -2, 1),
]

START_RESOURCES: list[ResourceType] = [MONEY, SCIENCE, MATERIALS]
START_POPULATION = 3

MAX_PLAYERS = len(START_SLOTS)

PLAYER_COLORS: list[str] = ["blue", "orange", "green", "purple"]
