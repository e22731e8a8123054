"""
Sector map generation.

The map is the fixed Galactic Center plus the inner ring from system_tiles,
all unrevealed, followed by one Start sector per player.  Player i's home
sits on START_SLOTS[i]: revealed, owned, with a Starbase and 3 population
producing one of each resource.
"""

from expanse.data.system_tiles import (
    MAX_PLAYERS,
    START_POPULATION,
    START_RESOURCES,
    START_SLOTS,
    STATIC_TILES,
    SectorTile,
)
from expanse.models.hex_tile import Hex, SectorType, Structure
from expanse.models.player import Player


def _hex_from_tile(tile: SectorTile) -> Hex:
    return Hex(
        id=tile.tile_id,
        q=tile.q,
        r=tile.r,
        name=tile.name,
        sector_type=tile.sector_type,
        resources=list(tile.resources),
        has_enemy=tile.has_enemy,
        is_gcds=tile.is_gcds,
        has_artifact=tile.has_artifact,
        description=tile.description,
    )


def create_start_hex(player: Player, slot_index: int) -> Hex:
    slot = START_SLOTS[slot_index]
    return Hex(
        id=slot.tile_id,
        q=slot.q,
        r=slot.r,
        name=f"{player.name} Home",
        sector_type=SectorType.start,
        resources=list(START_RESOURCES),
        owner_id=player.id,
        revealed=True,
        structure=Structure.starbase,
        population=START_POPULATION,
    )


def generate_map(players: list[Player]) -> list[Hex]:
    """Return a fresh map for players, static sectors first.

    Raises ValueError if there are more players than start slots.
    """
    if len(players) > MAX_PLAYERS:
        raise ValueError(f"At most {MAX_PLAYERS} players supported, got {len(players)}")
    hexes = [_hex_from_tile(tile) for tile in STATIC_TILES]
    hexes.extend(create_start_hex(player, i) for i, player in enumerate(players))
    return hexes
