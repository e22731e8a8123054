"""Axial hex-grid geometry: distance, adjacency and movement reach.

Uses axial coordinates (pointy-top hexagons):
  Direction 0: (q+1, r  ) - East
  Direction 1: (q+1, r-1) - North-East
  Direction 2: (q,   r-1) - North-West
  Direction 3: (q-1, r  ) - West
  Direction 4: (q-1, r+1) - South-West
  Direction 5: (q,   r+1) - South-East

Every function accepts anything with integer ``q`` and ``r`` attributes, so
the same code serves map Hex models and bare coordinates.
"""

from typing import Iterable, NamedTuple, Protocol

# Axial direction vectors for pointy-top hexagons
DIRECTIONS = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]


class Axial(Protocol):
    q: int
    r: int


class HexCoord(NamedTuple):
    q: int
    r: int


def hex_distance(a: Axial, b: Axial) -> int:
    """Return the number of steps between two hexes.

    (|dq| + |dr| + |dq + dr|) / 2, which is the cube-coordinate max norm
    written in axial terms.  Always an integer.
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


def is_neighbor(a: Axial, b: Axial) -> bool:
    """Return True if the hexes share an edge (distance exactly 1)."""
    dq = a.q - b.q
    dr = a.r - b.r
    if dq == 0 and dr == 0:
        return False
    return abs(dq) <= 1 and abs(dr) <= 1 and abs(dq + dr) <= 1


def hex_neighbors(origin: Axial) -> list[HexCoord]:
    """Return the 6 axial-coordinate neighbors of origin, in direction order."""
    return [HexCoord(origin.q + dq, origin.r + dr) for dq, dr in DIRECTIONS]


def neighbors_of(origin: Axial, hexes: Iterable[Axial]) -> list:
    """Return the members of hexes that are adjacent to origin."""
    return [h for h in hexes if is_neighbor(origin, h)]


def reachable_set(origin, hexes: Iterable, move_range: int) -> dict[str, int]:
    """Return {hex_id: distance} for every other hex within move_range of origin.

    The distance doubles as the movement cost.  A range of 0 (or less) reaches
    nothing, and the origin itself is never included.
    """
    if move_range <= 0:
        return {}
    costs: dict[str, int] = {}
    for hex_tile in hexes:
        if hex_tile.id == origin.id:
            continue
        dist = hex_distance(origin, hex_tile)
        if dist <= move_range:
            costs[hex_tile.id] = dist
    return costs
