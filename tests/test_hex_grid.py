"""Tests for hex-grid geometry.

Covers:
- hex_distance: identity, symmetry, known values
- is_neighbor agrees with distance == 1
- reachable_set: exact membership, origin excluded, range 0
- neighbors_of against the generated map
"""

import itertools

from expanse.services.hex_grid import (
    DIRECTIONS,
    HexCoord,
    hex_distance,
    hex_neighbors,
    is_neighbor,
    neighbors_of,
    reachable_set,
)
from expanse.services.map_generator import generate_map
from expanse.services.resource_service import create_player

_COORDS = [HexCoord(q, r) for q in range(-3, 4) for r in range(-3, 4)]


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------

def test_distance_identity():
    for c in _COORDS:
        assert hex_distance(c, c) == 0


def test_distance_symmetry():
    for a, b in itertools.combinations(_COORDS, 2):
        assert hex_distance(a, b) == hex_distance(b, a)


def test_distance_known_values():
    origin = HexCoord(0, 0)
    assert hex_distance(origin, HexCoord(1, 0)) == 1
    assert hex_distance(origin, HexCoord(1, -1)) == 1
    assert hex_distance(origin, HexCoord(1, 1)) == 2
    assert hex_distance(origin, HexCoord(0, 2)) == 2
    assert hex_distance(origin, HexCoord(2, -1)) == 2
    assert hex_distance(HexCoord(0, 2), HexCoord(0, -2)) == 4
    assert hex_distance(HexCoord(-3, 3), HexCoord(3, -3)) == 6


def test_every_direction_is_one_step():
    for dq, dr in DIRECTIONS:
        assert hex_distance(HexCoord(0, 0), HexCoord(dq, dr)) == 1


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------

def test_is_neighbor_agrees_with_distance():
    for a, b in itertools.product(_COORDS, repeat=2):
        assert is_neighbor(a, b) == (hex_distance(a, b) == 1)


def test_hex_is_not_its_own_neighbor():
    assert not is_neighbor(HexCoord(2, -1), HexCoord(2, -1))


def test_hex_neighbors_returns_six_in_direction_order():
    result = hex_neighbors(HexCoord(1, 1))
    assert result == [HexCoord(1 + dq, 1 + dr) for dq, dr in DIRECTIONS]


def test_neighbors_of_galactic_center_is_inner_ring():
    players = [create_player(0), create_player(1)]
    hexes = generate_map(players)
    center = next(h for h in hexes if h.id == "001")
    ids = {h.id for h in neighbors_of(center, hexes)}
    assert ids == {"i1", "i2", "i3", "i4", "i5", "i6"}


# ---------------------------------------------------------------------------
# Reachable set
# ---------------------------------------------------------------------------

def _map_hexes():
    players = [create_player(i) for i in range(4)]
    return generate_map(players)


def test_reachable_set_range_zero_is_empty():
    hexes = _map_hexes()
    assert reachable_set(hexes[0], hexes, 0) == {}


def test_reachable_set_excludes_origin():
    hexes = _map_hexes()
    origin = hexes[0]
    assert origin.id not in reachable_set(origin, hexes, 5)


def test_reachable_set_exact_membership():
    hexes = _map_hexes()
    by_id = {h.id: h for h in hexes}
    origin = by_id["start1"]  # (0, 2)
    result = reachable_set(origin, hexes, 2)
    expected = {
        h.id: hex_distance(origin, h)
        for h in hexes
        if h.id != origin.id and hex_distance(origin, h) <= 2
    }
    assert result == expected
    # start2 at (0, -2) is 4 steps away
    assert "start2" not in result
    assert result["i6"] == 1
    assert result["001"] == 2


def test_reachable_set_range_one_from_center():
    hexes = _map_hexes()
    center = next(h for h in hexes if h.id == "001")
    result = reachable_set(center, hexes, 1)
    assert set(result) == {"i1", "i2", "i3", "i4", "i5", "i6"}
    assert set(result.values()) == {1}
