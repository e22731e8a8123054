"""Tests for fleet range, PLAN_MOVE and EXECUTE_MOVE.

Player 0's home is start1 (0, 2).  From there, range 2 reaches i6 (1 step),
and 001, i1, i5 (2 steps); i2, i3 and i4 are 3 steps away.
"""

import pytest

from expanse.data.ship_parts import ShipType
from expanse.errors import InvalidTarget, NoSelection
from expanse.models.event import NotificationLevel
from expanse.services.movement_service import (
    add_ships,
    execute_move,
    fleet_range,
    move_ships,
    plan_move,
)
from expanse.services.resource_service import create_player

_MIXED = {ShipType.interceptor: 3, ShipType.cruiser: 2}


@pytest.fixture
def fleet_state(state):
    add_ships(state, 0, "start1", _MIXED)
    return state


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------

def test_fleet_range_is_minimum_across_selected_types():
    player = create_player(0)
    assert fleet_range(player.blueprints, _MIXED) == 2
    assert fleet_range(player.blueprints, {ShipType.interceptor: 1, ShipType.dreadnought: 1}) == 1


def test_fleet_range_nothing_selected():
    player = create_player(0)
    assert fleet_range(player.blueprints, {}) == 0
    assert fleet_range(player.blueprints, {ShipType.cruiser: 0}) == 0


def test_fleet_range_uses_upgrades():
    player = create_player(0)
    player.blueprints[ShipType.dreadnought].base_movement = 3
    assert fleet_range(player.blueprints, {ShipType.dreadnought: 1}) == 3


# ---------------------------------------------------------------------------
# Fleet bookkeeping
# ---------------------------------------------------------------------------

def test_add_ships_allocates_sequential_ids(state):
    first = add_ships(state, 0, "start1", {ShipType.interceptor: 1})
    second = add_ships(state, 1, "start2", {ShipType.cruiser: 1})
    assert (first.id, second.id) == ("f1", "f2")


def test_move_ships_removes_empty_source(fleet_state):
    move_ships(fleet_state, 0, "start1", "i6", _MIXED)
    assert fleet_state.find_fleet(0, "start1") is None
    dest = fleet_state.find_fleet(0, "i6")
    assert dest.ships[ShipType.interceptor] == 3
    assert dest.ships[ShipType.cruiser] == 2


# ---------------------------------------------------------------------------
# PLAN_MOVE
# ---------------------------------------------------------------------------

def test_plan_move_mixed_fleet(fleet_state):
    plan = plan_move(fleet_state, fleet_state.players[0], _MIXED, "start1")
    assert plan.move_range == 2
    assert plan.reachable == {"i6": 1, "001": 2, "i1": 2, "i5": 2}
    assert "i2" not in plan.reachable


def test_plan_move_without_fleet(state):
    with pytest.raises(InvalidTarget):
        plan_move(state, state.players[0], {ShipType.interceptor: 1}, "start1")


def test_plan_move_more_ships_than_present(fleet_state):
    with pytest.raises(InvalidTarget):
        plan_move(fleet_state, fleet_state.players[0], {ShipType.cruiser: 3}, "start1")
    with pytest.raises(InvalidTarget):
        plan_move(fleet_state, fleet_state.players[0], {ShipType.dreadnought: 1}, "start1")


def test_plan_move_empty_selection(fleet_state):
    with pytest.raises(NoSelection):
        plan_move(fleet_state, fleet_state.players[0], {ShipType.interceptor: 0}, "start1")


def test_plan_move_nothing_in_range(fleet_state):
    fleet_state.hexes = [fleet_state.get_hex("start1")]
    with pytest.raises(InvalidTarget):
        plan_move(fleet_state, fleet_state.players[0], _MIXED, "start1")


# ---------------------------------------------------------------------------
# EXECUTE_MOVE
# ---------------------------------------------------------------------------

def test_execute_partial_move(fleet_state):
    events = execute_move(
        fleet_state, fleet_state.players[0], "start1", "i6", {ShipType.interceptor: 2}
    )
    source = fleet_state.find_fleet(0, "start1")
    dest = fleet_state.find_fleet(0, "i6")
    assert source.ships[ShipType.interceptor] == 1
    assert source.ships[ShipType.cruiser] == 2
    assert dest.ships[ShipType.interceptor] == 2
    assert events[0].level == NotificationLevel.success
    fleet_state.check_invariants()


def test_execute_move_merges_at_destination(fleet_state):
    player = fleet_state.players[0]
    execute_move(fleet_state, player, "start1", "i6", {ShipType.interceptor: 1})
    execute_move(fleet_state, player, "start1", "i6", {ShipType.interceptor: 1})
    assert len([f for f in fleet_state.fleets if f.hex_id == "i6"]) == 1
    assert fleet_state.find_fleet(0, "i6").ships[ShipType.interceptor] == 2


def test_execute_move_out_of_range(fleet_state):
    with pytest.raises(InvalidTarget):
        execute_move(fleet_state, fleet_state.players[0], "start1", "i2", _MIXED)
    assert fleet_state.find_fleet(0, "i2") is None
    assert fleet_state.find_fleet(0, "start1").total_ships == 5


def test_execute_move_into_hostile_sector_warns(fleet_state):
    events = execute_move(fleet_state, fleet_state.players[0], "start1", "001", _MIXED)
    assert events[0].level == NotificationLevel.warning


def test_execute_move_into_foreign_territory(fleet_state):
    fleet_state.get_hex("i6").owner_id = 1
    events = execute_move(
        fleet_state, fleet_state.players[0], "start1", "i6", {ShipType.cruiser: 1}
    )
    assert events[0].level == NotificationLevel.info
