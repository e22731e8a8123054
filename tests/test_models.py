"""Unit tests for the state models and GameState invariants."""

import pytest

from expanse.data.ship_parts import ShipType
from expanse.errors import StateInvariantError
from expanse.models.fleet import HOSTILE, Fleet
from expanse.models.game import GameState
from expanse.models.player import ResourceType


class TestGameStateLookups:
    def test_get_hex_unknown(self, state):
        with pytest.raises(KeyError):
            state.get_hex("nope")

    def test_get_player(self, state):
        assert state.get_player(1).name == "Commander 2"
        with pytest.raises(KeyError):
            state.get_player(9)

    def test_active_player(self, state):
        state.active_player_index = 1
        assert state.active_player.id == 1

    def test_fleet_ids_come_from_sequence(self):
        state = GameState()
        assert state.next_fleet_id() == "f1"
        assert state.next_fleet_id() == "f2"
        assert state.fleet_seq == 2

    def test_hostile_fleet_owner(self):
        fleet = Fleet(id="f1", owner_id=HOSTILE, hex_id="001")
        fleet.ships[ShipType.dreadnought] = 1
        assert fleet.owner_id == "enemy"
        assert fleet.total_ships == 1

    def test_state_round_trips_through_json(self, state):
        restored = GameState.model_validate_json(state.model_dump_json())
        assert restored == state


class TestInvariants:
    def test_fresh_game_is_consistent(self, state):
        state.check_invariants()

    def test_duplicate_hex_ids(self, state):
        state.hexes.append(state.hexes[0].model_copy())
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_two_fleets_same_owner_and_hex(self, state):
        for fleet_id in ("f1", "f2"):
            fleet = Fleet(id=fleet_id, owner_id=0, hex_id="start1")
            fleet.ships[ShipType.interceptor] = 1
            state.fleets.append(fleet)
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_empty_fleet(self, state):
        state.fleets.append(Fleet(id="f1", owner_id=0, hex_id="start1"))
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_negative_balance(self, state):
        state.players[0].resources[ResourceType.money] = -1
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_influence_above_max(self, state):
        state.players[1].influence.current = 17
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_active_index_out_of_range(self, state):
        state.active_player_index = 2
        with pytest.raises(StateInvariantError):
            state.check_invariants()

    def test_population_above_slots(self, state):
        state.get_hex("start1").population = 4
        with pytest.raises(StateInvariantError):
            state.check_invariants()
