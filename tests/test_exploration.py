"""Tests for EXPLORE, CLAIM and RECALL.

Player 0 starts at start1 (0, 2), whose only neighbour on the map is i6.
Player 1 starts at start2 (0, -2), next to i3.
"""

import pytest

from expanse.errors import (
    InsufficientInfluence,
    InsufficientMoney,
    InvalidTarget,
    NoSelection,
)
from expanse.models.event import NotificationLevel
from expanse.models.player import ResourceType
from expanse.services.exploration_service import (
    claim_sector,
    explore,
    recall_influence,
)


# ---------------------------------------------------------------------------
# EXPLORE
# ---------------------------------------------------------------------------

def test_explore_reveals_neighbours_and_costs_one_money(state):
    player = state.players[0]
    events = explore(state, player, "start1")
    assert state.get_hex("i6").revealed
    assert not state.get_hex("i3").revealed
    assert player.resources[ResourceType.money] == 1
    assert events[0].level == NotificationLevel.success


def test_explore_second_time_is_free_no_op(state):
    player = state.players[0]
    explore(state, player, "start1")
    events = explore(state, player, "start1")
    assert player.resources[ResourceType.money] == 1
    assert events[0].level == NotificationLevel.info


def test_explore_without_selection(state):
    with pytest.raises(NoSelection):
        explore(state, state.players[0], None)


def test_explore_from_uncontrolled_hex(state):
    with pytest.raises(NoSelection):
        explore(state, state.players[0], "start2")


def test_explore_without_money(state):
    player = state.players[0]
    player.resources[ResourceType.money] = 0
    with pytest.raises(InsufficientMoney):
        explore(state, player, "start1")
    assert not state.get_hex("i6").revealed


def test_explore_unknown_hex_fails_fast(state):
    with pytest.raises(KeyError):
        explore(state, state.players[0], "nowhere")


# ---------------------------------------------------------------------------
# CLAIM
# ---------------------------------------------------------------------------

def test_claim_sector(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    assert state.get_hex("i6").owner_id == 0
    assert player.influence.current == 15
    assert player.victory_points == 1


def test_claim_owned_sector_rejected(state):
    with pytest.raises(InvalidTarget):
        claim_sector(state, state.players[0], "start2")


def test_claim_hostile_sector_rejected(state):
    with pytest.raises(InvalidTarget):
        claim_sector(state, state.players[0], "001")


def test_claim_without_influence_changes_nothing(state):
    player = state.players[0]
    player.influence.current = 0
    before = state.model_copy(deep=True)
    with pytest.raises(InsufficientInfluence):
        claim_sector(state, player, "i1")
    assert state.hexes == before.hexes
    assert player.victory_points == 0


def test_influence_checked_before_target(state):
    player = state.players[0]
    player.influence.current = 0
    with pytest.raises(InsufficientInfluence):
        claim_sector(state, player, "001")
    assert state.get_hex("001").owner_id is None


# ---------------------------------------------------------------------------
# RECALL
# ---------------------------------------------------------------------------

def test_recall_home_sector_returns_everything(state):
    player = state.players[0]
    recall_influence(state, player, "start1")
    home = state.get_hex("start1")
    assert home.owner_id is None
    assert home.structure is None
    assert home.population == 0
    assert player.inventory.population == 36
    # Starbase inventory is already at its cap of 4
    assert player.inventory.starbases == 4
    assert player.influence.current == 16
    assert player.victory_points == 0


def test_recall_after_claim_restores_disc_and_vp(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    recall_influence(state, player, "i6")
    assert player.influence.current == 16
    assert player.victory_points == 0


def test_recall_returns_built_starbase(state):
    player = state.players[0]
    player.inventory.starbases = 2
    recall_influence(state, player, "start1")
    assert player.inventory.starbases == 3
    assert state.get_hex("start1").structure is None


def test_recall_foreign_sector_rejected(state):
    with pytest.raises(InvalidTarget):
        recall_influence(state, state.players[0], "start2")
