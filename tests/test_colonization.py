"""Tests for BUILD_STARBASE and COLONIZE."""

import pytest

from expanse.errors import (
    CapacityExceeded,
    InsufficientMaterials,
    InvalidTarget,
    NotAvailable,
)
from expanse.models.hex_tile import Structure
from expanse.models.player import ResourceType
from expanse.services.colony_service import build_starbase, colonize
from expanse.services.exploration_service import claim_sector


# ---------------------------------------------------------------------------
# BUILD_STARBASE
# ---------------------------------------------------------------------------

def test_build_starbase_on_claimed_sector(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    build_starbase(state, player, "i6")
    assert state.get_hex("i6").structure == Structure.starbase
    assert player.resources[ResourceType.materials] == 0
    assert player.inventory.starbases == 3


def test_build_starbase_on_unowned_sector(state):
    with pytest.raises(InvalidTarget):
        build_starbase(state, state.players[0], "i6")


def test_build_starbase_where_one_exists(state):
    with pytest.raises(CapacityExceeded):
        build_starbase(state, state.players[0], "start1")


def test_build_starbase_without_inventory(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    player.inventory.starbases = 0
    with pytest.raises(NotAvailable):
        build_starbase(state, player, "i6")


def test_build_starbase_without_materials(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    player.resources[ResourceType.materials] = 2
    with pytest.raises(InsufficientMaterials):
        build_starbase(state, player, "i6")
    assert state.get_hex("i6").structure is None
    assert player.inventory.starbases == 4
    assert player.resources[ResourceType.materials] == 2


# ---------------------------------------------------------------------------
# COLONIZE
# ---------------------------------------------------------------------------

def test_colonize_claimed_sector(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    colonize(state, player, "i6")
    assert state.get_hex("i6").population == 1
    assert player.inventory.colony_ships == 0
    assert player.inventory.population == 32


def test_colonize_full_sector(state):
    # Home sector starts with 3 population in 3 slots
    with pytest.raises(CapacityExceeded):
        colonize(state, state.players[0], "start1")


def test_colonize_without_colony_ship(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    colonize(state, player, "i6")
    with pytest.raises(NotAvailable):
        colonize(state, player, "i6")
    assert state.get_hex("i6").population == 1


def test_colonize_without_population(state):
    player = state.players[0]
    claim_sector(state, player, "i6")
    player.inventory.population = 0
    with pytest.raises(NotAvailable):
        colonize(state, player, "i6")


def test_colonize_foreign_sector(state):
    with pytest.raises(InvalidTarget):
        colonize(state, state.players[0], "start2")


def test_population_never_exceeds_slots(state):
    player = state.players[0]
    claim_sector(state, player, "i4")  # Wolf 359: one slot
    player.inventory.colony_ships = 3
    colonize(state, player, "i4")
    with pytest.raises(CapacityExceeded):
        colonize(state, player, "i4")
    assert state.get_hex("i4").population == 1
    state.check_invariants()
