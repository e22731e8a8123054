"""Turn engine — player rotation, phase cycle and round income.

END_TURN passes play to the next player.  When play wraps back to the first
player the phase advances (Action -> Combat -> Maintenance -> Cleanup); after
Cleanup a new round starts in the Action phase and every player collects
income.

Income per round = base income + for every owned sector with population,
population x 1 of each resource slot on it.  Base income is never modified.
"""

import logging

from expanse.config import settings
from expanse.models.event import GameEvent, info, success
from expanse.models.game import PHASE_CYCLE, GamePhase, GameState
from expanse.models.player import Player, ResourceType
from expanse.services.resource_service import credit

logger = logging.getLogger(__name__)


def compute_income(state: GameState, player: Player) -> dict[ResourceType, int]:
    """Return what player collects at the start of a round, without applying it."""
    income = dict(player.income)
    for hex_tile in state.hexes:
        if hex_tile.owner_id != player.id or hex_tile.population <= 0:
            continue
        for resource in hex_tile.resources:
            income[resource] += hex_tile.population
    return income


def distribute_income(state: GameState) -> None:
    for player in state.players:
        for resource, amount in compute_income(state, player).items():
            credit(player, resource, amount)


def next_phase(phase: GamePhase) -> GamePhase:
    """Return the phase after phase; Cleanup wraps to Action."""
    index = PHASE_CYCLE.index(phase)
    return PHASE_CYCLE[(index + 1) % len(PHASE_CYCLE)]


def is_final_round(state: GameState, max_rounds: int | None = None) -> bool:
    limit = max_rounds if max_rounds is not None else settings.max_rounds
    return state.round >= limit


def end_turn(state: GameState) -> list[GameEvent]:
    """Advance to the next player, and to the next phase/round on wrap-around."""
    state.actions_taken = 0
    next_index = (state.active_player_index + 1) % len(state.players)
    if next_index != 0:
        state.active_player_index = next_index
        return [info(f"Turn: {state.players[next_index].name}")]

    state.active_player_index = 0
    state.phase = next_phase(state.phase)
    if state.phase != GamePhase.action:
        return [info(f"Phase Changed: {state.phase.value}")]

    state.round += 1
    distribute_income(state)
    logger.info("Round %d started", state.round)
    events: list[GameEvent] = [success(f"Round {state.round} Begun. Income distributed.")]
    if state.round == settings.max_rounds:
        events.append(info(f"Final round {state.round}"))
    return events
