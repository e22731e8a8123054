"""Game service — session setup and the action dispatcher.

apply_action() is the single state transition: it copies the current
snapshot, runs the handler registered for the action's type against the
copy, checks the GameState invariants and hands back the new snapshot.  The
snapshot passed in is never touched, so a failed action leaves nothing
behind.

GameStore wraps one game: it owns the current snapshot and the random
source, and swaps snapshots only after apply_action() succeeds.
"""

import logging
import random
from typing import Callable

from pydantic import BaseModel, Field

from expanse.config import settings
from expanse.errors import GameError, NotAvailable, NotYourTurn, StateInvariantError
from expanse.models.event import GameEvent, success
from expanse.models.game import GamePhase, GameState
from expanse.schemas import actions as a
from expanse.schemas.actions import Action, parse_action
from expanse.services import (
    colony_service,
    combat_service,
    exploration_service,
    movement_service,
    research_service,
    ship_service,
    turn_engine,
)
from expanse.services.map_generator import generate_map
from expanse.services.movement_service import MovePlan
from expanse.services.resource_service import create_player

logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    state: GameState
    events: list[GameEvent] = Field(default_factory=list)
    move_plan: MovePlan | None = None


HandlerResult = tuple[list[GameEvent], MovePlan | None]
Handler = Callable[[GameState, BaseModel, random.Random], HandlerResult]


# ---------------------------------------------------------------------------
# Session setup
# ---------------------------------------------------------------------------

def init_game(state: GameState, player_count: int) -> list[GameEvent]:
    """Populate an empty state with player_count players and a fresh map.

    Raises ValueError if player_count is outside 1-4.
    """
    if not 1 <= player_count <= 4:
        raise ValueError(f"player_count must be between 1 and 4, got {player_count}")
    state.players = [create_player(i) for i in range(player_count)]
    state.hexes = generate_map(state.players)
    state.fleets = []
    state.fleet_seq = 0
    state.round = 1
    state.phase = GamePhase.action
    state.active_player_index = 0
    state.actions_taken = 0
    return [success(f"Game started with {player_count} commander{'s' if player_count != 1 else ''}")]


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _init_game(state: GameState, action: a.InitGame, rng: random.Random) -> HandlerResult:
    if state.phase != GamePhase.setup:
        raise NotAvailable("The game has already started")
    return init_game(state, action.player_count), None


def _explore(state: GameState, action: a.Explore, rng: random.Random) -> HandlerResult:
    return exploration_service.explore(state, state.active_player, action.hex_id), None


def _claim_sector(state: GameState, action: a.ClaimSector, rng: random.Random) -> HandlerResult:
    return exploration_service.claim_sector(state, state.active_player, action.hex_id), None


def _recall_influence(state: GameState, action: a.RecallInfluence, rng: random.Random) -> HandlerResult:
    return exploration_service.recall_influence(state, state.active_player, action.hex_id), None


def _build_starbase(state: GameState, action: a.BuildStarbase, rng: random.Random) -> HandlerResult:
    return colony_service.build_starbase(state, state.active_player, action.hex_id), None


def _colonize(state: GameState, action: a.Colonize, rng: random.Random) -> HandlerResult:
    return colony_service.colonize(state, state.active_player, action.hex_id), None


def _research_tech(state: GameState, action: a.ResearchTech, rng: random.Random) -> HandlerResult:
    return research_service.research(state.active_player, action.tech_id), None


def _reset_techs(state: GameState, action: a.ResetTechs, rng: random.Random) -> HandlerResult:
    return research_service.reset_techs(state.active_player), None


def _upgrade_blueprint(state: GameState, action: a.UpgradeBlueprint, rng: random.Random) -> HandlerResult:
    return ship_service.upgrade_blueprint(state.active_player, action.ship_type, action.stat), None


def _install_part(state: GameState, action: a.InstallPart, rng: random.Random) -> HandlerResult:
    events = ship_service.install_part(
        state.active_player, action.ship_type, action.slot, action.part_id
    )
    return events, None


def _uninstall_part(state: GameState, action: a.UninstallPart, rng: random.Random) -> HandlerResult:
    return ship_service.uninstall_part(state.active_player, action.ship_type, action.slot), None


def _queue_build(state: GameState, action: a.QueueBuild, rng: random.Random) -> HandlerResult:
    events = ship_service.queue_build(
        state, state.active_player, action.ship_counts, action.colony_ship_count, action.hex_id
    )
    return events, None


def _plan_move(state: GameState, action: a.PlanMove, rng: random.Random) -> HandlerResult:
    plan = movement_service.plan_move(
        state, state.active_player, action.ship_counts, action.source_hex_id
    )
    return [], plan


def _execute_move(state: GameState, action: a.ExecuteMove, rng: random.Random) -> HandlerResult:
    events = movement_service.execute_move(
        state, state.active_player, action.source_hex_id, action.dest_hex_id, action.ship_counts
    )
    return events, None


def _resolve_combat(state: GameState, action: a.ResolveCombat, rng: random.Random) -> HandlerResult:
    return combat_service.resolve_combat(state, state.active_player, action.hex_id, rng), None


def _end_turn(state: GameState, action: a.EndTurn, rng: random.Random) -> HandlerResult:
    return turn_engine.end_turn(state), None


_HANDLERS: dict[type[BaseModel], Handler] = {
    a.InitGame: _init_game,
    a.Explore: _explore,
    a.ClaimSector: _claim_sector,
    a.RecallInfluence: _recall_influence,
    a.BuildStarbase: _build_starbase,
    a.Colonize: _colonize,
    a.ResearchTech: _research_tech,
    a.ResetTechs: _reset_techs,
    a.UpgradeBlueprint: _upgrade_blueprint,
    a.InstallPart: _install_part,
    a.UninstallPart: _uninstall_part,
    a.QueueBuild: _queue_build,
    a.PlanMove: _plan_move,
    a.ExecuteMove: _execute_move,
    a.ResolveCombat: _resolve_combat,
    a.EndTurn: _end_turn,
}

# Actions that do not count towards the active player's actions this turn
_UNCOUNTED = (a.InitGame, a.PlanMove, a.EndTurn)


# ---------------------------------------------------------------------------
# Transition
# ---------------------------------------------------------------------------

def apply_action(
    state: GameState,
    action: Action,
    rng: random.Random,
    player_id: int | None = None,
) -> tuple[GameState, list[GameEvent], MovePlan | None]:
    """Apply action to a copy of state and return (new_state, events, move_plan).

    Raises a GameError subclass for a rule violation, KeyError/ValueError for
    malformed input and StateInvariantError if the result is inconsistent.
    state itself is never modified.
    """
    if not isinstance(action, a.InitGame):
        if state.phase == GamePhase.setup:
            raise NotAvailable("Start a game first")
        if player_id is not None and player_id != state.active_player.id:
            raise NotYourTurn(f"It is {state.active_player.name}'s turn")

    handler = _HANDLERS[type(action)]
    working = state.model_copy(deep=True)
    events, plan = handler(working, action, rng)

    if isinstance(action, a.PlanMove):
        # Planning is read-only; hand back the original snapshot
        return state, events, plan
    if not isinstance(action, _UNCOUNTED):
        working.actions_taken += 1
    try:
        working.check_invariants()
    except StateInvariantError:
        logger.error("Action %s broke a state invariant", action.type, exc_info=True)
        raise
    return working, events, plan


class GameStore:
    """Holds the authoritative snapshot of one game and applies actions to it."""

    def __init__(
        self,
        state: GameState | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        self._state = state if state is not None else GameState()
        if rng is None:
            rng = random.Random(seed if seed is not None else settings.rng_seed)
        self.rng = rng

    @property
    def state(self) -> GameState:
        return self._state

    def dispatch(self, action: Action | dict, player_id: int | None = None) -> ActionResult:
        """Apply one action and publish the resulting snapshot.

        A dict is validated into its action model first.  On any failure the
        published snapshot is left as it was and the error propagates.
        """
        if isinstance(action, dict):
            action = parse_action(action)
        actor = self._state.active_player.id if self._state.players else None
        try:
            new_state, events, plan = apply_action(self._state, action, self.rng, player_id)
        except GameError as exc:
            logger.info("Rejected %s (%s): %s", action.type, exc.code, exc.message)
            raise
        self._state = new_state
        logger.info(
            "Applied %s for player %s (round %d, %s)",
            action.type,
            actor,
            self._state.round,
            self._state.phase.value,
        )
        return ActionResult(state=new_state, events=events, move_plan=plan)
