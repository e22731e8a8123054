"""Combat service — resolves a battle between a player's fleet and a hostile sector.

Combat sequence per round:
  1. The side with the higher initiative attacks first (ties go to the player).
  2. The other side answers, if it is still alive.
  3. Repeat until one side's hull reaches 0.

Hit formula: 1d6 (+1 with Missiles) >= 3.
  - damage = attacker damage, +2 on a natural 6 (critical)
  - Shields absorb 2 damage per hit (floor 0) unless the attacker has Ion

Each fleet fights as a single combatant: hull and damage are summed over
every ship, initiative is the best of the ship types present and specials
are shared by the whole fleet.

The resolver is a pure step function: advance_one_exchange() performs one
attack and returns the new CombatState plus its log lines, so a caller can
pace the battle however it likes.  run_full_combat() drives it to the end.

Every combatant deals at least 1 damage and a critical always beats Shields,
so a battle ends with probability 1.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from expanse.data.ship_parts import ShipType
from expanse.errors import InvalidTarget
from expanse.models.combat_log import CombatLogEntry, LogSource
from expanse.models.event import GameEvent
from expanse.models.fleet import Fleet
from expanse.models.game import GameState
from expanse.models.hex_tile import Hex
from expanse.models.player import Player, ResourceType
from expanse.services.resource_service import credit, debit_floored
from expanse.services.ship_service import compute_specials, compute_stats

logger = logging.getLogger(__name__)

HIT_THRESHOLD = 3
CRITICAL_ROLL = 6
CRITICAL_BONUS = 2
SHIELD_ABSORB = 2

VICTORY_MATERIALS = 2
VICTORY_SCIENCE = 2
DEFEAT_MATERIALS = 2
REPUTATION_RANGE = (1, 4)


# ---------------------------------------------------------------------------
# Combat stats dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Combatant:
    """One side of a battle, aggregated over all of its ships."""
    name: str
    hull: int
    max_hull: int
    damage: int
    initiative: int
    is_player: bool
    has_shields: bool = False
    has_ion: bool = False
    has_missiles: bool = False
    has_plasma: bool = False


@dataclass(frozen=True)
class CombatState:
    player: Combatant
    enemy: Combatant
    round: int = 1
    # 0 = the faster side attacks next, 1 = the slower side answers
    step: int = 0
    finished: bool = False

    @property
    def victory(self) -> bool:
        return self.player.hull > 0


@dataclass(frozen=True)
class AttackResult:
    roll: int
    hit: bool
    critical: bool
    damage: int
    absorbed: bool = False
    ion_bypassed: bool = False

    @property
    def outcome(self) -> str:
        if self.damage > 0:
            return f"HIT for {self.damage}"
        return "BLOCKED" if self.hit else "MISS"


# ---------------------------------------------------------------------------
# Hostile predefined stats
# ---------------------------------------------------------------------------

def _gcds_stats() -> Combatant:
    """Stats for the Galactic Center Defense System, the central guardian."""
    return Combatant(
        name="G.C.D.S. Omega",
        hull=30,
        max_hull=30,
        damage=7,
        initiative=6,
        is_player=False,
        has_shields=True,
        has_missiles=True,
        has_plasma=True,
    )


def _ancient_guardian_stats() -> Combatant:
    return Combatant(
        name="Ancient Guardian",
        hull=8,
        max_hull=8,
        damage=3,
        initiative=2,
        is_player=False,
    )


def enemy_for_hex(hex_tile: Hex) -> Combatant:
    """Return the hostile combatant defending hex_tile."""
    if hex_tile.is_gcds:
        return _gcds_stats()
    return _ancient_guardian_stats()


# ---------------------------------------------------------------------------
# Player fleet stats (computed from blueprints)
# ---------------------------------------------------------------------------

def build_player_combatant(player: Player, ship_counts: dict[ShipType, int]) -> Combatant:
    """Aggregate the ships in ship_counts into one combatant using player's blueprints."""
    present = {ShipType(t): n for t, n in ship_counts.items() if n > 0}
    if not present:
        raise InvalidTarget("No ships to fight with")

    hull = damage = 0
    initiatives: list[int] = []
    specials = {"has_shields": False, "has_ion": False, "has_missiles": False, "has_plasma": False}
    for ship_type, count in present.items():
        bp = player.blueprints[ship_type]
        stats = compute_stats(bp)
        hull += stats.hull * count
        damage += stats.damage * count
        initiatives.append(stats.initiative)
        bp_specials = compute_specials(bp)
        for key in specials:
            specials[key] = specials[key] or getattr(bp_specials, key)
    return Combatant(
        name=player.name,
        hull=hull,
        max_hull=hull,
        damage=damage,
        initiative=max(initiatives),
        is_player=True,
        **specials,
    )


# ---------------------------------------------------------------------------
# Hit resolution
# ---------------------------------------------------------------------------

def resolve_attack(attacker: Combatant, defender: Combatant, roll: int) -> AttackResult:
    """Deterministic attack resolution for a given natural d6 roll."""
    effective = roll + (1 if attacker.has_missiles else 0)
    hit = effective >= HIT_THRESHOLD
    if not hit:
        return AttackResult(roll=roll, hit=False, critical=False, damage=0)

    critical = roll == CRITICAL_ROLL
    damage = attacker.damage + (CRITICAL_BONUS if critical else 0)
    absorbed = defender.has_shields and not attacker.has_ion
    if absorbed:
        damage = max(damage - SHIELD_ABSORB, 0)
    return AttackResult(
        roll=roll,
        hit=True,
        critical=critical,
        damage=damage,
        absorbed=absorbed,
        ion_bypassed=defender.has_shields and attacker.has_ion,
    )


def roll_attack(attacker: Combatant, defender: Combatant, rng: random.Random) -> AttackResult:
    return resolve_attack(attacker, defender, rng.randint(1, 6))


# ---------------------------------------------------------------------------
# Step function
# ---------------------------------------------------------------------------

def begin_combat(player: Combatant, enemy: Combatant) -> CombatState:
    return CombatState(player=player, enemy=enemy)


def _player_goes_first(state: CombatState) -> bool:
    return state.player.initiative >= state.enemy.initiative


def advance_one_exchange(
    state: CombatState, rng: random.Random
) -> tuple[CombatState, list[CombatLogEntry], bool]:
    """Perform the next single attack of the battle.

    Returns (new_state, log_entries, finished).  The round header is logged
    before the first attack of each round.  Calling this on a finished state
    changes nothing and returns no entries.
    """
    if state.finished:
        return state, [], True

    entries: list[CombatLogEntry] = []
    if state.step == 0:
        entries.append(
            CombatLogEntry(round=state.round, message=f"--- Round {state.round} ---",
                           source=LogSource.info)
        )

    player_attacks = _player_goes_first(state) == (state.step == 0)
    attacker = state.player if player_attacks else state.enemy
    defender = state.enemy if player_attacks else state.player

    result = roll_attack(attacker, defender, rng)
    defender = replace(defender, hull=defender.hull - result.damage)
    entries.append(
        CombatLogEntry(
            round=state.round,
            message=f"{attacker.name} rolls {result.roll}: {result.outcome}",
            source=LogSource.player if attacker.is_player else LogSource.enemy,
        )
    )

    if player_attacks:
        new_state = replace(state, enemy=defender)
    else:
        new_state = replace(state, player=defender)

    if defender.hull <= 0:
        return replace(new_state, finished=True), entries, True
    if state.step == 0:
        return replace(new_state, step=1), entries, False
    return replace(new_state, step=0, round=state.round + 1), entries, False


def run_full_combat(
    player: Combatant, enemy: Combatant, rng: random.Random
) -> tuple[CombatState, list[CombatLogEntry]]:
    """Run the step function to completion.  Returns the final state and the whole log."""
    state = begin_combat(player, enemy)
    log: list[CombatLogEntry] = []
    finished = False
    while not finished:
        state, entries, finished = advance_one_exchange(state, rng)
        log.extend(entries)
    return state, log


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

def apply_combat_outcome(
    player: Player, hex_tile: Hex, final: CombatState, rng: random.Random
) -> list[CombatLogEntry]:
    """Apply rewards or penalties for a finished battle and return the closing log line.

    Victory clears the sector's hostiles, pays VICTORY_MATERIALS and
    VICTORY_SCIENCE and draws a reputation tile worth 1-4 VP.  Defeat costs
    DEFEAT_MATERIALS (never below 0).  Fleets are not touched either way.
    """
    if final.victory:
        reputation = rng.randint(*REPUTATION_RANGE)
        hex_tile.has_enemy = False
        hex_tile.is_gcds = False
        credit(player, ResourceType.materials, VICTORY_MATERIALS)
        credit(player, ResourceType.science, VICTORY_SCIENCE)
        player.reputation.append(reputation)
        player.victory_points += reputation
        message = f"Sector Secured. Reputation: {reputation} VP"
    else:
        debit_floored(player, ResourceType.materials, DEFEAT_MATERIALS)
        message = "Fleet critical failure. Retreating."
    return [CombatLogEntry(round=final.round, message=message, source=LogSource.info)]


def resolve_combat(
    state: GameState, player: Player, hex_id: str, rng: random.Random
) -> list[GameEvent]:
    """Fight the hostiles at hex_id with the player's fleet stationed there.

    Raises InvalidTarget if the sector holds no hostiles or the player has no
    fleet in it.
    """
    hex_tile = state.get_hex(hex_id)
    if not hex_tile.is_hostile:
        raise InvalidTarget(f"No hostiles at {hex_tile.name}")
    fleet: Fleet | None = state.find_fleet(player.id, hex_id)
    if fleet is None or fleet.total_ships == 0:
        raise InvalidTarget(f"You have no fleet at {hex_tile.name}")

    player_side = build_player_combatant(player, fleet.ships)
    enemy_side = enemy_for_hex(hex_tile)
    final, log = run_full_combat(player_side, enemy_side, rng)
    log.extend(apply_combat_outcome(player, hex_tile, final, rng))
    logger.info(
        "Combat at %s: player %s %s after %d round(s)",
        hex_id, player.id, "won" if final.victory else "lost", final.round,
    )
    return list(log)
