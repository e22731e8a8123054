import enum

from pydantic import BaseModel, Field

from expanse.errors import StateInvariantError
from expanse.models.fleet import Fleet
from expanse.models.hex_tile import Hex
from expanse.models.player import Player


class GamePhase(str, enum.Enum):
    setup = "Setup"
    action = "Action Phase"
    combat = "Combat Phase"
    maintenance = "Maintenance Phase"
    cleanup = "Cleanup Phase"


# Order the phases cycle through once a game is running
PHASE_CYCLE: list[GamePhase] = [
    GamePhase.action,
    GamePhase.combat,
    GamePhase.maintenance,
    GamePhase.cleanup,
]


class GameState(BaseModel):
    """The single authoritative aggregate of a game.

    Snapshots are never mutated once published: every transition works on a
    copy (see game_service.apply_action).
    """

    round: int = 1
    phase: GamePhase = GamePhase.setup
    players: list[Player] = Field(default_factory=list)
    active_player_index: int = 0
    fleets: list[Fleet] = Field(default_factory=list)
    hexes: list[Hex] = Field(default_factory=list)
    # Successful actions by the active player since the turn started
    actions_taken: int = 0
    # Last fleet number handed out; fleet ids are "f<N>"
    fleet_seq: int = 0

    @property
    def active_player(self) -> Player:
        return self.players[self.active_player_index]

    def get_hex(self, hex_id: str) -> Hex:
        """Return the hex with hex_id.  Raises KeyError if the map has no such hex."""
        for hex_tile in self.hexes:
            if hex_tile.id == hex_id:
                return hex_tile
        raise KeyError(f"Unknown hex: '{hex_id}'")

    def get_player(self, player_id: int) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(f"Unknown player: {player_id}")

    def find_fleet(self, owner_id: int | str, hex_id: str) -> Fleet | None:
        return next(
            (f for f in self.fleets if f.owner_id == owner_id and f.hex_id == hex_id), None
        )

    def next_fleet_id(self) -> str:
        self.fleet_seq += 1
        return f"f{self.fleet_seq}"

    def check_invariants(self) -> None:
        """Raise StateInvariantError if the aggregate is inconsistent."""
        hex_ids = [h.id for h in self.hexes]
        if len(hex_ids) != len(set(hex_ids)):
            raise StateInvariantError("Duplicate hex ids on the map")

        fleet_keys = [(f.owner_id, f.hex_id) for f in self.fleets]
        if len(fleet_keys) != len(set(fleet_keys)):
            raise StateInvariantError("More than one fleet for the same owner at one hex")
        for fleet in self.fleets:
            if any(count < 0 for count in fleet.ships.values()) or fleet.total_ships == 0:
                raise StateInvariantError(f"Fleet {fleet.id} has invalid ship counts")

        if self.players and not 0 <= self.active_player_index < len(self.players):
            raise StateInvariantError(
                f"Active player index {self.active_player_index} out of range"
            )

        for player in self.players:
            if any(v < 0 for v in player.resources.values()):
                raise StateInvariantError(f"Player {player.id} has a negative balance")
            if not 0 <= player.influence.current <= player.influence.max:
                raise StateInvariantError(f"Player {player.id} influence out of range")
            inv = player.inventory
            if min(inv.population, inv.colony_ships, inv.starbases) < 0:
                raise StateInvariantError(f"Player {player.id} has negative inventory")
            if player.victory_points < 0:
                raise StateInvariantError(f"Player {player.id} has negative victory points")

        for hex_tile in self.hexes:
            if not 0 <= hex_tile.population <= len(hex_tile.resources):
                raise StateInvariantError(f"Hex {hex_tile.id} population out of range")
