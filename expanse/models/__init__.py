from expanse.models.combat_log import CombatLogEntry, LogSource  # noqa: F401
from expanse.models.event import GameEvent, Notification, NotificationLevel  # noqa: F401
from expanse.models.fleet import HOSTILE, Fleet  # noqa: F401
from expanse.models.game import GamePhase, GameState  # noqa: F401
from expanse.models.hex_tile import Hex, SectorType, Structure  # noqa: F401
from expanse.models.player import Influence, Inventory, Player, ResourceType  # noqa: F401
from expanse.models.player_technology import PlayerTech  # noqa: F401
from expanse.models.ship_blueprint import ShipBlueprint  # noqa: F401
