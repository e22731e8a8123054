"""CombatLogEntry — one round-tagged line of a battle, in the order it happened."""

import enum
from typing import Literal

from pydantic import BaseModel


class LogSource(str, enum.Enum):
    player = "player"
    enemy = "enemy"
    info = "info"


class CombatLogEntry(BaseModel):
    kind: Literal["combat"] = "combat"
    round: int
    message: str
    source: LogSource
