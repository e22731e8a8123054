"""Events emitted by action handlers alongside the new state.

Notifications are the confirmations and warnings a client shows after an
action; combat log entries come from the combat resolver.  Both carry a
``kind`` tag so a mixed list round-trips through JSON.
"""

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from expanse.models.combat_log import CombatLogEntry


class NotificationLevel(str, enum.Enum):
    info = "info"
    success = "success"
    warning = "warning"


class Notification(BaseModel):
    kind: Literal["notification"] = "notification"
    level: NotificationLevel = NotificationLevel.info
    message: str


GameEvent = Annotated[Union[Notification, CombatLogEntry], Field(discriminator="kind")]


def info(message: str) -> Notification:
    return Notification(level=NotificationLevel.info, message=message)


def success(message: str) -> Notification:
    return Notification(level=NotificationLevel.success, message=message)


def warning(message: str) -> Notification:
    return Notification(level=NotificationLevel.warning, message=message)
