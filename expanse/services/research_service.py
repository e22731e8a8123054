"""Research service — validates and processes RESEARCH and RESET actions.

Responsibilities:
  - Build each player's independent technology tree from the static catalog
  - Decide which technologies are locked, available or completed
  - Validate prerequisites, duplicate acquisition, and science availability
  - Refund and rebuild the tree on reset
"""

import enum

from expanse.data.technologies import Technology, get_technology, list_technologies
from expanse.errors import NotAvailable
from expanse.models.event import GameEvent, info, success
from expanse.models.player import Player, ResourceType
from expanse.models.player_technology import PlayerTech
from expanse.services.resource_service import credit, debit


class TechStatus(str, enum.Enum):
    locked = "locked"
    available = "available"
    completed = "completed"


def _player_tech(tech: Technology) -> PlayerTech:
    return PlayerTech(
        id=tech.tech_id,
        name=tech.name,
        category=tech.category,
        cost=tech.cost,
        description=tech.description,
        prerequisite=tech.prerequisite,
    )


def create_tech_tree() -> list[PlayerTech]:
    """Return a fresh, fully locked tree in catalog order."""
    return [_player_tech(tech) for tech in list_technologies()]


def _find_tech(player: Player, tech_id: str) -> PlayerTech:
    # Unknown ids are malformed input, not a rule failure
    get_technology(tech_id)
    for tech in player.techs:
        if tech.id == tech_id:
            return tech
    raise KeyError(f"Technology '{tech_id}' missing from player {player.id}'s tree")


def unlocked_ids(player: Player) -> set[str]:
    return {t.id for t in player.techs if t.unlocked}


def is_available(player: Player, tech: PlayerTech) -> bool:
    """A tech is available when it is still locked and its prerequisite (if any) is unlocked."""
    if tech.unlocked:
        return False
    return tech.prerequisite is None or tech.prerequisite in unlocked_ids(player)


def tech_status(player: Player, tech: PlayerTech) -> TechStatus:
    if tech.unlocked:
        return TechStatus.completed
    if is_available(player, tech):
        return TechStatus.available
    return TechStatus.locked


def list_available(player: Player) -> list[PlayerTech]:
    return [t for t in player.techs if is_available(player, t)]


def research(player: Player, tech_id: str) -> list[GameEvent]:
    """Unlock tech_id for player, paying its Science cost.

    Raises KeyError for an id outside the catalog, NotAvailable if the tech is
    already unlocked or its prerequisite is missing, and InsufficientScience
    if the player cannot pay.
    """
    tech = _find_tech(player, tech_id)
    if tech.unlocked:
        raise NotAvailable(f"'{tech.name}' is already researched")
    if not is_available(player, tech):
        prereq = get_technology(tech.prerequisite).name
        raise NotAvailable(f"'{tech.name}' requires '{prereq}' first")
    debit(player, ResourceType.science, tech.cost)

    tech.unlocked = True
    return [success(f"Researched {tech.name}")]


def reset_techs(player: Player) -> list[GameEvent]:
    """Refund every unlocked tech's cost in Science and replace the tree with a fresh one.

    Parts already installed on blueprints stay where they are.
    """
    refund = sum(t.cost for t in player.techs if t.unlocked)
    credit(player, ResourceType.science, refund)
    player.techs = create_tech_tree()
    return [info(f"Research reset: refunded {refund} Science")]
