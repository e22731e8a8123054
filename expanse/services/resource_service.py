"""Resource ledger for player economies.

Every debit goes through debit(), which refuses to take a balance below zero,
so handlers can call it as their last validation step and rely on the
all-or-nothing contract.
"""

from expanse.data.system_tiles import PLAYER_COLORS
from expanse.errors import (
    InsufficientFunds,
    InsufficientMaterials,
    InsufficientMoney,
    InsufficientScience,
)
from expanse.models.player import Player, ResourceType

_SHORTFALL_ERRORS: dict[ResourceType, type[InsufficientFunds]] = {
    ResourceType.money: InsufficientMoney,
    ResourceType.science: InsufficientScience,
    ResourceType.materials: InsufficientMaterials,
}


def create_player(player_id: int) -> Player:
    """Return a player with the starting economy, a fresh tech tree and default blueprints."""
    # Local imports: both services depend on this module for debits
    from expanse.services.research_service import create_tech_tree
    from expanse.services.ship_service import create_blueprints

    return Player(
        id=player_id,
        name=f"Commander {player_id + 1}",
        color=PLAYER_COLORS[player_id % len(PLAYER_COLORS)],
        techs=create_tech_tree(),
        blueprints=create_blueprints(),
    )


def can_afford(player: Player, resource: ResourceType, amount: int) -> bool:
    return player.resources[resource] >= amount


def require(player: Player, resource: ResourceType, amount: int) -> None:
    """Raise the resource-specific InsufficientFunds if player cannot pay amount."""
    available = player.resources[resource]
    if available < amount:
        raise _SHORTFALL_ERRORS[resource](amount, available)


def debit(player: Player, resource: ResourceType, amount: int) -> None:
    """Take amount of resource from player.

    Raises InsufficientMoney / InsufficientScience / InsufficientMaterials
    (all InsufficientFunds) and leaves the balance untouched if it would go
    negative.
    """
    if amount < 0:
        raise ValueError(f"Cannot debit a negative amount: {amount}")
    require(player, resource, amount)
    player.resources[resource] -= amount


def credit(player: Player, resource: ResourceType, amount: int) -> None:
    if amount < 0:
        raise ValueError(f"Cannot credit a negative amount: {amount}")
    player.resources[resource] += amount


def debit_floored(player: Player, resource: ResourceType, amount: int) -> int:
    """Take up to amount of resource, stopping at zero.  Returns what was taken."""
    taken = min(amount, player.resources[resource])
    player.resources[resource] -= taken
    return taken

