"""ShipBlueprint model — base chassis stats plus installed parts for one ship type."""

from pydantic import BaseModel

from expanse.data.ship_parts import ShipType


class ShipBlueprint(BaseModel):
    """The design a player builds ships of one type from.

    installed_parts always has exactly ``slots`` entries: a part_id, or None
    for an empty slot.  Upgrades raise the base_* stats directly; parts add
    their deltas on top (see ship_service.compute_stats).
    """

    type: ShipType
    slots: int
    installed_parts: list[str | None]
    base_hull: int
    base_initiative: int
    base_movement: int
    base_damage: int
    cost: int
