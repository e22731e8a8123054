from typing import Literal

from pydantic import BaseModel, Field

from expanse.data.ship_parts import ShipType

# Owner marker for the static hostile fleets
HOSTILE = "enemy"


def empty_ship_counts() -> dict[ShipType, int]:
    return {ship_type: 0 for ship_type in ShipType}


class Fleet(BaseModel):
    id: str
    owner_id: int | Literal["enemy"]
    hex_id: str
    ships: dict[ShipType, int] = Field(default_factory=empty_ship_counts)

    @property
    def total_ships(self) -> int:
        return sum(self.ships.values())
