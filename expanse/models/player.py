import enum

from pydantic import BaseModel, Field

from expanse.data.ship_parts import ShipType
from expanse.models.player_technology import PlayerTech
from expanse.models.ship_blueprint import ShipBlueprint


class ResourceType(str, enum.Enum):
    money = "Money"
    science = "Science"
    materials = "Materials"


def _resource_table(money: int = 0, science: int = 0, materials: int = 0) -> dict[ResourceType, int]:
    return {
        ResourceType.money: money,
        ResourceType.science: science,
        ResourceType.materials: materials,
    }


class Influence(BaseModel):
    current: int = 16
    max: int = 16


class Inventory(BaseModel):
    # Population cubes in supply (not yet placed on a sector)
    population: int = 33
    colony_ships: int = 1
    starbases: int = 4


class Player(BaseModel):
    id: int
    name: str
    color: str
    resources: dict[ResourceType, int] = Field(
        default_factory=lambda: _resource_table(money=2, science=3, materials=3)
    )
    # Base income per round, before sector production is added
    income: dict[ResourceType, int] = Field(
        default_factory=lambda: _resource_table(money=1, science=1, materials=1)
    )
    influence: Influence = Field(default_factory=Influence)
    inventory: Inventory = Field(default_factory=Inventory)
    # Reputation earned per won battle, in the order it was earned
    reputation: list[int] = Field(default_factory=list)
    victory_points: int = 0
    techs: list[PlayerTech] = Field(default_factory=list)
    blueprints: dict[ShipType, ShipBlueprint] = Field(default_factory=dict)
