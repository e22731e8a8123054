import enum

from pydantic import BaseModel, Field

from expanse.models.player import ResourceType


class SectorType(str, enum.Enum):
    core = "Core"
    inner = "Inner"
    middle = "Middle"
    outer = "Outer"
    start = "Start"


class Structure(str, enum.Enum):
    starbase = "Starbase"
    monolith = "Monolith"


class Hex(BaseModel):
    id: str
    q: int
    r: int
    name: str
    sector_type: SectorType
    # One production slot per entry; population may not exceed len(resources)
    resources: list[ResourceType] = Field(default_factory=list)
    owner_id: int | None = None
    has_enemy: bool = False
    # Galactic Center Defense System guards this sector
    is_gcds: bool = False
    has_artifact: bool = False
    description: str | None = None
    revealed: bool = False
    structure: Structure | None = None
    population: int = 0

    @property
    def is_hostile(self) -> bool:
        return self.has_enemy or self.is_gcds
