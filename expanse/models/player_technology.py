"""PlayerTech model — one player's copy of a technology tile and its unlock state."""

from pydantic import BaseModel

from expanse.data.technologies import TechCategory


class PlayerTech(BaseModel):
    """A technology as owned by one player.

    Built from the static catalog by research_service.create_tech_tree so every
    player's unlock state is independent.
    """

    id: str
    name: str
    category: TechCategory
    cost: int
    description: str = ""
    unlocked: bool = False
    prerequisite: str | None = None
