"""Pydantic schemas for the research endpoints."""

from typing import Optional

from pydantic import BaseModel

from expanse.data.technologies import TechCategory
from expanse.services.research_service import TechStatus


class PlayerTechnologyResponse(BaseModel):
    id: str
    name: str
    category: TechCategory
    cost: int
    description: str
    prerequisite: Optional[str]
    unlocked: bool
    status: TechStatus
