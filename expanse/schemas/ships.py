"""Pydantic schemas for the blueprint endpoints."""

from typing import Optional

from pydantic import BaseModel

from expanse.data.ship_parts import ShipType


class BlueprintStatsResponse(BaseModel):
    hull: int
    initiative: int
    movement: int
    damage: int


class BlueprintSpecialsResponse(BaseModel):
    has_shields: bool
    has_ion: bool
    has_missiles: bool
    has_plasma: bool


class BlueprintResponse(BaseModel):
    type: ShipType
    slots: int
    installed_parts: list[Optional[str]]
    cost: int
    stats: BlueprintStatsResponse
    specials: BlueprintSpecialsResponse
