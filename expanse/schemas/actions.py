"""Action requests accepted by the game store.

Every action is a pydantic model tagged by a literal ``type``; ``Action`` is
the closed union of all of them, so an action body round-trips through JSON
and the dispatcher can be checked for completeness.
"""

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, Field, NonNegativeInt, RootModel, TypeAdapter, field_validator

from expanse.data.ship_parts import ShipType

ShipCounts = dict[ShipType, NonNegativeInt]


class InitGame(BaseModel):
    type: Literal["init_game"] = "init_game"
    player_count: int = Field(ge=1, le=4)


class Explore(BaseModel):
    type: Literal["explore"] = "explore"
    hex_id: str | None = None


class ClaimSector(BaseModel):
    type: Literal["claim_sector"] = "claim_sector"
    hex_id: str


class RecallInfluence(BaseModel):
    type: Literal["recall_influence"] = "recall_influence"
    hex_id: str


class BuildStarbase(BaseModel):
    type: Literal["build_starbase"] = "build_starbase"
    hex_id: str


class Colonize(BaseModel):
    type: Literal["colonize"] = "colonize"
    hex_id: str


class ResearchTech(BaseModel):
    type: Literal["research_tech"] = "research_tech"
    tech_id: str


class ResetTechs(BaseModel):
    type: Literal["reset_techs"] = "reset_techs"


class UpgradeBlueprint(BaseModel):
    type: Literal["upgrade_blueprint"] = "upgrade_blueprint"
    ship_type: ShipType
    stat: Literal["hull", "initiative", "movement"]


class InstallPart(BaseModel):
    type: Literal["install_part"] = "install_part"
    ship_type: ShipType
    slot: int
    part_id: str


class UninstallPart(BaseModel):
    type: Literal["uninstall_part"] = "uninstall_part"
    ship_type: ShipType
    slot: int


class QueueBuild(BaseModel):
    type: Literal["queue_build"] = "queue_build"
    ship_counts: ShipCounts = Field(default_factory=dict)
    colony_ship_count: NonNegativeInt = 0
    hex_id: str


class PlanMove(BaseModel):
    type: Literal["plan_move"] = "plan_move"
    ship_counts: ShipCounts
    source_hex_id: str


class ExecuteMove(BaseModel):
    type: Literal["execute_move"] = "execute_move"
    source_hex_id: str
    dest_hex_id: str
    ship_counts: ShipCounts

    @field_validator("dest_hex_id")
    @classmethod
    def validate_dest(cls, v: str) -> str:
        if not v:
            raise ValueError("dest_hex_id must not be empty")
        return v


class ResolveCombat(BaseModel):
    type: Literal["resolve_combat"] = "resolve_combat"
    hex_id: str


class EndTurn(BaseModel):
    type: Literal["end_turn"] = "end_turn"


Action = Annotated[
    Union[
        InitGame,
        Explore,
        ClaimSector,
        RecallInfluence,
        BuildStarbase,
        Colonize,
        ResearchTech,
        ResetTechs,
        UpgradeBlueprint,
        InstallPart,
        UninstallPart,
        QueueBuild,
        PlanMove,
        ExecuteMove,
        ResolveCombat,
        EndTurn,
    ],
    Field(discriminator="type"),
]

# Concrete action models, in union order
ACTION_TYPES: tuple[type[BaseModel], ...] = get_args(get_args(Action)[0])

action_adapter: TypeAdapter = TypeAdapter(Action)


class ActionRequest(RootModel[Action]):
    """Request body wrapper so the HTTP layer can validate any action."""


def parse_action(data: dict) -> BaseModel:
    """Validate a raw action dict into its concrete action model."""
    return action_adapter.validate_python(data)
