from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridpath.runtime.types import INITIAL_DISTANCE


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1
    json_lines: bool = False  # install a JSON stdout handler instead of using the host's
    run_id: str = "local"

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    graph_type: Literal["distance_2d", "square", "hexagonal"] = "distance_2d"


# ----------------- HEURISTICS ---------------------


class HeuristicEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class HeuristicManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


class HeuristicZeroModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


HeuristicUnion = Annotated[
    HeuristicEuclideanModel | HeuristicManhattanModel | HeuristicZeroModel,
    Field(discriminator="kind"),
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicUnion = Field(default_factory=HeuristicEuclideanModel)
    initial_distance: int = INITIAL_DISTANCE

    @field_validator("initial_distance")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("initial_distance must be > 0")
        return v


# ------------------------------------------------------------------


class PathfinderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    graph: GraphModel = Field(default_factory=GraphModel)
    search: SearchModel = Field(default_factory=SearchModel)
    log: LogModel = Field(default_factory=LogModel)
