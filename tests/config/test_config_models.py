import pytest
from pydantic import ValidationError

from gridpath.config.models import HeuristicManhattanModel, PathfinderModel
from gridpath.runtime.types import INITIAL_DISTANCE


def test_defaults():
    m = PathfinderModel()
    assert m.graph.graph_type == "distance_2d"
    assert m.search.heuristic.kind == "euclidean"
    assert m.search.initial_distance == INITIAL_DISTANCE
    assert m.log.level == "INFO" and not m.log.json_lines


def test_heuristic_discriminator():
    m = PathfinderModel.model_validate({"search": {"heuristic": {"kind": "manhattan"}}})
    assert isinstance(m.search.heuristic, HeuristicManhattanModel)


@pytest.mark.parametrize(
    "cfg",
    [
        {"graph": {"graph_type": "triangle"}},
        {"search": {"heuristic": {"kind": "octile"}}},
        {"search": {"initial_distance": 0}},
        {"log": {"sample_every": 0}},
        {"log": {"level": "TRACE"}},
        {"unknown": 1},
        {"graph": {"graph_type": "square", "extra": True}},
    ],
)
def test_rejects_bad_config(cfg):
    with pytest.raises(ValidationError):
        PathfinderModel.model_validate(cfg)
