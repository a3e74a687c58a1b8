# gridpath/app/build.py
import logging
from collections.abc import Mapping

from gridpath.app.pathfinder import Pathfinder
from gridpath.config.models import PathfinderModel
from gridpath.domain.graph import create_graph
from gridpath.io.search_logging import SearchLogging
from gridpath.runtime.types import GraphType
from gridpath.search.heuristics import make_heuristic
from gridpath.search.hooks import NoopHooks


def build_pathfinder(
    cfg: PathfinderModel | Mapping | None = None, *, use_logging: bool = True
) -> Pathfinder:
    # 0) Validate config
    if cfg is None:
        model = PathfinderModel()
    else:
        model = cfg if isinstance(cfg, PathfinderModel) else PathfinderModel.model_validate(cfg)

    # 1) Graph
    graph = create_graph(
        GraphType(model.graph.graph_type), initial_distance=model.search.initial_distance
    )

    # 2) Hooks
    if not use_logging:
        hooks = NoopHooks()
    elif model.log.json_lines:
        hooks = SearchLogging(
            run_id=model.log.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
    else:
        logger = logging.getLogger("gridpath")
        logger.setLevel(model.log.level)
        hooks = SearchLogging(
            run_id=model.log.run_id,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            logger=logger,
        )

    # 3) Heuristic
    heuristic = make_heuristic(model.search.heuristic.kind)

    return Pathfinder(graph=graph, heuristic=heuristic, hooks=hooks)
