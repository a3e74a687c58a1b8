import logging

from gridpath.domain.entities.geography import Point
from gridpath.domain.graph import (
    add_node,
    add_or_set_edge,
    create_graph,
    edge_weight,
    neighbours,
    reset_search_state,
)
from gridpath.runtime.types import INITIAL_DISTANCE, NO_PARENT, GraphType, SearchKind


def test_add_node_assigns_dense_ids_and_sentinel_state():
    g = create_graph(GraphType.HEXAGONAL)
    assert len(g) == 0
    assert add_node(g, (0, 0)) == 0
    assert add_node(g, Point(3.0, 4.0)) == 1
    assert g.nodes[1].position == Point(3.0, 4.0)
    assert g.nodes[0].position == Point(0.0, 0.0)
    assert len(g.edges) == len(g.nodes) == 2
    assert g.state.distance == [INITIAL_DISTANCE, INITIAL_DISTANCE]
    assert g.state.heuristic == [0, 0]
    assert g.state.parent == [NO_PARENT, NO_PARENT]
    assert g.graph_type is GraphType.HEXAGONAL


def test_edges_are_symmetric_and_upserted():
    g = create_graph()
    a, b, c = (add_node(g, (i, 0)) for i in range(3))
    add_or_set_edge(g, a, b, 5)
    assert edge_weight(g, a, b) == edge_weight(g, b, a) == 5

    add_or_set_edge(g, b, a, 7)  # either orientation updates both directions
    assert edge_weight(g, a, b) == edge_weight(g, b, a) == 7
    assert len(neighbours(g, a)) == 1 and len(neighbours(g, b)) == 1
    assert edge_weight(g, a, c) is None


def test_invalid_edge_is_noop_with_diagnostic(caplog):
    g = create_graph()
    add_node(g, (0, 0))
    with caplog.at_level(logging.WARNING, logger="gridpath.graph"):
        add_or_set_edge(g, 0, 5, 1)
        add_or_set_edge(g, -1, 0, 1)
    assert g.edges == [[]]
    assert len([r for r in caplog.records if r.name == "gridpath.graph"]) == 2


def test_reset_search_state(diamond):
    st = diamond.state
    st.distance[2], st.heuristic[2], st.parent[2] = 3, 1, 1
    st.mark(SearchKind.HEURISTIC, 0, 2)
    reset_search_state(diamond)
    assert st.distance == [INITIAL_DISTANCE] * 4
    assert st.heuristic == [0] * 4
    assert st.parent == [NO_PARENT] * 4
    assert st.kind is SearchKind.NONE and st.source is None


def test_custom_initial_distance():
    g = create_graph(initial_distance=100)
    add_node(g, (0, 0))
    assert g.state.distance == [100]
