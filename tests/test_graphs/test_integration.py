"""Integration tests for the graphs package within edgegraph."""

import pytest


def test_graphs_import_from_main():
    """Graph types and algorithms are importable from the top-level package."""
    from edgegraph import Edge, Graph, Vertex, depth_first_search

    assert Graph is not None
    assert Vertex is not None
    assert Edge is not None
    assert depth_first_search is not None


def test_graphs_in_all_exports():
    """Graph exports are listed in __all__."""
    import edgegraph

    graph_exports = {
        "Vertex", "Edge", "Graph", "depth_first_search",
        "vertex_index_map", "adjacency_matrix", "degree_sequence",
    }
    assert graph_exports.issubset(set(edgegraph.__all__)), "Graph exports missing from __all__"


def test_errors_share_a_base():
    """Every package error can be caught as GraphError."""
    import edgegraph as eg

    for exc in (
        eg.InvalidArgumentError,
        eg.VertexNotFoundError,
        eg.EmptyGraphError,
        eg.DegreeUndefinedError,
        eg.DuplicateVertexError,
        eg.GraphIntegrityError,
    ):
        assert issubclass(exc, eg.GraphError)

    assert issubclass(eg.VertexNotFoundError, KeyError)
    assert issubclass(eg.DegreeUndefinedError, ZeroDivisionError)
    assert str(eg.VertexNotFoundError("Vertex 'x' is not in the graph")) == (
        "Vertex 'x' is not in the graph"
    )


def test_graphs_functional_integration():
    """Build, query, copy and traverse a graph end to end."""
    import edgegraph as eg

    g = eg.Graph(weighted=True)
    hub = eg.Vertex("hub")
    spokes = [eg.Vertex(f"s{i}") for i in range(4)]
    g.add_vertex(hub)
    for spoke in spokes:
        g.add_vertex(spoke)
        g.add_edge(hub, spoke, 1)
    g.add_edge(hub, hub, 9)

    assert g.degree(hub) == 5
    assert g.maximum_degree() == 5
    assert g.count_self_loops() == 1
    assert g.average_degree() == (2 * 5) // 5

    order = g.depth_first_search()
    assert [v.value for v in order] == ["hub", "s3", "s2", "s1", "s0"]

    clone = g.copy()
    assert str(clone) == str(g)
    assert eg.check_invariants(clone) == []

    with pytest.raises(eg.GraphError):
        g.add_edge(hub, eg.Vertex("stranger"))
