"""Tests for depth-first traversal."""

import pytest

from edgegraph import (
    Edge,
    EmptyGraphError,
    Graph,
    Vertex,
    VertexNotFoundError,
    depth_first_search,
)


def _values(order):
    return [v.value for v in order]


class TestDepthFirstSearch:
    """Tests for depth_first_search."""

    def test_sample_order(self, sample_graph):
        """The undirected sample graph visits 0, 2, 3, 1."""
        g, _ = sample_graph
        assert _values(g.depth_first_search()) == [0, 2, 3, 1]

    def test_function_and_method_agree(self, sample_graph):
        """The module function and the Graph method are the same walk."""
        g, _ = sample_graph
        assert depth_first_search(g) == g.depth_first_search()

    def test_directed_sample_order(self, directed_sample_graph):
        """Directed edges are followed one way only."""
        g, (v0, v1, v2, v3) = directed_sample_graph
        assert _values(g.depth_first_search()) == [0, 1, 2, 3]
        assert _values(g.depth_first_search(v3)) == [3, 2, 0, 1]

    def test_last_added_neighbor_first(self):
        """Neighbors are pushed in edge order, so the newest is popped first."""
        g = Graph()
        a, b, c, d = (Vertex(x) for x in "abcd")
        for v in (a, b, c, d):
            g.add_vertex(v)
        g.add_edge(a, b)
        g.add_edge(a, c)
        g.add_edge(a, d)
        assert _values(depth_first_search(g)) == ["a", "d", "c", "b"]

    def test_single_vertex(self):
        """A lone vertex is visited alone."""
        g = Graph()
        v = Vertex("solo")
        g.add_vertex(v)
        assert depth_first_search(g) == [v]

    def test_self_loop_visited_once(self):
        """Self-loops do not revisit the vertex."""
        g = Graph()
        v = Vertex("loop")
        g.add_vertex(v)
        g.add_edge(v, v)
        assert depth_first_search(g) == [v]

    def test_unreachable_vertices_skipped(self):
        """Only the start vertex's component is visited."""
        g = Graph()
        a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
        for v in (a, b, c):
            g.add_vertex(v)
        g.add_edge(a, b)
        assert _values(depth_first_search(g)) == ["a", "b"]
        assert _values(depth_first_search(g, c)) == ["c"]

    def test_empty_graph(self):
        """Traversing an empty graph is an error."""
        with pytest.raises(EmptyGraphError):
            depth_first_search(Graph())
        with pytest.raises(ValueError):
            Graph().depth_first_search()

    def test_foreign_start(self, sample_graph):
        """The start vertex must belong to the graph."""
        g, _ = sample_graph
        with pytest.raises(VertexNotFoundError):
            depth_first_search(g, Vertex(0))

    def test_deterministic(self, sample_graph):
        """Repeated walks of an unchanged graph agree."""
        g, _ = sample_graph
        first = depth_first_search(g)
        second = depth_first_search(g)
        assert first == second
        assert [v.key for v in first] == [v.key for v in second]

    def test_deterministic_with_outside_destination(self):
        """Edges leaving the graph are followed the same way on every walk."""
        g = Graph()
        a = Vertex("a")
        g.add_vertex(a)
        a.add_edge(Edge(Vertex("x")))

        assert _values(depth_first_search(g)) == ["a", "x"]
        assert _values(depth_first_search(g)) == ["a", "x"]

    def test_walk_does_not_affect_copy(self):
        """Walking a graph leaves the walk of its copy unchanged."""
        g = Graph()
        a = Vertex("a")
        g.add_vertex(a)
        a.add_edge(Edge(Vertex("x")))

        assert _values(depth_first_search(g)) == ["a", "x"]
        assert _values(depth_first_search(g.copy())) == ["a", "x"]

    def test_visited_flags_set(self, sample_graph):
        """Visited vertices are marked."""
        g, vertices = sample_graph
        depth_first_search(g)
        assert all(v.visited for v in vertices)

    def test_visits_every_vertex_once_when_connected(self, rng):
        """A connected random graph is fully visited without repeats."""
        n = 60
        g = Graph(weighted=True)
        vertices = [Vertex(i) for i in range(n)]
        for v in vertices:
            g.add_vertex(v)
        # Random spanning tree, then extra random edges.
        for i in range(1, n):
            g.add_edge(vertices[i], vertices[int(rng.integers(0, i))], int(rng.integers(0, 10)))
        for _ in range(3 * n):
            u, v = rng.integers(0, n, size=2)
            g.add_edge(vertices[int(u)], vertices[int(v)], int(rng.integers(0, 10)))

        order = depth_first_search(g)
        assert len(order) == g.vertex_count
        assert len({v.key for v in order}) == n
