"""Pytest configuration and shared fixtures for edgegraph tests.

This module provides:
- A deterministic numpy RNG for randomized graph tests
- Builders for the four-vertex sample graph in both directions
- Debug-mode isolation between tests
"""

import os
from typing import List, Tuple

import numpy as np
import pytest

from edgegraph import Graph, GraphMode, Vertex
from edgegraph.diagnostics import set_debug_enabled

SAMPLE_EDGES = [(0, 1, 2), (1, 2, 3), (2, 0, 1), (2, 3, 1), (3, 2, 4)]


def build_sample(directed: bool) -> Tuple[Graph, List[Vertex]]:
    """Vertices 0..3 with the five weighted sample edges."""
    graph = Graph(GraphMode.from_flags(directed=directed, weighted=True))
    vertices = [Vertex(i) for i in range(4)]
    for vertex in vertices:
        graph.add_vertex(vertex)
    for u, v, w in SAMPLE_EDGES:
        graph.add_edge(vertices[u], vertices[v], w)
    return graph, vertices


def adjacency(vertex: Vertex) -> List[Tuple[object, int]]:
    """Edge list of a vertex as (destination value, weight) pairs."""
    return [(edge.to.value, edge.weight) for edge in vertex.iter_edges()]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def sample_graph() -> Tuple[Graph, List[Vertex]]:
    """Undirected weighted sample graph and its vertices."""
    return build_sample(directed=False)


@pytest.fixture
def directed_sample_graph() -> Tuple[Graph, List[Vertex]]:
    """Directed weighted sample graph and its vertices."""
    return build_sample(directed=True)


@pytest.fixture(autouse=True)
def debug_mode_off() -> None:
    """Run every test with debug mode off unless the test turns it on."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)
