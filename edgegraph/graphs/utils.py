"""
Utility functions for graphs.

Provides vertex indexing and numpy views of a graph's adjacency structure.
"""

from typing import Dict, List, Tuple

import numpy as np

from .core import Graph
from .elements import Vertex


def vertex_index_map(graph: Graph) -> Tuple[Dict[int, int], List[Vertex]]:
    """
    Map vertex keys to indices 0..n-1 in insertion order.

    Args:
        graph: Graph whose vertices are indexed.

    Returns:
        Tuple of (vertex key -> index dict, index -> vertex list).

    Example:
        >>> g = Graph()
        >>> a, b = Vertex("a"), Vertex("b")
        >>> g.add_vertex(a)
        >>> g.add_vertex(b)
        >>> key_to_idx, idx_to_vertex = vertex_index_map(g)
        >>> key_to_idx[b.key]
        1
        >>> idx_to_vertex[key_to_idx[a.key]] is a
        True
    """
    vertices = graph.vertices()
    key_to_index = {vertex.key: idx for idx, vertex in enumerate(vertices)}
    return key_to_index, vertices


def adjacency_matrix(graph: Graph, weighted: bool = False) -> np.ndarray:
    """
    Build the (n, n) adjacency matrix in vertex insertion order.

    Entry ``[i, j]`` counts the edges stored in vertex i's list that point at
    vertex j, or sums their weights when ``weighted`` is True. Undirected
    graphs give a symmetric matrix; a self-loop contributes once to the
    diagonal. Edges pointing outside the graph are ignored.

    Args:
        graph: Graph to convert.
        weighted: Sum weights instead of counting edges.

    Returns:
        Integer numpy array of shape (n, n).
    """
    key_to_idx, vertices = vertex_index_map(graph)
    n = len(vertices)
    matrix = np.zeros((n, n), dtype=np.int64)

    for i, vertex in enumerate(vertices):
        for edge in vertex.iter_edges():
            j = key_to_idx.get(edge.to.key)
            if j is None:
                continue
            matrix[i, j] += edge.weight if weighted else 1

    return matrix


def degree_sequence(graph: Graph) -> np.ndarray:
    """Return each vertex's edge-list size, in insertion order."""
    return np.array([vertex.degree for vertex in graph.vertices()], dtype=np.int64)
