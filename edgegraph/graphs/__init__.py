"""
Graph package for edgegraph.

Provides:
- Vertex and Edge types with ordering, equality and hashing
- Graph, an edge-list graph that is undirected or directed, weighted or not
- Depth-first traversal
- numpy views of adjacency and degrees
"""

from .core import Graph
from .elements import Edge, Vertex
from .traversal import depth_first_search
from .utils import adjacency_matrix, degree_sequence, vertex_index_map

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "depth_first_search",
    "vertex_index_map",
    "adjacency_matrix",
    "degree_sequence",
]

# Example usage:
# from edgegraph.graphs import Graph, Vertex
#
# g = Graph(weighted=True)
# a, b = Vertex("a"), Vertex("b")
# g.add_vertex(a)
# g.add_vertex(b)
# g.add_edge(a, b, 3)
# g.degree(a)  # 1
