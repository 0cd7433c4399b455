"""Sample graph example.

Builds a small weighted undirected graph, prints its edge lists and a few
statistics, then walks it depth-first.
"""

from __future__ import annotations

import edgegraph as eg


def build_sample_graph() -> eg.Graph:
    """Four vertices, five weighted edges, no self-loops."""
    graph = eg.Graph(weighted=True)
    v0, v1, v2, v3 = (eg.Vertex(str(i)) for i in range(4))
    for vertex in (v0, v1, v2, v3):
        graph.add_vertex(vertex)

    graph.add_edge(v0, v1, 2)
    graph.add_edge(v1, v2, 3)
    graph.add_edge(v2, v0, 1)
    graph.add_edge(v2, v3, 1)
    graph.add_edge(v3, v2, 4)
    return graph


def main() -> None:
    graph = build_sample_graph()

    print(graph)
    print(f"Vertices: {graph.vertex_count}")
    print(f"Edges: {graph.edge_count}")
    print(f"Maximum degree: {graph.maximum_degree()}")
    print(f"Average degree: {graph.average_degree()}")
    print(f"Self-loops: {graph.count_self_loops()}")

    order = graph.depth_first_search()
    print("Depth-first order: " + " -> ".join(v.value for v in order))

    print("Adjacency matrix (weights):")
    print(eg.adjacency_matrix(graph, weighted=True))


if __name__ == "__main__":
    main()
