"""Benchmark graph construction and depth-first traversal."""

import time
from typing import Dict

import numpy as np

import edgegraph as eg


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> eg.Graph:
    """Build a random weighted undirected graph with a spanning path."""
    rng = np.random.default_rng(seed)
    graph = eg.Graph(weighted=True)
    vertices = [eg.Vertex(i) for i in range(n_vertices)]
    for vertex in vertices:
        graph.add_vertex(vertex)

    # Path keeps the graph connected so DFS touches every vertex.
    for i in range(n_vertices - 1):
        graph.add_edge(vertices[i], vertices[i + 1], int(rng.integers(0, 100)))

    endpoints = rng.integers(0, n_vertices, size=(max(n_edges - n_vertices + 1, 0), 2))
    weights = rng.integers(0, 100, size=len(endpoints))
    for (u, v), w in zip(endpoints, weights):
        graph.add_edge(vertices[int(u)], vertices[int(v)], int(w))

    return graph


def benchmark_depth_first_search(
    n_vertices: int,
    n_edges: int,
    n_runs: int = 20,
) -> Dict[str, float]:
    """Benchmark graph construction and DFS.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges (at least n_vertices - 1 are used).
        n_runs: Number of timed traversals.

    Returns:
        Dictionary with timing results.
    """
    start = time.perf_counter()
    graph = random_graph(n_vertices, n_edges)
    build_time = time.perf_counter() - start

    # Warmup
    graph.depth_first_search()

    start = time.perf_counter()
    for _ in range(n_runs):
        graph.depth_first_search()
    total_time = time.perf_counter() - start

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.edge_count,
        "build_time_sec": build_time,
        "time_per_dfs_sec": total_time / n_runs,
        "dfs_per_sec": n_runs / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking depth-first search...")
    for n in [100, 1_000, 10_000]:
        results = benchmark_depth_first_search(n_vertices=n, n_edges=4 * n)
        print(
            f"  {n:>6} vertices, {results['n_edges']:>6} edges: "
            f"build {results['build_time_sec'] * 1e3:.2f} ms, "
            f"dfs {results['time_per_dfs_sec'] * 1e3:.3f} ms"
        )
