"""Structural invariant checks for graphs."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, List

from ..exceptions import GraphIntegrityError

if TYPE_CHECKING:
    from ..graphs.core import Graph


def check_invariants(graph: "Graph") -> List[str]:
    """
    Collect violations of the graph's structural invariants.

    Checked:
        - every adjacency entry points at a member vertex;
        - an undirected graph is symmetric: each non-loop entry u -> v with
          weight w is matched by an entry v -> u with weight w;
        - the global edge list holds exactly the adjacency entries;
        - the number of adjacency entries agrees with ``edge_count``
          (``2 * e - loops`` undirected, ``e`` directed).

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    list of str
        Human-readable violation messages; empty when the graph is consistent.
    """
    problems: List[str] = []
    forward: Counter = Counter()
    entries = 0
    loops = 0

    for vertex in graph.vertices():
        for edge in vertex.iter_edges():
            entries += 1
            if edge.to not in graph:
                problems.append(
                    f"edge {vertex.value!r} -> {edge.to.value!r} points outside the graph"
                )
            if edge.to is vertex:
                loops += 1
            else:
                forward[(vertex.key, edge.to.key, edge.weight)] += 1

    if not graph.directed:
        backward = Counter({(v, u, w): n for (u, v, w), n in forward.items()})
        if forward != backward:
            problems.append("undirected adjacency lists are not symmetric")

    if len(graph.edges()) != entries:
        problems.append(
            f"global edge list has {len(graph.edges())} edges, "
            f"adjacency lists hold {entries}"
        )

    expected = graph.edge_count if graph.directed else 2 * graph.edge_count - loops
    if entries != expected:
        problems.append(
            f"edge_count={graph.edge_count} does not match {entries} adjacency entries"
        )

    return problems


def assert_consistent(graph: "Graph") -> None:
    """
    Raise if any structural invariant of ``graph`` is violated.

    Raises
    ------
    GraphIntegrityError
        Listing every violation found by :func:`check_invariants`.
    """
    problems = check_invariants(graph)
    if problems:
        raise GraphIntegrityError("; ".join(problems))
