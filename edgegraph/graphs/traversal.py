"""
Depth-first traversal.

Iterative DFS over a Graph's edge lists using an explicit stack. Order is
deterministic for a fixed edge insertion order and starting vertex.

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.1 (depth-first search).
"""

from typing import List, Optional, Set

from ..exceptions import EmptyGraphError, VertexNotFoundError
from ..logging import get_logger
from .core import Graph
from .elements import Vertex

logger = get_logger(__name__)


def depth_first_search(graph: Graph, start: Optional[Vertex] = None) -> List[Vertex]:
    """
    Depth-first search from ``start`` (default: the first vertex added).

    Every destination of a visited vertex's edges is pushed, whether or not
    it was already seen; already-visited vertices are dropped when popped.
    Destinations outside the graph are followed too. Neighbours are pushed in
    edge order, so the most recently added edge of a vertex is followed first.

    Visits are tracked by vertex key for the duration of one walk. The
    ``visited`` flags of member vertices are cleared first and set on every
    vertex reached, but never consulted.

    Not safe to call while another thread mutates the graph.

    Args:
        graph: Graph to traverse.
        start: Member vertex to start from.

    Returns:
        Vertices reachable from ``start``, in visitation order, each once.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        VertexNotFoundError: If ``start`` is not a member of the graph.

    Complexity: O(V + E) time, O(E) stack in the worst case.

    Example:
        >>> g = Graph()
        >>> a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
        >>> for v in (a, b, c):
        ...     g.add_vertex(v)
        >>> _ = g.add_edge(a, b)
        >>> _ = g.add_edge(a, c)
        >>> [v.value for v in depth_first_search(g)]
        ['a', 'c', 'b']
    """
    vertices = graph.vertices()
    if not vertices:
        raise EmptyGraphError("Cannot traverse an empty graph")

    if start is None:
        start = vertices[0]
    elif start not in graph:
        raise VertexNotFoundError(f"Start vertex {start.value!r} is not in the graph")

    for vertex in vertices:
        vertex.visited = False

    seen: Set[int] = set()
    order: List[Vertex] = []
    stack: List[Vertex] = [start]

    while stack:
        current = stack.pop()
        if current.key in seen:
            continue

        seen.add(current.key)
        current.visited = True
        order.append(current)
        for edge in current.iter_edges():
            stack.append(edge.to)

    logger.debug("DFS from %r visited %d of %d vertices", start.value, len(order), len(vertices))
    return order
