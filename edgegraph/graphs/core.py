"""
Core graph data structure.

Provides a single Graph type covering undirected and directed graphs, with or
without edge weights, backed by per-vertex edge lists plus a global list of
every stored edge. Self-loops are allowed and stored once.

Vertices are kept in insertion order and indexed by their stable key, so
membership never depends on the mutable structural hash of a Vertex.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from ..config import GraphMode
from ..diagnostics import check_mutation
from ..exceptions import (
    DegreeUndefinedError,
    DuplicateVertexError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from ..logging import get_logger
from .elements import Edge, Vertex, validate_weight

logger = get_logger(__name__)


class Graph:
    """
    Graph with edge-list adjacency.

    In undirected mode ``add_edge(u, v, w)`` stores ``u -> v`` in ``u``'s
    list and ``v -> u`` in ``v``'s list; a self-loop ``add_edge(u, u, w)``
    stores a single entry. ``edge_count`` grows by one per call either way.

    Attributes:
        mode: Direction and weighting of the graph.

    Complexity:
        - add_vertex: O(1)
        - add_edge: O(1) amortized
        - degree, adjacent_edges: O(1) for member vertices, O(V) otherwise
        - maximum_degree, count_self_loops: O(V + E)

    Example:
        >>> g = Graph(weighted=True)
        >>> a, b = Vertex("a"), Vertex("b")
        >>> g.add_vertex(a)
        >>> g.add_vertex(b)
        >>> _ = g.add_edge(a, b, 5)
        >>> g.degree(a), g.degree(b), g.edge_count
        (1, 1, 1)
    """

    def __init__(
        self,
        mode: Optional[GraphMode] = None,
        *,
        directed: Optional[bool] = None,
        weighted: Optional[bool] = None,
    ):
        """
        Initialize an empty graph.

        Args:
            mode: Graph mode. Defaults to undirected and unweighted.
            directed: Overrides the direction of ``mode`` when given.
            weighted: Overrides the weighting of ``mode`` when given.
        """
        mode = mode or GraphMode()
        if directed is not None or weighted is not None:
            mode = GraphMode.from_flags(
                directed=mode.directed if directed is None else directed,
                weighted=mode.weighted if weighted is None else weighted,
            )
        self._mode = mode
        self._vertices: Dict[int, Vertex] = {}
        self._edges: List[Edge] = []
        self._edge_count = 0

    # Construction

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Vertex],
        edges: Iterable[Edge],
        mode: Optional[GraphMode] = None,
    ) -> "Graph":
        """
        Build a graph from vertices and source-carrying edges.

        Every vertex is added first. An edge is then skipped, with a warning,
        when either of its endpoints is not one of those vertices. Accepted
        edges are stored as given in their source's list; undirected graphs
        also get a reciprocal edge in the destination's list (except for
        self-loops).

        Args:
            vertices: Vertices to add, in order.
            edges: Edges created with :meth:`Edge.between`.
            mode: Graph mode. Defaults to undirected and unweighted.

        Returns:
            The new graph.

        Raises:
            InvalidArgumentError: If an edge is None or lacks a source.
            DuplicateVertexError: If a vertex appears twice.
        """
        graph = cls(mode)
        for vertex in vertices:
            graph._insert_vertex(vertex)

        # Validate everything before any caller-owned vertex is touched.
        edges = list(edges)
        for edge in edges:
            graph._validate_edge(edge)

        skipped = 0
        for edge in edges:
            if edge.source in graph and edge.to in graph:
                graph._link(edge)
            else:
                logger.warning(
                    "Skipping edge %r -> %r: endpoint not in graph",
                    edge.source.value, edge.to.value,
                )
                skipped += 1

        logger.debug(
            "Built %s graph with %d vertices and %d edges (%d skipped)",
            graph._mode, graph.vertex_count, graph.edge_count, skipped,
        )
        check_mutation(graph, "from_edges")
        return graph

    @classmethod
    def from_graph(cls, other: "Graph") -> "Graph":
        """
        Deep-copy a graph.

        The copy has fresh Vertex instances carrying the same values, and its
        edges point at those new vertices. Edges that pointed outside
        ``other`` keep their original destination.
        """
        if other is None:
            raise InvalidArgumentError("Cannot copy a None graph")

        clone = cls(other._mode)
        mapping: Dict[int, Vertex] = {}
        for vertex in other._vertices.values():
            twin = Vertex(vertex.value)
            mapping[vertex.key] = twin
            clone._vertices[twin.key] = twin

        for vertex in other._vertices.values():
            twin = mapping[vertex.key]
            for edge in vertex.iter_edges():
                twin.add_edge(edge.retarget(mapping))

        clone._edges = [
            edge for twin in clone._vertices.values() for edge in twin.iter_edges()
        ]
        clone._edge_count = other._edge_count

        logger.debug(
            "Copied graph with %d vertices and %d edges",
            clone.vertex_count, clone.edge_count,
        )
        return clone

    def copy(self) -> "Graph":
        return Graph.from_graph(self)

    def __deepcopy__(self, memo: dict) -> "Graph":
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    # Mutation

    def add_vertex(self, vertex: Vertex) -> None:
        """
        Add a vertex.

        Raises:
            InvalidArgumentError: If vertex is None.
            DuplicateVertexError: If this vertex instance is already present.
        """
        self._insert_vertex(vertex)
        check_mutation(self, "add_vertex")

    def add_edge(self, u: Vertex, v: Vertex, weight: int = 0) -> Edge:
        """
        Add an edge between two member vertices.

        ``u``'s edge list gains an edge to ``v``. Unless the graph is
        directed or ``u`` is ``v``, ``v``'s list gains the reciprocal edge.

        Args:
            u: First endpoint; its list receives the edge.
            v: Second endpoint.
            weight: Integer weight, kept as given in either weighting mode.

        Returns:
            The edge stored in ``u``'s list.

        Raises:
            InvalidArgumentError: If an endpoint is None or the weight is not
                an integer.
            VertexNotFoundError: If an endpoint is not in the graph.
        """
        if u is None or v is None:
            raise InvalidArgumentError("Both edge endpoints are required")
        self._require_member(u)
        self._require_member(v)
        validate_weight(weight)

        edge = Edge.between(u, v, weight)
        self._link(edge)
        check_mutation(self, "add_edge")
        return edge

    # Queries

    @property
    def mode(self) -> GraphMode:
        return self._mode

    @property
    def directed(self) -> bool:
        return self._mode.directed

    @property
    def weighted(self) -> bool:
        return self._mode.weighted

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of edges added, one per add_edge call."""
        return self._edge_count

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._vertices.values())

    def edges(self) -> List[Edge]:
        """
        Return every stored edge.

        Undirected graphs list both directions of each non-loop edge.
        """
        return list(self._edges)

    def find_vertex(self, vertex: Vertex) -> Optional[Vertex]:
        """
        Return the member vertex matching ``vertex``, or None.

        The vertex itself matches first; failing that, the first member that
        compares equal to it (same value and edge weights).
        """
        if vertex is None:
            return None
        member = self._vertices.get(vertex.key)
        if member is vertex:
            return member
        for member in self._vertices.values():
            if member == vertex:
                return member
        return None

    def adjacent_edges(self, vertex: Vertex) -> Optional[List[Edge]]:
        """Return the matched vertex's edges, or None if it is not found."""
        member = self.find_vertex(vertex)
        if member is None:
            return None
        return list(member.iter_edges())

    def degree(self, vertex: Vertex) -> int:
        """
        Return the number of edges in the matched vertex's list.

        A vertex that is not found reports 0, same as an isolated vertex;
        use ``vertex in graph`` to tell them apart.
        """
        member = self.find_vertex(vertex)
        return 0 if member is None else member.degree

    def in_degree(self, vertex: Vertex) -> int:
        """Return how many stored edges point at the matched vertex (0 if not found)."""
        member = self.find_vertex(vertex)
        if member is None:
            return 0
        return sum(1 for edge in self._iter_adjacency() if edge.to is member)

    def maximum_degree(self) -> int:
        return max((vertex.degree for vertex in self._vertices.values()), default=0)

    def count_self_loops(self) -> int:
        """Return the number of self-loops; each one is stored exactly once."""
        return sum(
            1
            for vertex in self._vertices.values()
            for edge in vertex.iter_edges()
            if edge.to is vertex
        )

    def average_degree(self) -> int:
        """
        Return ``(2 * edge_count) // vertex_count``.

        Raises:
            DegreeUndefinedError: If the graph has no vertices.
        """
        if not self._vertices:
            raise DegreeUndefinedError("Average degree of an empty graph is undefined")
        return (2 * self._edge_count) // len(self._vertices)

    def depth_first_search(self, start: Optional[Vertex] = None) -> List[Vertex]:
        """Depth-first visitation order; see :func:`.traversal.depth_first_search`."""
        # Import here to avoid circular imports
        from .traversal import depth_first_search

        return depth_first_search(self, start)

    # Internals

    def _insert_vertex(self, vertex: Vertex) -> None:
        if vertex is None:
            raise InvalidArgumentError("Cannot add a None vertex")
        if vertex.key in self._vertices:
            raise DuplicateVertexError(f"Vertex {vertex.value!r} is already in the graph")
        self._vertices[vertex.key] = vertex
        logger.debug("Added vertex %r", vertex.value)

    def _validate_edge(self, edge: Edge) -> None:
        if edge is None:
            raise InvalidArgumentError("Cannot add a None edge")
        if edge.source is None:
            raise InvalidArgumentError(
                f"Edge to {edge.to.value!r} has no source; build it with Edge.between"
            )

    def _link(self, edge: Edge) -> None:
        source, to = edge.source, edge.to
        source.add_edge(edge)
        self._edges.append(edge)
        if not self._mode.directed and source is not to:
            reciprocal = Edge.between(to, source, edge.weight)
            to.add_edge(reciprocal)
            self._edges.append(reciprocal)
        self._edge_count += 1
        logger.debug("Added edge %r -> %r (weight %d)", source.value, to.value, edge.weight)

    def _require_member(self, vertex: Vertex) -> None:
        if vertex not in self:
            raise VertexNotFoundError(f"Vertex {vertex.value!r} is not in the graph")

    def _iter_adjacency(self) -> Iterator[Edge]:
        for vertex in self._vertices.values():
            yield from vertex.iter_edges()

    # Container protocol

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, Vertex):
            return False
        return self._vertices.get(vertex.key) is vertex

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices.values()))

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"Graph(mode={self._mode}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )

    def __str__(self) -> str:
        return "".join(f"{vertex}\n" for vertex in self._vertices.values())
