"""
Vertex and edge types.

A Vertex owns an ordered list of outgoing Edges; an Edge references (never
owns) its destination vertex and, optionally, its source. Edge lists keep
insertion order, and that order is significant: vertex equality, hashing and
ordering compare edge weights position by position.

Each Vertex also carries a stable integer ``key``. Structural equality changes
as edges are added, so containers that need stable membership (such as
:class:`~edgegraph.graphs.core.Graph`) index vertices by ``key`` instead.
"""

import itertools
from copy import deepcopy
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from ..exceptions import InvalidArgumentError

_vertex_keys = itertools.count()


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _compare_values(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def validate_weight(weight: Any) -> int:
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidArgumentError(
            f"Edge weight must be an integer, got {type(weight).__name__}"
        )
    return weight


class Vertex:
    """
    Graph vertex holding an orderable value and its outgoing edges.

    Attributes:
        value: The vertex value. Must support ``<`` against other values
            stored in the same graph.
        visited: Marker set by the most recent traversal that reached this vertex.
        key: Stable identity handle, unique per Vertex instance.

    Example:
        >>> a, b = Vertex("a"), Vertex("b")
        >>> a.add_edge(Edge(b, 3))
        >>> a.is_adjacent(b)
        True
        >>> str(a)
        'Vertex = a\\n\\t\\t[b][3]'
    """

    __slots__ = ("_value", "_edges", "_key", "visited")

    def __init__(self, value: Any):
        if value is None:
            raise InvalidArgumentError("Vertex value cannot be None")
        self._value = value
        self._edges: List["Edge"] = []
        self._key = next(_vertex_keys)
        self.visited = False

    @classmethod
    def from_vertex(cls, other: "Vertex") -> "Vertex":
        """
        Copy a vertex: same value, shallow copy of its edge list.

        The new vertex holds the *same* Edge objects as ``other``, so those
        edges still point at the original destinations. Use
        :meth:`Graph.copy` for a copy whose edges point at copied vertices.
        """
        if other is None:
            raise InvalidArgumentError("Cannot copy a None vertex")
        vertex = cls(other._value)
        vertex._edges.extend(other._edges)
        return vertex

    def copy(self) -> "Vertex":
        return Vertex.from_vertex(self)

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Vertex":
        # A fresh key keeps deep copies distinguishable inside a Graph.
        vertex = Vertex(deepcopy(self._value, memo))
        memo[id(self)] = vertex
        vertex._edges.extend(deepcopy(edge, memo) for edge in self._edges)
        return vertex

    @property
    def value(self) -> Any:
        return self._value

    @property
    def key(self) -> int:
        return self._key

    @property
    def edges(self) -> Tuple["Edge", ...]:
        """Outgoing edges in insertion order."""
        return tuple(self._edges)

    @property
    def degree(self) -> int:
        return len(self._edges)

    def add_edge(self, edge: "Edge") -> None:
        """Append an outgoing edge. Duplicates are not checked."""
        if edge is None:
            raise InvalidArgumentError("Cannot add a None edge")
        self._edges.append(edge)

    def is_adjacent(self, other: "Vertex") -> bool:
        """Return True if any outgoing edge points at ``other``."""
        return any(edge.to is other for edge in self._edges)

    def neighbors(self) -> List["Vertex"]:
        """Destinations of the outgoing edges, in edge order (with repeats)."""
        return [edge.to for edge in self._edges]

    def iter_edges(self) -> Iterator["Edge"]:
        return iter(self._edges)

    def compare_to(self, other: "Vertex") -> int:
        """
        Three-way comparison.

        Orders by value, then by number of edges, then by the first differing
        edge weight in insertion order.

        Returns:
            -1, 0 or 1.
        """
        result = _compare_values(self._value, other._value)
        if result != 0:
            return result

        result = _sign(len(self._edges) - len(other._edges))
        if result != 0:
            return result

        for mine, theirs in zip(self._edges, other._edges):
            result = _sign(mine.weight - theirs.weight)
            if result != 0:
                return result
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        if self is other:
            return True
        if self._value != other._value:
            return False
        if len(self._edges) != len(other._edges):
            return False
        return all(
            mine.weight == theirs.weight
            for mine, theirs in zip(self._edges, other._edges)
        )

    def __hash__(self) -> int:
        # Changes as edges are added; never use a Vertex as a long-lived dict key.
        return hash((self._value, len(self._edges), tuple(e.weight for e in self._edges)))

    def __lt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        return f"Vertex({self._value!r}, degree={len(self._edges)})"

    def __str__(self) -> str:
        rendered = "--->".join(str(edge) for edge in self._edges)
        return f"Vertex = {self._value}\n\t\t{rendered}"


class Edge:
    """
    Weighted edge pointing at a destination vertex.

    Equality is identity-based on the endpoints: two edges are equal when
    their weights match and they reference the very same vertex objects.
    Ordering is by weight, then destination, then source.

    Args:
        to: Destination vertex.
        weight: Integer weight (default 0, meaning unweighted).
        source: Optional source vertex. Graph-created edges always set it.

    Raises:
        InvalidArgumentError: If ``to`` is None or ``weight`` is not an int.
    """

    __slots__ = ("_to", "_source", "_weight")

    def __init__(self, to: Vertex, weight: int = 0, source: Optional[Vertex] = None):
        if to is None:
            raise InvalidArgumentError("Destination vertex 'to' cannot be None")
        self._to = to
        self._source = source
        self._weight = validate_weight(weight)

    @classmethod
    def between(cls, source: Vertex, to: Vertex, weight: int = 0) -> "Edge":
        """
        Create an edge that records both endpoints.

        Raises:
            InvalidArgumentError: If either endpoint is None.
        """
        if source is None or to is None:
            raise InvalidArgumentError("Both 'source' and 'to' vertices are required")
        return cls(to, weight, source=source)

    @classmethod
    def from_edge(cls, other: "Edge") -> "Edge":
        """Copy an edge; the copy shares ``other``'s endpoint vertices."""
        if other is None:
            raise InvalidArgumentError("Cannot copy a None edge")
        return cls(other._to, other._weight, source=other._source)

    def copy(self) -> "Edge":
        return Edge.from_edge(self)

    def retarget(self, mapping: Dict[int, Vertex]) -> "Edge":
        """
        Copy the edge with endpoints replaced through ``mapping``.

        Args:
            mapping: Vertex key -> replacement vertex. Endpoints whose key is
                not in the mapping are kept as-is.
        """
        to = mapping.get(self._to.key, self._to)
        source = self._source
        if source is not None:
            source = mapping.get(source.key, source)
        return Edge(to, self._weight, source=source)

    @property
    def to(self) -> Vertex:
        return self._to

    @property
    def source(self) -> Optional[Vertex]:
        return self._source

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def is_self_loop(self) -> bool:
        """True when the edge's source is its destination."""
        return self._source is self._to

    def compare_to(self, other: "Edge") -> int:
        result = _sign(self._weight - other._weight)
        if result != 0:
            return result
        result = self._to.compare_to(other._to)
        if result != 0:
            return result
        if self._source is not None and other._source is not None:
            return self._source.compare_to(other._source)
        return 0

    def _identity(self) -> Tuple[Hashable, ...]:
        source_key = None if self._source is None else self._source.key
        return (self._weight, self._to.key, source_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self._weight == other._weight
            and self._to is other._to
            and self._source is other._source
        )

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        if self._source is None:
            return f"Edge(to={self._to.value!r}, weight={self._weight})"
        return (
            f"Edge(source={self._source.value!r}, to={self._to.value!r}, "
            f"weight={self._weight})"
        )

    def __str__(self) -> str:
        return f"[{self._to.value}][{self._weight}]"
