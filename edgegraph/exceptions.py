"""Exception types raised by edgegraph.

Every error derives from :class:`GraphError` and from the builtin exception
that best describes it, so callers can either catch the package's errors as a
group or keep catching ``ValueError``/``KeyError`` as usual.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all edgegraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """A required vertex, edge or weight argument is missing or malformed."""


class VertexNotFoundError(GraphError, KeyError):
    """A vertex is not a member of the graph it was used with."""

    def __str__(self) -> str:
        # KeyError.__str__ quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""


class EmptyGraphError(GraphError, ValueError):
    """An operation that needs at least one vertex ran on an empty graph."""


class DegreeUndefinedError(GraphError, ZeroDivisionError):
    """Average degree was requested for a graph without vertices."""


class DuplicateVertexError(GraphError, ValueError):
    """The same vertex instance was added to a graph twice."""


class GraphIntegrityError(GraphError, RuntimeError):
    """Structural invariants of a graph do not hold."""
