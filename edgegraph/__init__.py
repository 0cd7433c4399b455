"""edgegraph - an in-memory edge-list graph library."""

__version__ = "0.1.0"

from .config import Direction, GraphMode, Weighting
from .diagnostics import (
    assert_consistent,
    check_invariants,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .exceptions import (
    DegreeUndefinedError,
    DuplicateVertexError,
    EmptyGraphError,
    GraphError,
    GraphIntegrityError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from .graphs import (
    Edge,
    Graph,
    Vertex,
    adjacency_matrix,
    degree_sequence,
    depth_first_search,
    vertex_index_map,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Configuration
    "Direction",
    "Weighting",
    "GraphMode",
    # Graph model
    "Vertex",
    "Edge",
    "Graph",
    "depth_first_search",
    "vertex_index_map",
    "adjacency_matrix",
    "degree_sequence",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "VertexNotFoundError",
    "EmptyGraphError",
    "DegreeUndefinedError",
    "DuplicateVertexError",
    "GraphIntegrityError",
    # Diagnostics
    "check_invariants",
    "assert_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
