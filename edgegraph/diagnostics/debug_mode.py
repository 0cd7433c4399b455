"""
Debug mode for edgegraph.

While debug mode is on, every Graph mutation is followed by a full
:func:`~edgegraph.diagnostics.core.assert_consistent` pass, so a corrupted
graph is reported at the mutation that first observes it instead of at some
later query.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from ..logging import get_logger
from .core import assert_consistent

if TYPE_CHECKING:
    from ..graphs.core import Graph

logger = get_logger(__name__)

_DEBUG_ENV_VAR = "EDGEGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether mutations are currently checked (``EDGEGRAPH_DEBUG``)."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable graph invariant checks after mutations.

    Parameters
    ----------
    enabled:
        Whether to check graphs after every mutation.
    """
    global _debug_enabled
    enabled = bool(enabled)
    if enabled != _debug_enabled:
        logger.info("Debug mode %s", "enabled" if enabled else "disabled")
    _debug_enabled = enabled


def check_mutation(graph: "Graph", operation: str) -> None:
    """
    Verify ``graph`` after ``operation`` when debug mode is on.

    Raises
    ------
    GraphIntegrityError
        If debug mode is on and the graph violates an invariant.
    """
    if not _debug_enabled:
        return
    logger.debug("Checking graph invariants after %s", operation)
    assert_consistent(graph)


@contextmanager
def debug_context(enabled: bool = True, graph: Optional["Graph"] = None) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    When ``graph`` is given and debug mode is on inside the block, the graph
    is also checked on entry and again on a normal exit, which covers edits
    made directly through ``Vertex.add_edge``.

    Example
    -------
    >>> with debug_context(True, graph):
    ...     graph.add_edge(a, b)  # checked after the call and on exit
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        if graph is not None:
            check_mutation(graph, "entering debug context")
        yield
        if graph is not None:
            check_mutation(graph, "leaving debug context")
    finally:
        _debug_enabled = prev
