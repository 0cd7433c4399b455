"""Graph mode configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Whether edges are stored in one direction or mirrored."""

    UNDIRECTED = "undirected"
    DIRECTED = "directed"


class Weighting(Enum):
    """Whether edge weights are meaningful; a label, weights are always stored."""

    UNWEIGHTED = "unweighted"
    WEIGHTED = "weighted"


@dataclass(frozen=True)
class GraphMode:
    """
    Mode flags for a :class:`~edgegraph.graphs.core.Graph`.

    Args:
        direction: Edge direction. Defaults to ``Direction.UNDIRECTED``.
        weighting: Edge weighting label. Defaults to ``Weighting.UNWEIGHTED``.
            Weights are stored as given in either mode.
    """

    direction: Direction = Direction.UNDIRECTED
    weighting: Weighting = Weighting.UNWEIGHTED

    @property
    def directed(self) -> bool:
        return self.direction is Direction.DIRECTED

    @property
    def weighted(self) -> bool:
        return self.weighting is Weighting.WEIGHTED

    @classmethod
    def from_flags(cls, directed: bool = False, weighted: bool = False) -> "GraphMode":
        """
        Build a mode from boolean flags.

        Example:
            >>> GraphMode.from_flags(weighted=True).weighted
            True
        """
        return cls(
            direction=Direction.DIRECTED if directed else Direction.UNDIRECTED,
            weighting=Weighting.WEIGHTED if weighted else Weighting.UNWEIGHTED,
        )

    def __str__(self) -> str:
        return f"{self.direction.value}/{self.weighting.value}"
