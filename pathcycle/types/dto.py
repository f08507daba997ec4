"""Immutable result containers for path analysis.

Defines summary objects returned by the analysis and verification helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pathcycle.types.base import END, NodeIndex


@dataclass(frozen=True)
class PathShape:
    """Shape of a path as a leading chain followed by an optional cycle.

    Attributes:
        nodes_before_cycle: Number of nodes on the path before the cycle entry.
            For an acyclic path this is the full path length.
        nodes_in_cycle: Number of nodes on the cycle; ``0`` when acyclic.
    """

    nodes_before_cycle: int
    nodes_in_cycle: int

    def __str__(self) -> str:
        return f"{self.nodes_before_cycle}+{self.nodes_in_cycle}"


@dataclass(frozen=True)
class CycleInfo:
    """Result of analyzing a single path.

    Attributes:
        cycle_start: Index of the first node on the cycle, or ``END``.
        nodes_before_cycle: Distance from the path start to ``cycle_start``.
        nodes_in_cycle: Cycle length; ``0`` when there is no cycle.
    """

    cycle_start: NodeIndex
    nodes_before_cycle: int
    nodes_in_cycle: int

    @property
    def has_cycle(self) -> bool:
        return self.cycle_start != END

    @property
    def shape(self) -> PathShape:
        return PathShape(self.nodes_before_cycle, self.nodes_in_cycle)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping. ``END`` is reported as ``None``."""
        return {
            "cycle_start": self.cycle_start if self.has_cycle else None,
            "nodes_before_cycle": self.nodes_before_cycle,
            "nodes_in_cycle": self.nodes_in_cycle,
            "has_cycle": self.has_cycle,
        }


@dataclass(frozen=True)
class ShapeCheck:
    """Outcome of building a path of a known shape and analyzing it.

    Attributes:
        expected: Shape the path was built with.
        observed: Shape reported by the analyzer.
    """

    expected: PathShape
    observed: PathShape

    @property
    def passed(self) -> bool:
        return self.expected == self.observed
