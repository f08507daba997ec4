"""Shared typing constructs for pathcycle.

Holds the node index alias, the ``END`` sentinel and the immutable result
objects produced by analysis. Contains no traversal logic.
"""

from pathcycle.types.base import END, NodeIndex
from pathcycle.types.dto import CycleInfo, PathShape, ShapeCheck

__all__ = [
    # Type aliases and constants
    "NodeIndex",
    "END",
    # DTOs
    "PathShape",
    "CycleInfo",
    "ShapeCheck",
]
