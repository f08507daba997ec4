"""pathcycle: cycle detection on index-linked paths.

A path is a singly-linked sequence of nodes held in an index-based arena. The
package finds whether following the path from its start ever revisits a node,
and if so where the cycle begins and how long it is.

Primary API:
    PathStore - Arena of singly-linked nodes
    create_path() - Build a path with a given chain and cycle length
    find_cycle_start() - First node of the cycle, or END
    analyze() - Cycle start, chain length and cycle length in one call

Example:
    from pathcycle import END, PathStore, analyze

    path = PathStore()
    a = path.add_node()
    b = path.add_node()
    path.set_next(END, a)
    path.set_next(a, b)
    path.set_next(b, b)

    info = analyze(path)
    assert info.cycle_start == b and info.nodes_in_cycle == 1
"""

from __future__ import annotations

from pathcycle import cli, logging
from pathcycle._version import __version__
from pathcycle.algorithms.cycle import (
    advance,
    analyze,
    cycle_length,
    distance_from_start,
    find_cycle_start,
    has_cycle,
    is_empty,
)
from pathcycle.algorithms.verify import run_sweep, verify_shape
from pathcycle.config import SweepConfig
from pathcycle.path.builder import create_path
from pathcycle.path.store import PathStore
from pathcycle.types.base import END, NodeIndex
from pathcycle.types.dto import CycleInfo, PathShape, ShapeCheck

__all__ = [
    # Version
    "__version__",
    # Model
    "PathStore",
    "create_path",
    # Analysis
    "advance",
    "analyze",
    "cycle_length",
    "distance_from_start",
    "find_cycle_start",
    "has_cycle",
    "is_empty",
    # Verification
    "run_sweep",
    "verify_shape",
    "SweepConfig",
    # Types
    "END",
    "NodeIndex",
    "CycleInfo",
    "PathShape",
    "ShapeCheck",
    # Utilities
    "cli",
    "logging",
]
