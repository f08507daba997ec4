"""Path analysis algorithms."""

from pathcycle.algorithms.cycle import (
    advance,
    analyze,
    cycle_length,
    distance_from_start,
    find_cycle_start,
    has_cycle,
    is_empty,
    start_of_cycle_containing,
)
from pathcycle.algorithms.verify import run_sweep, verify_shape

__all__ = [
    "advance",
    "analyze",
    "cycle_length",
    "distance_from_start",
    "find_cycle_start",
    "has_cycle",
    "is_empty",
    "start_of_cycle_containing",
    "run_sweep",
    "verify_shape",
]
