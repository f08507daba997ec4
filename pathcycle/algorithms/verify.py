"""Shape-based verification of the cycle analyzer.

Builds paths of a known shape and compares the analyzer's measurements with
the shape used to build them.
"""

from __future__ import annotations

from typing import List, Optional

from pathcycle.algorithms.cycle import analyze
from pathcycle.config import SWEEP_CONFIG, SweepConfig
from pathcycle.logging import get_logger
from pathcycle.path.builder import create_path
from pathcycle.types.dto import PathShape, ShapeCheck

logger = get_logger(__name__)


def verify_shape(n_nodes_before_cycle: int, n_nodes_in_cycle: int) -> ShapeCheck:
    """Build one path and check the analyzer recovers its shape."""
    expected = PathShape(n_nodes_before_cycle, n_nodes_in_cycle)
    info = analyze(create_path(n_nodes_before_cycle, n_nodes_in_cycle))
    check = ShapeCheck(expected=expected, observed=info.shape)
    if not check.passed:
        logger.warning("Shape %s analyzed as %s", expected, check.observed)
    return check


def run_sweep(config: Optional[SweepConfig] = None) -> List[ShapeCheck]:
    """Verify every shape covered by ``config``.

    Args:
        config: Sweep bounds; defaults to ``SWEEP_CONFIG``.

    Returns:
        One check per shape, in the order produced by ``config.shapes()``.
    """
    config = config or SWEEP_CONFIG
    checks = [verify_shape(n_before, n_cycle) for n_before, n_cycle in config.shapes()]
    n_failed = sum(1 for check in checks if not check.passed)
    logger.debug(
        "Swept %d shapes (%d failed) up to %d+%d",
        len(checks),
        n_failed,
        config.max_nodes_before_cycle,
        config.max_nodes_in_cycle,
    )
    return checks
