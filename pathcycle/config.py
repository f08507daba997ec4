"""Configuration classes for pathcycle components."""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass
class SweepConfig:
    """Bounds for the exhaustive path-shape sweep.

    Shapes are ``(nodes_before_cycle, nodes_in_cycle)`` pairs. Both bounds are
    exclusive, so the defaults cover ``[0, 10) x [0, 10)``.
    """

    # Exclusive upper bound on the leading chain length
    max_nodes_before_cycle: int = 10

    # Exclusive upper bound on the cycle length (0 means acyclic)
    max_nodes_in_cycle: int = 10

    def __post_init__(self) -> None:
        if self.max_nodes_before_cycle < 0:
            raise ValueError(
                f"max_nodes_before_cycle must be >= 0, got {self.max_nodes_before_cycle}"
            )
        if self.max_nodes_in_cycle < 0:
            raise ValueError(
                f"max_nodes_in_cycle must be >= 0, got {self.max_nodes_in_cycle}"
            )

    @property
    def shape_count(self) -> int:
        """Number of shapes covered by this configuration."""
        return self.max_nodes_before_cycle * self.max_nodes_in_cycle

    def shapes(self) -> Iterator[Tuple[int, int]]:
        """Yield every ``(nodes_before_cycle, nodes_in_cycle)`` pair, row-major."""
        for n_before in range(self.max_nodes_before_cycle):
            for n_cycle in range(self.max_nodes_in_cycle):
                yield n_before, n_cycle


# Global configuration instance
SWEEP_CONFIG = SweepConfig()
