"""Construction of paths with a known shape.

Paths are built only through the public ``add_node``/``set_next`` contract,
so the result exercises the store the same way any other client would.
"""

from __future__ import annotations

from pathcycle.path.store import PathStore
from pathcycle.types.base import END


def create_path(n_nodes_before_cycle: int, n_nodes_in_cycle: int) -> PathStore:
    """Build a path of ``n_nodes_before_cycle`` chain nodes and an ``n_nodes_in_cycle`` cycle.

    The chain nodes come first in arena order, followed by the cycle nodes.
    The last cycle node links back to the first cycle node. With
    ``n_nodes_in_cycle == 0`` the last chain node links to ``END``.

    Args:
        n_nodes_before_cycle: Length of the leading chain.
        n_nodes_in_cycle: Length of the cycle.

    Returns:
        A new store whose start is the first created node, or ``END`` when
        both counts are zero.

    Raises:
        ValueError: If either count is negative.
    """
    if n_nodes_before_cycle < 0 or n_nodes_in_cycle < 0:
        raise ValueError(
            f"Node counts must be non-negative, got "
            f"{n_nodes_before_cycle} and {n_nodes_in_cycle}"
        )

    path = PathStore()
    prev_node_index = END

    for _ in range(n_nodes_before_cycle):
        node_index = path.add_node()
        path.set_next(prev_node_index, node_index)
        prev_node_index = node_index

    cycle_start = END
    for _ in range(n_nodes_in_cycle):
        node_index = path.add_node()
        if cycle_start == END:
            cycle_start = node_index
        path.set_next(prev_node_index, node_index)
        prev_node_index = node_index

    if prev_node_index != END:
        path.set_next(prev_node_index, cycle_start)

    return path
