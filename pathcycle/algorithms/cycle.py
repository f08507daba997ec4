"""Cycle detection and measurement on a `PathStore`.

All functions are read-only with respect to the store and keep their traversal
state local to the call.

Detection is Floyd's tortoise-and-hare in two phases:

1. A slow pointer advances one node per round while a fast pointer advances
   two. Each single step of the fast pointer is checked on its own, both for
   running off the path and for landing on the slow pointer, since either can
   happen between the two sub-steps. Any collision yields a witness node that
   lies on the cycle.
2. The cycle length ``c`` is measured from the witness. One pointer starts at
   the path start, a second starts ``c`` nodes ahead of it, and both advance
   in lockstep. They first meet on the cycle's entry node, because the lead
   of exactly one cycle length cancels out once both are inside the cycle.

This uses O(n) time and O(1) extra space.
"""

from __future__ import annotations

from pathcycle.logging import get_logger
from pathcycle.path.store import PathStore
from pathcycle.types.base import END, NodeIndex
from pathcycle.types.dto import CycleInfo

logger = get_logger(__name__)


def is_empty(path: PathStore) -> bool:
    """Return True if the path has no start node."""
    return path.start() == path.end()


def advance(path: PathStore, node_index: NodeIndex, count: int) -> NodeIndex:
    """Follow ``count`` links starting at ``node_index``.

    The caller must keep ``count`` within a finite chain or a known cycle.
    Stepping past ``END`` fails the store's index assertion.
    """
    while count > 0:
        node_index = path.next(node_index)
        count -= 1
    return node_index


def cycle_length(path: PathStore, cycle_node: NodeIndex) -> int:
    """Return the number of nodes on the cycle through ``cycle_node``.

    Args:
        path: Store to traverse.
        cycle_node: A node on a cycle, or ``END``.

    Returns:
        ``0`` for ``END``, otherwise the number of steps needed to return to
        ``cycle_node``.
    """
    if cycle_node == END:
        return 0

    n_nodes = 0
    node_index = cycle_node
    while True:
        assert node_index != END, f"Node {cycle_node} does not lie on a cycle"
        node_index = path.next(node_index)
        n_nodes += 1
        if node_index == cycle_node:
            return n_nodes


def distance_from_start(path: PathStore, target: NodeIndex) -> int:
    """Return the number of links followed from the path start to ``target``.

    ``target`` must be reachable from the start. Passing ``END`` on an acyclic
    path returns the number of nodes in the path.
    """
    n_steps = 0
    node_index = path.start()
    while node_index != target:
        node_index = path.next(node_index)
        n_steps += 1
    return n_steps


def start_of_cycle_containing(path: PathStore, witness: NodeIndex) -> NodeIndex:
    """Return the entry node of the cycle that ``witness`` lies on.

    Args:
        path: Store to traverse.
        witness: Any node already known to be on the cycle reached from the
            path start.

    Returns:
        Index of the first node of the cycle in path order.
    """
    n_cycle = cycle_length(path, witness)
    behind = path.start()
    ahead = advance(path, behind, n_cycle)

    while behind != ahead:
        behind = path.next(behind)
        ahead = path.next(ahead)

    logger.debug(
        "Cycle of %d nodes via witness %d enters at node %d", n_cycle, witness, behind
    )
    return behind


def find_cycle_start(path: PathStore) -> NodeIndex:
    """Locate the first node of the path's cycle.

    Args:
        path: Store to analyze.

    Returns:
        ``END`` if the path is empty or acyclic, otherwise the index of the
        node at which the path first revisits a node.
    """
    start = path.start()
    if start == END:
        return END

    slow = start
    fast = start

    while True:
        fast = path.next(fast)
        if fast == END:
            return END
        if fast == slow:
            break

        fast = path.next(fast)
        if fast == END:
            return END
        if fast == slow:
            break

        slow = path.next(slow)
        if slow == fast:
            break

    logger.debug("Runners met at node %d", slow)
    return start_of_cycle_containing(path, slow)


def has_cycle(path: PathStore) -> bool:
    """Return True if following the path from its start revisits a node."""
    return find_cycle_start(path) != END


def analyze(path: PathStore) -> CycleInfo:
    """Locate and measure the path's cycle.

    For an acyclic path ``cycle_start`` is ``END``, ``nodes_in_cycle`` is 0
    and ``nodes_before_cycle`` is the number of nodes on the path.
    """
    cycle_start = find_cycle_start(path)
    info = CycleInfo(
        cycle_start=cycle_start,
        nodes_before_cycle=distance_from_start(path, cycle_start),
        nodes_in_cycle=cycle_length(path, cycle_start),
    )
    logger.debug("Analyzed %r: %s", path, info)
    return info
