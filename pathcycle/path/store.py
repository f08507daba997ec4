"""Index-based arena holding the nodes of a singly-linked path.

`PathStore` keeps nodes in a growable list and refers to them by integer index
rather than by object reference, so a node may link to itself or to any earlier
node without ownership cycles. Each node carries exactly one outgoing link,
either another index or the ``END`` sentinel. The store only grows: indices are
stable for its whole lifetime.

Index checks are assertions. A bad index is a bug in the caller, not a runtime
condition to recover from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from pathcycle.types.base import END, NodeIndex


@dataclass
class _Node:
    """Arena record with a single outgoing link."""

    next: NodeIndex = END


class PathStore:
    """Growable arena of singly-linked nodes plus a start field.

    The start field is set independently of node creation. ``set_next`` with
    ``END`` as the source treats ``END`` as the virtual predecessor of the
    first node and redirects the start field instead of a node link.

    Attributes:
        _nodes: Node records in creation order.
        _start: Index of the first node, or ``END`` for an empty path.
    """

    def __init__(self) -> None:
        self._nodes: List[_Node] = []
        self._start: NodeIndex = END

    @staticmethod
    def end() -> NodeIndex:
        """Return the sentinel meaning "no node"."""
        return END

    def add_node(self) -> NodeIndex:
        """Append an unlinked node.

        Returns:
            Index of the new node, equal to the arena size before the append.
        """
        index = len(self._nodes)
        self._nodes.append(_Node())
        return index

    def set_next(self, node_index: NodeIndex, next_node_index: NodeIndex) -> None:
        """Link ``node_index`` to ``next_node_index``.

        Args:
            node_index: Source node, or ``END`` to set the path start.
            next_node_index: Target node, or ``END`` to terminate the path.

        Raises:
            AssertionError: If either index is neither valid nor ``END``.
        """
        self._check_maybe_node_index(next_node_index)
        if node_index == END:
            self._start = next_node_index
            return
        self._node(node_index).next = next_node_index

    def next(self, node_index: NodeIndex) -> NodeIndex:
        """Return the outgoing link of a valid node.

        Raises:
            AssertionError: If ``node_index`` is not a node of this store.
        """
        return self._node(node_index).next

    def start(self) -> NodeIndex:
        """Return the first node of the path, or ``END`` if it is empty."""
        return self._start

    def links(self) -> Tuple[NodeIndex, ...]:
        """Return a snapshot of every node's outgoing link, by index."""
        return tuple(node.next for node in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeIndex]:
        return iter(range(len(self._nodes)))

    def __contains__(self, node_index: object) -> bool:
        return type(node_index) is int and 0 <= node_index < len(self._nodes)

    def __repr__(self) -> str:
        start = "END" if self._start == END else self._start
        return f"PathStore(nodes={len(self._nodes)}, start={start})"

    def _node(self, node_index: NodeIndex) -> _Node:
        self._check_node_index(node_index)
        return self._nodes[node_index]

    def _check_maybe_node_index(self, node_index: NodeIndex) -> None:
        if node_index == END:
            return
        self._check_node_index(node_index)

    def _check_node_index(self, node_index: NodeIndex) -> None:
        assert node_index in self, (
            f"Invalid node index {node_index!r} for store of {len(self._nodes)} nodes"
        )
