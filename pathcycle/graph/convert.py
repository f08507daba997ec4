"""Conversion between `PathStore` and NetworkX directed graphs.

A path store maps onto an ``nx.DiGraph`` whose nodes are arena indices and
whose edges are the non-``END`` links. The path start travels as the
``start`` graph attribute (``None`` for an empty path).
"""

from __future__ import annotations

from typing import Dict, Hashable, Tuple

import networkx as nx

from pathcycle.path.store import PathStore
from pathcycle.types.base import END, NodeIndex

START_ATTR = "start"


def to_digraph(path: PathStore) -> nx.DiGraph:
    """Convert a path store to a NetworkX DiGraph.

    Every arena node becomes a graph node, including nodes not reachable from
    the start. Self-links become self-loops.

    Args:
        path: The store to convert.

    Returns:
        A DiGraph with integer nodes and out-degree at most one.
    """
    start = path.start()
    nx_graph = nx.DiGraph(**{START_ATTR: None if start == END else start})
    nx_graph.add_nodes_from(path)
    nx_graph.add_edges_from(
        (node_index, next_index)
        for node_index, next_index in enumerate(path.links())
        if next_index != END
    )
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
) -> Tuple[PathStore, Dict[Hashable, NodeIndex]]:
    """Build a path store from a NetworkX DiGraph.

    Graph nodes are added to the arena in ``nx_graph.nodes`` order. The start
    is taken from the ``start`` graph attribute when present.

    Args:
        nx_graph: A directed graph where every node has out-degree <= 1.

    Returns:
        The new store and a mapping from graph node to arena index.

    Raises:
        ValueError: If a node has more than one successor, or the ``start``
            attribute names a node missing from the graph.
    """
    path = PathStore()
    to_index: Dict[Hashable, NodeIndex] = {}
    for node in nx_graph.nodes:
        to_index[node] = path.add_node()

    for node in nx_graph.nodes:
        successors = list(nx_graph.successors(node))
        if len(successors) > 1:
            raise ValueError(
                f"Node '{node}' has {len(successors)} successors; a path allows at most one."
            )
        if successors:
            path.set_next(to_index[node], to_index[successors[0]])

    start = nx_graph.graph.get(START_ATTR)
    if start is not None:
        if start not in to_index:
            raise ValueError(f"Start node '{start}' does not exist.")
        path.set_next(END, to_index[start])

    return path, to_index
