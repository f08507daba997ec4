"""Shared path fixtures.

Each fixture builds its store by hand through ``add_node``/``set_next`` so the
tests do not depend on ``create_path`` unless they exercise it directly.
"""

from __future__ import annotations

import pytest

from pathcycle.path.store import PathStore
from pathcycle.types.base import END


@pytest.fixture
def empty_path() -> PathStore:
    return PathStore()


@pytest.fixture
def single_node() -> PathStore:
    #  0 ──► END
    p = PathStore()
    n0 = p.add_node()
    p.set_next(END, n0)
    return p


@pytest.fixture
def self_loop() -> PathStore:
    #  ┌──┐
    #  ▼  │
    #  0 ─┘
    p = PathStore()
    n0 = p.add_node()
    p.set_next(END, n0)
    p.set_next(n0, n0)
    return p


@pytest.fixture
def two_cycle() -> PathStore:
    #  0 ◄──► 1
    p = PathStore()
    n0 = p.add_node()
    n1 = p.add_node()
    p.set_next(END, n0)
    p.set_next(n0, n1)
    p.set_next(n1, n0)
    return p


@pytest.fixture
def chain_then_loop() -> PathStore:
    #            ┌──┐
    #            ▼  │
    #  0 ──► 1 ──► 2 ─┘
    p = PathStore()
    n0 = p.add_node()
    n1 = p.add_node()
    n2 = p.add_node()
    p.set_next(END, n0)
    p.set_next(n0, n1)
    p.set_next(n1, n2)
    p.set_next(n2, n2)
    return p


@pytest.fixture
def rho() -> PathStore:
    #  Start is node 4; arena order differs from path order.
    #
    #  4 ──► 0 ──► 3 ──► 1 ──► 2
    #              ▲           │
    #              └───────────┘
    p = PathStore()
    nodes = [p.add_node() for _ in range(5)]
    p.set_next(END, nodes[4])
    p.set_next(nodes[4], nodes[0])
    p.set_next(nodes[0], nodes[3])
    p.set_next(nodes[3], nodes[1])
    p.set_next(nodes[1], nodes[2])
    p.set_next(nodes[2], nodes[3])
    return p
