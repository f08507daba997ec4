"""Tests for shape verification helpers in `pathcycle.algorithms.verify`."""

from __future__ import annotations

import logging

from pathcycle.algorithms import verify as verify_mod
from pathcycle.algorithms.verify import run_sweep, verify_shape
from pathcycle.config import SweepConfig
from pathcycle.types.base import END
from pathcycle.types.dto import CycleInfo, PathShape


def test_verify_shape_passes_for_cycle() -> None:
    check = verify_shape(3, 4)
    assert check.passed
    assert check.expected == PathShape(3, 4)
    assert check.observed == PathShape(3, 4)


def test_verify_shape_passes_for_acyclic_path() -> None:
    check = verify_shape(5, 0)
    assert check.passed
    assert check.observed == PathShape(5, 0)


def test_run_sweep_default_covers_full_grid() -> None:
    checks = run_sweep()
    assert len(checks) == 100
    assert all(check.passed for check in checks)
    assert checks[0].expected == PathShape(0, 0)
    assert checks[-1].expected == PathShape(9, 9)


def test_run_sweep_custom_config_order() -> None:
    checks = run_sweep(SweepConfig(max_nodes_before_cycle=2, max_nodes_in_cycle=3))
    assert [c.expected for c in checks] == [
        PathShape(0, 0),
        PathShape(0, 1),
        PathShape(0, 2),
        PathShape(1, 0),
        PathShape(1, 1),
        PathShape(1, 2),
    ]


def test_run_sweep_empty_config() -> None:
    assert run_sweep(SweepConfig(max_nodes_before_cycle=0)) == []


def test_verify_shape_reports_mismatch(monkeypatch, caplog) -> None:
    """A wrong analyzer result is reported as a failed check and logged."""

    def broken_analyze(path):
        return CycleInfo(cycle_start=END, nodes_before_cycle=0, nodes_in_cycle=0)

    monkeypatch.setattr(verify_mod, "analyze", broken_analyze)

    with caplog.at_level(logging.WARNING, logger="pathcycle"):
        check = verify_shape(2, 3)

    assert not check.passed
    assert check.observed == PathShape(0, 0)
    assert any("2+3" in r.getMessage() for r in caplog.records)
