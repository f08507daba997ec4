"""Tests for `pathcycle.config`."""

import pytest

from pathcycle.config import SWEEP_CONFIG, SweepConfig


def test_default_sweep_bounds() -> None:
    assert SWEEP_CONFIG.max_nodes_before_cycle == 10
    assert SWEEP_CONFIG.max_nodes_in_cycle == 10
    assert SWEEP_CONFIG.shape_count == 100


def test_shapes_row_major_and_exclusive() -> None:
    config = SweepConfig(max_nodes_before_cycle=2, max_nodes_in_cycle=2)
    assert list(config.shapes()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_shape_count_matches_shapes() -> None:
    config = SweepConfig(max_nodes_before_cycle=3, max_nodes_in_cycle=5)
    assert config.shape_count == len(list(config.shapes())) == 15


def test_zero_bound_yields_no_shapes() -> None:
    config = SweepConfig(max_nodes_before_cycle=4, max_nodes_in_cycle=0)
    assert config.shape_count == 0
    assert list(config.shapes()) == []


@pytest.mark.parametrize(
    "kwargs,field",
    [
        ({"max_nodes_before_cycle": -1}, "max_nodes_before_cycle"),
        ({"max_nodes_in_cycle": -3}, "max_nodes_in_cycle"),
    ],
)
def test_negative_bounds_rejected(kwargs, field) -> None:
    with pytest.raises(ValueError, match=field):
        SweepConfig(**kwargs)
