"""Shared fixtures for robot census tests."""

from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402

from robot_census.config.types import GridBounds  # noqa: E402
from robot_census.domain.robot import Population  # noqa: E402
from robot_census.io.parser import parse_text  # noqa: E402

EXAMPLE_INPUT = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_INPUT


@pytest.fixture
def small_bounds() -> GridBounds:
    """11x7 grid: center lines at x=5 and y=3."""
    return GridBounds(width=11, height=7)


@pytest.fixture
def example_population(small_bounds: GridBounds) -> Population:
    return parse_text(EXAMPLE_INPUT, bounds=small_bounds)
