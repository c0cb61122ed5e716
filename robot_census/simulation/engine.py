"""Simulation driver: advance a population snapshot for a fixed step count.

Each step maps the complete previous snapshot to a new tuple, so no robot
ever sees a partially updated population.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from robot_census.config.types import GridBounds
from robot_census.domain.motion import step_robot
from robot_census.domain.robot import Population
from robot_census.errors import ConfigurationError

logger = logging.getLogger(__name__)


def step_population(population: Population, bounds: GridBounds) -> Population:
    """Advance every robot by one step."""
    return tuple(step_robot(robot, bounds) for robot in population)


def iter_steps(
    population: Population, steps: int, bounds: GridBounds
) -> Iterator[tuple[int, Population]]:
    """Yield ``(step, snapshot)`` after each of steps ``1..steps``.

    A negative step count is rejected when called, before iteration starts.
    """
    if steps < 0:
        raise ConfigurationError("steps must be >= 0")
    return _advance(population, steps, bounds)


def _advance(
    population: Population, steps: int, bounds: GridBounds
) -> Iterator[tuple[int, Population]]:
    snapshot = population
    for step in range(1, steps + 1):
        snapshot = step_population(snapshot, bounds)
        yield step, snapshot


def simulate(population: Population, steps: int, bounds: GridBounds) -> Population:
    """Return the population after ``steps`` applications of the motion rule."""
    if steps < 0:
        raise ConfigurationError("steps must be >= 0")
    logger.info(
        "simulating %d robots for %d steps on %dx%d grid",
        len(population),
        steps,
        bounds.width,
        bounds.height,
    )
    snapshot = population
    for _ in range(steps):
        snapshot = step_population(snapshot, bounds)
    logger.debug("simulation finished after %d steps", steps)
    return snapshot
