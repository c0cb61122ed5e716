"""Quadrant occupancy and the safety number."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from robot_census.config.types import GridBounds
from robot_census.domain.robot import Population
from robot_census.metrics.spatial import (
    count_in_region,
    count_on_center_lines,
    quadrant_regions,
    whole_grid_region,
)


@dataclass(frozen=True)
class QuadrantCounts:
    """Robot counts per quadrant, ordered counter-clockwise from bottom-left."""

    bottom_left: int
    bottom_right: int
    top_right: int
    top_left: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.bottom_left, self.bottom_right, self.top_right, self.top_left)

    def __str__(self) -> str:
        return ", ".join(str(count) for count in self.as_tuple())


@dataclass(frozen=True)
class SafetyReport:
    """Aggregate counts for one population snapshot."""

    quadrants: QuadrantCounts
    total_counted: int
    on_center_lines: int
    population_size: int
    safety_number: int

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def quadrant_counts(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> QuadrantCounts:
    bottom_left, bottom_right, top_right, top_left = (
        count_in_region(region, population, bounds, exclude_center_lines)
        for region in quadrant_regions(bounds)
    )
    return QuadrantCounts(bottom_left, bottom_right, top_right, top_left)


def safety_number(counts: QuadrantCounts) -> int:
    """Product of the four quadrant counts."""
    return math.prod(counts.as_tuple())


def summarize(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> SafetyReport:
    """Compute quadrant counts, totals and the safety number in one pass."""
    counts = quadrant_counts(population, bounds, exclude_center_lines)
    return SafetyReport(
        quadrants=counts,
        total_counted=count_in_region(
            whole_grid_region(bounds), population, bounds, exclude_center_lines
        ),
        on_center_lines=count_on_center_lines(population, bounds),
        population_size=len(population),
        safety_number=safety_number(counts),
    )
