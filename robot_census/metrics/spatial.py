"""Spatial counting: inclusive rectangular regions, quadrants, center lines.

The two center lines (``x == W // 2`` and ``y == H // 2``) separate the four
quadrants. With ``exclude_center_lines`` enabled a robot standing on either
line is left out of every count, including regions whose bounds contain it.
Every per-cell view (text grid, bitmap) goes through the same predicate so
renderers stay consistent with the safety number.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from robot_census.config.types import GridBounds
from robot_census.domain.robot import Population, Vector2


@dataclass(frozen=True)
class Region:
    """Inclusive axis-aligned rectangle ``[min.x, max.x] x [min.y, max.y]``."""

    min: Vector2
    max: Vector2

    def contains(self, position: Vector2) -> bool:
        return (
            self.min.x <= position.x <= self.max.x and self.min.y <= position.y <= self.max.y
        )


def is_on_center_line(position: Vector2, bounds: GridBounds) -> bool:
    """True if the position sits on the vertical or horizontal center line."""
    return position.x == bounds.mid_x or position.y == bounds.mid_y


def _counts(position: Vector2, bounds: GridBounds, exclude_center_lines: bool) -> bool:
    return not (exclude_center_lines and is_on_center_line(position, bounds))


def count_in_region(
    region: Region,
    population: Population,
    bounds: GridBounds,
    exclude_center_lines: bool = True,
) -> int:
    """Count robots inside ``region``, honouring the center-line exclusion."""
    return sum(
        1
        for robot in population
        if region.contains(robot.position)
        and _counts(robot.position, bounds, exclude_center_lines)
    )


def count_on_center_lines(population: Population, bounds: GridBounds) -> int:
    return sum(1 for robot in population if is_on_center_line(robot.position, bounds))


def whole_grid_region(bounds: GridBounds) -> Region:
    return Region(Vector2(0, 0), Vector2(bounds.width - 1, bounds.height - 1))


def quadrant_regions(bounds: GridBounds) -> tuple[Region, Region, Region, Region]:
    """Return ``(bottom_left, bottom_right, top_right, top_left)``.

    Quadrants run from the grid edge up to, but not through, the center
    lines. On a grid with a dimension of 1 some quadrants are empty ranges.
    """
    mid_x, mid_y = bounds.mid_x, bounds.mid_y
    max_x, max_y = bounds.width - 1, bounds.height - 1
    return (
        Region(Vector2(0, 0), Vector2(mid_x - 1, mid_y - 1)),
        Region(Vector2(mid_x + 1, 0), Vector2(max_x, mid_y - 1)),
        Region(Vector2(mid_x + 1, mid_y + 1), Vector2(max_x, max_y)),
        Region(Vector2(0, mid_y + 1), Vector2(mid_x - 1, max_y)),
    )


def cell_counts(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> Counter[tuple[int, int]]:
    """Per-cell robot counts keyed by ``(x, y)``.

    ``cell_counts(...)[(x, y)]`` equals ``count_in_region`` over the single
    cell ``(x, y)``.
    """
    return Counter(
        (robot.position.x, robot.position.y)
        for robot in population
        if bounds.contains(robot.position.x, robot.position.y)
        and _counts(robot.position, bounds, exclude_center_lines)
    )
