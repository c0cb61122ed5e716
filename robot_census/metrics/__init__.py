"""Metrics: spatial region counts and the quadrant safety number."""

from robot_census.metrics.safety import (
    QuadrantCounts,
    SafetyReport,
    quadrant_counts,
    safety_number,
    summarize,
)
from robot_census.metrics.spatial import (
    Region,
    cell_counts,
    count_in_region,
    count_on_center_lines,
    is_on_center_line,
    quadrant_regions,
    whole_grid_region,
)

__all__ = [
    "QuadrantCounts",
    "Region",
    "SafetyReport",
    "cell_counts",
    "count_in_region",
    "count_on_center_lines",
    "is_on_center_line",
    "quadrant_counts",
    "quadrant_regions",
    "safety_number",
    "summarize",
    "whole_grid_region",
]
