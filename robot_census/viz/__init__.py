"""Visualization package: text grids, occupancy bitmaps and themes."""

from robot_census.viz.render import (
    build_count_array,
    build_occupancy_array,
    format_robot_listing,
    render_density_figure,
    render_occupancy_image,
    render_text_grid,
)
from robot_census.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_count_array",
    "build_occupancy_array",
    "format_robot_listing",
    "get_theme",
    "render_density_figure",
    "render_occupancy_image",
    "render_text_grid",
]
