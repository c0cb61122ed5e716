"""Read-only views over a population: text grids, bitmaps and figures.

All per-cell counts come from :func:`robot_census.metrics.spatial.cell_counts`
so the pictures agree with the reported safety number, exclusion rule
included.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from robot_census.config.constants import (
    CENTER_LINE_CHAR,
    EMPTY_CELL_CHAR,
    MAX_CELL_DIGIT,
    OVERFLOW_CELL_CHAR,
)
from robot_census.config.types import GridBounds
from robot_census.domain.robot import Population
from robot_census.io.paths import ensure_parent
from robot_census.metrics.safety import quadrant_counts
from robot_census.metrics.spatial import cell_counts
from robot_census.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Text views
# ---------------------------------------------------------------------------


def _cell_char(count: int) -> str:
    if count == 0:
        return EMPTY_CELL_CHAR
    if count > MAX_CELL_DIGIT:
        return OVERFLOW_CELL_CHAR
    return str(count)


def render_text_grid(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> str:
    """Return the grid as text, one line per row starting at ``y = 0``.

    Cells show ``.`` when empty, the robot count for 1-9 and ``+`` above
    that. When center lines are excluded their cells are drawn blank.
    """
    counts = cell_counts(population, bounds, exclude_center_lines)
    lines: list[str] = []
    for y in range(bounds.height):
        row: list[str] = []
        for x in range(bounds.width):
            if exclude_center_lines and (x == bounds.mid_x or y == bounds.mid_y):
                row.append(CENTER_LINE_CHAR)
            else:
                row.append(_cell_char(counts[(x, y)]))
        lines.append("".join(row))
    return "\n".join(lines)


def format_robot_listing(population: Population) -> str:
    """One ``Pos: (x, y), Vel: (dx, dy)`` line per robot, in input order."""
    return "\n".join(str(robot) for robot in population)


# ---------------------------------------------------------------------------
# Bitmap views
# ---------------------------------------------------------------------------


def build_occupancy_array(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> np.ndarray:
    """Return (H, W) uint8 array: 1 where at least one robot is counted."""
    grid = np.zeros((bounds.height, bounds.width), dtype=np.uint8)
    for x, y in cell_counts(population, bounds, exclude_center_lines):
        grid[y, x] = 1
    return grid


def build_count_array(
    population: Population, bounds: GridBounds, exclude_center_lines: bool = True
) -> np.ndarray:
    """Return (H, W) int array of per-cell robot counts."""
    grid = np.zeros((bounds.height, bounds.width), dtype=int)
    for (x, y), count in cell_counts(population, bounds, exclude_center_lines).items():
        grid[y, x] = count
    return grid


def render_occupancy_image(
    population: Population,
    bounds: GridBounds,
    output_path: Path,
    exclude_center_lines: bool = True,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Write a one-pixel-per-cell PNG of occupied vs. empty cells."""
    grid = build_occupancy_array(population, bounds, exclude_center_lines)
    cmap = ListedColormap([theme.empty_color, theme.occupied_color])
    output_path = ensure_parent(Path(output_path))
    plt.imsave(output_path, grid, cmap=cmap, vmin=0, vmax=1, origin="upper")
    logger.info("wrote occupancy image %s", output_path)
    return output_path


def render_density_figure(
    population: Population,
    bounds: GridBounds,
    output_path: Path,
    exclude_center_lines: bool = True,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Render per-cell counts with the center lines and quadrant counts marked."""
    grid = build_count_array(population, bounds, exclude_center_lines)
    counts = quadrant_counts(population, bounds, exclude_center_lines)

    fig, ax = plt.subplots(figsize=(6, 6 * bounds.height / bounds.width))
    img = ax.imshow(grid, cmap=theme.density_cmap, origin="upper", aspect="equal")
    ax.axvline(bounds.mid_x, color=theme.center_line_color, linewidth=0.8)
    ax.axhline(bounds.mid_y, color=theme.center_line_color, linewidth=0.8)
    ax.set_xticks([])
    ax.set_yticks([])
    heading = title if title is not None else "Robot density"
    ax.set_title(f"{heading}\nquadrants: {counts}", fontsize=10)
    fig.colorbar(img, ax=ax, fraction=0.046, pad=0.04, label="robots per cell")
    fig.tight_layout()

    output_path = ensure_parent(Path(output_path))
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    logger.info("wrote density figure %s", output_path)
    return output_path
