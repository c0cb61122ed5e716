"""Configuration dataclasses for simulation and reporting runs.

All dataclasses are frozen and validate themselves in ``__post_init__`` so
that a bad configuration is rejected before any robot moves.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from robot_census.config.constants import (
    EXCLUDE_CENTER_LINES,
    GRID_HEIGHT,
    GRID_WIDTH,
    IMAGE_DIR,
    NUM_STEPS,
)
from robot_census.errors import ConfigurationError

__all__ = [
    "GridBounds",
    "ReportConfig",
    "SimulationConfig",
]


@dataclass(frozen=True)
class GridBounds:
    """Toroidal grid ``[0, width) x [0, height)``."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ConfigurationError("grid width must be >= 1")
        if self.height < 1:
            raise ConfigurationError("grid height must be >= 1")

    @property
    def mid_x(self) -> int:
        """Column of the vertical center line."""
        return self.width // 2

    @property
    def mid_y(self) -> int:
        """Row of the horizontal center line."""
        return self.height // 2

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass(frozen=True)
class SimulationConfig:
    """Fixed parameters of one simulation run."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    steps: int = NUM_STEPS
    exclude_center_lines: bool = EXCLUDE_CENTER_LINES

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ConfigurationError("width must be >= 1")
        if self.height < 1:
            raise ConfigurationError("height must be >= 1")
        if self.steps < 0:
            raise ConfigurationError("steps must be >= 0")

    @property
    def bounds(self) -> GridBounds:
        return GridBounds(self.width, self.height)


@dataclass(frozen=True)
class ReportConfig:
    """Diagnostic output switches; none of them affect the safety number."""

    print_grid: bool = False
    print_robots: bool = False
    generate_images: bool = False
    image_dir: Path = Path(IMAGE_DIR)
    density_figure: Path | None = None
    theme: str = "default"
    summary: bool = False
