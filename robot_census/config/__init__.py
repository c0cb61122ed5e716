"""Configuration layer: constants and typed config dataclasses."""

from robot_census.config.constants import (
    EXCLUDE_CENTER_LINES,
    GRID_HEIGHT,
    GRID_WIDTH,
    IMAGE_DIR,
    INPUT_PATH,
    MAX_CELL_DIGIT,
    NUM_STEPS,
)
from robot_census.config.types import GridBounds, ReportConfig, SimulationConfig

__all__ = [
    "EXCLUDE_CENTER_LINES",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GridBounds",
    "IMAGE_DIR",
    "INPUT_PATH",
    "MAX_CELL_DIGIT",
    "NUM_STEPS",
    "ReportConfig",
    "SimulationConfig",
]
