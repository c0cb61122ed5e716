"""Centralized defaults for the robot census pipeline.

All magic numbers shared across modules are defined here. Consuming
modules should import from this module rather than defining their own
inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 101
"""Default grid width in cells."""

GRID_HEIGHT = 103
"""Default grid height in cells."""

NUM_STEPS = 100
"""Default number of simulation steps (seconds)."""

EXCLUDE_CENTER_LINES = True
"""Whether robots on either center line are left out of every region count."""

INPUT_PATH = "input"
"""Default input file, relative to the working directory."""

IMAGE_DIR = "output"
"""Default directory for per-step occupancy images."""

MAX_CELL_DIGIT = 9
"""Largest per-cell count rendered as a digit in text grids."""

OVERFLOW_CELL_CHAR = "+"
"""Text-grid character for cells holding more than ``MAX_CELL_DIGIT`` robots."""

EMPTY_CELL_CHAR = "."
"""Text-grid character for cells with no robots."""

CENTER_LINE_CHAR = " "
"""Text-grid character for center-line cells when exclusion is enabled."""
