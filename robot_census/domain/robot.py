"""Typed domain model for robots and population snapshots.

``Vector2`` and ``Robot`` are frozen dataclasses; a ``Population`` is an
ordered tuple of robots in input order. Simulation steps never mutate a
robot, they build a new snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Integer pair used for both positions and velocities."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Robot:
    """A point robot with a position and a constant velocity."""

    position: Vector2
    velocity: Vector2

    def __str__(self) -> str:
        return f"Pos: {self.position}, Vel: {self.velocity}"


Population = tuple[Robot, ...]
"""Ordered tuple of robots capturing the whole grid at one step."""
