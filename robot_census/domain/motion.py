"""Toroidal motion rule for a single robot."""

from __future__ import annotations

from robot_census.config.types import GridBounds
from robot_census.domain.robot import Robot, Vector2


def wrap_coordinate(value: int, delta: int, length: int) -> int:
    """Move ``value`` by ``delta`` on an axis of ``length`` cells, wrapping around.

    Python's ``%`` with a positive modulus is already non-negative, so any
    velocity magnitude lands back in ``[0, length)``.
    """
    return (value + delta) % length


def step_robot(robot: Robot, bounds: GridBounds) -> Robot:
    """Return the robot one time step later. Velocity is carried unchanged."""
    position = Vector2(
        wrap_coordinate(robot.position.x, robot.velocity.x, bounds.width),
        wrap_coordinate(robot.position.y, robot.velocity.y, bounds.height),
    )
    return Robot(position=position, velocity=robot.velocity)
