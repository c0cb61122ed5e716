"""Domain layer: robots, population snapshots and the motion rule."""

from robot_census.domain.motion import step_robot, wrap_coordinate
from robot_census.domain.robot import Population, Robot, Vector2

__all__ = [
    "Population",
    "Robot",
    "Vector2",
    "step_robot",
    "wrap_coordinate",
]
