"""Simulation engine: whole-population stepping over immutable snapshots."""

from robot_census.simulation.engine import iter_steps, simulate, step_population

__all__ = [
    "iter_steps",
    "simulate",
    "step_population",
]
