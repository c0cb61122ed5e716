"""Robot census: toroidal robot simulation with a quadrant safety score."""

from robot_census.config.types import GridBounds, ReportConfig, SimulationConfig
from robot_census.domain.robot import Population, Robot, Vector2
from robot_census.errors import ConfigurationError, InputUnavailable, ParseError, RobotCensusError
from robot_census.io.parser import load_population, parse_line, parse_text
from robot_census.metrics.safety import quadrant_counts, safety_number, summarize
from robot_census.simulation.engine import simulate

__all__ = [
    "ConfigurationError",
    "GridBounds",
    "InputUnavailable",
    "ParseError",
    "Population",
    "ReportConfig",
    "Robot",
    "RobotCensusError",
    "SimulationConfig",
    "Vector2",
    "load_population",
    "parse_line",
    "parse_text",
    "quadrant_counts",
    "safety_number",
    "simulate",
    "summarize",
]
