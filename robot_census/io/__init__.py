"""Input parsing and output path helpers."""

from robot_census.io.parser import load_population, parse_line, parse_population, parse_text

__all__ = [
    "load_population",
    "parse_line",
    "parse_population",
    "parse_text",
]
