"""Line-based input parser: ``p=X,Y v=DX,DY`` into ``Robot`` values.

A blank line is the only line that yields no robot. Every other line must
match the grammar exactly; there is no whitespace tolerance and no silent
skipping.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from robot_census.config.types import GridBounds
from robot_census.domain.robot import Population, Robot, Vector2
from robot_census.errors import InputUnavailable, ParseError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_EXPECTED_KEYS = ("p", "v")


def _parse_integer(raw: str, line: str, field: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise ParseError(line, f"{field} is not a valid integer ({raw!r})")
    return int(raw)


def _parse_vector(token: str, expected_key: str, line: str) -> Vector2:
    """Parse one ``key=X,Y`` token."""
    key, sep, value = token.partition("=")
    if not sep:
        raise ParseError(line, f"token {token!r} lacks '='")
    if key != expected_key:
        raise ParseError(line, f"expected '{expected_key}=' but found {key!r}")
    fields = value.split(",")
    if len(fields) != 2:
        raise ParseError(line, f"'{expected_key}' needs exactly two comma-separated fields")
    x = _parse_integer(fields[0], line, f"{expected_key}.x")
    y = _parse_integer(fields[1], line, f"{expected_key}.y")
    return Vector2(x, y)


def parse_line(line: str) -> Robot | None:
    """Parse a single input line; return ``None`` for a blank line."""
    if line == "":
        return None
    tokens = line.split(" ")
    if len(tokens) != 2:
        raise ParseError(line, f"expected 2 space-separated tokens, found {len(tokens)}")
    position, velocity = (
        _parse_vector(token, key, line) for token, key in zip(tokens, _EXPECTED_KEYS)
    )
    return Robot(position=position, velocity=velocity)


def parse_population(lines: Iterable[str], bounds: GridBounds | None = None) -> Population:
    """Parse all lines into a population, preserving input order.

    When ``bounds`` is given, a starting position outside the grid is
    rejected as a ``ParseError``.
    """
    robots: list[Robot] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            robot = parse_line(line)
        except ParseError as exc:
            raise exc.at_line(line_number) from exc
        if robot is None:
            continue
        if bounds is not None and not bounds.contains(robot.position.x, robot.position.y):
            raise ParseError(
                line,
                f"position {robot.position} outside {bounds.width}x{bounds.height} grid",
                line_number=line_number,
            )
        robots.append(robot)
    logger.debug("parsed %d robots", len(robots))
    return tuple(robots)


def parse_text(text: str, bounds: GridBounds | None = None) -> Population:
    """Parse a whole input document."""
    return parse_population(text.splitlines(), bounds=bounds)


def load_population(path: Path | str, bounds: GridBounds | None = None) -> Population:
    """Read and parse the input file.

    Raises :exc:`InputUnavailable` if the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailable(path, str(exc)) from exc
    logger.info("loaded input from %s", path)
    return parse_text(text, bounds=bounds)
