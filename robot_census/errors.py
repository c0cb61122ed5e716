"""Error taxonomy for the robot census pipeline.

Every failure is terminal: the pipeline never emits a partial result once
one of these has been raised.
"""

from __future__ import annotations

from pathlib import Path


class RobotCensusError(Exception):
    """Base class for all pipeline errors."""


class InputUnavailable(RobotCensusError):
    """The input resource could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read input {str(self.path)!r}: {reason}")


class ParseError(RobotCensusError, ValueError):
    """A non-blank input line does not match ``p=X,Y v=DX,DY``."""

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{reason}: {line!r}")

    def at_line(self, line_number: int) -> ParseError:
        """Return a copy of this error tagged with a 1-based line number."""
        return ParseError(self.line, self.reason, line_number=line_number)


class ConfigurationError(RobotCensusError, ValueError):
    """Simulation parameters are invalid and the run must not start."""
