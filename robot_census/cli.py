"""CLI entrypoint: parse the robot list, simulate, print the safety number.

Values are resolved CLI > ``--config`` JSON file > built-in defaults from
:mod:`robot_census.config.constants`.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path

from robot_census.config.constants import (
    EXCLUDE_CENTER_LINES,
    GRID_HEIGHT,
    GRID_WIDTH,
    IMAGE_DIR,
    INPUT_PATH,
    NUM_STEPS,
)
from robot_census.config.types import ReportConfig, SimulationConfig
from robot_census.errors import ConfigurationError, RobotCensusError
from robot_census.io.parser import load_population
from robot_census.pipeline import run_census
from robot_census.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool; accepts JSON 0/1 and strict on/off strings."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ConfigurationError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise ConfigurationError(f"{key} must be a finite integer value, got {raw!r}")
        if raw != int(raw):
            raise ConfigurationError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ConfigurationError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ConfigurationError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: object, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_path(
    cli_val: Path | None, key: str, file_cfg: dict[str, object]
) -> Path | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    if raw is None:
        return None
    return Path(_coerce_str(raw, key))


def _load_file_config(path: Path) -> dict[str, object]:
    """Read a JSON object of option defaults."""
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Config file cannot be read: {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a JSON object: {path}")
    return data


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate robots on a wrap-around grid and print the safety number"
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help=f"robot list, one 'p=X,Y v=DX,DY' per line (default: {INPUT_PATH})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument(
        "--exclude-center-lines",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave robots on either center line out of every count",
    )
    parser.add_argument(
        "--print-grid",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the text grid initially and after every step",
    )
    parser.add_argument(
        "--print-robots",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="List every robot's final position and velocity",
    )
    parser.add_argument(
        "--images",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write an occupancy PNG after every step",
    )
    parser.add_argument("--image-dir", type=Path, default=None)
    parser.add_argument("--density-figure", type=Path, default=None)
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    parser.add_argument(
        "--summary",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print a JSON summary instead of the bare safety number",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a census run."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        file_cfg = _load_file_config(args.config) if args.config is not None else {}
        sim_config = SimulationConfig(
            width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
            height=_get_int(args.height, "height", file_cfg, GRID_HEIGHT),
            steps=_get_int(args.steps, "steps", file_cfg, NUM_STEPS),
            exclude_center_lines=_get_bool(
                args.exclude_center_lines, "exclude_center_lines", file_cfg, EXCLUDE_CENTER_LINES
            ),
        )
        report_config = ReportConfig(
            print_grid=_get_bool(args.print_grid, "print_grid", file_cfg, False),
            print_robots=_get_bool(args.print_robots, "print_robots", file_cfg, False),
            generate_images=_get_bool(args.images, "images", file_cfg, False),
            image_dir=Path(_get_str(args.image_dir, "image_dir", file_cfg, IMAGE_DIR)),
            density_figure=_get_optional_path(args.density_figure, "density_figure", file_cfg),
            theme=_get_str(args.theme, "theme", file_cfg, "default"),
            summary=_get_bool(args.summary, "summary", file_cfg, False),
        )
        theme = get_theme(report_config.theme)
        input_path = Path(_get_str(args.input, "input", file_cfg, INPUT_PATH))
        population = load_population(input_path, bounds=sim_config.bounds)
        _, report = run_census(population, sim_config, report_config, theme)
    except (RobotCensusError, ValueError) as exc:
        logger.debug("run aborted", exc_info=True)
        parser.error(str(exc))

    if report_config.summary:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(report.safety_number)


if __name__ == "__main__":
    main()
