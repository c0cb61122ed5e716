"""End-to-end run: simulate a parsed population and report on the result.

Diagnostics requested through :class:`ReportConfig` are emitted while the
simulation advances; none of them influence the returned report.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from robot_census.config.types import ReportConfig, SimulationConfig
from robot_census.domain.robot import Population
from robot_census.io.paths import state_image_path
from robot_census.metrics.safety import SafetyReport, summarize
from robot_census.simulation.engine import iter_steps
from robot_census.viz.render import (
    format_robot_listing,
    render_density_figure,
    render_occupancy_image,
    render_text_grid,
)
from robot_census.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def run_census(
    population: Population,
    config: SimulationConfig,
    report: ReportConfig | None = None,
    theme: Theme = DEFAULT_THEME,
    out: TextIO | None = None,
) -> tuple[Population, SafetyReport]:
    """Simulate ``config.steps`` steps and summarize the final snapshot."""
    report = report or ReportConfig()
    out = out if out is not None else sys.stdout
    bounds = config.bounds
    exclude = config.exclude_center_lines

    if report.print_grid:
        print("Initial state:", file=out)
        print(render_text_grid(population, bounds, exclude), file=out)

    logger.info("running %d steps over %d robots", config.steps, len(population))
    final = population
    for step, final in iter_steps(population, config.steps, bounds):
        if report.generate_images:
            render_occupancy_image(
                final, bounds, state_image_path(report.image_dir, step), exclude, theme
            )
        if report.print_grid:
            print(f"\nAfter {step} seconds:", file=out)
            print(render_text_grid(final, bounds, exclude), file=out)

    if report.print_robots:
        print(format_robot_listing(final), file=out)
    if report.density_figure is not None:
        render_density_figure(
            final,
            bounds,
            report.density_figure,
            exclude,
            theme,
            title=f"After {config.steps} seconds",
        )

    summary = summarize(final, bounds, exclude)
    logger.info(
        "quadrants %s; counted %d of %d",
        summary.quadrants,
        summary.total_counted,
        summary.population_size,
    )
    return final, summary
