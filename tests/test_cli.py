"""Tests for the pipeline and the CLI entrypoint."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from robot_census.cli import _coerce_bool, _coerce_int, main
from robot_census.config.types import GridBounds, ReportConfig, SimulationConfig
from robot_census.domain.robot import Population
from robot_census.errors import ConfigurationError
from robot_census.pipeline import run_census


@pytest.fixture
def input_file(tmp_path: Path, example_text: str) -> Path:
    path = tmp_path / "input"
    path.write_text(example_text)
    return path


class TestRunCensus:
    def test_returns_final_population_and_report(self, example_population: Population) -> None:
        config = SimulationConfig(width=11, height=7, steps=100)
        final, report = run_census(example_population, config, out=io.StringIO())
        assert len(final) == 12
        assert report.safety_number == 12

    def test_exclusion_disabled_counts_center_line_robots(
        self, example_population: Population
    ) -> None:
        config = SimulationConfig(width=11, height=7, steps=100, exclude_center_lines=False)
        _, report = run_census(example_population, config, out=io.StringIO())
        assert report.total_counted == 12
        assert report.safety_number == 12

    def test_print_grid_emits_every_step(self, example_population: Population) -> None:
        out = io.StringIO()
        config = SimulationConfig(width=11, height=7, steps=3)
        run_census(example_population, config, ReportConfig(print_grid=True), out=out)
        text = out.getvalue()
        assert text.startswith("Initial state:\n")
        for step in (1, 2, 3):
            assert f"After {step} seconds:" in text

    def test_print_robots(self, example_population: Population) -> None:
        out = io.StringIO()
        config = SimulationConfig(width=11, height=7, steps=0)
        run_census(example_population, config, ReportConfig(print_robots=True), out=out)
        assert out.getvalue().splitlines()[0] == "Pos: (0, 4), Vel: (3, -3)"

    def test_images_written_per_step(
        self, example_population: Population, tmp_path: Path
    ) -> None:
        config = SimulationConfig(width=11, height=7, steps=3)
        report = ReportConfig(generate_images=True, image_dir=tmp_path / "frames")
        run_census(example_population, config, report, out=io.StringIO())
        names = sorted(p.name for p in (tmp_path / "frames").iterdir())
        assert names == ["state_1.png", "state_2.png", "state_3.png"]

    def test_diagnostics_do_not_change_result(self, example_population: Population) -> None:
        config = SimulationConfig(width=11, height=7, steps=100)
        _, quiet = run_census(example_population, config, out=io.StringIO())
        _, loud = run_census(
            example_population,
            config,
            ReportConfig(print_grid=True, print_robots=True),
            out=io.StringIO(),
        )
        assert quiet == loud


class TestMain:
    def test_prints_safety_number(
        self, input_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([str(input_file), "--width", "11", "--height", "7"])
        assert capsys.readouterr().out.strip() == "12"

    def test_summary_json(self, input_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(input_file), "--width", "11", "--height", "7", "--summary"])
        data = json.loads(capsys.readouterr().out)
        assert data["safety_number"] == 12
        assert data["population_size"] == 12
        assert data["on_center_lines"] == 3

    def test_config_file_values_used(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "census.json"
        config.write_text(json.dumps({"width": 11, "height": 7, "steps": 100}))
        main([str(input_file), "--config", str(config)])
        assert capsys.readouterr().out.strip() == "12"

    def test_cli_overrides_config_file(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "census.json"
        config.write_text(json.dumps({"width": 11, "height": 7, "steps": 5}))
        with patch("robot_census.cli.run_census", wraps=run_census) as mock_run:
            main([str(input_file), "--config", str(config), "--steps", "100"])
        sim_config = mock_run.call_args.args[1]
        assert sim_config.steps == 100
        assert sim_config.bounds == GridBounds(11, 7)
        assert capsys.readouterr().out.strip() == "12"

    def test_missing_input_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing"), "--width", "11", "--height", "7"])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "Cannot read input" in captured.err
        assert captured.out == ""

    def test_malformed_input_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "input"
        path.write_text("p=0,4 v=3,-3\np=1 v=1,1\n")
        with pytest.raises(SystemExit):
            main([str(path), "--width", "11", "--height", "7"])
        assert "line 2" in capsys.readouterr().err

    def test_negative_steps_exits(self, input_file: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(input_file), "--steps", "-1"])

    def test_invalid_config_json_exits(self, input_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "bad.json"
        config.write_text("{not json")
        with pytest.raises(SystemExit):
            main([str(input_file), "--config", str(config)])

    def test_density_figure_option(self, input_file: Path, tmp_path: Path) -> None:
        figure = tmp_path / "density.png"
        main([str(input_file), "--width", "11", "--height", "7", "--density-figure", str(figure)])
        assert figure.exists()

    @pytest.mark.parametrize(
        "flag,expected_total",
        [("--exclude-center-lines", 9), ("--no-exclude-center-lines", 12)],
    )
    def test_exclusion_flag_changes_total(
        self,
        input_file: Path,
        capsys: pytest.CaptureFixture[str],
        flag: str,
        expected_total: int,
    ) -> None:
        main([str(input_file), "--width", "11", "--height", "7", "--summary", flag])
        data = json.loads(capsys.readouterr().out)
        assert data["total_counted"] == expected_total
        assert data["safety_number"] == 12

    def test_exclusion_from_config_file_overridden_by_cli(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "census.json"
        config.write_text(
            json.dumps({"width": 11, "height": 7, "exclude_center_lines": False, "summary": True})
        )
        main([str(input_file), "--config", str(config)])
        assert json.loads(capsys.readouterr().out)["total_counted"] == 12

        main([str(input_file), "--config", str(config), "--exclude-center-lines"])
        assert json.loads(capsys.readouterr().out)["total_counted"] == 9

    def test_config_path_is_directory_exits(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(input_file), "--config", str(tmp_path)])
        assert exc_info.value.code == 2
        assert "Config file cannot be read" in capsys.readouterr().err

    def test_infinite_config_value_exits(
        self, input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "census.json"
        config.write_text('{"width": 1e400, "height": 7}')
        with pytest.raises(SystemExit) as exc_info:
            main([str(input_file), "--config", str(config)])
        assert exc_info.value.code == 2
        assert "width must be a finite integer value" in capsys.readouterr().err


class TestCoercion:
    def test_coerce_bool_strings(self) -> None:
        assert _coerce_bool("yes", "flag") is True
        assert _coerce_bool("off", "flag") is False

    def test_coerce_bool_rejects_other(self) -> None:
        with pytest.raises(ConfigurationError, match="flag"):
            _coerce_bool("maybe", "flag")

    def test_coerce_int_rejects_bool_and_fraction(self) -> None:
        with pytest.raises(ConfigurationError):
            _coerce_int(True, "steps")
        with pytest.raises(ConfigurationError):
            _coerce_int(1.5, "steps")
        assert _coerce_int(7.0, "steps") == 7
        assert _coerce_int("12", "steps") == 12

    def test_coerce_int_rejects_non_finite(self) -> None:
        with pytest.raises(ConfigurationError, match="finite"):
            _coerce_int(float("inf"), "width")
        with pytest.raises(ConfigurationError, match="finite"):
            _coerce_int(float("nan"), "width")

    def test_coerce_bool_accepts_json_zero_one(self) -> None:
        assert _coerce_bool(1, "flag") is True
        assert _coerce_bool(0, "flag") is False
        with pytest.raises(ConfigurationError):
            _coerce_bool(2, "flag")
