"""End-to-end tests of the command line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from moorecurve import __version__
from moorecurve.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run every command inside a temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestGenerate:
    """Tests for normal runs."""

    def test_writes_points_and_svg(self, workdir):
        """Test the coordinate list and the default SVG file."""
        result = runner.invoke(app, ["-n", "2", "-o", "points.txt"])

        assert result.exit_code == 0, result.output
        lines = (workdir / "points.txt").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 16
        assert lines[0] == "1, 0"
        assert lines[-1] == "2, 0"

        svg = (workdir / "svg_result.svg").read_text(encoding="utf-8")
        assert 'width="300" height="300"' in svg
        assert "<polyline" in svg

    def test_custom_svg_path_and_scale(self, workdir):
        """Test --svg-file and --scale."""
        result = runner.invoke(
            app, ["-n", "1", "-o", "p.txt", "--svg-file", "c.svg", "--scale", "10"]
        )

        assert result.exit_code == 0, result.output
        svg = (workdir / "c.svg").read_text(encoding="utf-8")
        assert 'width="10" height="10"' in svg
        assert not (workdir / "svg_result.svg").exists()

    @pytest.mark.parametrize("solution", ["1", "2"])
    def test_solutions_write_same_file(self, workdir, solution):
        """Test that every algorithm writes identical output."""
        runner.invoke(app, ["-n", "3", "-o", "a.txt", "-V", "0"])
        result = runner.invoke(app, ["-n", "3", "-o", "b.txt", "-V", solution])

        assert result.exit_code == 0, result.output
        assert (workdir / "a.txt").read_text() == (workdir / "b.txt").read_text()

    def test_benchmark_with_average(self):
        """Test per-cycle and average timing output."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-B", "2", "-A", "-q"])

        assert result.exit_code == 0, result.output
        assert result.output.count("Time:") == 2
        assert "Average time:" in result.output

    def test_combined_average_flag(self):
        """Test the -AB spelling of the average flag."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-B", "2", "-AB", "-q"])

        assert result.exit_code == 0, result.output
        assert result.output.count("Time:") == 2
        assert "Average time:" in result.output

    def test_quiet_run_prints_no_summary(self):
        """Test that -q suppresses the header and summary."""
        result = runner.invoke(app, ["-n", "1", "-o", "p.txt", "-q"])

        assert result.exit_code == 0
        assert "Complete" not in result.output
        assert "Moorecurve" not in result.output


class TestValidation:
    """Tests for rejected arguments."""

    def test_missing_degree(self):
        """Test that the degree is required."""
        result = runner.invoke(app, ["-o", "p.txt"])
        assert result.exit_code == 1
        assert "Curve degree must be specified" in result.output

    @pytest.mark.parametrize("degree", ["0", "16"])
    def test_degree_out_of_range(self, degree, workdir):
        """Test the accepted degree range."""
        result = runner.invoke(app, ["-n", degree, "-o", "p.txt"])

        assert result.exit_code == 1
        assert "Invalid moore curve degree" in result.output
        assert not (workdir / "p.txt").exists()

    def test_missing_output(self):
        """Test that the output file is required."""
        result = runner.invoke(app, ["-n", "2"])
        assert result.exit_code == 1
        assert "Output file must be specified" in result.output

    def test_unknown_solution(self):
        """Test that only codes 0 to 2 are accepted."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-V", "5"])
        assert result.exit_code == 1
        assert "Unsupported solution type" in result.output

    def test_average_without_benchmark(self):
        """Test that -A needs -B."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-A"])
        assert result.exit_code == 1
        assert "Benchmark parameter must be" in result.output

    def test_zero_benchmark_cycles(self):
        """Test that at least one cycle is required."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-B", "0"])
        assert result.exit_code == 1
        assert "Invalid number of benchmarking" in result.output

    def test_verbose_and_quiet(self):
        """Test mutually exclusive output modes."""
        result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-v", "-q"])
        assert result.exit_code == 1

    def test_unwritable_output(self):
        """Test the message for a file that cannot be opened."""
        result = runner.invoke(app, ["-n", "2", "-o", "missing/p.txt"])
        assert result.exit_code == 1
        assert "Failed to open the file" in result.output

    @pytest.mark.parametrize("solution", ["1", "2"])
    def test_out_of_memory(self, solution, workdir):
        """Test the message when a generator runs out of memory."""
        with (
            patch("moorecurve.core.gray_code.vertex_coordinate", side_effect=MemoryError),
            patch("moorecurve.core.recursive.walk_production", side_effect=MemoryError),
        ):
            result = runner.invoke(app, ["-n", "2", "-o", "p.txt", "-V", solution])

        assert result.exit_code == 1
        assert "Failed memory allocation" in result.output
        assert "Unexpected error" not in result.output
        assert not (workdir / "p.txt").exists()


class TestCrossCheck:
    """Tests for --cross-check."""

    def test_generators_agree(self, workdir):
        """Test that the cross check passes without an output file."""
        result = runner.invoke(app, ["--cross-check", "-n", "3", "-j", "1"])

        assert result.exit_code == 0, result.output
        assert "All generators agree" in result.output
        assert not (workdir / "svg_result.svg").exists()


def test_version():
    """Test --version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
