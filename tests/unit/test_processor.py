"""Tests for run orchestration."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from moorecurve.config import (
    BenchmarkConfig,
    GenerationConfig,
    MooreCurveSettings,
    OutputConfig,
    ProcessingConfig,
    SolutionType,
)
from moorecurve.core.processor import CurveProcessor, generate_points
from moorecurve.domain import PointSequence
from moorecurve.exceptions import (
    AllocationFailureError,
    ConfigurationError,
    InvalidDegreeError,
    OutputWriteError,
)


@pytest.fixture
def settings(tmp_path: Path) -> MooreCurveSettings:
    """Create settings writing into a temporary directory."""
    return MooreCurveSettings(
        generation=GenerationConfig(degree=3, solution=SolutionType.STRING_REWRITE),
        output=OutputConfig(
            output_file=tmp_path / "points.txt",
            svg_file=tmp_path / "curve.svg",
        ),
        processing=ProcessingConfig(max_workers=1),
    )


class TestGeneratePoints:
    """Tests for generate_points function."""

    def test_success(self, degree_2_points):
        """Test successful generation result."""
        result = generate_points(SolutionType.GRAY_CODE.value, 2)

        assert "error" not in result
        assert result["solution"] == 1
        assert result["duration_ms"] >= 0
        assert PointSequence.from_dict(result["sequence"]) == degree_2_points

    def test_invalid_degree(self):
        """Test that a rejected degree is returned as an error."""
        result = generate_points(SolutionType.RECURSIVE.value, 0)

        assert result["error_type"] == "InvalidDegreeError"
        assert "sequence" not in result
        assert "traceback" in result

    def test_unknown_solution(self):
        """Test that an unknown code is returned as an error."""
        result = generate_points(7, 2)
        assert result["error_type"] == "UnknownSolutionTypeError"


class TestCurveProcessor:
    """Tests for CurveProcessor class."""

    def test_run_writes_both_files(self, settings):
        """Test a single run."""
        stats = CurveProcessor(settings).run()

        points_file = settings.output.output_file
        svg_file = settings.output.svg_file
        assert len(points_file.read_text(encoding="utf-8").splitlines()) == 64
        assert 'width="700" height="700"' in svg_file.read_text(encoding="utf-8")

        assert stats.cycles_completed == 1
        assert stats.point_count == 64
        assert stats.durations == []
        assert stats.average_seconds is None
        assert stats.output_files == [points_file, svg_file]

    @pytest.mark.parametrize("solution", list(SolutionType))
    def test_same_output_for_every_solution(self, settings, solution):
        """Test that every algorithm writes the same coordinate list."""
        reference = CurveProcessor(settings)
        reference.run()
        expected = settings.output.output_file.read_text(encoding="utf-8")

        other = settings.model_copy(
            update={"generation": GenerationConfig(degree=3, solution=solution)}
        )
        CurveProcessor(other).run()
        assert settings.output.output_file.read_text(encoding="utf-8") == expected

    def test_benchmark_cycles(self, settings):
        """Test timing repeated generations."""
        settings.benchmark = BenchmarkConfig(enabled=True, cycles=3, average=True)
        callback = Mock()

        stats = CurveProcessor(settings).run(progress_callback=callback)

        assert stats.cycles_completed == 3
        assert len(stats.durations) == 3
        assert stats.average_seconds is not None
        assert stats.average_seconds == pytest.approx(sum(stats.durations) / 3)
        assert callback.call_count == 3
        completed, total, duration = callback.call_args.args
        assert (completed, total) == (3, 3)
        assert duration is not None

    def test_callback_without_benchmark(self, settings):
        """Test that untimed cycles report no duration."""
        callback = Mock()
        CurveProcessor(settings).run(progress_callback=callback)
        callback.assert_called_once_with(1, 1, None)

    def test_missing_output_file(self, settings):
        """Test that a run needs an output file."""
        settings.output = OutputConfig(output_file=None)
        with pytest.raises(ConfigurationError, match="Output file"):
            CurveProcessor(settings).run()

    def test_unwritable_output(self, settings, tmp_path):
        """Test that write errors propagate."""
        settings.output = OutputConfig(output_file=tmp_path / "missing" / "points.txt")
        with pytest.raises(OutputWriteError):
            CurveProcessor(settings).run()

    def test_allocation_failure_propagates(self, settings):
        """Test that generation errors are logged and re-raised."""
        processor = CurveProcessor(settings)
        with patch(
            "moorecurve.core.string_rewrite.build_commands", side_effect=MemoryError
        ):
            with pytest.raises(AllocationFailureError):
                processor.run()
        assert not settings.output.output_file.exists()

    def test_cross_check_in_process(self, settings):
        """Test that all generators agree for the configured degree."""
        result = CurveProcessor(settings).cross_check()

        assert result.agree
        assert result.degree == 3
        assert set(result.point_counts.values()) == {64}
        assert set(result.durations_ms) == set(SolutionType)

    def test_cross_check_worker_pool(self, settings):
        """Test cross checking in worker processes."""
        result = CurveProcessor(settings).cross_check(degree=4, max_workers=2)
        assert result.agree
        assert set(result.point_counts.values()) == {256}

    def test_cross_check_reports_errors(self, settings):
        """Test that a failing generator makes the cross check fail."""
        failure = {
            "solution": SolutionType.STRING_REWRITE.value,
            "error": "out of memory",
            "error_type": "AllocationFailureError",
            "traceback": "",
            "duration_ms": 0.0,
        }
        real = generate_points

        def fake(solution_code, degree):
            if solution_code == SolutionType.STRING_REWRITE.value:
                return failure
            return real(solution_code, degree)

        with patch("moorecurve.core.processor.generate_points", side_effect=fake):
            result = CurveProcessor(settings).cross_check()

        assert not result.agree
        assert result.errors == {SolutionType.STRING_REWRITE: "out of memory"}
        assert result.reference is SolutionType.GRAY_CODE

    def test_cross_check_reports_unexpected_errors(self, settings):
        """Test that any exception from a generator is reported per solution."""
        with patch(
            "moorecurve.core.gray_code.vertex_coordinate",
            side_effect=RuntimeError("boom"),
        ):
            result = CurveProcessor(settings).cross_check(max_workers=1)

        assert not result.agree
        assert result.errors == {SolutionType.GRAY_CODE: "boom"}
        assert result.reference is SolutionType.STRING_REWRITE
        assert set(result.point_counts) == {
            SolutionType.STRING_REWRITE,
            SolutionType.RECURSIVE,
        }

    def test_worker_reports_unexpected_errors(self):
        """Test that generate_points turns any exception into an error dict."""
        with patch(
            "moorecurve.core.recursive.walk_production",
            side_effect=RuntimeError("stack"),
        ):
            result = generate_points(SolutionType.RECURSIVE.value, 2)

        assert result["error"] == "stack"
        assert result["error_type"] == "RuntimeError"
        assert "sequence" not in result

    def test_cross_check_invalid_degree(self, settings):
        """Test that the cross check applies the caller-level bound."""
        with pytest.raises(InvalidDegreeError):
            CurveProcessor(settings).cross_check(degree=16)
