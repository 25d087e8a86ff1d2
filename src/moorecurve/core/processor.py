"""Run orchestration for curve generation.

This module coordinates a full run: generation (optionally timed and
repeated), coordinate list output and SVG output. It also runs the
cross check of all generators, in worker processes when requested.

Key components:
- generate_points: Top-level picklable function for parallel execution
- CurveProcessor: Main orchestrator class for a run
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

from moorecurve.config import MooreCurveSettings, SolutionType
from moorecurve.core.base import validate_degree
from moorecurve.core.selector import get_generator
from moorecurve.core.validation import CrossValidationResult, compare_sequences
from moorecurve.domain import PointSequence
from moorecurve.exceptions import ConfigurationError, MooreCurveError
from moorecurve.io import PointWriter, SvgWriter
from moorecurve.utils import RunLogger, RunStats, configure_logging


def generate_points(solution_code: int, degree: int) -> dict[str, Any]:
    """Generate one curve with the selected algorithm.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        solution_code: Solution type code (0, 1 or 2)
        degree: Curve degree

    Returns:
        Dictionary containing either:
        - Success: {"solution": int, "sequence": dict, "duration_ms": float}
        - Error: {"solution": int, "error": str, "error_type": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.perf_counter()

    try:
        sequence = get_generator(solution_code).generate(degree)
        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "solution": solution_code,
            "sequence": sequence.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "solution": solution_code,
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class CurveProcessor:
    """Orchestrates curve generation runs.

    Manages the complete workflow:
    1. Select the generator for the configured solution type
    2. Generate the points, once per benchmark cycle
    3. Time every generation when benchmarking is enabled
    4. Write the coordinate list and the SVG drawing

    Example:
        settings = get_default_settings(degree=4, output_file=Path("points.txt"))
        processor = CurveProcessor(settings)
        stats = processor.run()
    """

    def __init__(self, config: MooreCurveSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings containing generation, output and benchmark config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.run_logger = RunLogger(self.logger)

    def run(
        self,
        progress_callback: Callable[[int, int, float | None], None] | None = None,
    ) -> RunStats:
        """Generate the curve and write both output files.

        Args:
            progress_callback: Optional callback(completed, total, duration_s)
                called after every cycle; duration_s is None unless
                benchmarking is enabled

        Returns:
            RunStats with cycle count and timings

        Raises:
            InvalidDegreeError: If the degree is outside [1, 15]
            ConfigurationError: If no output file is configured
            AllocationFailureError: If the generator ran out of memory
            OutputWriteError: If an output file cannot be written
        """
        generation = self.config.generation
        benchmark = self.config.benchmark
        output = self.config.output

        if output.output_file is None:
            raise ConfigurationError("Output file must be specified")

        degree = validate_degree(generation.degree)
        generator = get_generator(generation.solution)
        cycles = benchmark.cycles

        self.run_logger = RunLogger(self.logger)
        stats = self.run_logger.stats
        stats.start_time = time.time()
        self.run_logger.log_run_start(degree, generator.name, cycles)

        point_writer = PointWriter(output.output_file)
        svg_writer = SvgWriter(
            output.svg_file,
            scale=output.svg_scale,
            stroke_width=output.stroke_width,
        )

        for cycle in range(1, cycles + 1):
            start = time.perf_counter()
            try:
                points = generator.generate(degree)
            except MooreCurveError as e:
                self.run_logger.log_generation_error(
                    generator.name, e, traceback.format_exc()
                )
                raise
            elapsed = time.perf_counter() - start
            duration = elapsed if benchmark.enabled else None

            self.run_logger.log_generation_complete(cycle, len(points), duration)

            point_writer.write(points)
            self.run_logger.log_output_written(point_writer.output_path, "points")
            svg_writer.write(points)
            self.run_logger.log_output_written(svg_writer.output_path, "svg")

            if progress_callback:
                progress_callback(cycle, cycles, duration)

        stats.end_time = time.time()
        self.logger.info(
            "Run complete",
            cycles=stats.cycles_completed,
            points=stats.point_count,
            average_s=stats.average_seconds,
        )
        return stats

    def cross_check(
        self,
        degree: int | None = None,
        max_workers: int | None = None,
    ) -> CrossValidationResult:
        """Run every generator for one degree and compare their output.

        Args:
            degree: Curve degree (config degree if None)
            max_workers: Worker processes (config default if None; 1 runs
                in-process)

        Returns:
            CrossValidationResult describing agreement, mismatches and errors
        """
        if degree is None:
            degree = self.config.generation.degree
        degree = validate_degree(degree)

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info("Starting cross check", degree=degree, max_workers=max_workers)

        results: list[dict[str, Any]] = []
        codes = [solution.value for solution in SolutionType]

        if max_workers == 1:
            results = [generate_points(code, degree) for code in codes]
        else:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                futures = [
                    executor.submit(generate_points, code, degree) for code in codes
                ]
                for future in as_completed(futures):
                    results.append(future.result())

        sequences: dict[SolutionType, PointSequence] = {}
        errors: dict[SolutionType, str] = {}
        durations: dict[SolutionType, float] = {}

        for result in results:
            solution = SolutionType(result["solution"])
            durations[solution] = result["duration_ms"]
            if "error" in result:
                errors[solution] = result["error"]
                self.logger.error(
                    "Generator failed during cross check",
                    solution=solution.name,
                    error=result["error"],
                    error_type=result["error_type"],
                )
            else:
                sequences[solution] = PointSequence.from_dict(result["sequence"])

        comparison = compare_sequences(degree, sequences, errors)
        comparison.durations_ms = dict(sorted(durations.items()))

        self.run_logger.log_cross_check(
            degree,
            comparison.agree,
            {solution.name: index for solution, index in comparison.mismatches.items()},
            {solution.name: message for solution, message in comparison.errors.items()},
        )
        return comparison
