"""CLI application entry point for moorecurve.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from moorecurve import __version__
from moorecurve.cli.output import (
    console,
    print_average_time,
    print_cross_check,
    print_curve_info,
    print_cycle_time,
    print_error,
    print_header,
    print_step,
    print_success,
)
from moorecurve.config import (
    DEFAULT_SVG_FILE,
    BenchmarkConfig,
    GenerationConfig,
    LoggingConfig,
    MooreCurveSettings,
    OutputConfig,
    ProcessingConfig,
)
from moorecurve.core import CurveProcessor, get_generator, point_count, validate_degree
from moorecurve.core.selector import resolve_solution_type
from moorecurve.exceptions import (
    AllocationFailureError,
    InvalidDegreeError,
    MooreCurveError,
    OutputWriteError,
    UnknownSolutionTypeError,
)

# Create the Typer app
app = typer.Typer(
    name="moorecurve",
    help="Compute the points of a Moore space-filling curve and draw it as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Moorecurve[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def moorecurve(
    degree: Annotated[
        int | None,
        typer.Option(
            "--degree",
            "-n",
            help="Degree N of the Moore curve (1-15)",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="File receiving one '<x>, <y>' line per point",
            show_default=False,
        ),
    ] = None,
    solution: Annotated[
        int,
        typer.Option(
            "--solution",
            "-V",
            help="Algorithm: 0 = string rewrite, 1 = gray code, 2 = recursive",
        ),
    ] = 0,
    benchmark: Annotated[
        int | None,
        typer.Option(
            "--benchmark",
            "-B",
            help="Time the generation and repeat it the given number of times",
            show_default=False,
        ),
    ] = None,
    average: Annotated[
        bool,
        typer.Option(
            "--average-benchmark",
            "-A",
            "-AB",
            help="Print the average time over all benchmark cycles (requires -B)",
        ),
    ] = False,
    svg_file: Annotated[
        Path,
        typer.Option(
            "--svg-file",
            help="File receiving the SVG polyline",
        ),
    ] = Path(DEFAULT_SVG_FILE),
    scale: Annotated[
        int,
        typer.Option(
            "--scale",
            help="Factor applied to every coordinate in the SVG",
            min=1,
            max=1000,
        ),
    ] = 100,
    cross_check: Annotated[
        bool,
        typer.Option(
            "--cross-check",
            help="Run all three algorithms, compare their points and exit",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for --cross-check (default: auto, 1 = in-process)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute the points of a Moore curve of degree N.

    Writes the points to the output file, one '<x>, <y>' line per point, and
    draws them as an SVG polyline (svg_result.svg by default).

    Example:
        moorecurve -n 4 -o points.txt

    This will write the 256 points of a degree 4 Moore curve to points.txt.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if degree is None:
        print_error("Curve degree must be specified", details="Use -n <Number>.")
        raise typer.Exit(code=1)

    try:
        validate_degree(degree)
    except InvalidDegreeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        solution_type = resolve_solution_type(solution)
    except UnknownSolutionTypeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if benchmark is not None and benchmark < 1:
        print_error("Invalid number of benchmarking cycles. The number must be at least 1")
        raise typer.Exit(code=1)

    if average and benchmark is None:
        print_error("Benchmark parameter must be specified too")
        raise typer.Exit(code=1)

    if not cross_check and output is None:
        print_error("Output file must be specified", details="Use -o <File name>.")
        raise typer.Exit(code=1)

    settings = MooreCurveSettings(
        generation=GenerationConfig(degree=degree, solution=solution_type),
        output=OutputConfig(output_file=output, svg_file=svg_file, svg_scale=scale),
        benchmark=BenchmarkConfig(
            enabled=benchmark is not None,
            cycles=benchmark or 1,
            average=average,
        ),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    if not quiet:
        print_header(__version__)

    try:
        processor = CurveProcessor(settings)

        if cross_check:
            _handle_cross_check(processor, degree, quiet)
            raise typer.Exit(code=0)

        _handle_run(processor, settings, quiet, verbose)

    except (AllocationFailureError, MemoryError) as e:
        print_error(
            "Failed memory allocation. Moore curve degree is too big",
            details=str(e) or None,
        )
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Failed to open the file {e.path}", details=e.reason)
        raise typer.Exit(code=1)
    except MooreCurveError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_run(
    processor: CurveProcessor, settings: MooreCurveSettings, quiet: bool, verbose: bool
) -> None:
    """Generate the curve and write the output files.

    Args:
        processor: Configured processor
        settings: Run settings
        quiet: Suppress output
        verbose: Show per-cycle details
    """
    generation = settings.generation
    benchmark = settings.benchmark
    output = settings.output
    generator = get_generator(generation.solution)

    if not quiet:
        print_step("Generating")
        print_curve_info(generation.degree, generator.name, point_count(generation.degree))

    def report_cycle(completed: int, total: int, duration: float | None) -> None:
        if duration is not None:
            print_cycle_time(duration)
        if verbose and not quiet:
            console.print(f"  cycle {completed}/{total} written")

    stats = processor.run(progress_callback=report_cycle)

    if benchmark.average and stats.average_seconds is not None:
        print_average_time(stats.average_seconds)

    if not quiet:
        print_success(
            output_path=str(output.output_file),
            svg_path=str(output.svg_file),
            total_time_s=stats.duration_seconds,
            points=stats.point_count,
            cycles=stats.cycles_completed,
        )


def _handle_cross_check(processor: CurveProcessor, degree: int, quiet: bool) -> None:
    """Handle --cross-check mode.

    Args:
        processor: Configured processor
        degree: Curve degree
        quiet: Suppress the comparison table

    Raises:
        typer.Exit: With code 1 if the generators disagree
    """
    if not quiet:
        print_step(f"Cross checking degree {degree}")

    if degree > 10:
        console.print(
            f"  [yellow]{point_count(degree):,} points per algorithm, this may take a while[/yellow]"
        )

    result = processor.cross_check(degree)

    if not quiet:
        print_cross_check(result)

    if not result.agree:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
