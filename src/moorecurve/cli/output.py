"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from moorecurve.core import CrossValidationResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Moorecurve[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_curve_info(degree: int, solution: str, point_count: int) -> None:
    """Print what is about to be generated.

    Args:
        degree: Curve degree
        solution: Generator name
        point_count: Number of points the curve will have
    """
    side = 1 << degree
    console.print(f"  degree {degree} {SYM_DOT} {solution} {SYM_DOT} {side}x{side} grid")
    console.print(f"  {point_count:,} points")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_cycle_time(seconds: float) -> None:
    """Print the time of one timed generation."""
    console.print(f"Time: {seconds:f}")


def print_average_time(seconds: float) -> None:
    """Print the average time over all timed generations."""
    console.print(f"Average time: {seconds:f}")


def print_success(
    output_path: str,
    svg_path: str,
    total_time_s: float,
    points: int,
    cycles: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the coordinate list
        svg_path: Path to the SVG drawing
        total_time_s: Total run time in seconds
        points: Number of points written
        cycles: Number of generation cycles run
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    for path in (output_path, svg_path):
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)

    plural = "cycle" if cycles == 1 else "cycles"
    console.print(f"  {points:,} points {SYM_DOT} {cycles} {plural}")


def print_cross_check(result: CrossValidationResult) -> None:
    """Print a table comparing every generator with the reference.

    Args:
        result: Outcome of the cross check
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Solution")
    table.add_column("Points", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Result")

    solutions = sorted(set(result.point_counts) | set(result.errors))
    for solution in solutions:
        duration = result.durations_ms.get(solution)
        time_str = _format_time(duration / 1000) if duration is not None else "-"

        if solution in result.errors:
            table.add_row(
                f"{solution.value} {solution.name.lower()}",
                "-",
                time_str,
                f"[red]{SYM_ERR} {result.errors[solution]}[/red]",
            )
            continue

        mismatch = result.mismatches.get(solution)
        if solution == result.reference:
            status = "[green]reference[/green]"
        elif mismatch is None:
            status = f"[green]{SYM_OK} identical[/green]"
        else:
            status = f"[red]{SYM_ERR} differs at point {mismatch}[/red]"

        table.add_row(
            f"{solution.value} {solution.name.lower()}",
            f"{result.point_counts[solution]:,}",
            time_str,
            status,
        )

    console.print(table)

    if result.agree:
        console.print(f"\n[bold green]{SYM_OK} All generators agree[/bold green]")
    else:
        console.print(f"\n[bold red]{SYM_ERR} Generators disagree[/bold red]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
