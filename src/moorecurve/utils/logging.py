"""Logging utilities for Moorecurve."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "moorecurve"


@dataclass
class RunStats:
    """Statistics from a generation run."""

    degree: int = 0
    solution: str = ""
    point_count: int = 0
    cycles_completed: int = 0
    durations: list[float] = field(default_factory=list)
    output_files: list[Path] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate total run duration, file output included."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def average_seconds(self) -> float | None:
        """Average timed generation duration (None if nothing was timed)."""
        if not self.durations:
            return None
        return sum(self.durations) / len(self.durations)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced, so the function can
    be called once per run.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("moorecurve")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RunLogger:
    """Logger for tracking generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_run_start(self, degree: int, solution: str, cycles: int) -> None:
        """Log start of a run."""
        self._logger.info("Starting run", degree=degree, solution=solution, cycles=cycles)
        self._stats.degree = degree
        self._stats.solution = solution

    def log_generation_complete(
        self,
        cycle: int,
        point_count: int,
        duration_s: float | None,
    ) -> None:
        """Log one successful generation."""
        self._logger.info(
            "Curve generated",
            cycle=cycle,
            points=point_count,
            duration_ms=round(duration_s * 1000, 3) if duration_s is not None else None,
        )
        self._stats.cycles_completed += 1
        self._stats.point_count = point_count
        if duration_s is not None:
            self._stats.durations.append(duration_s)

    def log_generation_error(
        self,
        solution: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log a failed generation."""
        self._logger.error(
            "Curve generation failed",
            solution=solution,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )

    def log_output_written(self, path: Path, kind: str) -> None:
        """Log an output file being written."""
        self._logger.debug("Output written", path=str(path), kind=kind)
        if path not in self._stats.output_files:
            self._stats.output_files.append(path)

    def log_cross_check(
        self,
        degree: int,
        agree: bool,
        mismatches: dict[str, int | None],
        errors: dict[str, str],
    ) -> None:
        """Log the outcome of a cross check."""
        log = self._logger.info if agree else self._logger.warning
        log(
            "Cross check finished",
            degree=degree,
            agree=agree,
            mismatches=mismatches,
            errors=errors,
        )

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
