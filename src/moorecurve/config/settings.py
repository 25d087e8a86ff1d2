"""Configuration settings for Moorecurve."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

MIN_DEGREE = 1
MAX_DEGREE = 15
DEFAULT_SVG_FILE = "svg_result.svg"


class SolutionType(int, Enum):
    """Algorithm used to compute the curve points."""

    STRING_REWRITE = 0
    GRAY_CODE = 1
    RECURSIVE = 2


class GenerationConfig(BaseModel):
    """Configuration for point generation."""

    degree: int = Field(
        ge=MIN_DEGREE,
        le=MAX_DEGREE,
        description="Degree N of the Moore curve (4^N points)",
    )
    solution: SolutionType = Field(
        default=SolutionType.STRING_REWRITE,
        description="Generation algorithm (0 = string rewrite, 1 = gray code, 2 = recursive)",
    )


class OutputConfig(BaseModel):
    """Configuration for output files."""

    output_file: Path | None = Field(
        default=None,
        description="File receiving one '<x>, <y>' line per point",
    )
    svg_file: Path = Field(
        default=Path(DEFAULT_SVG_FILE),
        description="File receiving the SVG polyline",
    )
    svg_scale: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Factor applied to every coordinate in the SVG",
    )
    stroke_width: int = Field(
        default=2,
        ge=1,
        le=50,
        description="Polyline stroke width in the SVG",
    )


class BenchmarkConfig(BaseModel):
    """Configuration for timing generations."""

    enabled: bool = Field(
        default=False,
        description="Time every generation",
    )
    cycles: int = Field(
        default=1,
        ge=1,
        description="Number of times the generation is repeated",
    )
    average: bool = Field(
        default=False,
        description="Report the average time over all cycles",
    )

    @model_validator(mode="after")
    def _average_requires_benchmark(self) -> "BenchmarkConfig":
        if self.average and not self.enabled:
            raise ValueError("Benchmark parameter must be specified too")
        return self


class ProcessingConfig(BaseModel):
    """Configuration for cross checks."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes for cross checks (None = auto, 1 = in-process)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MooreCurveSettings(BaseModel):
    """Main application settings."""

    generation: GenerationConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings(degree: int, output_file: Path | None = None) -> MooreCurveSettings:
    """Get default application settings for a degree and output file."""
    return MooreCurveSettings(
        generation=GenerationConfig(degree=degree),
        output=OutputConfig(output_file=output_file),
    )
