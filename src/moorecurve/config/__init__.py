"""Configuration management for moorecurve.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GenerationConfig: Degree and algorithm selection
- OutputConfig: Coordinate and SVG output settings
- BenchmarkConfig: Timing settings
- ProcessingConfig: Cross check settings
- LoggingConfig: Logging settings
- MooreCurveSettings: Main application settings
"""

from moorecurve.config.settings import (
    DEFAULT_SVG_FILE,
    MAX_DEGREE,
    MIN_DEGREE,
    BenchmarkConfig,
    GenerationConfig,
    LoggingConfig,
    MooreCurveSettings,
    OutputConfig,
    ProcessingConfig,
    SolutionType,
    get_default_settings,
)

__all__ = [
    "DEFAULT_SVG_FILE",
    "MAX_DEGREE",
    "MIN_DEGREE",
    "BenchmarkConfig",
    "GenerationConfig",
    "LoggingConfig",
    "MooreCurveSettings",
    "OutputConfig",
    "ProcessingConfig",
    "SolutionType",
    "get_default_settings",
]
