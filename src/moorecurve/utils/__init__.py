"""Utility functions for moorecurve.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics (cycle count, per-cycle timings)
"""

from moorecurve.utils.logging import (
    RunLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "RunLogger",
    "RunStats",
    "configure_logging",
]
