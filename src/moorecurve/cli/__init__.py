"""Command-line interface for moorecurve.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Algorithm selection by solution type code
- Benchmark mode with per-cycle and average timings
- Cross check of all generators
- Detailed error reporting
"""

from moorecurve.cli.app import cli, main

__all__ = ["cli", "main"]
