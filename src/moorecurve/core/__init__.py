"""Core algorithms for moorecurve.

This module contains the point generators and the machinery around them:

- Turtle interpretation (cursor, heading, recorded points)
- The L-system grammar of the Moore curve
- Three independent generators that must produce identical output
- Structural checks and cross validation of generated sequences
- Run orchestration (timing, output files)

All generators are designed to be:
- Pure functions of the curve degree
- Free of global state (failures are raised, never flagged)

Key functions:
- generate: Generate a curve with the selected algorithm
- get_generator: Map a solution type code to its generator
- validate_degree: Check a degree against the supported range
- commands_count: Length of an L(i)/R(i) production
- check_sequence: List violated curve invariants

Key classes:
- TurtleInterpreter: Executes turtle commands and records points
- StringRewriteGenerator: L-system expansion + turtle walk
- GrayCodeGenerator: Closed-form per-vertex transform
- RecursiveTurtleGenerator: Mutual recursion over L/R productions
- CurveProcessor: Orchestrates runs and cross checks
"""

from moorecurve.core.base import CurveGenerator, point_count, validate_degree
from moorecurve.core.grammar import commands_count, expand_axiom, expand_production
from moorecurve.core.gray_code import GrayCodeGenerator
from moorecurve.core.processor import CurveProcessor, generate_points
from moorecurve.core.recursive import RecursiveTurtleGenerator
from moorecurve.core.selector import generate, get_generator
from moorecurve.core.string_rewrite import StringRewriteGenerator, build_commands
from moorecurve.core.turtle import TurtleInterpreter, start_coordinate
from moorecurve.core.validation import (
    CrossValidationResult,
    check_sequence,
    compare_sequences,
    find_first_mismatch,
    is_connected,
    is_self_avoiding,
)

__all__ = [
    # Generator classes
    "CrossValidationResult",
    "CurveGenerator",
    "CurveProcessor",
    "GrayCodeGenerator",
    "RecursiveTurtleGenerator",
    "StringRewriteGenerator",
    "TurtleInterpreter",
    # Functions
    "build_commands",
    "check_sequence",
    "commands_count",
    "compare_sequences",
    "expand_axiom",
    "expand_production",
    "find_first_mismatch",
    "generate",
    "generate_points",
    "get_generator",
    "is_connected",
    "is_self_avoiding",
    "point_count",
    "start_coordinate",
    "validate_degree",
]
