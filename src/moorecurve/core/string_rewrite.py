"""L-system string rewriting generator.

The command string of a degree-N curve is assembled in a single shared byte
buffer. Every production L(i) and R(i) for i < N - 1, and L(N - 1), is
written exactly once; larger productions splice in the byte ranges of the
smaller ones already in the buffer. The buffer is then walked once by a
TurtleInterpreter.

Layout of the buffer: the productions of sub-degree i start at offset
(top - i) and at (top - i) + commands_count(i) + 2, where top = N - 1. Which
of L(i) and R(i) takes the first slot alternates with the parity of i, so
that the first production of level i + 1 already contains both productions
of level i at the right offsets and only has to copy the two trailing ones.
L(top) always lands at offset 0, where the axiom starts.
"""

import logging

from moorecurve.config import MAX_DEGREE, SolutionType
from moorecurve.core.base import CurveGenerator
from moorecurve.core.grammar import (
    AXIOM,
    PRODUCTION_RULES,
    Symbol,
    axiom_length,
    commands_count,
)
from moorecurve.core.turtle import TurtleInterpreter, start_coordinate
from moorecurve.domain import PointSequence, Production
from moorecurve.exceptions import AllocationFailureError

logger = logging.getLogger(__name__)

OffsetTable = dict[tuple[Production, int], int]


def production_offsets(degree: int) -> OffsetTable:
    """Calculate where each production starts inside the shared buffer.

    L(i) starts with R(i - 1) and R(i) starts with L(i - 1), so the
    production placed first at each level alternates with parity.

    Args:
        degree: Highest production degree stored in the buffer

    Returns:
        Mapping of (production, sub_degree) to start offset, for
        sub_degree in 1..degree
    """
    offsets: OffsetTable = {}
    l_is_first = degree % 2 == 1

    for sub_degree in range(1, degree + 1):
        first_start = degree - sub_degree
        second_start = first_start + commands_count(sub_degree) + 2
        if l_is_first:
            offsets[(Production.L, sub_degree)] = first_start
            offsets[(Production.R, sub_degree)] = second_start
        else:
            offsets[(Production.L, sub_degree)] = second_start
            offsets[(Production.R, sub_degree)] = first_start
        l_is_first = not l_is_first

    return offsets


def _write_symbols(
    buffer: bytearray,
    offsets: OffsetTable,
    symbols: tuple[Symbol, ...],
    sub_degree: int,
    start: int,
) -> int:
    """Write a rule body at start, splicing in sub-productions.

    Sub-productions already sitting at the destination offset are left
    in place.

    Returns:
        Offset just past the written symbols
    """
    size = commands_count(sub_degree)
    index = start

    for symbol in symbols:
        if isinstance(symbol, Production):
            if size:
                source = offsets[(symbol, sub_degree)]
                if source != index:
                    buffer[index : index + size] = buffer[source : source + size]
            index += size
        else:
            buffer[index] = symbol.code
            index += 1

    return index


def build_commands(degree: int) -> bytearray:
    """Assemble the full command string of a degree-N curve.

    Args:
        degree: Curve degree, at least 1

    Returns:
        Buffer of axiom_length(degree) command symbols

    Raises:
        MemoryError: If the buffer cannot be allocated
    """
    top = degree - 1
    buffer = bytearray(axiom_length(degree))
    offsets = production_offsets(top)

    for sub_degree in range(1, top + 1):
        for production in (Production.L, Production.R):
            # Only L is needed at the top level
            if sub_degree == top and production is Production.R:
                continue
            _write_symbols(
                buffer,
                offsets,
                PRODUCTION_RULES[production],
                sub_degree - 1,
                offsets[(production, sub_degree)],
            )

    _write_symbols(buffer, offsets, AXIOM, top, 0)
    return buffer


class StringRewriteGenerator(CurveGenerator):
    """Generates points by expanding the L-system and walking the result.

    Example:
        generator = StringRewriteGenerator()
        points = generator.generate(3)
        len(points)  # 64
    """

    solution_type = SolutionType.STRING_REWRITE
    name = "string-rewrite"
    max_degree = MAX_DEGREE

    def _generate(self, degree: int) -> PointSequence:
        try:
            commands = build_commands(degree)
            logger.debug("Built %d commands for degree %d", len(commands), degree)

            turtle = TurtleInterpreter(start_coordinate(degree))
            turtle.run(commands)
            return turtle.to_sequence(degree)
        except MemoryError as e:
            raise AllocationFailureError(degree, str(e) or "out of memory") from e
