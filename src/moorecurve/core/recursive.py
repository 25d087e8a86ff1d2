"""Recursive turtle generator.

Walks the L and R productions by direct recursion and drives the turtle on
the fly, without materializing a command string. Stack depth is O(degree).
"""

from moorecurve.config import SolutionType
from moorecurve.core.base import CurveGenerator
from moorecurve.core.grammar import AXIOM, PRODUCTION_RULES, Symbol
from moorecurve.core.turtle import TurtleInterpreter, start_coordinate
from moorecurve.domain import PointSequence, Production


def _walk(turtle: TurtleInterpreter, symbols: tuple[Symbol, ...], sub_degree: int) -> None:
    for symbol in symbols:
        if isinstance(symbol, Production):
            walk_production(turtle, symbol, sub_degree)
        else:
            turtle.execute(symbol)


def walk_production(turtle: TurtleInterpreter, production: Production, degree: int) -> None:
    """Execute production L(degree) or R(degree) on the turtle.

    L(d) turns left, walks R(d-1), moves, turns right, walks L(d-1), moves,
    walks L(d-1), turns right, moves, walks R(d-1) and turns left. R(d) is
    the mirror image. Degree <= 0 is a no-op.

    Args:
        turtle: Turtle receiving the commands
        production: Production to walk
        degree: Production degree
    """
    if degree <= 0:
        return
    _walk(turtle, PRODUCTION_RULES[production], degree - 1)


class RecursiveTurtleGenerator(CurveGenerator):
    """Generates points by mutual recursion over the L and R productions.

    Example:
        generator = RecursiveTurtleGenerator()
        points = generator.generate(2)
        points.start  # Coordinate(x=1, y=0)
    """

    solution_type = SolutionType.RECURSIVE
    name = "recursive"

    def _generate(self, degree: int) -> PointSequence:
        turtle = TurtleInterpreter(start_coordinate(degree))
        _walk(turtle, AXIOM, degree - 1)
        return turtle.to_sequence(degree)
