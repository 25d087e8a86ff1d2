"""Mapping of solution type codes to generators."""

from moorecurve.config import SolutionType
from moorecurve.core.base import CurveGenerator
from moorecurve.core.gray_code import GrayCodeGenerator
from moorecurve.core.recursive import RecursiveTurtleGenerator
from moorecurve.core.string_rewrite import StringRewriteGenerator
from moorecurve.domain import PointSequence
from moorecurve.exceptions import UnknownSolutionTypeError

GENERATORS: dict[SolutionType, type[CurveGenerator]] = {
    generator.solution_type: generator
    for generator in (StringRewriteGenerator, GrayCodeGenerator, RecursiveTurtleGenerator)
}


def resolve_solution_type(solution: SolutionType | int) -> SolutionType:
    """Convert a solution code (0, 1 or 2) to a SolutionType.

    Raises:
        UnknownSolutionTypeError: If the code maps to no generator
    """
    try:
        return SolutionType(solution)
    except ValueError:
        raise UnknownSolutionTypeError(solution, len(SolutionType)) from None


def get_generator(solution: SolutionType | int) -> CurveGenerator:
    """Return the generator for a solution type or its integer code.

    Args:
        solution: SolutionType or code 0 (string rewrite), 1 (gray code)
            or 2 (recursive)

    Returns:
        A new generator instance

    Raises:
        UnknownSolutionTypeError: If the code maps to no generator
    """
    return GENERATORS[resolve_solution_type(solution)]()


def generate(
    degree: int, solution: SolutionType | int = SolutionType.STRING_REWRITE
) -> PointSequence:
    """Generate the points of a Moore curve with the selected algorithm."""
    return get_generator(solution).generate(degree)
