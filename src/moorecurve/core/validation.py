"""Structural checks on generated point sequences.

No independent ground truth exists for the curve, so correctness is
established by comparing the generators against each other and by checking
the properties every space-filling curve tour must have.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from moorecurve.config import SolutionType
from moorecurve.core.base import point_count
from moorecurve.core.turtle import start_coordinate
from moorecurve.domain import Coordinate, PointSequence


def is_connected(points: Sequence[Coordinate]) -> bool:
    """Check that consecutive points are exactly one unit step apart."""
    return all(
        points[i].manhattan_distance(points[i + 1]) == 1 for i in range(len(points) - 1)
    )


def is_self_avoiding(points: Sequence[Coordinate]) -> bool:
    """Check that no lattice point is visited twice."""
    return len(set(points)) == len(points)


def fills_grid(points: PointSequence) -> bool:
    """Check that the points cover the 2^N x 2^N grid exactly."""
    side = 1 << points.degree
    return (
        len(points) == point_count(points.degree)
        and points.bounding_box() == (0, 0, side - 1, side - 1)
        and is_self_avoiding(points.points)
    )


def find_first_mismatch(
    first: Sequence[Coordinate], second: Sequence[Coordinate]
) -> int | None:
    """Return the first index where two sequences differ.

    Returns:
        Index of the first differing point, the length of the shorter
        sequence if one is a prefix of the other, or None if they are equal
    """
    for index, (a, b) in enumerate(zip(first, second)):
        if a != b:
            return index
    if len(first) != len(second):
        return min(len(first), len(second))
    return None


@dataclass
class CrossValidationResult:
    """Outcome of running every generator for one degree.

    Attributes:
        degree: Curve degree checked
        reference: Solution type the others are compared against
        point_counts: Number of points produced per solution type
        mismatches: First mismatching index per solution type (None = equal)
        errors: Error message per solution type that failed to generate
        durations_ms: Generation time per solution type
    """

    degree: int
    reference: SolutionType = SolutionType.STRING_REWRITE
    point_counts: dict[SolutionType, int] = field(default_factory=dict)
    mismatches: dict[SolutionType, int | None] = field(default_factory=dict)
    errors: dict[SolutionType, str] = field(default_factory=dict)
    durations_ms: dict[SolutionType, float] = field(default_factory=dict)

    @property
    def agree(self) -> bool:
        """True if every generator succeeded and produced the same points."""
        return not self.errors and all(index is None for index in self.mismatches.values())


def compare_sequences(
    degree: int,
    sequences: dict[SolutionType, PointSequence],
    errors: dict[SolutionType, str] | None = None,
    reference: SolutionType = SolutionType.STRING_REWRITE,
) -> CrossValidationResult:
    """Compare the sequences of several generators against a reference.

    When the reference itself is missing, the first available sequence is
    used instead.
    """
    result = CrossValidationResult(degree=degree, errors=dict(errors or {}))
    if not sequences:
        return result

    if reference not in sequences:
        reference = min(sequences)
    result.reference = reference
    expected = sequences[reference]

    for solution, sequence in sorted(sequences.items()):
        result.point_counts[solution] = len(sequence)
        result.mismatches[solution] = find_first_mismatch(expected.points, sequence.points)

    return result


def check_sequence(points: PointSequence) -> list[str]:
    """Check the invariants every generated sequence must satisfy.

    Returns:
        Human-readable descriptions of violated invariants (empty if none)
    """
    problems: list[str] = []
    degree = points.degree

    expected_count = point_count(degree)
    if len(points) != expected_count:
        problems.append(f"expected {expected_count} points, got {len(points)}")
    if points.points and points.start != start_coordinate(degree):
        problems.append(f"curve starts at {points.start.to_tuple()}")
    if not is_connected(points.points):
        problems.append("consecutive points are not adjacent")
    if not is_self_avoiding(points.points):
        problems.append("a point is visited twice")

    return problems
