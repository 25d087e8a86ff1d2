"""Common contract of the point generators.

Every generator is a pure function of the curve degree that returns the full
PointSequence of 4^degree points or raises. There is no partial success.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from moorecurve.config import MAX_DEGREE, MIN_DEGREE, SolutionType
from moorecurve.domain import PointSequence
from moorecurve.exceptions import InvalidDegreeError

logger = logging.getLogger(__name__)


def point_count(degree: int) -> int:
    """Number of points of a degree-N curve (4^N)."""
    return 1 << (2 * degree)


def validate_degree(degree: int) -> int:
    """Check a degree against the supported range [1, 15].

    Args:
        degree: Requested curve degree

    Returns:
        The degree, unchanged

    Raises:
        InvalidDegreeError: If degree is outside the supported range
    """
    if degree < MIN_DEGREE or degree > MAX_DEGREE:
        raise InvalidDegreeError(degree, MIN_DEGREE, MAX_DEGREE)
    return degree


class CurveGenerator(ABC):
    """Base class for the Moore curve point generators.

    Subclasses implement _generate() for a degree that has already been
    checked against min_degree and max_degree.
    """

    solution_type: ClassVar[SolutionType]
    name: ClassVar[str]
    # None means the generator itself places no upper bound on the degree
    max_degree: ClassVar[int | None] = None

    def generate(self, degree: int) -> PointSequence:
        """Generate the points of a Moore curve.

        Args:
            degree: Curve degree, at least 1

        Returns:
            PointSequence of 4^degree points starting at (2^(degree-1) - 1, 0)

        Raises:
            InvalidDegreeError: If degree is not supported by this generator
        """
        if degree < MIN_DEGREE or (self.max_degree is not None and degree > self.max_degree):
            raise InvalidDegreeError(degree, MIN_DEGREE, self.max_degree or MAX_DEGREE)

        logger.debug("Generating %s curve of degree %d", self.name, degree)
        points = self._generate(degree)
        logger.debug("Generated %d points", len(points))
        return points

    @abstractmethod
    def _generate(self, degree: int) -> PointSequence:
        """Generate the points for a validated degree."""
