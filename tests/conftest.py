"""Shared fixtures for moorecurve tests."""

import pytest

from moorecurve.domain import PointSequence

# Traced by hand from the axiom F+F+F
DEGREE_1_POINTS = [(0, 0), (0, 1), (1, 1), (1, 0)]

# Traced by hand from the axiom LFL+F+LFL with L = -F+F+F-
DEGREE_2_POINTS = [
    (1, 0), (0, 0), (0, 1), (1, 1),
    (1, 2), (0, 2), (0, 3), (1, 3),
    (2, 3), (3, 3), (3, 2), (2, 2),
    (2, 1), (3, 1), (3, 0), (2, 0),
]


@pytest.fixture
def degree_1_points() -> PointSequence:
    """The four points of the degree 1 curve."""
    return PointSequence.from_tuples(1, DEGREE_1_POINTS)


@pytest.fixture
def degree_2_points() -> PointSequence:
    """The sixteen points of the degree 2 curve."""
    return PointSequence.from_tuples(2, DEGREE_2_POINTS)
