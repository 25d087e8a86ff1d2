"""Lattice coordinates and turtle headings.

This module defines the fundamental geometric types used throughout moorecurve:
- Coordinate: An integer lattice point visited by the curve
- Direction: Enum for the four turtle headings
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Turtle heading on the lattice.

    Values are ordered clockwise so that turning right is the successor
    and turning left the predecessor, modulo 4.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step (dx, dy) taken by a forward move in this direction."""
        return _DELTAS[self.value]

    def turn_right(self) -> "Direction":
        """Return the heading after a 90 degree clockwise turn."""
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> "Direction":
        """Return the heading after a 90 degree counter-clockwise turn."""
        return Direction((self.value + 3) % 4)


_DELTAS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point on the integer lattice.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Column index, 0 at the left edge
        y: Row index, 0 at the bottom edge
    """

    x: int
    y: int

    def manhattan_distance(self, other: "Coordinate") -> int:
        """Return |dx| + |dy| between two coordinates."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)
