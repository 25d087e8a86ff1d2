"""Ordered point sequences produced by the generators."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, overload

from moorecurve.domain.coordinate import Coordinate


@dataclass(frozen=True)
class PointSequence:
    """The ordered lattice points of a Moore curve.

    A sequence is produced once per generator call and never mutated
    afterwards. Index 0 is the curve start.

    Attributes:
        degree: Curve degree the points were generated for
        points: Coordinates in visiting order
    """

    degree: int
    points: tuple[Coordinate, ...]

    @classmethod
    def from_coordinates(cls, degree: int, points: Iterable[Coordinate]) -> "PointSequence":
        """Freeze an iterable of coordinates into a sequence."""
        return cls(degree=degree, points=tuple(points))

    @classmethod
    def from_tuples(
        cls, degree: int, pairs: Iterable[tuple[int, int]]
    ) -> "PointSequence":
        """Build a sequence from plain (x, y) pairs."""
        return cls(degree=degree, points=tuple(Coordinate(x, y) for x, y in pairs))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> Coordinate: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Coordinate, ...]: ...

    def __getitem__(self, index: int | slice) -> Coordinate | tuple[Coordinate, ...]:
        return self.points[index]

    @property
    def start(self) -> Coordinate:
        """First point of the curve."""
        return self.points[0]

    @property
    def end(self) -> Coordinate:
        """Last point of the curve."""
        return self.points[-1]

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the sequence.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0, 0, 0, 0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_tuples(self) -> list[tuple[int, int]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Points are stored as flat pairs to keep worker results small.
        """
        return {"degree": self.degree, "points": self.to_tuples()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointSequence":
        """Deserialize from dictionary."""
        return cls.from_tuples(data["degree"], data["points"])
