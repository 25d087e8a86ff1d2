"""Turtle interpretation of Moore curve commands.

The turtle keeps a cursor on the integer lattice and a heading. Turn
commands rotate the heading by 90 degrees; a forward command moves the cursor
one unit and records the new position. Both the string rewriting generator and
the recursive generator drive the same interpreter.
"""

from collections.abc import Iterable

from moorecurve.domain import Command, Coordinate, Direction, PointSequence

_FORWARD = ord(Command.FORWARD.value)
_TURN_LEFT = ord(Command.TURN_LEFT.value)
_TURN_RIGHT = ord(Command.TURN_RIGHT.value)


def start_coordinate(degree: int) -> Coordinate:
    """Return the fixed start point (2^(degree-1) - 1, 0) of a curve.

    Args:
        degree: Curve degree, at least 1

    Returns:
        Start coordinate of the curve
    """
    return Coordinate((1 << (degree - 1)) - 1, 0)


class TurtleInterpreter:
    """Cursor with a heading that records every position it moves to.

    The start position is recorded when the turtle is created, so after n
    forward moves the turtle holds n + 1 points.

    Example:
        turtle = TurtleInterpreter(Coordinate(0, 0))
        turtle.run("F+F+F")
        turtle.points  # [(0, 0), (0, 1), (1, 1), (1, 0)]
    """

    def __init__(self, start: Coordinate, heading: Direction = Direction.UP) -> None:
        """Initialize the turtle.

        Args:
            start: Initial cursor position, recorded as the first point
            heading: Initial heading
        """
        self._x = start.x
        self._y = start.y
        self._heading = heading
        self._dx, self._dy = heading.delta
        self._points: list[Coordinate] = [start]

    @property
    def position(self) -> Coordinate:
        """Current cursor position."""
        return Coordinate(self._x, self._y)

    @property
    def heading(self) -> Direction:
        """Current heading."""
        return self._heading

    @property
    def points(self) -> list[Coordinate]:
        """Points recorded so far, start point included."""
        return self._points

    def turn_right(self) -> None:
        """Rotate the heading to its clockwise successor."""
        self._set_heading(self._heading.turn_right())

    def turn_left(self) -> None:
        """Rotate the heading to its counter-clockwise predecessor."""
        self._set_heading(self._heading.turn_left())

    def forward(self) -> None:
        """Move one unit along the heading and record the new position."""
        self._x += self._dx
        self._y += self._dy
        self._points.append(Coordinate(self._x, self._y))

    def execute(self, command: Command) -> None:
        """Execute a single turtle command."""
        if command is Command.FORWARD:
            self.forward()
        elif command is Command.TURN_RIGHT:
            self.turn_right()
        elif command is Command.TURN_LEFT:
            self.turn_left()

    def run(self, commands: str | bytes | bytearray | memoryview) -> None:
        """Execute a whole command string from left to right.

        Symbols other than '+', '-' and 'F' are ignored, as production
        names are in an L-system.

        Args:
            commands: Command symbols as text or as a byte buffer
        """
        codes: Iterable[int]
        if isinstance(commands, str):
            codes = commands.encode("ascii", errors="ignore")
        else:
            codes = commands

        for code in codes:
            if code == _FORWARD:
                self.forward()
            elif code == _TURN_RIGHT:
                self.turn_right()
            elif code == _TURN_LEFT:
                self.turn_left()

    def to_sequence(self, degree: int) -> PointSequence:
        """Freeze the recorded points into a PointSequence."""
        return PointSequence.from_coordinates(degree, self._points)

    def _set_heading(self, heading: Direction) -> None:
        self._heading = heading
        self._dx, self._dy = heading.delta
