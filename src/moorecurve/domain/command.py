"""L-system symbols for the Moore curve grammar."""

from enum import Enum


class Command(str, Enum):
    """Turtle command encoded by an L-system symbol."""

    TURN_LEFT = "-"
    TURN_RIGHT = "+"
    FORWARD = "F"

    @property
    def code(self) -> int:
        """Byte value of the symbol inside a command buffer."""
        return ord(self.value)

    @property
    def mirror(self) -> "Command":
        """The command with left and right turns exchanged."""
        if self is Command.TURN_LEFT:
            return Command.TURN_RIGHT
        if self is Command.TURN_RIGHT:
            return Command.TURN_LEFT
        return self


class Production(Enum):
    """The two mutually dependent productions of the grammar.

    L(i) = -R(i-1)F+L(i-1)FL(i-1)+FR(i-1)-
    R(i) = +L(i-1)F-R(i-1)FR(i-1)-FL(i-1)+
    """

    L = "L"
    R = "R"

    @property
    def mirror(self) -> "Production":
        """The other production."""
        return Production.R if self is Production.L else Production.L
