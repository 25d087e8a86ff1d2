"""Domain models for moorecurve.

This module contains the value types shared by every generator and
serializer. All models are designed to be:

- Immutable (frozen dataclasses and enums)
- Serializable for inter-process communication (cross checks)
- Independent of any particular generation algorithm

Key classes:
- Coordinate: An integer lattice point
- Direction: One of the four turtle headings
- Command: A turtle command symbol of the L-system
- Production: The L or R production of the grammar
- PointSequence: The ordered points of a generated curve
"""

from moorecurve.domain.command import Command, Production
from moorecurve.domain.coordinate import Coordinate, Direction
from moorecurve.domain.sequence import PointSequence

__all__: list[str] = [
    # Enums
    "Command",
    "Direction",
    "Production",
    # Core types
    "Coordinate",
    "PointSequence",
]
