"""Gray code generator.

Computes every point independently from its index, with no command string:

1. The two high bits of the index select one of the four quadrants of the
   2^N x 2^N grid; the low bits index a vertex of a Hilbert curve of degree
   N - 1.
2. The Gray code of that sub-index is split into raw x (odd bits) and
   y (even bits) coordinates.
3. transform_to_hilbert() corrects the raw coordinates bit by bit into
   true Hilbert curve coordinates.
4. transform_to_moore() places the Hilbert curve into its quadrant with
   a quadrant-specific rotation, reflection and translation.

O(N) work per point, O(1) extra state.
"""

from moorecurve.config import SolutionType
from moorecurve.core.base import CurveGenerator, point_count
from moorecurve.domain import Coordinate, PointSequence


def gray_code(number: int) -> int:
    """Return the reflected binary Gray code of number."""
    return number ^ (number >> 1)


def init_coordinates(gray: int, bits: int) -> tuple[int, int]:
    """Deinterleave a Gray code into raw (x, y) coordinates.

    Bit 2i + 1 of the Gray code becomes bit i of x and bit 2i becomes
    bit i of y.

    Args:
        gray: Gray code of a Hilbert curve vertex index
        bits: Number of bits per coordinate (Hilbert curve degree)

    Returns:
        Tuple of raw (x, y)
    """
    x = 0
    y = 0
    for i in range(bits):
        x |= ((gray >> (2 * i + 1)) & 1) << i
        y |= ((gray >> (2 * i)) & 1) << i
    return x, y


def transform_to_hilbert(x: int, y: int, bits: int) -> tuple[int, int]:
    """Correct raw Gray code coordinates into Hilbert curve coordinates.

    For every bit position i from 1 upwards, looking at bit i of the raw
    y and x: if the y bit is set, the low i bits of x are inverted,
    otherwise the low i bits of x and y are exchanged. Then, if the x bit
    is set, the low i bits of x are inverted again.

    Args:
        x: Raw x from init_coordinates()
        y: Raw y from init_coordinates()
        bits: Number of bits per coordinate (Hilbert curve degree)

    Returns:
        Tuple of Hilbert curve (x, y)
    """
    raw_x = x
    raw_y = y

    for i in range(1, bits):
        mask = (1 << i) - 1

        if (raw_y >> i) & 1:
            x ^= mask
        else:
            low_x = x & mask
            low_y = y & mask
            x = (x & ~mask) | low_y
            y = (y & ~mask) | low_x

        if (raw_x >> i) & 1:
            x ^= mask

    return x, y


def transform_to_moore(x: int, y: int, quadrant: int, degree: int) -> tuple[int, int]:
    """Map a Hilbert curve of degree N - 1 into one quadrant of the Moore curve.

    Quadrants are visited in the order lower left, upper left, upper right,
    lower right.

    Args:
        x: Hilbert curve x
        y: Hilbert curve y
        quadrant: Quadrant index 0..3
        degree: Moore curve degree N

    Returns:
        Tuple of Moore curve (x, y)

    Raises:
        ValueError: If quadrant is not in 0..3
    """
    k = 1 << (degree - 1)

    if quadrant == 0:
        return (k - 1) - y, x
    if quadrant == 1:
        return (k - 1) - y, x + k
    if quadrant == 2:
        return y + k, (k - 1) - x + k
    if quadrant == 3:
        return y + k, (k - 1) - x
    raise ValueError(f"Quadrant must be between 0 and 3, got {quadrant}")


def vertex_coordinate(index: int, degree: int) -> Coordinate:
    """Compute the coordinate of a single vertex of a Moore curve.

    Args:
        index: Vertex index in [0, 4^degree)
        degree: Moore curve degree N

    Returns:
        Coordinate of the vertex
    """
    shift = 2 * (degree - 1)
    quadrant = index >> shift
    sub_index = index & ((1 << shift) - 1)

    bits = degree - 1
    x, y = init_coordinates(gray_code(sub_index), bits)
    x, y = transform_to_hilbert(x, y, bits)
    x, y = transform_to_moore(x, y, quadrant, degree)
    return Coordinate(x, y)


class GrayCodeGenerator(CurveGenerator):
    """Generates points with a closed-form transform per vertex.

    Example:
        generator = GrayCodeGenerator()
        generator.generate(1).to_tuples()  # [(0, 0), (0, 1), (1, 1), (1, 0)]
    """

    solution_type = SolutionType.GRAY_CODE
    name = "gray-code"

    def _generate(self, degree: int) -> PointSequence:
        return PointSequence.from_coordinates(
            degree,
            (vertex_coordinate(index, degree) for index in range(point_count(degree))),
        )
