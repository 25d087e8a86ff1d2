"""Writers for generated point sequences.

This module provides the PointWriter class for the plain coordinate list and
the SvgWriter class for the polyline drawing.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from moorecurve.domain import Coordinate, PointSequence
from moorecurve.exceptions import OutputWriteError

SVG_HEADER = '<?xml version="1.0" standalone="no"?>\n'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_point(point: Coordinate) -> str:
    """Format a point as an '<x>, <y>' line (without newline)."""
    return f"{point.x}, {point.y}"


def format_points(points: Iterable[Coordinate]) -> Iterator[str]:
    """Yield one '<x>, <y>' line per point, newline included."""
    for point in points:
        yield f"{point.x}, {point.y}\n"


class PointWriter:
    """Writes a point sequence as one '<x>, <y>' line per point.

    Example:
        writer = PointWriter(Path("points.txt"))
        writer.write(points)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the point writer.

        Args:
            output_path: Path where the coordinate list will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination path."""
        return self._output_path

    def write(self, points: PointSequence) -> None:
        """Write all points in order.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            with open(self._output_path, "w", encoding="utf-8", newline="\n") as handle:
                handle.writelines(format_points(points))
        except OSError as e:
            raise OutputWriteError(str(self._output_path), e.strerror or str(e)) from e


class SvgWriter:
    """Writes a point sequence as a single SVG polyline.

    Every coordinate is multiplied by scale. The document is as wide and as
    tall as the largest scaled x and y.

    Example:
        writer = SvgWriter(Path("svg_result.svg"))
        writer.write(points)
    """

    def __init__(self, output_path: Path, scale: int = 100, stroke_width: int = 2) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the SVG document will be saved
            scale: Factor applied to every coordinate
            stroke_width: Stroke width of the polyline
        """
        self._output_path = output_path
        self._scale = scale
        self._stroke_width = stroke_width

    @property
    def output_path(self) -> Path:
        """Destination path."""
        return self._output_path

    def canvas_size(self, points: PointSequence) -> tuple[int, int]:
        """Return (width, height) of the scaled drawing."""
        _, _, max_x, max_y = points.bounding_box()
        return max_x * self._scale, max_y * self._scale

    def iter_document(self, points: PointSequence) -> Iterator[str]:
        """Yield the SVG document in chunks."""
        width, height = self.canvas_size(points)
        scale = self._scale

        yield SVG_HEADER
        yield (
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
            'version="1.1" baseProfile="full">\n'
        )
        yield '<polyline points="'
        for point in points:
            yield f"{point.x * scale},{point.y * scale} "
        yield f'" style="fill:none;stroke:black;stroke-width:{self._stroke_width}"/>\n'
        yield "</svg>\n"

    def render(self, points: PointSequence) -> str:
        """Render the SVG document to a string."""
        return "".join(self.iter_document(points))

    def write(self, points: PointSequence) -> None:
        """Write the SVG document.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            with open(self._output_path, "w", encoding="utf-8", newline="\n") as handle:
                handle.writelines(self.iter_document(points))
        except OSError as e:
            raise OutputWriteError(str(self._output_path), e.strerror or str(e)) from e
