"""Output layer for moorecurve.

This module writes generated point sequences to disk. It provides a clean
abstraction layer between the file formats and the domain models.

Key responsibilities:
- Coordinate list output ('<x>, <y>' per line)
- SVG polyline output scaled by a fixed factor

Key classes:
- PointWriter: Save the coordinate list
- SvgWriter: Save the SVG drawing
"""

from moorecurve.io.writer import PointWriter, SvgWriter, format_point, format_points

__all__ = [
    "PointWriter",
    "SvgWriter",
    "format_point",
    "format_points",
]
