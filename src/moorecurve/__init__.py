"""Moorecurve - Generate the points of a Moore space-filling curve.

Moorecurve computes the ordered lattice points visited by a Moore curve of a
given degree using three independent algorithms (L-system string rewriting,
Gray code bit manipulation and direct recursion), and writes the result as a
plain coordinate list and as an SVG polyline.

Example:
    $ moorecurve -n 4 -o points.txt

This will write 256 points to points.txt and draw the curve to svg_result.svg.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
