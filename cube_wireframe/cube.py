#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/cube.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .argb import BLACK
from .coordinate import Coordinate
from .paint import Paint
from .transform import apply, build_rotation, build_scaling, build_translation

logger = logging.getLogger(__name__)

# Vertices 0-3 sit on the x = -1 face, 4-7 on the x = +1 face;
# vertex i and i + 4 differ only in x.
CORNERS = (
    (-1.0, -1.0, -1.0),
    (-1.0, -1.0,  1.0),
    (-1.0,  1.0, -1.0),
    (-1.0,  1.0,  1.0),
    ( 1.0, -1.0, -1.0),
    ( 1.0, -1.0,  1.0),
    ( 1.0,  1.0, -1.0),
    ( 1.0,  1.0,  1.0),
)

EDGES = (
    (0, 1), (1, 3), (3, 2), (2, 0),  # x = -1 face
    (4, 5), (5, 7), (7, 6), (6, 4),  # x = +1 face
    (0, 4), (1, 5), (2, 6), (3, 7),  # connectors
)


class Cube:
    """
    Wireframe cube with live, already-transformed vertices.

    translate(), scale() and rotate() each build one matrix and apply it
    to the current vertices straight away. There is no running transform
    and no rest pose, so call order matters: translate(1, 0, 0) followed
    by scale(2, 2, 2) is not the same as the reverse.
    """

    def __init__(self, color: int = BLACK):
        self._vertices = [Coordinate(x, y, z) for x, y, z in CORNERS]
        self._paint = Paint(color)

    def __repr__(self):
        return f"Cube(color=0x{self.color:08X}, vertices={self._vertices!r})"

    @property
    def color(self) -> int:
        return self._paint.color

    @property
    def paint(self) -> Paint:
        return self._paint

    @property
    def vertices(self):
        """Copies of the 8 current vertex positions, in index order."""
        return [v.copy() for v in self._vertices]

    def translate(self, tx: float, ty: float, tz: float):
        logger.debug("translate(%s, %s, %s)", tx, ty, tz)
        self._transform(build_translation(tx, ty, tz))

    def scale(self, sx: float, sy: float, sz: float):
        """Scale about the origin. z is scaled by ``sy``; see build_scaling."""
        logger.debug("scale(%s, %s, %s)", sx, sy, sz)
        self._transform(build_scaling(sx, sy, sz))

    def rotate(self, angle_degrees: float, axis):
        """Rotate about ``axis`` through the origin. The axis should be unit length."""
        logger.debug("rotate(%s, %s)", angle_degrees, tuple(axis))
        self._transform(build_rotation(angle_degrees, axis))

    def _transform(self, matrix):
        self._vertices[:] = apply(matrix, self._vertices)

    def edges(self):
        return EDGES

    def segments(self):
        """Yield ((x1, y1), (x2, y2)) for each of the 12 edges."""
        v = self._vertices
        for start, end in EDGES:
            yield v[start].xy, v[end].xy
