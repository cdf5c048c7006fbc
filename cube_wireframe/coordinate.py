#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/coordinate.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class Coordinate:
    """Homogeneous 3D coordinate (x, y, z, w).

    w = 1.0 marks a point, w = 0.0 a direction. Coordinates are mutable;
    the transform engine always hands back fresh instances.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 w: float = 1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __repr__(self):
        return f"Coordinate({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other):
        if isinstance(other, Coordinate):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None

    @property
    def xy(self):
        """Drawable 2D position; z is carried but not used for drawing."""
        return (self.x, self.y)

    def copy(self) -> 'Coordinate':
        return Coordinate(self.x, self.y, self.z, self.w)

    def normalise(self):
        """Divide x, y, z by w and reset w to 1.0.

        When w is 0 the components are left as they are, but w is still
        reset to 1.0, so a direction comes out as a point.
        """
        if self.w != 0.0:
            self.x /= self.w
            self.y /= self.w
            self.z /= self.w
        self.w = 1.0
