#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .coordinate import Coordinate


class Mat4:
    """4x4 matrix stored flat as 16 floats, row-major.

    Flat index ``r * 4 + c`` addresses row r, column c. Entries can be
    read and written either by flat index or by a ``(row, col)`` tuple.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = [0.0] * 16
        else:
            values = [float(v) for v in data]
            if len(values) != 16:
                raise ValueError(f"Mat4 needs 16 entries, got {len(values)}")
            self.m = values

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in (0, 5, 10, 15):
            res.m[i] = 1.0
        return res

    @staticmethod
    def _index(key):
        if isinstance(key, tuple):
            r, c = key
            if not (0 <= r < 4 and 0 <= c < 4):
                raise IndexError("Mat4 index out of range")
            return r * 4 + c
        if not 0 <= key < 16:
            raise IndexError("Mat4 index out of range")
        return key

    def __getitem__(self, key):
        return self.m[self._index(key)]

    def __setitem__(self, key, value):
        self.m[self._index(key)] = float(value)

    def __len__(self):
        return 16

    def __iter__(self):
        return iter(self.m)

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        rows = ", ".join(
            "[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.rows())
        return f"Mat4({rows})"

    def rows(self):
        """Return the matrix as four row lists."""
        return [self.m[r * 4:r * 4 + 4] for r in range(4)]

    def upper_left_3x3(self):
        """The rotation/scale block as three row lists."""
        return [self.m[r * 4:r * 4 + 3] for r in range(3)]

    def mul_coordinate(self, c: Coordinate) -> Coordinate:
        """Raw matrix-vector product. The result is NOT normalised."""
        m = self.m
        return Coordinate(
            m[0] * c.x + m[1] * c.y + m[2] * c.z + m[3] * c.w,
            m[4] * c.x + m[5] * c.y + m[6] * c.z + m[7] * c.w,
            m[8] * c.x + m[9] * c.y + m[10] * c.z + m[11] * c.w,
            m[12] * c.x + m[13] * c.y + m[14] * c.z + m[15] * c.w,
        )


def identity() -> Mat4:
    """Fresh identity matrix; callers own and may mutate the result."""
    return Mat4.identity()
