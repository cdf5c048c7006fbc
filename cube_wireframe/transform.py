#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Matrix builders and the apply step.

Every builder starts from a fresh identity matrix and overwrites the
entries it needs. Nothing here validates its input: NaN, infinities, zero
scale factors and zero-length axes go straight into the arithmetic.
"""

import math

from .coordinate import Coordinate
from .matrix import Mat4, identity


def build_translation(tx: float, ty: float, tz: float) -> Mat4:
    mat = identity()
    mat[3] = tx
    mat[7] = ty
    mat[11] = tz
    return mat


def build_scaling(sx: float, sy: float, sz: float) -> Mat4:
    """Scaling matrix.

    Known quirk kept for compatibility: the z entry (flat index 10) takes
    ``sy``, so ``sz`` has no effect and z is scaled by the y factor.
    """
    mat = identity()
    mat[0] = sx
    mat[5] = sy
    mat[10] = sy
    return mat


def axis_angle_quaternion(angle_degrees: float, axis):
    """Return (w, x, y, z) for a rotation of ``angle_degrees`` about ``axis``.

    The axis is used as given. A non-unit axis yields a non-unit
    quaternion, and the matrix built from it scales as well as rotates.
    """
    half = math.radians(angle_degrees) / 2
    s = math.sin(half)
    return (math.cos(half), s * axis[0], s * axis[1], s * axis[2])


def build_rotation(angle_degrees: float, axis) -> Mat4:
    """Quaternion rotation matrix.

    The diagonal is not divided by the squared quaternion norm. The
    translation column and the whole bottom row are zero, so the product
    comes out with w = 0 and normalisation leaves x, y, z untouched.
    """
    w, x, y, z = axis_angle_quaternion(angle_degrees, axis)
    ww, xx, yy, zz = w * w, x * x, y * y, z * z

    mat = identity()
    mat[0] = ww + xx - yy - zz
    mat[1] = 2 * x * y - 2 * w * z
    mat[2] = 2 * x * z + 2 * w * y
    mat[3] = 0.0
    mat[4] = 2 * x * y + 2 * w * z
    mat[5] = ww + yy - xx - zz
    mat[6] = 2 * y * z - 2 * w * x
    mat[7] = 0.0
    mat[8] = 2 * x * z - 2 * w * y
    mat[9] = 2 * y * z + 2 * w * x
    mat[10] = ww + zz - xx - yy
    mat[11] = 0.0
    for i in (12, 13, 14, 15):
        mat[i] = 0.0
    return mat


def apply(matrix: Mat4, target):
    """Multiply ``target`` by ``matrix`` and normalise the result.

    ``target`` is a single Coordinate or an iterable of them. A new
    Coordinate (or a new list, in input order) is returned; the input is
    never mutated.
    """
    if isinstance(target, Coordinate):
        result = matrix.mul_coordinate(target)
        result.normalise()
        return result
    return [apply(matrix, c) for c in target]
