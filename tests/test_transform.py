import math

import pytest

from cube_wireframe.coordinate import Coordinate
from cube_wireframe.matrix import identity
from cube_wireframe.transform import (apply, axis_angle_quaternion,
                                      build_rotation, build_scaling,
                                      build_translation)


def _mul3(a, b):
    return [[sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3)]
            for r in range(3)]


def _transpose3(a):
    return [[a[c][r] for c in range(3)] for r in range(3)]


def _det3(a):
    return (a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
            - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
            + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0]))


def _is_identity3(a, tol=1e-9):
    return all(abs(a[r][c] - (1.0 if r == c else 0.0)) < tol
               for r in range(3) for c in range(3))


def test_translation_entries():
    m = build_translation(1.5, -2.0, 3.0)
    assert (m[3], m[7], m[11]) == (1.5, -2.0, 3.0)
    rest = [m[i] for i in range(16) if i not in (3, 7, 11)]
    assert rest == [identity()[i] for i in range(16) if i not in (3, 7, 11)]


def test_scaling_uses_y_factor_for_z():
    m = build_scaling(2.0, 3.0, 5.0)
    assert (m[0], m[5], m[10]) == (2.0, 3.0, 3.0)


def test_scaling_defect_on_point():
    out = apply(build_scaling(2.0, 3.0, 5.0), Coordinate(1.0, 1.0, 1.0))
    assert (out.x, out.y) == (2.0, 3.0)
    assert out.z == 3.0


def test_identity_leaves_points_unchanged():
    c = Coordinate(3.0, -4.0, 5.5)
    assert apply(identity(), c) == c


def test_identity_normalises_weighted_point():
    out = apply(identity(), Coordinate(2.0, 4.0, 6.0, 2.0))
    assert tuple(out) == (1.0, 2.0, 3.0, 1.0)


def test_translate_then_scale():
    p = Coordinate(1.0, 0.0, 0.0)
    p = apply(build_translation(1.0, 0.0, 0.0), p)
    assert p.x == 2.0
    p = apply(build_scaling(2.0, 2.0, 2.0), p)
    assert tuple(p) == (4.0, 0.0, 0.0, 1.0)


def test_scale_then_translate_differs():
    p = Coordinate(1.0, 0.0, 0.0)
    p = apply(build_scaling(2.0, 2.0, 2.0), p)
    p = apply(build_translation(1.0, 0.0, 0.0), p)
    assert tuple(p) == (3.0, 0.0, 0.0, 1.0)


def test_translation_moves_direction_after_normalise():
    # A w = 0 direction is not translated, but comes back as a point
    d = apply(build_translation(5.0, 5.0, 5.0), Coordinate(1.0, 0.0, 0.0, 0.0))
    assert tuple(d) == (1.0, 0.0, 0.0, 1.0)


def test_apply_sequence_returns_new_list_in_order():
    points = [Coordinate(0.0, 0.0, 0.0), Coordinate(1.0, 2.0, 3.0)]
    out = apply(build_translation(1.0, 1.0, 1.0), points)
    assert [tuple(c) for c in out] == [(1.0, 1.0, 1.0, 1.0), (2.0, 3.0, 4.0, 1.0)]
    assert tuple(points[1]) == (1.0, 2.0, 3.0, 1.0)
    assert out is not points


def test_quaternion_components():
    w, x, y, z = axis_angle_quaternion(180.0, (0, 1, 0))
    assert w == pytest.approx(0.0, abs=1e-12)
    assert (x, y, z) == (0.0, pytest.approx(1.0), 0.0)


def test_rotation_90_about_z():
    out = apply(build_rotation(90.0, (0, 0, 1)), Coordinate(1.0, 0.0, 0.0))
    assert out.x == pytest.approx(0.0, abs=1e-12)
    assert out.y == pytest.approx(1.0)
    assert out.z == pytest.approx(0.0, abs=1e-12)
    assert out.w == 1.0


def test_rotation_drops_translation_row_and_column():
    m = build_rotation(30.0, (1, 0, 0))
    assert [m[i] for i in (3, 7, 11, 12, 13, 14, 15)] == [0.0] * 7


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, 137.5, -45.0, 360.0])
@pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1),
                                  (1 / math.sqrt(3),) * 3])
def test_unit_axis_rotation_is_orthogonal(angle, axis):
    r = build_rotation(angle, axis).upper_left_3x3()
    assert _is_identity3(_mul3(r, _transpose3(r)))
    assert _det3(r) == pytest.approx(1.0)


def test_non_unit_axis_rotation_is_not_orthogonal():
    # |q|^2 = 1.5 here, so R R^T = 2.25 I
    r = build_rotation(90.0, (1, 1, 0)).upper_left_3x3()
    rrt = _mul3(r, _transpose3(r))
    assert not _is_identity3(rrt)
    assert rrt[0][0] == pytest.approx(2.25)
    assert _det3(r) == pytest.approx(1.5 ** 3)


def test_zero_axis_is_accepted():
    # A zero axis gives a pure cos^2 scaling, not an error
    out = apply(build_rotation(90.0, (0, 0, 0)), Coordinate(2.0, 0.0, 0.0))
    assert out.x == pytest.approx(1.0)


def test_nan_angle_propagates():
    out = apply(build_rotation(float('nan'), (0, 0, 1)), Coordinate(1.0, 0.0, 0.0))
    assert math.isnan(out.x) and math.isnan(out.y)
