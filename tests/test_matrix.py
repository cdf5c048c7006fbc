import pytest

from cube_wireframe.coordinate import Coordinate
from cube_wireframe.matrix import Mat4, identity


def test_identity_diagonal():
    m = identity()
    for i in range(16):
        assert m[i] == (1.0 if i in (0, 5, 10, 15) else 0.0)


def test_identity_returns_fresh_matrix():
    a = identity()
    a[3] = 7.0
    assert identity()[3] == 0.0


def test_row_col_indexing_is_row_major():
    m = Mat4(range(16))
    assert m[1, 2] == 6.0
    assert m[3, 0] == 12.0
    m[2, 3] = 99
    assert m[11] == 99.0


def test_rows_and_upper_block():
    m = Mat4(range(16))
    assert m.rows()[2] == [8.0, 9.0, 10.0, 11.0]
    assert m.upper_left_3x3() == [[0.0, 1.0, 2.0], [4.0, 5.0, 6.0], [8.0, 9.0, 10.0]]


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Mat4([1.0] * 9)


def test_tuple_index_out_of_range():
    with pytest.raises(IndexError):
        identity()[4, 0]


def test_mul_coordinate_does_not_normalise():
    m = identity()
    m[15] = 2.0
    out = m.mul_coordinate(Coordinate(1.0, 2.0, 3.0))
    assert tuple(out) == (1.0, 2.0, 3.0, 2.0)


@pytest.mark.parametrize("key", [-1, 16, (-1, 0), (0, -1)])
def test_negative_and_overflow_indices_rejected(key):
    m = identity()
    with pytest.raises(IndexError):
        m[key]
    with pytest.raises(IndexError):
        m[key] = 1.0
