import pytest

from qrforge.matrix import (
    IterDirection,
    Matrix,
    OutOfRangeOfHeight,
    OutOfRangeOfWidth,
)
from qrforge.matrix_type import QRValue


def test_set_and_at():
    m = Matrix(3, 3)
    with pytest.raises(OutOfRangeOfHeight):
        m.set(2, 4, QRValue.DATA_V1)

    m.set(2, 2, QRValue.DATA_V1)
    assert m.at(2, 2) == QRValue.DATA_V1


def test_out_of_range_width():
    m = Matrix(3, 3)
    with pytest.raises(OutOfRangeOfWidth):
        m.at(3, 0)
    with pytest.raises(OutOfRangeOfWidth):
        m.set(-1, 0, QRValue.DATA_V0)


def test_new_matrix_is_initialised():
    m = Matrix(2, 4)
    assert m.width == 2
    assert m.height == 4
    assert all(v == QRValue.INIT_V0 for _, _, v in m.iterate())


def test_copy_is_independent():
    m1 = Matrix(3, 3)
    m2 = Matrix(3, 3)
    for m in (m1, m2):
        m.set(1, 1, QRValue.DATA_V0)
        m.set(0, 0, QRValue.DATA_V0)

    got = m1.copy()
    m1.set(2, 2, QRValue.DATA_V1)

    assert got == m2
    assert m1.at(2, 2) == QRValue.DATA_V1
    assert got.at(2, 2) == QRValue.INIT_V0


def _diagonal_matrix():
    m = Matrix(3, 3)
    for i in range(3):
        m.set(i, 0, QRValue.DATA_V1)
        m.set(i, i, QRValue.DATA_V1)
    return m


def test_row():
    m = _diagonal_matrix()
    assert m.row(1) == [QRValue.INIT_V0, QRValue.DATA_V1, QRValue.INIT_V0]


def test_col():
    m = _diagonal_matrix()
    assert m.col(2) == [QRValue.DATA_V1, QRValue.INIT_V0, QRValue.DATA_V1]


def test_row_out_of_range():
    with pytest.raises(OutOfRangeOfHeight):
        _diagonal_matrix().row(4)


def test_col_out_of_range():
    with pytest.raises(OutOfRangeOfWidth):
        _diagonal_matrix().col(4)


def test_iterate_orders():
    m = Matrix(2, 2)
    rows = [(x, y) for x, y, _ in m.iterate(IterDirection.ROW)]
    cols = [(x, y) for x, y, _ in m.iterate(IterDirection.COLUMN)]
    assert rows == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert cols == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_bitmap():
    m = _diagonal_matrix()
    assert m.bitmap() == [
        [True, True, True],
        [False, True, False],
        [False, False, True],
    ]


def test_render():
    m = Matrix(2, 2)
    m.set(1, 0, QRValue.DATA_V1)
    assert m.render() == "I0 d1 \nI0 I0 \n"


def test_equality_detects_difference():
    a = Matrix(2, 2)
    b = Matrix(2, 2)
    b.set(0, 1, QRValue.FINDER_V1)
    assert not a == b
    assert not Matrix(2, 3) == Matrix(3, 2)