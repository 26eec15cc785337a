import pytest

from qrforge.mask import Mask, MaskPattern, modulo_function
from qrforge.matrix import Matrix
from qrforge.matrix_type import QRType, QRValue

FUNCTION_CELLS = {
    (0, 0): QRValue.FINDER_V1,
    (1, 0): QRValue.TIMING_V0,
    (2, 2): QRValue.DATA_V1,
    (4, 3): QRValue.FORMAT_V0,
}


def _matrix():
    m = Matrix(6, 6)
    for (x, y), value in FUNCTION_CELLS.items():
        m.set(x, y, value)
    return m


@pytest.mark.parametrize("pattern", list(MaskPattern))
def test_mask_clears_function_cells_and_fills_data(pattern):
    mask = Mask(_matrix(), pattern)
    predicate = modulo_function(pattern)
    for x, y, value in mask.mat.iterate():
        if (x, y) in FUNCTION_CELLS:
            assert value == QRValue.INIT_V0
        else:
            assert value.qrtype() == QRType.DATA
            assert value.is_set() is predicate(x, y)


def test_mask_leaves_source_untouched():
    source = _matrix()
    before = source.copy()
    Mask(source, MaskPattern.MODULO3)
    assert source == before


def test_mask_pattern0_values():
    mask = Mask(Matrix(3, 3), 0)
    assert mask.mat.at(1, 1) == QRValue.DATA_V1
    assert mask.mat.at(1, 2) == QRValue.DATA_V0
    assert mask.pattern is MaskPattern.MODULO0


def test_mask_pattern1_uses_row():
    mask = Mask(Matrix(4, 4), MaskPattern.MODULO1)
    assert mask.mat.at(3, 1) == QRValue.DATA_V0
    assert mask.mat.at(3, 2) == QRValue.DATA_V1


def test_modulo2_uses_column():
    fn = modulo_function(MaskPattern.MODULO2)
    assert fn(3, 0) is True
    assert fn(1, 0) is False


def test_invalid_pattern():
    with pytest.raises(ValueError):
        modulo_function(8)
    with pytest.raises(ValueError):
        Mask(Matrix(2, 2), -1)