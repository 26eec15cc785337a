import pytest

from qrforge.matrix_type import QRValue
from qrforge.utilities import binary_to_qrvalues, samestate


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (QRValue.DATA_V1, QRValue.DATA_V1, True),
        (QRValue.DATA_V0, QRValue.DATA_V0, True),
        (QRValue.DATA_V1, QRValue.DATA_V0, False),
        (QRValue.DATA_V0, QRValue.DATA_V1, False),
        (QRValue.FINDER_V1, QRValue.FINDER_V1, True),
        (QRValue.FINDER_V1, QRValue.DATA_V0, False),
        (QRValue.DATA_V1, QRValue.FINDER_V1, True),
    ],
)
def test_samestate(first, second, expected):
    assert samestate(first, second) is expected


def test_binary_to_qrvalues_skips_letters():
    V1, V0 = QRValue.DATA_V1, QRValue.DATA_V0
    assert binary_to_qrvalues("1010 0001 101a") == [
        V1, V0, V1, V0,
        V0, V0, V0, V1,
        V1, V0, V1,
    ]


def test_binary_to_qrvalues_skips_other_digits():
    V1, V0 = QRValue.DATA_V1, QRValue.DATA_V0
    assert binary_to_qrvalues("0000 11a1 11x2 x") == [
        V0, V0, V0, V0,
        V1, V1, V1,
        V1, V1,
    ]


def test_binary_to_qrvalues_empty():
    assert binary_to_qrvalues("") == []