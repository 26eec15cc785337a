import pytest

from qrforge.matrix_type import QRType, QRValue


@pytest.mark.parametrize(
    "qrtype, expected",
    [
        (QRType.INIT, 0b00000010),
        (QRType.DATA, 0b00000100),
        (QRType.VERSION, 0b00000110),
        (QRType.FORMAT, 0b00001000),
        (QRType.FINDER, 0b00001010),
        (QRType.DARK, 0b00001100),
        (QRType.SPLITTER, 0b00001110),
        (QRType.TIMING, 0b00010000),
    ],
)
def test_qrtype_values(qrtype, expected):
    assert int(qrtype) == expected


@pytest.mark.parametrize(
    "value, qrtype, is_set",
    [
        (QRValue.INIT_V0, QRType.INIT, False),
        (QRValue.DATA_V1, QRType.DATA, True),
        (QRValue.DATA_V0, QRType.DATA, False),
        (QRValue.VERSION_V0, QRType.VERSION, False),
        (QRValue.VERSION_V1, QRType.VERSION, True),
        (QRValue.FORMAT_V0, QRType.FORMAT, False),
        (QRValue.FORMAT_V1, QRType.FORMAT, True),
        (QRValue.FINDER_V0, QRType.FINDER, False),
        (QRValue.FINDER_V1, QRType.FINDER, True),
        (QRValue.DARK_V0, QRType.DARK, False),
        (QRValue.DARK_V1, QRType.DARK, True),
        (QRValue.SPLITTER_V0, QRType.SPLITTER, False),
        (QRValue.SPLITTER_V1, QRType.SPLITTER, True),
        (QRValue.TIMING_V0, QRType.TIMING, False),
        (QRValue.TIMING_V1, QRType.TIMING, True),
    ],
)
def test_qrvalue_type_and_state(value, qrtype, is_set):
    assert value.qrtype() == qrtype
    assert value.is_set() is is_set


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (QRValue.DATA_V0, QRValue.DATA_V0, QRValue.DATA_V0),
        (QRValue.DATA_V1, QRValue.DATA_V0, QRValue.DATA_V1),
    ],
)
def test_qrvalue_xor(first, second, expected):
    assert first.xor(second) == expected


@pytest.mark.parametrize(
    "qrtype, expected",
    [
        (QRType.INIT, "I"),
        (QRType.DATA, "d"),
        (QRType.VERSION, "V"),
        (QRType.FORMAT, "f"),
        (QRType.FINDER, "F"),
        (QRType.DARK, "D"),
    ],
)
def test_qrtype_str(qrtype, expected):
    assert str(qrtype) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (QRValue.DATA_V0, "d0"),
        (QRValue.DATA_V1, "d1"),
        (QRValue.VERSION_V0, "V0"),
        (QRValue.VERSION_V1, "V1"),
    ],
)
def test_qrvalue_str(value, expected):
    assert str(value) == expected