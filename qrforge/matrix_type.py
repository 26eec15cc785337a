"""Module types and values stored in a QR code matrix."""

from __future__ import annotations

from enum import IntEnum


class QRType(IntEnum):
    """Kind of a module in the matrix; the lowest bit is always clear."""

    INIT = 1 << 1
    DATA = 2 << 1
    VERSION = 3 << 1
    FORMAT = 4 << 1
    FINDER = 5 << 1
    DARK = 6 << 1
    SPLITTER = 7 << 1
    TIMING = 8 << 1

    def __str__(self) -> str:
        return _TYPE_LABELS.get(self, "?")


_TYPE_LABELS = {
    QRType.INIT: "I",
    QRType.DATA: "d",
    QRType.VERSION: "V",
    QRType.FORMAT: "f",
    QRType.FINDER: "F",
    QRType.DARK: "D",
    QRType.SPLITTER: "S",
    QRType.TIMING: "T",
}


class QRValue(IntEnum):
    """A module value: its type in the upper seven bits, its state in the lowest bit."""

    INIT_V0 = QRType.INIT
    DATA_V0 = QRType.DATA
    DATA_V1 = QRType.DATA | 1
    VERSION_V0 = QRType.VERSION
    VERSION_V1 = QRType.VERSION | 1
    FORMAT_V0 = QRType.FORMAT
    FORMAT_V1 = QRType.FORMAT | 1
    FINDER_V0 = QRType.FINDER
    FINDER_V1 = QRType.FINDER | 1
    DARK_V0 = QRType.DARK
    DARK_V1 = QRType.DARK | 1
    SPLITTER_V0 = QRType.SPLITTER
    SPLITTER_V1 = QRType.SPLITTER | 1
    TIMING_V0 = QRType.TIMING
    TIMING_V1 = QRType.TIMING | 1

    def qrtype(self) -> QRType:
        """The kind of module this value belongs to."""
        return QRType(self & 0xFE)

    def is_set(self) -> bool:
        """Whether the module is dark."""
        return bool(self & 0x01)

    def xor(self, other: QRValue) -> QRValue:
        """A data value that is set when the two values differ."""
        return QRValue.DATA_V1 if self != other else QRValue.DATA_V0

    def __str__(self) -> str:
        return f"{self.qrtype()}{1 if self.is_set() else 0}"