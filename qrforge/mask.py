"""The eight data mask patterns."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from qrforge.matrix import IterDirection, Matrix
from qrforge.matrix_type import QRType, QRValue

ModuloFunction = Callable[[int, int], bool]


class MaskPattern(IntEnum):
    """Mask pattern identifiers 0 to 7."""

    MODULO0 = 0
    MODULO1 = 1
    MODULO2 = 2
    MODULO3 = 3
    MODULO4 = 4
    MODULO5 = 5
    MODULO6 = 6
    MODULO7 = 7


_MODULO_FUNCTIONS: dict[MaskPattern, ModuloFunction] = {
    MaskPattern.MODULO0: lambda x, y: (x + y) % 2 == 0,
    MaskPattern.MODULO1: lambda x, y: y % 2 == 0,
    MaskPattern.MODULO2: lambda x, y: x % 3 == 0,
    MaskPattern.MODULO3: lambda x, y: (x + y) % 3 == 0,
    MaskPattern.MODULO4: lambda x, y: (x // 3 + y // 2) % 2 == 0,
    MaskPattern.MODULO5: lambda x, y: (x * y) % 2 + (x * y) % 3 == 0,
    MaskPattern.MODULO6: lambda x, y: ((x * y) % 2 + (x * y) % 3) % 2 == 0,
    MaskPattern.MODULO7: lambda x, y: ((x + y) % 2 + (x * y) % 3) % 2 == 0,
}


def modulo_function(pattern: int) -> ModuloFunction:
    """The predicate that decides which data modules a pattern flips."""
    return _MODULO_FUNCTIONS[MaskPattern(pattern)]


class Mask:
    """A mask over a matrix: function modules cleared, data modules set by the pattern."""

    def __init__(self, mat: Matrix, pattern: int) -> None:
        self.pattern = MaskPattern(pattern)
        self.modulo = modulo_function(self.pattern)
        self.mat = mat.copy()
        self._apply()

    def _apply(self) -> None:
        for x, y, value in list(self.mat.iterate(IterDirection.COLUMN)):
            if value.qrtype() != QRType.INIT:
                self.mat.set(x, y, QRValue.INIT_V0)
            elif self.modulo(x, y):
                self.mat.set(x, y, QRValue.DATA_V1)
            else:
                self.mat.set(x, y, QRValue.DATA_V0)