"""Small helpers shared by the matrix code."""

from __future__ import annotations

from qrforge.matrix_type import QRValue


def samestate(first: QRValue, second: QRValue) -> bool:
    """Whether two values are both dark or both light, whatever their type."""
    return first.is_set() == second.is_set()


def binary_to_qrvalues(text: str) -> list[QRValue]:
    """Turn a string of '0' and '1' into data values, skipping any other character."""
    mapping = {"1": QRValue.DATA_V1, "0": QRValue.DATA_V0}
    return [mapping[char] for char in text if char in mapping]