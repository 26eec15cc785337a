"""Encoding modes and detection of the smallest mode that can hold some data."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum


class EncMode(IntEnum):
    """Data encoding mode; AUTO asks for the mode to be detected from the data."""

    AUTO = 0
    NONE = 1 << 1
    NUMERIC = 1 << 2
    ALPHANUMERIC = 1 << 3
    BYTE = 1 << 4
    JP = 1 << 5

    def label(self) -> str:
        """Short lower-case name of the mode, "unknown" for AUTO."""
        return _MODE_LABELS.get(self, "unknown")


_MODE_LABELS = {
    EncMode.NONE: "none",
    EncMode.NUMERIC: "numeric",
    EncMode.ALPHANUMERIC: "alphanumeric",
    EncMode.BYTE: "byte",
    EncMode.JP: "japan",
}

_ALPHANUMERIC_SYMBOLS = frozenset(b" $%*+-./:")


def analyze_num(byte: int) -> bool:
    """Whether the byte is an ASCII digit."""
    return ord("0") <= byte <= ord("9")


def analyze_alphanum(byte: int) -> bool:
    """Whether the byte belongs to the QR alphanumeric character set."""
    if analyze_num(byte) or ord("A") <= byte <= ord("Z"):
        return True
    return byte in _ALPHANUMERIC_SYMBOLS


_ANALYZERS: dict[EncMode, Callable[[int], bool]] = {
    EncMode.NUMERIC: analyze_num,
    EncMode.ALPHANUMERIC: analyze_alphanum,
}


def analyze_encode_mode(raw: bytes | str) -> EncMode:
    """The smallest mode whose character set holds every byte of the data."""
    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    mode = EncMode.NUMERIC
    for byte in raw:
        # a byte that does not fit moves to the next, wider mode and is checked again
        while (check := _ANALYZERS.get(mode)) is not None and not check(byte):
            mode = EncMode(mode << 1)
        if check is None:
            break
    return mode