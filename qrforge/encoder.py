"""Turning raw data into the data codeword bit stream of a QR code."""

from __future__ import annotations

from qrforge.bits import Bits
from qrforge.debug import debug_logf
from qrforge.modes import EncMode
from qrforge.version import ECLevel, Version

_PADDING_BYTES = (Bits.from_string("11101100"), Bits.from_string("00010001"))

_MODE_INDICATORS = {
    EncMode.NUMERIC: "0001",
    EncMode.ALPHANUMERIC: "0010",
    EncMode.BYTE: "0100",
    EncMode.JP: "1000",
}

_CHAR_COUNT_BITS = {
    (9, EncMode.NUMERIC): 10,
    (9, EncMode.ALPHANUMERIC): 9,
    (9, EncMode.BYTE): 8,
    (9, EncMode.JP): 8,
    (26, EncMode.NUMERIC): 12,
    (26, EncMode.ALPHANUMERIC): 11,
    (26, EncMode.BYTE): 16,
    (26, EncMode.JP): 10,
    (40, EncMode.NUMERIC): 14,
    (40, EncMode.ALPHANUMERIC): 13,
    (40, EncMode.BYTE): 16,
    (40, EncMode.JP): 12,
}

_ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"


class EncodingError(ValueError):
    """The data cannot be encoded with the chosen mode or version."""


def mode_indicator(mode: EncMode) -> Bits:
    """The four mode indicator bits."""
    try:
        return Bits.from_string(_MODE_INDICATORS[mode])
    except KeyError:
        raise EncodingError(f"no indicator for mode {mode!r}") from None


def char_count_bits(mode: EncMode, version: Version) -> int:
    """Width of the character count field for a mode at a version."""
    if version.ver <= 9:
        band = 9
    elif version.ver <= 26:
        band = 26
    else:
        band = 40
    try:
        return _CHAR_COUNT_BITS[band, mode]
    except KeyError:
        raise EncodingError(f"no character count width for mode {mode!r}") from None


def encode_alphanumeric_character(char: int | str) -> int:
    """Value 0-44 of a QR alphanumeric character: 0-9, A-Z, space, $%*+-./:"""
    symbol = chr(char) if isinstance(char, int) else char
    index = _ALPHANUMERIC_CHARSET.find(symbol) if len(symbol) == 1 else -1
    if index < 0:
        raise EncodingError(f"non alphanumeric character {symbol!r}")
    return index


class Encoder:
    """Encodes data in one mode into the codewords of one version."""

    def __init__(self, mode: EncMode, ec_level: ECLevel, version: Version) -> None:
        self.mode = mode
        self.ec_level = ec_level
        self.version = version

    def encode(self, data: bytes | str) -> Bits:
        """Mode indicator, character count, data bits, terminator and padding."""
        if isinstance(data, str):
            data = data.encode("utf-8")

        bits = mode_indicator(self.mode)
        bits.append_uint(len(data), char_count_bits(self.mode, self.version))

        if self.mode == EncMode.NUMERIC:
            self._encode_numeric(bits, data)
        elif self.mode == EncMode.ALPHANUMERIC:
            self._encode_alphanumeric(bits, data)
        elif self.mode == EncMode.BYTE:
            for byte in data:
                bits.append_uint(byte, 8)
        else:
            raise EncodingError(f"encoding in mode {self.mode.label()} is unsupported")

        self._terminate(bits)
        return bits

    @staticmethod
    def _encode_numeric(bits: Bits, data: bytes) -> None:
        for start in range(0, len(data), 3):
            chunk = data[start : start + 3]
            if not chunk.isdigit():
                raise EncodingError(f"non numeric data {chunk!r}")
            bits.append_uint(int(chunk), 1 + 3 * len(chunk))

    @staticmethod
    def _encode_alphanumeric(bits: Bits, data: bytes) -> None:
        for start in range(0, len(data), 2):
            chunk = data[start : start + 2]
            value = 0
            for byte in chunk:
                value = value * 45 + encode_alphanumeric_character(byte)
            bits.append_uint(value, 11 if len(chunk) > 1 else 6)

    def _terminate(self, bits: Bits) -> None:
        max_cap = self.version.num_total_codewords() * 8
        less = max_cap - len(bits)
        if less < 0:
            raise EncodingError(
                f"wrong version({self.version.ver}) cap({max_cap} bits) "
                f"and could not contain all bits: {len(bits)} bits"
            )
        bits.append_bools(min(less, 4), False)

        if mod := len(bits) % 8:
            bits.append_bools(8 - mod, False)

        remaining = max_cap - len(bits)
        if remaining > 0:
            debug_logf("maxCap: %d, len: %d, less: %d", max_cap, len(bits), remaining)
            for index in range(remaining // 8):
                bits.append(_PADDING_BYTES[index % 2])