"""A growable sequence of bits, most significant first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Bits:
    """An ordered, mutable sequence of bits."""

    __slots__ = ("_bits",)

    def __init__(self, *args: bool) -> None:
        self._bits: list[bool] = [bool(bit) for bit in args]

    @classmethod
    def from_string(cls, text: str) -> Bits:
        """Parse a string of '0' and '1'; whitespace is ignored."""
        bits = cls()
        for char in text:
            if char == "1":
                bits._bits.append(True)
            elif char == "0":
                bits._bits.append(False)
            elif not char.isspace():
                raise ValueError(f"invalid binary character {char!r}")
        return bits

    @classmethod
    def from_bytes(cls, data: bytes) -> Bits:
        """Bits of the bytes, most significant bit of each byte first."""
        return cls(*(bool((byte >> shift) & 1) for byte in data for shift in range(7, -1, -1)))

    def append(self, other: Bits | Iterable[bool]) -> None:
        """Append other bits at the end."""
        self._bits.extend(bool(bit) for bit in other)

    def append_uint(self, value: int, width: int) -> None:
        """Append the lowest width bits of value, most significant first."""
        if width < 0:
            raise ValueError("width must not be negative")
        self._bits.extend(bool((value >> shift) & 1) for shift in range(width - 1, -1, -1))

    def append_bools(self, count: int, value: bool) -> None:
        """Append count copies of value."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._bits.extend([bool(value)] * count)

    def subset(self, start: int, end: int) -> Bits:
        """A copy of the bits from start up to, not including, end."""
        if start < 0 or end > len(self._bits) or start > end:
            raise IndexError(f"subset [{start}, {end}) out of range of {len(self._bits)} bits")
        result = Bits()
        result._bits = self._bits[start:end]
        return result

    def to_bytes(self) -> bytes:
        """Pack into bytes; the last byte is padded with zero bits."""
        out = bytearray((len(self._bits) + 7) // 8)
        for pos, bit in enumerate(self._bits):
            if bit:
                out[pos // 8] |= 0x80 >> (pos % 8)
        return bytes(out)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __getitem__(self, index: int | slice) -> bool | Bits:
        if isinstance(index, slice):
            result = Bits()
            result._bits = self._bits[index]
            return result
        return self._bits[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bits):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"Bits('{self}')"