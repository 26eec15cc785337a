"""Reed-Solomon error correction codewords over GF(256), as QR codes use them."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from qrforge.bits import Bits

# x^8 + x^4 + x^3 + x^2 + 1
_PRIMITIVE = 0x11D


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * 512
    log = [0] * 256
    value = 1
    for power in range(255):
        exp[power] = value
        log[value] = power
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    for power in range(255, 512):
        exp[power] = exp[power - 255]
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def _mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


@lru_cache(maxsize=None)
def generator_polynomial(degree: int) -> tuple[int, ...]:
    """Coefficients of (x - a^0)(x - a^1)...(x - a^(degree-1)), highest power first."""
    if degree < 0:
        raise ValueError("degree must not be negative")
    poly = [1]
    for power in range(degree):
        root = _EXP[power]
        product = poly + [0]
        for index, coef in enumerate(poly):
            product[index + 1] ^= _mul(coef, root)
        poly = product
    return tuple(poly)


def rs_encode(data: bytes | Bits | Iterable[int], ec_count: int) -> bytes:
    """The ec_count error correction codewords for the data codewords."""
    if ec_count < 0:
        raise ValueError("number of error correction codewords must not be negative")
    if isinstance(data, Bits):
        message = list(data.to_bytes())
    else:
        message = list(bytes(data))

    generator = generator_polynomial(ec_count)
    remainder = message + [0] * ec_count
    for index in range(len(message)):
        coef = remainder[index]
        if coef == 0:
            continue
        for offset, gen_coef in enumerate(generator[1:], start=1):
            remainder[index + offset] ^= _mul(gen_coef, coef)
    return bytes(remainder[len(message):])