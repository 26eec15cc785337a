"""Placing function patterns, data bits, masks and information bits into a matrix."""

from __future__ import annotations

from contextlib import suppress

from qrforge.bits import Bits
from qrforge.mask import Mask
from qrforge.matrix import IterDirection, Matrix, OutOfRangeOfHeight, OutOfRangeOfWidth
from qrforge.matrix_type import QRType, QRValue
from qrforge.version import Version


def _put(mat: Matrix, x: int, y: int, value: QRValue) -> None:
    # positions outside the matrix are silently skipped
    with suppress(IndexError):
        mat.set(x, y, value)


def add_finder(mat: Matrix, top: int, left: int) -> None:
    """Draw a 7x7 finder pattern whose corner is at x=top, y=left."""
    for dx in range(7):
        for dy in range(7):
            ring = max(abs(dx - 3), abs(dy - 3))
            value = QRValue.FINDER_V0 if ring == 2 else QRValue.FINDER_V1
            _put(mat, top + dx, left + dy, value)


def add_splitter(mat: Matrix, x: int, y: int, dimension: int) -> None:
    """Draw the light separator beside the finder whose corner touches (x, y)."""
    if x == 7 and y == 7:
        for pos in range(8):
            _put(mat, x, pos, QRValue.SPLITTER_V0)
            _put(mat, pos, y, QRValue.SPLITTER_V0)
    elif x == dimension - 8 and y == 7:
        for pos in range(8):
            _put(mat, x, y - pos, QRValue.SPLITTER_V0)
            _put(mat, x + pos, y, QRValue.SPLITTER_V0)
    elif x == 7 and y == dimension - 8:
        for pos in range(8):
            _put(mat, x, y + pos, QRValue.SPLITTER_V0)
            _put(mat, x - pos, y, QRValue.SPLITTER_V0)


def add_alignment(mat: Matrix, center_x: int, center_y: int) -> None:
    """Draw a 5x5 alignment pattern centred at (center_x, center_y)."""
    for dx in range(-2, 3):
        for dy in range(-2, 3):
            ring = max(abs(dx), abs(dy))
            value = QRValue.DATA_V0 if ring == 1 else QRValue.DATA_V1
            _put(mat, center_x + dx, center_y + dy, value)


def add_timing_line(mat: Matrix, dimension: int) -> None:
    """Draw the alternating timing patterns along row 6 and column 6."""
    for pos in range(8, dimension - 8):
        value = QRValue.TIMING_V1 if pos % 2 == 0 else QRValue.TIMING_V0
        _put(mat, 6, pos, value)
        _put(mat, pos, 6, value)


def add_dark_block(mat: Matrix, x: int, y: int) -> None:
    """Set the always dark module."""
    _put(mat, x, y, QRValue.DARK_V1)


def reserve_format_block(mat: Matrix, dimension: int) -> None:
    """Mark the modules that will hold the format information."""
    for pos in range(1, 9):
        if pos == 6:
            # the timing line passes here
            _put(mat, 8, dimension - pos, QRValue.FORMAT_V0)
            _put(mat, dimension - pos, 8, QRValue.FORMAT_V0)
            continue
        _put(mat, 8, pos, QRValue.FORMAT_V0)
        _put(mat, pos, 8, QRValue.FORMAT_V0)
        _put(mat, dimension - pos, 8, QRValue.FORMAT_V0)
        if pos != 8:
            # (8, dimension - 8) is the dark module
            _put(mat, 8, dimension - pos, QRValue.FORMAT_V0)

    _put(mat, 0, 8, QRValue.FORMAT_V0)
    _put(mat, 8, 0, QRValue.FORMAT_V0)


def reserve_version_block(mat: Matrix, dimension: int) -> None:
    """Mark the two 3x6 areas that will hold the version information."""
    for i in range(1, 4):
        for pos in range(6):
            _put(mat, dimension - 8 - i, pos, QRValue.VERSION_V0)
            _put(mat, pos, dimension - 8 - i, QRValue.VERSION_V0)


def fill_data_bits(mat: Matrix, bits: Bits) -> None:
    """Place bits into the free modules in the zigzag order, starting bottom right."""
    dimension = mat.width
    x = y = dimension - 1
    upward = True
    pos = 0
    step = 0
    total = len(bits)

    while pos < total:
        value = QRValue.DATA_V1 if bits[pos] else QRValue.DATA_V0

        try:
            state = mat.at(x, y)
        except OutOfRangeOfWidth:
            break
        except OutOfRangeOfHeight:
            # turn around at the top or bottom edge
            x -= 2
            y += 1 if upward else -1
            if x in (7, 6):
                x -= 1
            upward = not upward
            try:
                state = mat.at(x, y)
            except IndexError:
                state = QRValue.INIT_V0

        if state.qrtype() == QRType.INIT:
            _put(mat, x, y, value)
            pos += 1

        if step % 2 == 0:
            x -= 1
        else:
            x += 1
            y += -1 if upward else 1
        step += 1


def xor_mask(mat: Matrix, mask: Mask) -> None:
    """Apply a mask to every module the mask covers."""
    for x, y, value in mask.mat.iterate(IterDirection.COLUMN):
        if value.qrtype() == QRType.INIT:
            continue
        mat.set(x, y, mat.at(x, y).xor(value))


def fill_format_info(mat: Matrix, version: Version, pattern: int) -> None:
    """Write the format information for a mask pattern into both reserved places."""
    dimension = version.dimension()
    x, y = 0, dimension - 1

    for bit in version.format_info(int(pattern)):
        value = QRValue.FORMAT_V1 if bit else QRValue.FORMAT_V0
        _put(mat, x, 8, value)
        _put(mat, 8, y, value)

        x += 1
        y -= 1
        if x == 6:
            x = 7
        elif x == 8:
            x = dimension - 8
        if y == dimension - 8:
            y = 8
        elif y == 6:
            y = 5


def fill_version_info(mat: Matrix, version: Version) -> None:
    """Write the version information; only versions 7 and up carry it."""
    info = version.version_info()
    if info is None:
        raise ValueError(f"version {version.ver} carries no version information")

    dimension = version.dimension()
    bits = iter(info)
    for j in range(5, -1, -1):
        for i in range(1, 4):
            value = QRValue.VERSION_V1 if next(bits) else QRValue.VERSION_V0
            _put(mat, dimension - 8 - i, j, value)
            _put(mat, j, dimension - 8 - i, value)