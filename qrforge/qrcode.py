"""Building a QR code matrix from text: encoding, error correction, placement and masking."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import suppress
from dataclasses import replace
from typing import Protocol, runtime_checkable

from qrforge.bits import Bits
from qrforge.debug import debug_draw, debug_enabled, debug_logf
from qrforge.encoder import Encoder
from qrforge.evaluation import evaluation
from qrforge.mask import Mask, MaskPattern
from qrforge.matrix import Matrix
from qrforge.modes import EncMode, analyze_encode_mode
from qrforge.options import EncodeOption, EncodingOptions, default_encoding_options
from qrforge.patterns import (
    add_alignment,
    add_dark_block,
    add_finder,
    add_splitter,
    add_timing_line,
    fill_data_bits,
    fill_format_info,
    fill_version_info,
    reserve_format_block,
    reserve_version_block,
    xor_mask,
)
from qrforge.reedsolomon import rs_encode
from qrforge.version import (
    VERSION_COUNT,
    ECLevel,
    Version,
    VersionError,
    alignment_pattern_locations,
    analyze_version,
    load_version,
)

_logger = logging.getLogger("qrforge")


@runtime_checkable
class Writer(Protocol):
    """Destination of a finished QR code matrix."""

    def write(self, mat: Matrix) -> None:
        """Output the matrix."""

    def close(self) -> None:
        """Release whatever the writer holds."""


class _NullWriter:
    def write(self, mat: Matrix) -> None:
        return None

    def close(self) -> None:
        return None


def new(text: str, versions: Sequence[Version]) -> QRCode:
    """A QR code for text with the default encoding options."""
    return QRCode(text, default_encoding_options(), versions)


def new_with(text: str, versions: Sequence[Version], *args: EncodeOption) -> QRCode:
    """A QR code for text with the given encoding options applied to the defaults."""
    options = default_encoding_options()
    for option in args:
        option(options)
    return QRCode(text, options, versions)


def _interleave(blocks: Sequence[bytes]) -> Bits:
    """Take the first codeword of every block, then the second, and so on."""
    out = Bits()
    longest = max((len(block) for block in blocks), default=0)
    for index in range(longest):
        for block in blocks:
            if index < len(block):
                out.append_uint(block[index], 8)
    return out


class QRCode:
    """A finished, masked QR code for one text."""

    def __init__(
        self,
        text: str,
        options: EncodingOptions,
        versions: Sequence[Version],
    ) -> None:
        self.text = text
        self._raw = text.encode("utf-8")
        self.options = replace(options)

        if self.options.enc_mode == EncMode.AUTO:
            self.options.enc_mode = analyze_encode_mode(self._raw)

        self._version = self._choose_version(versions)
        self._data_bits = self._encode_data()
        self._mat = self._prefill_matrix()
        self._mat = self._masking()

    @property
    def dimension(self) -> int:
        """Modules per side."""
        return self._mat.width

    @property
    def matrix(self) -> Matrix:
        """The masked matrix."""
        return self._mat

    @property
    def version(self) -> Version:
        """The version the code was built with."""
        return self._version

    def save(self, writer: Writer | None = None) -> None:
        """Hand the matrix to a writer and close it afterwards."""
        target: Writer = writer if writer is not None else _NullWriter()
        try:
            target.write(self._mat.copy())
        finally:
            try:
                target.close()
            except Exception as exc:  # a failing close must not hide the result
                _logger.warning("close writer failed: %s", exc)

    def _choose_version(self, versions: Sequence[Version]) -> Version:
        opts = self.options
        fixed = 1 <= opts.version <= VERSION_COUNT and (
            ECLevel.LOW <= opts.ec_level <= ECLevel.HIGHEST
        )
        if not fixed:
            try:
                analyzed = analyze_version(self._raw, opts.ec_level, opts.enc_mode, versions)
            except VersionError as exc:
                raise VersionError(f"calc version failed: {exc}") from exc
            opts.version = analyzed.ver
            if opts.minimum_version > 0 and opts.version < opts.minimum_version:
                opts.version = opts.minimum_version
        return load_version(opts.version, opts.ec_level, versions)

    def _encode_data(self) -> Bits:
        version = self._version
        encoder = Encoder(self.options.enc_mode, self.options.ec_level, version)
        bits = encoder.encode(self._raw)

        data_blocks: list[bytes] = []
        ec_blocks: list[bytes] = []
        start = 0
        for group in version.groups:
            for _ in range(group.num_blocks):
                end = start + group.num_data_codewords * 8
                block = bits.subset(start, end).to_bytes()
                data_blocks.append(block)
                debug_logf("numOfECBlock: %d", group.ec_codewords_per_block)
                ec_blocks.append(rs_encode(block, group.ec_codewords_per_block))
                start = end

        data = _interleave(data_blocks)
        ec = _interleave(ec_blocks)
        if debug_enabled():
            debug_logf("data bitsets: %s", data)
            debug_logf("ec bitsets: %s", ec)

        data.append(ec)
        data.append_bools(version.remainder_bits, False)
        return data

    def _prefill_matrix(self) -> Matrix:
        ver = self._version.ver
        dimension = self._version.dimension()
        mat = Matrix(dimension, dimension)

        add_finder(mat, 0, 0)
        add_splitter(mat, 7, 7, dimension)
        add_finder(mat, dimension - 7, 0)
        add_splitter(mat, dimension - 8, 7, dimension)
        add_finder(mat, 0, dimension - 7)
        add_splitter(mat, 7, dimension - 8, dimension)

        if ver > 1:
            for loc in alignment_pattern_locations(ver):
                add_alignment(mat, loc.x, loc.y)

        add_timing_line(mat, dimension)
        add_dark_block(mat, 8, 4 * ver + 9)
        reserve_format_block(mat, dimension)
        if ver >= 7:
            reserve_version_block(mat, dimension)
        return mat

    def _masking(self) -> Matrix:
        filled = self._mat.copy()
        fill_data_bits(filled, self._data_bits)

        best: Matrix | None = None
        best_score = 0
        for pattern in MaskPattern:
            mask = Mask(self._mat, pattern)
            candidate = filled.copy()
            xor_mask(candidate, mask)
            fill_format_info(candidate, self._version, pattern)
            if self._version.ver >= 7:
                fill_version_info(candidate, self._version)

            score = evaluation(candidate)
            debug_logf("mask %d score: %d", int(pattern), score)
            with suppress(OSError):
                debug_draw(f"draft/qrcode_mask_{int(pattern)}.jpeg", candidate)

            if best is None or score < best_score:
                best, best_score = candidate, score

        assert best is not None
        return best