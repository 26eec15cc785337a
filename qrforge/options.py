"""Options that control how a QR code is encoded."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from qrforge.modes import EncMode
from qrforge.version import VERSION_COUNT, ECLevel


@dataclass
class EncodingOptions:
    """Encoding settings; a version of 0 means it is chosen from the data."""

    version: int = 0
    minimum_version: int = 0
    enc_mode: EncMode = EncMode.AUTO
    ec_level: ECLevel = ECLevel.QUART


EncodeOption = Callable[[EncodingOptions], None]


def default_encoding_options() -> EncodingOptions:
    """Automatic mode detection with the QUART error correction level."""
    return EncodingOptions()


def with_encoding_mode(mode: EncMode) -> EncodeOption:
    """Set the encoding mode; unknown modes are ignored."""

    def apply(options: EncodingOptions) -> None:
        try:
            options.enc_mode = EncMode(mode)
        except ValueError:
            return

    return apply


def with_error_correction_level(level: ECLevel) -> EncodeOption:
    """Set the error correction level; levels outside LOW..HIGHEST are ignored."""

    def apply(options: EncodingOptions) -> None:
        if ECLevel.LOW <= level <= ECLevel.HIGHEST:
            options.ec_level = ECLevel(level)

    return apply


def with_version(version: int) -> EncodeOption:
    """Fix the version; values outside 1..40 are ignored."""

    def apply(options: EncodingOptions) -> None:
        if 1 <= version <= VERSION_COUNT:
            options.version = version

    return apply


def with_minimum_version(version: int) -> EncodeOption:
    """Set the smallest version an automatic choice may give; values outside 1..40 are ignored."""

    def apply(options: EncodingOptions) -> None:
        if 1 <= version <= VERSION_COUNT:
            options.minimum_version = version

    return apply