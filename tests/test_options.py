import pytest

from qrforge.modes import EncMode
from qrforge.options import (
    default_encoding_options,
    with_encoding_mode,
    with_error_correction_level,
    with_minimum_version,
    with_version,
)
from qrforge.version import ECLevel


def test_defaults():
    options = default_encoding_options()
    assert options.enc_mode == EncMode.AUTO
    assert options.ec_level == ECLevel.QUART
    assert options.version == 0
    assert options.minimum_version == 0


def test_defaults_are_independent():
    first = default_encoding_options()
    second = default_encoding_options()
    with_version(7)(first)
    assert second.version == 0
    assert first.version == 7


def test_with_encoding_mode():
    options = default_encoding_options()
    with_encoding_mode(EncMode.BYTE)(options)
    assert options.enc_mode == EncMode.BYTE


def test_with_encoding_mode_ignores_unknown():
    options = default_encoding_options()
    with_encoding_mode(3)(options)
    assert options.enc_mode == EncMode.AUTO


@pytest.mark.parametrize("level", list(ECLevel))
def test_with_error_correction_level(level):
    options = default_encoding_options()
    with_error_correction_level(level)(options)
    assert options.ec_level == level


@pytest.mark.parametrize("level", [0, 5, -1])
def test_with_error_correction_level_ignores_invalid(level):
    options = default_encoding_options()
    with_error_correction_level(level)(options)
    assert options.ec_level == ECLevel.QUART


@pytest.mark.parametrize("version", [1, 7, 40])
def test_with_version(version):
    options = default_encoding_options()
    with_version(version)(options)
    assert options.version == version


@pytest.mark.parametrize("version", [0, 41, -1])
def test_with_version_ignores_invalid(version):
    options = default_encoding_options()
    with_version(version)(options)
    assert options.version == 0


@pytest.mark.parametrize("version", [1, 9, 40])
def test_with_minimum_version(version):
    options = default_encoding_options()
    with_minimum_version(version)(options)
    assert options.minimum_version == version


@pytest.mark.parametrize("version", [0, 41, -1])
def test_with_minimum_version_ignores_invalid(version):
    options = default_encoding_options()
    with_minimum_version(version)(options)
    assert options.minimum_version == 0