import io
import logging

import pytest
from PIL import Image

from qrforge import debug
from qrforge.matrix import Matrix
from qrforge.matrix_type import QRValue


@pytest.fixture
def fresh_switch(monkeypatch):
    monkeypatch.setattr(debug, "_state", debug._DebugSwitch())
    monkeypatch.delenv("QRCODE_DEBUG", raising=False)
    return monkeypatch


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "enabled", "ENABLED"])
def test_enabled_from_environment(fresh_switch, value):
    fresh_switch.setenv("QRCODE_DEBUG", value)
    assert debug.debug_enabled() is True


@pytest.mark.parametrize("value", ["0", "yes", "True", ""])
def test_not_enabled_by_other_values(fresh_switch, value):
    fresh_switch.setenv("QRCODE_DEBUG", value)
    assert debug.debug_enabled() is False


def test_environment_read_once(fresh_switch):
    assert debug.debug_enabled() is False
    fresh_switch.setenv("QRCODE_DEBUG", "1")
    assert debug.debug_enabled() is False


def test_set_debug_mode(fresh_switch):
    assert debug.debug_enabled() is False
    debug.set_debug_mode()
    assert debug.debug_enabled() is True


def test_logf_silent_when_disabled(fresh_switch, caplog):
    caplog.set_level(logging.DEBUG, logger="qrforge")
    debug.debug_logf("value %d", 7)
    assert caplog.records == []


def test_logf_when_enabled(fresh_switch, caplog):
    caplog.set_level(logging.DEBUG, logger="qrforge")
    debug.set_debug_mode()
    debug.debug_logf("value %d", 7)
    assert caplog.records[-1].getMessage() == "[qrcode] DEBUG: value 7"


def test_draw_to_disabled_writes_nothing(fresh_switch):
    stream = io.BytesIO()
    assert debug.debug_draw_to(stream, Matrix(3, 3)) is False
    assert stream.getvalue() == b""


def _dark_center_matrix():
    m = Matrix(3, 3)
    m.set(1, 1, QRValue.DATA_V1)
    return m


def test_draw_to_writes_jpeg(fresh_switch):
    debug.set_debug_mode()
    stream = io.BytesIO()
    assert debug.debug_draw_to(stream, _dark_center_matrix()) is True

    data = stream.getvalue()
    assert data[:2] == b"\xff\xd8"

    image = Image.open(io.BytesIO(data))
    assert image.format == "JPEG"
    assert image.size[0] == image.size[1]
    gray = image.convert("L")
    assert gray.getpixel((25, 25)) < 64
    assert gray.getpixel((15, 15)) > 192
    assert gray.getpixel((2, 2)) > 192


def test_draw_to_file(fresh_switch, tmp_path):
    target = tmp_path / "snapshot.jpeg"
    assert debug.debug_draw(target, _dark_center_matrix()) is False
    assert not target.exists()

    debug.set_debug_mode()
    assert debug.debug_draw(target, _dark_center_matrix()) is True
    with Image.open(target) as image:
        assert image.format == "JPEG"