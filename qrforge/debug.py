"""Optional diagnostics: log messages and matrix snapshots as JPEG images."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import BinaryIO

from PIL import Image, ImageDraw

from qrforge.matrix import IterDirection, Matrix

_logger = logging.getLogger("qrforge")

_ENABLING_VALUES = frozenset({"1", "true", "TRUE", "enabled", "ENABLED"})
_PADDING = 10
_BLOCK_WIDTH = 10


@dataclass
class _DebugSwitch:
    enabled: bool = False
    loaded: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock)


_state = _DebugSwitch()


def debug_enabled() -> bool:
    """Whether debug mode is on; QRCODE_DEBUG is read from the environment once."""
    state = _state
    with state.lock:
        if not state.loaded:
            if os.environ.get("QRCODE_DEBUG", "") in _ENABLING_VALUES:
                state.enabled = True
            state.loaded = True
    return state.enabled


def set_debug_mode() -> None:
    """Turn debug mode on."""
    _state.enabled = True


def debug_logf(fmt: str, *args: object) -> None:
    """Log a %-style message when debug mode is on."""
    if not debug_enabled():
        return
    _logger.debug("[qrcode] DEBUG: " + fmt, *args)


def debug_draw(filename: str | os.PathLike[str], mat: Matrix) -> bool:
    """Write the matrix as a JPEG file when debug mode is on; return whether it did."""
    if not debug_enabled():
        return False
    with open(filename, "wb") as stream:
        return debug_draw_to(stream, mat)


def debug_draw_to(stream: BinaryIO, mat: Matrix) -> bool:
    """Write the matrix as JPEG to a stream when debug mode is on; return whether it did."""
    if not debug_enabled():
        return False

    size = mat.width * _BLOCK_WIDTH + 2 * _PADDING
    image = Image.new("L", (size, size), 0xFF)
    draw = ImageDraw.Draw(image)

    for x, y, value in mat.iterate(IterDirection.COLUMN):
        sx = x * _BLOCK_WIDTH + _PADDING
        sy = y * _BLOCK_WIDTH + _PADDING
        draw.rectangle(
            (sx, sy, sx + _BLOCK_WIDTH - 1, sy + _BLOCK_WIDTH - 1),
            fill=0 if value.is_set() else 0xFF,
        )

    image.save(stream, format="JPEG")
    return True