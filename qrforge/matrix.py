"""A two-dimensional grid of QR code module values."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

from qrforge.matrix_type import QRValue


class OutOfRangeOfWidth(IndexError):
    """An x coordinate lies outside the matrix width."""

    def __init__(self, message: str = "out of range of width") -> None:
        super().__init__(message)


class OutOfRangeOfHeight(IndexError):
    """A y coordinate lies outside the matrix height."""

    def __init__(self, message: str = "out of range of height") -> None:
        super().__init__(message)


class IterDirection(IntEnum):
    """Order in which the matrix is walked."""

    ROW = 1
    COLUMN = 2


class Matrix:
    """Grid of module values addressed by (x, y); every cell starts as INIT_V0."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._cols = [[QRValue.INIT_V0] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def copy(self) -> Matrix:
        """An independent copy of this matrix."""
        other = Matrix(0, 0)
        other._width = self._width
        other._height = self._height
        other._cols = [list(col) for col in self._cols]
        return other

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self._width:
            raise OutOfRangeOfWidth()
        if not 0 <= y < self._height:
            raise OutOfRangeOfHeight()

    def set(self, x: int, y: int, value: QRValue) -> None:
        """Store a value at (x, y)."""
        self._check(x, y)
        self._cols[x][y] = value

    def at(self, x: int, y: int) -> QRValue:
        """The value at (x, y)."""
        self._check(x, y)
        return self._cols[x][y]

    def iterate(
        self, direction: IterDirection = IterDirection.COLUMN
    ) -> Iterator[tuple[int, int, QRValue]]:
        """Yield (x, y, value) row by row or column by column."""
        if direction == IterDirection.ROW:
            for y in range(self._height):
                for x, col in enumerate(self._cols):
                    yield x, y, col[y]
            return

        for x, col in enumerate(self._cols):
            for y, value in enumerate(col):
                yield x, y, value

    def row(self, cur: int) -> list[QRValue]:
        """Values of row y = cur, left to right."""
        if not 0 <= cur < self._height:
            raise OutOfRangeOfHeight()
        return [col[cur] for col in self._cols]

    def col(self, cur: int) -> list[QRValue]:
        """Values of column x = cur, top to bottom."""
        if not 0 <= cur < self._width:
            raise OutOfRangeOfWidth()
        return list(self._cols[cur])

    def bitmap(self) -> list[list[bool]]:
        """Rows of booleans, True where a module is dark."""
        return [
            [col[y].is_set() for col in self._cols] for y in range(self._height)
        ]

    def render(self) -> str:
        """Text view of the matrix, one line per row."""
        return "".join(
            "".join(f"{value} " for value in self.row(y)) + "\n"
            for y in range(self._height)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cols == other._cols
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(width={self._width}, height={self._height})"