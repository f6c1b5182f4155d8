"""Fixed-size 2D pixel grid over contiguous 1D storage."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .colors import BACKGROUND

PIXEL_DTYPE = np.uint32


class GridBuffer:
    """Row-major grid of packed colors. Height is derived from the storage length."""

    __slots__ = ("_data", "_width")

    def __init__(self, data: np.ndarray | None = None, width: int = 0) -> None:
        if data is None:
            data = np.zeros(0, dtype=PIXEL_DTYPE)
        if width < 0:
            raise ValueError("width must be non-negative")
        if width == 0 and len(data) != 0:
            raise ValueError("a zero-width grid must be empty")
        if width > 0 and len(data) % width != 0:
            raise ValueError(f"storage length {len(data)} is not a multiple of width {width}")
        self._data = data
        self._width = width

    @classmethod
    def create(cls, fill: int = BACKGROUND, width: int = 0, height: int = 0) -> GridBuffer:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must be non-negative")
        if width == 0:
            height = 0
        return cls(np.full(width * height, fill, dtype=PIXEL_DTYPE), width)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        if self._width == 0:
            return 0
        return len(self._data) // self._width

    def as_flat_view(self) -> np.ndarray:
        """The backing storage itself, not a copy."""
        return self._data

    def as_2d_view(self) -> np.ndarray:
        return self._data.reshape((self.height, self._width))

    def copy(self) -> GridBuffer:
        return GridBuffer(self._data.copy(), self._width)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self.height} grid")
        return y * self._width + x

    def get(self, x: int, y: int) -> int:
        return int(self._data[self._index(x, y)])

    def set(self, x: int, y: int, value: int) -> None:
        self._data[self._index(x, y)] = value

    def __getitem__(self, xy: tuple[int, int]) -> int:
        return self.get(*xy)

    def __setitem__(self, xy: tuple[int, int], value: int) -> None:
        self.set(xy[0], xy[1], value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBuffer):
            return NotImplemented
        return self._width == other._width and np.array_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GridBuffer(width={self._width}, height={self.height})"

    def _check_fits(self, dst_x: int, dst_y: int, src: GridBuffer) -> None:
        if dst_x < 0 or dst_y < 0:
            raise ValueError(f"blit origin ({dst_x}, {dst_y}) is negative")
        if dst_x + src.width > self._width or dst_y + src.height > self.height:
            raise ValueError(
                f"{src.width}x{src.height} source does not fit at ({dst_x}, {dst_y}) "
                f"in a {self._width}x{self.height} grid"
            )

    def copy_region(self, dst_x: int, dst_y: int, src: GridBuffer) -> None:
        """Copy all of ``src`` so that its origin lands at ``(dst_x, dst_y)``."""
        self._check_fits(dst_x, dst_y, src)
        if src.width == 0:
            return
        w = src.width
        src_data = src._data
        for row in range(src.height):
            start = (dst_y + row) * self._width + dst_x
            self._data[start : start + w] = src_data[row * w : row * w + w]

    def copy_region_if(
        self,
        dst_x: int,
        dst_y: int,
        src: GridBuffer,
        should_overwrite: Callable[[int], bool],
    ) -> None:
        """Like copy_region, but only where ``should_overwrite(current destination pixel)``."""
        self._check_fits(dst_x, dst_y, src)
        dst_data = self._data
        src_data = src._data
        for src_y in range(src.height):
            dst_row = (dst_y + src_y) * self._width + dst_x
            src_row = src_y * src.width
            for src_x in range(src.width):
                if should_overwrite(int(dst_data[dst_row + src_x])):
                    dst_data[dst_row + src_x] = src_data[src_row + src_x]
