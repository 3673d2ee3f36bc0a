# grid.py
# read-only boolean raster with bounds-checked lookup

from __future__ import annotations
from typing import Sequence
import numpy as np

from .errors import ShapeError
from .point import Point


class Grid:
    """
    Rectangular boolean image, indexed [y, x] (row, column).
    True = foreground. The wrapped array is never written to.
    """

    def __init__(self, mask):
        try:
            arr = np.asarray(mask)
        except ValueError as e:  # ragged nested sequences
            raise ShapeError("Image rows not of uniform size") from e
        if arr.ndim != 2:
            raise ShapeError(f"expected a 2-D mask, got shape {arr.shape}")
        self._mask = arr.astype(bool, copy=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> Grid:
        """Build from nested rows; ragged input raises ShapeError."""
        rows = [list(r) for r in rows]
        if rows and min(map(len, rows)) != max(map(len, rows)):
            raise ShapeError("Image rows not of uniform size")
        if not rows:
            return cls(np.zeros((0, 0), dtype=bool))
        return cls(np.array(rows, dtype=bool))

    @property
    def mask(self) -> np.ndarray:
        return self._mask

    @property
    def shape(self) -> tuple[int, int]:
        return self._mask.shape

    def width(self) -> int:
        return self._mask.shape[1]

    def height(self) -> int:
        return self._mask.shape[0]

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.width() and 0 <= p.y < self.height()

    def is_foreground(self, x: int, y: int) -> bool:
        # caller keeps (x, y) in range
        return bool(self._mask[y, x])

    def __repr__(self):
        return f"Grid(width={self.width()}, height={self.height()})"
