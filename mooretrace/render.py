# render.py
# terminal view of a mask, outline -> mask

from typing import Iterable
import numpy as np

from .point import Point


def outline_mask(points: Iterable[Point], shape: tuple[int, int]) -> np.ndarray:
    out = np.zeros(shape, dtype=bool)
    for p in points:
        out[p.y, p.x] = True
    return out


def render_text(mask: np.ndarray, on: str = "X", off: str = " ") -> str:
    """Rows of `on`/`off` closed by '|', then a rule of '=' as wide as the image."""
    mask = np.asarray(mask, dtype=bool)
    h, w = mask.shape
    lines = ["".join(on if v else off for v in row) + "|" for row in mask]
    lines.append("=" * w)
    return "\n".join(lines) + "\n"
