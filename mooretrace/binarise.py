# binarise.py
# greyscale -> boolean mask

import numpy as np
from skimage.filters import threshold_otsu


def otsu(gray: np.ndarray) -> int|None:
    """Otsu cut (skimage convention: values above it are background); None if the image is flat."""
    if gray.size == 0 or gray.min() == gray.max():
        return None
    return int(threshold_otsu(gray))


def binarise(gray: np.ndarray, threshold: int|None=None, invert: bool=False) -> tuple[np.ndarray,int|None]:
    if threshold is None:
        threshold = otsu(gray)
    if threshold is None:
        fg = np.zeros(gray.shape, dtype=bool)
    else:
        fg = gray <= threshold   # black = foreground
    if invert:
        fg = ~fg
    return fg, threshold
