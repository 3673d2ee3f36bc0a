# io_save_load.py
# load/save helpers

import json, os
import pathlib as _p
import numpy as np
from PIL import Image

from .binarise import binarise
from .config import S
from .errors import ShapeError

TEXT_SUFFIXES = (".txt",)


def load_gray(path: str) -> np.ndarray:
    return np.array(Image.open(path).convert('L'), dtype=np.uint8)


def parse_text_mask(text: str, foreground_chars: str = "1") -> np.ndarray:
    """One row per line; characters in `foreground_chars` are foreground."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ShapeError("Image has no rows")
    if min(len(l) for l in lines) != max(len(l) for l in lines):
        raise ShapeError("Image rows not of uniform size")
    return np.array([[ch in foreground_chars for ch in line] for line in lines], dtype=bool)


def load_text_mask(path: str, foreground_chars: str = "1") -> np.ndarray:
    with open(path, 'r') as f:
        return parse_text_mask(f.read(), foreground_chars)


def load_mask(path: str, settings=S) -> np.ndarray:
    """Text images parse directly; anything else goes through Pillow + binarise."""
    if _p.Path(path).suffix.lower() in TEXT_SUFFIXES:
        return load_text_mask(path, settings.FOREGROUND_CHARS)
    fg, _ = binarise(load_gray(path), settings.THRESHOLD, settings.INVERT)
    return fg


def save_json(path: str, obj: dict):
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)
