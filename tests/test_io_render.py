"""
Unit tests for loaders, binarisation, rendering and settings.
"""

import os
import tempfile
import unittest

import numpy as np
from PIL import Image

from mooretrace.binarise import binarise
from mooretrace.config import TraceSettings
from mooretrace.errors import ConfigError, ShapeError
from mooretrace.io_save_load import load_mask, parse_text_mask
from mooretrace.point import Point
from mooretrace.render import outline_mask, render_text
from mooretrace.svg import write_svg


class TestTextMask(unittest.TestCase):
    """One line per row, '1' is foreground."""

    def test_parse(self):
        m = parse_text_mask("010\n111\n0x0\n")
        np.testing.assert_array_equal(m, [[0, 1, 0], [1, 1, 1], [0, 0, 0]])
        self.assertEqual(m.dtype, bool)

    def test_trailing_blank_lines_ignored(self):
        self.assertEqual(parse_text_mask("11\n00\n\n\n").shape, (2, 2))

    def test_spaces_are_background(self):
        np.testing.assert_array_equal(parse_text_mask(" 1 \n1  "), [[0, 1, 0], [1, 0, 0]])

    def test_custom_foreground_chars(self):
        np.testing.assert_array_equal(parse_text_mask("#.\n.#", "#"), [[1, 0], [0, 1]])

    def test_ragged_rows(self):
        with self.assertRaises(ShapeError):
            parse_text_mask("111\n11\n")

    def test_empty(self):
        with self.assertRaises(ShapeError):
            parse_text_mask("\n\n")


class TestBinarise(unittest.TestCase):
    """Dark pixels become foreground."""

    def test_otsu_two_levels(self):
        gray = np.array([[0, 255], [255, 0]], dtype=np.uint8)
        fg, thr = binarise(gray)
        self.assertTrue(0 <= thr < 255)
        np.testing.assert_array_equal(fg, [[1, 0], [0, 1]])

    def test_flat_image_has_no_foreground(self):
        fg, thr = binarise(np.full((3, 3), 200, dtype=np.uint8))
        self.assertIsNone(thr)
        self.assertFalse(fg.any())

    def test_explicit_threshold_and_invert(self):
        gray = np.array([[10, 100, 200]], dtype=np.uint8)
        fg, thr = binarise(gray, threshold=150)
        self.assertEqual(thr, 150)
        np.testing.assert_array_equal(fg, [[1, 1, 0]])
        fg, _ = binarise(gray, threshold=150, invert=True)
        np.testing.assert_array_equal(fg, [[0, 0, 1]])


class TestLoadMask(unittest.TestCase):
    """Dispatch on file suffix."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_text_file(self):
        path = os.path.join(self.tmp.name, "img.txt")
        with open(path, "w") as f:
            f.write("00\n01\n")
        np.testing.assert_array_equal(load_mask(path), [[0, 0], [0, 1]])

    def test_png_file(self):
        gray = np.full((4, 5), 255, dtype=np.uint8)
        gray[1:3, 1:4] = 0
        path = os.path.join(self.tmp.name, "img.png")
        Image.fromarray(gray).save(path)
        m = load_mask(path)
        self.assertEqual(m.shape, (4, 5))
        self.assertEqual(int(m.sum()), 6)
        self.assertTrue(m[1, 1])


class TestRender(unittest.TestCase):
    """Terminal rendering and outline masks."""

    def test_render_text(self):
        m = np.array([[1, 0], [0, 1]], dtype=bool)
        self.assertEqual(render_text(m), "X |\n X|\n==\n")

    def test_outline_mask(self):
        m = outline_mask({Point(0, 1), Point(2, 0)}, (2, 3))
        np.testing.assert_array_equal(m, [[0, 0, 1], [1, 0, 0]])

    def test_write_svg(self):
        with tempfile.TemporaryDirectory() as d:
            out = os.path.join(d, "o.svg")
            write_svg([Point(0, 0), Point(1, 0)], (3, 2), out)
            with open(out) as f:
                text = f.read()
        self.assertTrue(text.startswith("<svg"))
        self.assertEqual(text.count("<rect"), 2)
        self.assertIn('d="M 0.5 0.5 L 1.5 0.5 Z"', text)


class TestSettings(unittest.TestCase):
    """Environment overrides."""

    def test_defaults(self):
        s = TraceSettings.from_env({})
        self.assertEqual(s, TraceSettings())
        self.assertEqual(s.FOREGROUND_CHARS, "1")
        self.assertIsNone(s.MAX_STEPS)

    def test_env_overrides(self):
        s = TraceSettings.from_env({
            "MOORETRACE_MAX_STEPS": "100",
            "MOORETRACE_INVERT": "yes",
            "MOORETRACE_THRESHOLD": "none",
            "MOORETRACE_LOG_LEVEL": "debug",
            "MOORETRACE_FOREGROUND_CHARS": "#",
        })
        self.assertEqual(s.MAX_STEPS, 100)
        self.assertTrue(s.INVERT)
        self.assertIsNone(s.THRESHOLD)
        self.assertEqual(s.LOG_LEVEL, "DEBUG")
        self.assertEqual(s.FOREGROUND_CHARS, "#")

    def test_bad_env_values(self):
        with self.assertRaises(ConfigError):
            TraceSettings.from_env({"MOORETRACE_MAX_STEPS": "abc"})
        with self.assertRaises(ConfigError):
            TraceSettings.from_env({"MOORETRACE_THRESHOLD": "1.5"})
        with self.assertRaises(ConfigError):
            TraceSettings.from_env({"MOORETRACE_LOG_LEVEL": "bogus"})


if __name__ == "__main__":
    unittest.main()
