# mooretrace/__init__.py

# Core
from .point import Point
from .grid import Grid
from .contours import (
    CLOCKWISE,
    clockwise_neighbor,
    find_start,
    trace,
    trace_path,
)
from .errors import (
    MooreTraceError,
    ShapeError,
    AlgorithmInvariantError,
    StepBudgetExceeded,
    ConfigError,
)

# Config
from .config import TraceSettings

# I/O & rendering
from .binarise import binarise
from .io_save_load import load_gray, load_mask, load_text_mask, parse_text_mask, save_json
from .render import outline_mask, render_text
from .svg import write_svg

# Pipeline
from .pipeline import trace_mask, trace_file, trace_files
