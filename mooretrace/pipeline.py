# pipeline.py
# Orchestration helpers: load files, trace, write summaries/overlays.

from __future__ import annotations
import glob, logging, os
from typing import Dict, List, Optional

from .config import S
from .contours import trace_path
from .errors import MooreTraceError
from .grid import Grid
from .io_save_load import load_mask, save_json
from .svg import write_svg

logger = logging.getLogger(__name__)


def trace_mask(mask, name: str, settings=S, svg_out: Optional[str] = None) -> Dict:
    """
    Trace an already loaded mask and return a JSON-ready row:
      file, width, height, start ([x, y] or None), count, points (walk order)
    """
    grid = Grid(mask)
    points = trace_path(grid, max_steps=settings.MAX_STEPS)
    # the walk always begins at the scan start pixel
    start = points[0] if points else None
    logger.info("%s: %dx%d, %d boundary pixels", name,
                grid.width(), grid.height(), len(points))
    if svg_out:
        os.makedirs(os.path.dirname(svg_out) or ".", exist_ok=True)
        write_svg(points, (grid.width(), grid.height()), svg_out)
    return {
        "file": name,
        "width": grid.width(),
        "height": grid.height(),
        "start": list(start.as_tuple()) if start else None,
        "count": len(points),
        "points": [list(p.as_tuple()) for p in points],
    }


def trace_file(path: str, settings=S, svg_out: Optional[str] = None) -> Dict:
    """Load one image file and trace it; see trace_mask for the row layout."""
    return trace_mask(load_mask(path, settings), os.path.basename(path), settings, svg_out)


def trace_files(input_glob: str, out_json: str = "out/outlines.json", settings=S,
                svg_dir: Optional[str] = None) -> List[Dict]:
    """
    Trace every file matching `input_glob`. Files that fail to load or trace
    are logged and recorded with an "error" entry; the rest of the batch runs.
    Writes a JSON summary and returns the rows.
    """
    rows: List[Dict] = []
    paths = sorted(glob.glob(input_glob))
    if not paths:
        logger.warning("no files match %s", input_glob)
    for path in paths:
        svg_out = None
        if svg_dir:
            stem = os.path.splitext(os.path.basename(path))[0]
            svg_out = os.path.join(svg_dir, f"{stem}_outline.svg")
        try:
            rows.append(trace_file(path, settings, svg_out=svg_out))
        except (MooreTraceError, OSError) as e:
            logger.error("%s: %s", path, e)
            rows.append({"file": os.path.basename(path), "error": str(e)})
    save_json(out_json, {"results": rows})
    return rows
