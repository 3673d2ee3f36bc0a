"""
mooretrace CLI.

Usage:
    python -m mooretrace.cli trace <image> [--json OUT] [--svg OUT] [--show]
    python -m mooretrace.cli batch "<glob>" [--out OUT] [--svg-dir DIR]

Text images (.txt) use one line per row with '1' as foreground; other files
are loaded with Pillow and thresholded (dark = foreground).
"""

import argparse
import dataclasses
import logging
import os
import sys

from mooretrace.config import TraceSettings
from mooretrace.errors import MooreTraceError
from mooretrace.io_save_load import load_mask, save_json
from mooretrace.pipeline import trace_files, trace_mask
from mooretrace.point import Point
from mooretrace.render import outline_mask, render_text


logger = logging.getLogger("mooretrace.cli")


def _settings(args, base: TraceSettings) -> TraceSettings:
    updates = {}
    if args.threshold is not None:
        updates["THRESHOLD"] = args.threshold
    if args.invert:
        updates["INVERT"] = True
    if args.max_steps is not None:
        updates["MAX_STEPS"] = args.max_steps
    if args.foreground is not None:
        updates["FOREGROUND_CHARS"] = args.foreground
    return dataclasses.replace(base, **updates)


def cmd_trace(args, settings: TraceSettings) -> int:
    mask = load_mask(args.image, settings)
    row = trace_mask(mask, os.path.basename(args.image), settings, svg_out=args.svg)
    if args.show:
        sys.stdout.write(render_text(mask))
        sys.stdout.write("\n")
        outline = [Point(x, y) for x, y in row["points"]]
        sys.stdout.write(render_text(outline_mask(outline, mask.shape)))
    if args.json:
        save_json(args.json, row)
        logger.info("Saved outline JSON to: %s", args.json)
    else:
        print(f"{row['file']}: start={row['start']} boundary pixels={row['count']}")
    return 0


def cmd_batch(args, settings: TraceSettings) -> int:
    rows = trace_files(args.pattern, out_json=args.out, settings=settings, svg_dir=args.svg_dir)
    failed = [r for r in rows if "error" in r]
    logger.info("Traced %d file(s), %d failed; summary in %s", len(rows), len(failed), args.out)
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mooretrace", description="Moore-neighbour contour tracing")
    parser.add_argument("--threshold", type=int, default=None, help="grey cut for raster images (default: Otsu)")
    parser.add_argument("--invert", action="store_true", help="treat light pixels as foreground")
    parser.add_argument("--max-steps", type=int, default=None, help="abort a walk after this many probes")
    parser.add_argument("--foreground", default=None, help="foreground characters for text images")
    sub = parser.add_subparsers(dest="command", required=True)

    p_trace = sub.add_parser("trace", help="trace a single image")
    p_trace.add_argument("image")
    p_trace.add_argument("--json", default=None, help="write the outline to this JSON file")
    p_trace.add_argument("--svg", default=None, help="write an SVG overlay")
    p_trace.add_argument("--show", action="store_true", help="print image and outline to the terminal")
    p_trace.set_defaults(func=cmd_trace)

    p_batch = sub.add_parser("batch", help="trace every file matching a glob")
    p_batch.add_argument("pattern")
    p_batch.add_argument("--out", default="out/outlines.json")
    p_batch.add_argument("--svg-dir", default=None)
    p_batch.set_defaults(func=cmd_batch)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        base = TraceSettings.from_env()
        logging.basicConfig(level=base.LOG_LEVEL, format="%(levelname)s: %(message)s")
        return args.func(args, _settings(args, base))
    except (MooreTraceError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
