# contours.py  (Moore-neighbour tracing, Jacob's stopping criterion)
# outer contour of the first region found scanning bottom-up, left-to-right

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Iterator, List, Optional, Set, Tuple

from .errors import AlgorithmInvariantError, StepBudgetExceeded
from .grid import Grid
from .point import Point

logger = logging.getLogger(__name__)

# offset of the previous pixel -> offset of the next pixel clockwise from it.
# y is the row index here exactly as in Grid; flipping its sign reverses the walk.
CLOCKWISE = MappingProxyType({
    Point(1, 0): Point(1, -1),     # right        => down-right
    Point(1, -1): Point(0, -1),    # down-right   => down
    Point(0, -1): Point(-1, -1),   # down         => down-left
    Point(-1, -1): Point(-1, 0),   # down-left    => left
    Point(-1, 0): Point(-1, 1),    # left         => top-left
    Point(-1, 1): Point(0, 1),     # top-left     => top
    Point(0, 1): Point(1, 1),      # top          => top-right
    Point(1, 1): Point(1, 0),      # top-right    => right
})


def _as_grid(grid) -> Grid:
    return grid if isinstance(grid, Grid) else Grid(grid)


def clockwise_neighbor(target: Point, prev: Point) -> Point:
    """Next pixel clockwise from `prev` in the Moore neighbourhood of `target`."""
    offset = prev.subtract(target)
    try:
        step = CLOCKWISE[offset]
    except KeyError:
        raise AlgorithmInvariantError(
            f"{prev} is not a Moore neighbour of {target}") from None
    return target.add(step)


def find_start(grid) -> Optional[Tuple[Point, Point]]:
    """
    Scan rows bottom to top, columns left to right.
    Returns (first, first_prev): the first foreground pixel and the cell scanned
    just before it, or None for an all-background grid.
    """
    grid = _as_grid(grid)
    for y in range(grid.height() - 1, -1, -1):
        first_prev = Point(0, y - 1)
        for x in range(grid.width()):
            if grid.is_foreground(x, y):
                return Point(x, y), first_prev
            first_prev = Point(x, y)
    return None


def _walk(grid: Grid, max_steps: Optional[int]) -> Iterator[Point]:
    """Yield every accepted boundary pixel in walk order (first included)."""
    start = find_start(grid)
    if start is None:
        logger.debug("no foreground in %r", grid)
        return
    first, first_prev = start
    logger.debug("start pixel %s entered from %s", first, first_prev)

    boundary, prev = first, first_prev
    yield first
    curr = clockwise_neighbor(boundary, prev)

    # (boundary, prev) fixes every later step; a repeat means the walk is periodic
    # at most 8 entries per boundary pixel
    seen = set()
    steps = 0
    while not (curr.equals(first) and prev.equals(first_prev)):
        state = (boundary, prev)
        if state in seen:
            logger.debug("walk repeated state at %s after %d steps", boundary, steps)
            break
        seen.add(state)

        steps += 1
        if max_steps is not None and steps > max_steps:
            raise StepBudgetExceeded(f"contour walk exceeded {max_steps} steps")

        if grid.contains(curr) and grid.is_foreground(curr.x, curr.y):
            yield curr
            prev = boundary
            boundary = curr
        else:
            prev = curr
        curr = clockwise_neighbor(boundary, prev)

    logger.debug("walk finished in %d steps", steps)


def trace(grid, max_steps: Optional[int] = None) -> Set[Point]:
    """Boundary pixels of the first region found; empty set if there is none."""
    return set(_walk(_as_grid(grid), max_steps))


def trace_path(grid, max_steps: Optional[int] = None) -> List[Point]:
    """Same pixels as trace(), ordered by first visit along the walk."""
    return list(dict.fromkeys(_walk(_as_grid(grid), max_steps)))
