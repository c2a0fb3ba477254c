"""Contour extraction from packed bitmaps.

Every filled pixel contributes the four unit edges around it, oriented so the
pixel lies on the right of each edge. An edge shared by two filled pixels shows
up twice, once in each direction, and the two copies cancel. What survives is
exactly the boundary of the filled area, holes included. The surviving edges
are then chained into closed loops.

Coordinates are grid corners in the font's Y-up system: the corner at (0, 0)
is the bottom-left of the bitmap. The sprite's top row becomes the highest
row of corners.
"""

import logging
from enum import IntEnum
from typing import NamedTuple

from pixelfont.domain import Contour, Sprite
from pixelfont.exceptions import ContourError

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Cardinal edge direction, numbered clockwise."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn(self, by: "Direction") -> "Direction":
        """Rotate clockwise by ``by`` quarter turns (RIGHT turns right, LEFT turns left)."""
        return Direction((self + by) % 4)


_STEP = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}

# Right turns first so that pixels touching only at a corner stay in separate loops.
_TURN_ORDER = (Direction.RIGHT, Direction.UP, Direction.LEFT)


class Edge(NamedTuple):
    """A unit edge starting at grid corner (x, y)."""

    x: int
    y: int
    direction: Direction

    def dest(self) -> tuple[int, int]:
        dx, dy = _STEP[self.direction]
        return self.x + dx, self.y + dy

    def complement(self) -> "Edge":
        """The same segment walked the other way."""
        x, y = self.dest()
        return Edge(x, y, self.direction.turn(Direction.DOWN))

    @classmethod
    def surrounding(cls, x: int, y: int) -> tuple["Edge", "Edge", "Edge", "Edge"]:
        """The four edges around the pixel whose bottom-left corner is (x, y).

        They run clockwise, so the pixel is on the right of each one.
        """
        return (
            cls(x, y, Direction.UP),
            cls(x, y + 1, Direction.RIGHT),
            cls(x + 1, y + 1, Direction.DOWN),
            cls(x + 1, y, Direction.LEFT),
        )


def boundary_edges(sprite: Sprite) -> set[Edge]:
    """Collect the edges separating filled pixels from empty ones.

    Args:
        sprite: Bitmap to trace

    Returns:
        Set of directed boundary edges with filled pixels on their right
    """
    edges: set[Edge] = set()
    top = sprite.height - 1
    for x, row in sprite.filled():
        for edge in Edge.surrounding(x, top - row):
            complement = edge.complement()
            if complement in edges:
                edges.remove(complement)
            else:
                edges.add(edge)
    return edges


def _next_edge(edge: Edge, edges: set[Edge]) -> Edge:
    x, y = edge.dest()
    for turn in _TURN_ORDER:
        candidate = Edge(x, y, edge.direction.turn(turn))
        if candidate in edges:
            return candidate
    raise ContourError(f"No boundary edge continues from {edge}")


def _chain_loops(edges: set[Edge]) -> list[list[Edge]]:
    seen: set[Edge] = set()
    loops = []
    for start in sorted(edges):
        if start in seen:
            continue
        seen.add(start)
        loop = []
        edge = start
        while True:
            edge = _next_edge(edge, edges)
            loop.append(edge)
            if edge == start:
                break
            if edge in seen:
                raise ContourError(f"Boundary loop from {start} does not close")
            seen.add(edge)
        loops.append(loop)
    return loops


def _simplify(loop: list[Edge]) -> Contour:
    # Start right after a direction change so no straight run wraps around the end.
    start_direction = loop[-1].direction
    offset = next(
        (i for i, edge in enumerate(loop) if edge.direction != start_direction),
        None,
    )
    if offset is None:
        raise ContourError("Boundary loop never changes direction")
    loop = loop[offset:] + loop[:offset]

    points = []
    previous = None
    for edge in loop:
        if edge.direction != previous:
            points.append((edge.x, edge.y))
            previous = edge.direction
    return points


def find_contours(sprite: Sprite) -> list[Contour]:
    """Trace a bitmap into closed polygon contours.

    Each contour is a list of corner points. Walking it keeps filled pixels on
    the right, so outer boundaries run clockwise and holes counter-clockwise.
    Colinear points are dropped.

    Args:
        sprite: Bitmap to trace

    Returns:
        List of contours, possibly empty

    Raises:
        ContourError: If the boundary edges do not form closed loops
    """
    edges = boundary_edges(sprite)
    contours = [_simplify(loop) for loop in _chain_loops(edges)]
    logger.debug(
        "Traced %dx%d sprite: %d edges, %d contours",
        sprite.width,
        sprite.height,
        len(edges),
        len(contours),
    )
    return contours
