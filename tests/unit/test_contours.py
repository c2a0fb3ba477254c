"""Unit tests for contour extraction."""

import random

import pytest

from pixelfont.core.contours import Direction, Edge, boundary_edges, find_contours
from pixelfont.domain import Contour, Sprite


def signed_area(contour: Contour) -> float:
    """Shoelace area; negative for clockwise loops in Y-up coordinates."""
    area = 0
    for i, (x0, y0) in enumerate(contour):
        x1, y1 = contour[(i + 1) % len(contour)]
        area += x0 * y1 - x1 * y0
    return area / 2


def winding(contours: list[Contour], px: float, py: float) -> int:
    """Winding number of a point, counting crossings of a ray towards +x."""
    total = 0
    for contour in contours:
        for i, (x0, y0) in enumerate(contour):
            x1, y1 = contour[(i + 1) % len(contour)]
            if x0 != x1 or x0 < px:
                continue
            if y0 < py < y1:
                total += 1
            elif y1 < py < y0:
                total -= 1
    return total


def rasterize(contours: list[Contour], width: int, height: int) -> set[tuple[int, int]]:
    """Pixels (sprite coordinates, row 0 on top) inside the contours."""
    filled = set()
    for row in range(height):
        for x in range(width):
            if winding(contours, x + 0.5, height - 1 - row + 0.5) != 0:
                filled.add((x, row))
    return filled


SHAPES = {
    "single": ["#"],
    "full": ["###", "###"],
    "ring": ["###", "#.#", "###"],
    "diagonal": ["#.", ".#"],
    "checkerboard": ["#.#.", ".#.#", "#.#.", ".#.#"],
    "components": ["##..", "##..", "...#", "...#"],
    "nested": ["#####", "#...#", "#.#.#", "#...#", "#####"],
    "empty": ["...", "..."],
    "letter_a": None,
    "letter_b": None,
}


def shape(name: str) -> Sprite:
    if name == "letter_a":
        return Sprite.from_int(8, 8, 0x0000708888986800)
    if name == "letter_b":
        return Sprite.from_int(8, 8, 0x8080F0888888F000)
    return Sprite.from_rows(SHAPES[name])


class TestDirection:
    """Tests for Direction turns."""

    def test_turns(self) -> None:
        """Test right, straight, left and reverse turns."""
        assert Direction.UP.turn(Direction.RIGHT) == Direction.RIGHT
        assert Direction.UP.turn(Direction.UP) == Direction.UP
        assert Direction.UP.turn(Direction.LEFT) == Direction.LEFT
        assert Direction.LEFT.turn(Direction.RIGHT) == Direction.UP
        assert Direction.RIGHT.turn(Direction.DOWN) == Direction.LEFT


class TestEdge:
    """Tests for Edge class."""

    def test_complement(self) -> None:
        """Test an edge and its complement cover the same segment."""
        edge = Edge(2, 3, Direction.RIGHT)
        assert edge.complement() == Edge(3, 3, Direction.LEFT)
        assert edge.complement().complement() == edge

    def test_surrounding_is_closed(self) -> None:
        """Test the four edges around a pixel chain end to start."""
        edges = Edge.surrounding(4, 5)
        for edge, following in zip(edges, edges[1:] + edges[:1]):
            assert edge.dest() == (following.x, following.y)


class TestBoundaryEdges:
    """Tests for boundary_edges."""

    def test_single_pixel(self) -> None:
        """Test a lone pixel keeps all four edges."""
        assert boundary_edges(Sprite.from_rows(["#"])) == set(Edge.surrounding(0, 0))

    def test_shared_edges_cancel(self) -> None:
        """Test two adjacent pixels lose the edge between them."""
        edges = boundary_edges(Sprite.from_rows(["##"]))
        assert len(edges) == 6
        assert Edge(1, 0, Direction.UP) not in edges
        assert Edge(1, 1, Direction.DOWN) not in edges

    def test_rows_flip_to_y_up(self) -> None:
        """Test the top sprite row becomes the highest pixel row."""
        edges = boundary_edges(Sprite.from_rows(["#", "."]))
        assert edges == set(Edge.surrounding(0, 1))


class TestFindContours:
    """Tests for find_contours."""

    def test_single_pixel(self) -> None:
        """Test a lone pixel gives one clockwise square."""
        contours = find_contours(Sprite.from_rows(["#"]))
        assert contours == [[(0, 1), (1, 1), (1, 0), (0, 0)]]
        assert signed_area(contours[0]) == -1

    def test_empty_sprite(self) -> None:
        """Test a blank sprite has no contours."""
        assert find_contours(Sprite.from_rows(["...", "..."])) == []

    def test_full_rectangle_drops_colinear_points(self) -> None:
        """Test a filled rectangle reduces to its four corners."""
        contours = find_contours(Sprite.from_rows(["###", "###"]))
        assert len(contours) == 1
        assert sorted(contours[0]) == [(0, 0), (0, 2), (3, 0), (3, 2)]
        assert signed_area(contours[0]) == -6

    def test_ring_has_hole(self) -> None:
        """Test a ring gives a clockwise outer loop and a counter-clockwise hole."""
        contours = find_contours(Sprite.from_rows(["###", "#.#", "###"]))
        assert len(contours) == 2
        areas = sorted(signed_area(c) for c in contours)
        assert areas == [-9, 1]
        hole = next(c for c in contours if signed_area(c) > 0)
        assert sorted(hole) == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_diagonal_pixels_stay_separate(self) -> None:
        """Test pixels touching at a corner form two loops."""
        contours = find_contours(Sprite.from_rows(["#.", ".#"]))
        assert len(contours) == 2
        assert all(len(c) == 4 for c in contours)
        assert all(signed_area(c) == -1 for c in contours)

    def test_points_alternate_axis(self) -> None:
        """Test consecutive points change exactly one coordinate."""
        for name in SHAPES:
            for contour in find_contours(shape(name)):
                assert len(contour) % 2 == 0
                for i, (x0, y0) in enumerate(contour):
                    x1, y1 = contour[(i + 1) % len(contour)]
                    x2, y2 = contour[(i + 2) % len(contour)]
                    assert (x0 == x1) != (y0 == y1)
                    # No three points on a line
                    assert not (x0 == x1 == x2 or y0 == y1 == y2)

    def test_deterministic(self) -> None:
        """Test tracing the same sprite twice gives identical output."""
        sprite = shape("letter_a")
        assert find_contours(sprite) == find_contours(sprite)

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_round_trip(self, name: str) -> None:
        """Test filling the contours reproduces the sprite."""
        sprite = shape(name)
        contours = find_contours(sprite)
        assert rasterize(contours, sprite.width, sprite.height) == set(sprite.filled())

    def test_round_trip_random(self) -> None:
        """Test the round trip on random bitmaps."""
        rng = random.Random(42)
        for _ in range(40):
            width, height = rng.randrange(1, 10), rng.randrange(1, 10)
            value = rng.getrandbits(width * height)
            padding = -(width * height) % 8
            sprite = Sprite.from_int(width, height, value << padding)
            contours = find_contours(sprite)
            assert rasterize(contours, width, height) == set(sprite.filled())
