"""Grid geometry: points, squares, vectors and the occupancy grid."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Union

from .constants import G_MAX, Direction
from .messages import ConfigError, print_index, print_outside

_MAX = G_MAX - 1

_STEP = {
    Direction.N: (0, 1),
    Direction.NE: (1, 1),
    Direction.E: (1, 0),
    Direction.SE: (1, -1),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, 1),
}


def _half(n: int) -> int:
    """Integer division by two, truncating toward zero."""
    return int(n / 2)


@dataclass(frozen=True)
class Point:
    """A cell of the world grid."""

    x: int
    y: int

    def in_square(self, square: "Square") -> bool:
        """Whether the point lies inside the given square."""
        ll = square.lower_left()
        ur = square.upper_right()
        return ll.x <= self.x <= ur.x and ll.y <= self.y <= ur.y

    def validate(self) -> None:
        """Raise ConfigError if a coordinate is outside the grid."""
        for coordinate in (self.x, self.y):
            if not 0 <= coordinate <= _MAX:
                raise ConfigError(print_index(coordinate, _MAX))


@dataclass(frozen=True)
class Square:
    """A square of cells, anchored at its lower-left cell or at its centre."""

    origin: Point = Point(0, 0)
    side: int = 1
    centered: bool = False

    # corners
    def lower_left(self) -> Point:
        if self.side == 1:
            return self.origin
        if self.centered:
            return self.non_centered().lower_left()
        return self.origin

    def lower_right(self) -> Point:
        if self.side == 1:
            return self.origin
        if self.centered:
            return self.non_centered().lower_right()
        return Point(self.origin.x + self.side - 1, self.origin.y)

    def upper_right(self) -> Point:
        if self.side == 1:
            return self.origin
        if self.centered:
            return self.non_centered().upper_right()
        return Point(self.origin.x + self.side - 1, self.origin.y + self.side - 1)

    def upper_left(self) -> Point:
        if self.side == 1:
            return self.origin
        if self.centered:
            return self.non_centered().upper_left()
        return Point(self.origin.x, self.origin.y + self.side - 1)

    # anchoring
    def non_centered(self) -> "Square":
        """The same cells, anchored at the lower-left corner."""
        if not self.centered:
            return self
        offset = _half(self.side - 1)
        return Square(
            Point(self.origin.x - offset, self.origin.y - offset), self.side, False
        )

    def as_centered(self) -> "Square":
        """The same cells, anchored at the centre (odd sides only)."""
        if self.side % 2 == 0 or self.centered:
            return self
        offset = _half(self.side - 1)
        return Square(
            Point(self.origin.x + offset, self.origin.y + offset), self.side, True
        )

    def shifted(self, dx: int, dy: int) -> "Square":
        """A copy moved by (dx, dy)."""
        return replace(self, origin=Point(self.origin.x + dx, self.origin.y + dy))

    def _cells(self) -> Iterator[tuple[int, int]]:
        square = self.non_centered()
        for x in range(square.origin.x, square.origin.x + square.side):
            for y in range(square.origin.y, square.origin.y + square.side):
                yield x, y

    # tests
    def _outside_coordinate(self) -> Optional[int]:
        x, y, side = self.origin.x, self.origin.y, self.side
        if self.centered:
            half = _half(side)
            if x - half < 0 or x + half > _MAX:
                return x
            if y - half < 0 or y + half > _MAX:
                return y
        else:
            if x < 0 or x + side - 1 > _MAX:
                return x
            if y < 0 or y + side - 1 > _MAX:
                return y
        return None

    def in_grid(self) -> bool:
        """Whether every cell of the square lies in the world grid."""
        return self._outside_coordinate() is None

    def validate(self) -> None:
        """Raise ConfigError if the square is not a valid square of the grid."""
        self.origin.validate()
        outside = self._outside_coordinate()
        if outside is not None:
            raise ConfigError(print_outside(outside, self.side, _MAX))
        if self.side <= 0:
            raise ConfigError(f"square side {self.side} is not positive\n")
        if self.centered and self.side % 2 == 0:
            raise ConfigError(f"centered square side {self.side} is even\n")

    def within(self, big: "Square") -> bool:
        """Whether the square lies entirely inside another one."""
        if self.centered:
            return self.non_centered().within(big)
        corners = (self.origin, self.lower_right(), self.upper_right(), self.upper_left())
        return self.side <= big.side and all(p.in_square(big) for p in corners)

    def superpose(self, other: "Square") -> bool:
        """Whether a corner of the smaller square lies in the larger one."""
        if self.side > other.side:
            return other.superpose(self)
        corners = (self.lower_left(), self.lower_right(), self.upper_right(), self.upper_left())
        return any(p.in_square(other) for p in corners)

    def contact(self, other: "Square", corners_count: bool = False) -> bool:
        """Whether the square touches another, diagonally too if corners count."""
        target = other.non_centered()
        if corners_count:
            grown = Square(
                Point(target.origin.x - 1, target.origin.y - 1), target.side + 2
            )
            return self.superpose(grown)
        return any(
            self.superpose(target.shifted(dx, dy))
            for dx, dy in ((0, 1), (1, 0), (0, -1), (-1, 0))
        )

    def touching_world_border(self, direction: int) -> bool:
        """Whether the square lies against the world edge on the given side."""
        if self.centered:
            return self.non_centered().touching_world_border(direction)
        if direction == Direction.N:
            return self.origin.y + self.side == G_MAX
        if direction == Direction.S:
            return self.origin.y == 0
        if direction == Direction.E:
            return self.origin.x + self.side == G_MAX
        if direction == Direction.W:
            return self.origin.x == 0
        return False


_Located = Union[Point, Square]


def _position(item: _Located) -> Point:
    return item.origin if isinstance(item, Square) else item


@dataclass(frozen=True)
class Vector:
    """A displacement between two cells."""

    x: int
    y: int

    @classmethod
    def between(cls, a: _Located, b: _Located) -> "Vector":
        """The vector from a to b; squares count by their origin."""
        pa, pb = _position(a), _position(b)
        return cls(pb.x - pa.x, pb.y - pa.y)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm_inf(self) -> int:
        """Chebyshev length."""
        return max(abs(self.x), abs(self.y))

    def coord_min(self) -> int:
        """The smaller coordinate."""
        return min(self.x, self.y)


class Grid:
    """Occupancy map of the world: which cells hold an exclusive entity."""

    def __init__(self, size: int = G_MAX) -> None:
        self.size = size
        self._occupied: set[tuple[int, int]] = set()

    def reset(self) -> None:
        """Mark every cell free."""
        self._occupied.clear()

    def is_free(self, square: Square) -> bool:
        """Whether no cell of the square is occupied; squares off the grid count as free."""
        if not square.in_grid():
            return True
        return self._occupied.isdisjoint(square._cells())

    def fill(self, square: Square) -> None:
        """Mark the cells of the square occupied."""
        self._occupied.update(
            (x, y)
            for x, y in square._cells()
            if 0 <= x < self.size and 0 <= y < self.size
        )

    def clear(self, square: Square) -> None:
        """Mark the cells of the square free."""
        self._occupied.difference_update(square._cells())

    def first_overlap(self, square: Square) -> Point:
        """The first occupied cell, scanning rows from the top; (0, 0) if none."""
        square = square.non_centered()
        if self.is_free(square):
            return Point(0, 0)
        ox, oy, side = square.origin.x, square.origin.y, square.side
        for y in range(oy + side - 1, oy - 1, -1):
            for x in range(ox, ox + side):
                if (x, y) in self._occupied:
                    return Point(x, y)
        return Point(0, 0)

    def _candidates(self, square: Square, target: int) -> Iterator[Square]:
        ox, oy, side = square.origin.x, square.origin.y, square.side
        for xi in range(ox + side - target, ox - 1, -1):
            for yi in range(oy + side - target, oy - 1, -1):
                candidate = Square(Point(xi, yi), target)
                if self.is_free(candidate):
                    yield candidate

    def enough_space(self, square: Square, target: int) -> bool:
        """Whether a free square of the target side fits inside the square."""
        if target <= 0 or target > square.side:
            return False
        return next(self._candidates(square, target), None) is not None

    def find_space(self, square: Square, target: int, centered: bool = False) -> Square:
        """A free square of the target side inside the square, searched from the
        upper-right corner; the default square if there is none."""
        found = next(self._candidates(square, target), None)
        if found is None:
            return Square()
        return found.as_centered() if centered else found

    def _count_overlaps(
        self,
        square: Square,
        to_target: Vector,
        first: Direction,
        second: Direction,
        axis: int,
        sign: int,
    ) -> int:
        mx, my = square.origin.x, square.origin.y
        tx, ty = to_target.x, to_target.y
        count = 0
        for phase in (first, second):
            dx, dy = _STEP[phase]
            while True:
                if phase is first:
                    if abs(tx) == abs(ty):
                        break
                elif (tx if axis == 0 else ty) * sign <= 0:
                    break
                mx, my, tx, ty = mx + dx, my + dy, tx - dx, ty - dy
                if not self.is_free(Square(Point(mx, my), square.side)):
                    count += 1
        return count

    def best_direction_diagonal(self, square: Square, target: Point) -> Direction:
        """The diagonal step that leads the square toward the target along the
        path with fewest collisions. The square is left marked on the grid."""
        self.clear(square)
        try:
            to_target = Vector.between(square.origin, target)
            tx, ty = to_target.x, to_target.y
            if abs(tx) == abs(ty):
                if tx > 0:
                    return Direction.NE if ty > 0 else Direction.SE
                return Direction.NW if ty > 0 else Direction.SW
            if (tx + ty) % 2:
                raise ValueError(f"target {target} cannot be reached diagonally")
            if tx > 0 and abs(ty) < tx:
                a, b, border_a, border_b, axis, sign = (
                    Direction.NE, Direction.SE, Direction.N, Direction.S, 0, 1)
            elif tx < 0 and abs(ty) < -tx:
                a, b, border_a, border_b, axis, sign = (
                    Direction.NW, Direction.SW, Direction.N, Direction.S, 0, -1)
            elif ty > 0:
                a, b, border_a, border_b, axis, sign = (
                    Direction.NE, Direction.NW, Direction.E, Direction.W, 1, 1)
            else:
                a, b, border_a, border_b, axis, sign = (
                    Direction.SE, Direction.SW, Direction.E, Direction.W, 1, -1)
            via_a = self._count_overlaps(square, to_target, a, b, axis, sign)
            via_b = self._count_overlaps(square, to_target, b, a, axis, sign)
            if via_a < via_b:
                return b if square.touching_world_border(border_a) else a
            return a if square.touching_world_border(border_b) else b
        finally:
            self.fill(square)


def random_coordinate(rng: random.Random) -> int:
    """A random coordinate strictly inside the world border."""
    return rng.randint(1, G_MAX - 2)


def random_bool(rng: random.Random, probability: float) -> bool:
    """True with the given probability."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability {probability} is outside [0, 1]")
    return rng.random() < probability