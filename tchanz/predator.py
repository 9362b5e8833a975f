"""Predators: ants that hunt the collectors and predators of other anthills."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .constants import AntKind
from .geometry import Grid, Point, Square, Vector
from .ants import Ant

_VERY_BIG = 1000.0


def _enemies(world_ants: Sequence[Sequence[Ant]], hill_id: int) -> Iterator[Ant]:
    """Ants of other anthills that a predator may attack."""
    for index, ants in enumerate(world_ants):
        if index != hill_id:
            for ant in ants:
                if ant.kind != AntKind.DEFENSOR:
                    yield ant


def _knight_steps(to_target: Vector) -> tuple[tuple[int, int], tuple[int, int]]:
    """The two knight moves that head into the quadrant of the target."""
    if to_target.x > 0 and to_target.y >= 0:
        return (1, 2), (2, 1)
    if to_target.x <= 0 and to_target.y > 0:
        return (-1, 2), (-2, 1)
    if to_target.x < 0 and to_target.y <= 0:
        return (-2, -1), (-1, -2)
    return (1, -2), (2, -1)


class Predator(Ant):
    """An ant that moves by knight jumps and kills the ants it reaches."""

    kind = AntKind.PREDATOR

    def to_line(self) -> str:
        return f"{super().to_line()}{self.age}\n"

    def act(self, grid, foods, border, interior, generator_body, world_ants,
            hill_id, constrained) -> bool:
        if constrained:
            self.act_constrained(grid, border, interior, world_ants, hill_id)
        else:
            self.act_free(grid, border, interior, world_ants, hill_id)
        return False

    def check_death(self, world_ants, hill_id) -> None:
        for other in _enemies(world_ants, hill_id):
            if self.body.contact(other.body, True) or self.body.superpose(other.body):
                other.die()
                if other.kind == AntKind.PREDATOR:
                    self.die()

    def act_constrained(self, grid: Grid, border: Square, anthill: Square,
                        world_ants: Sequence[Sequence[Ant]], hill_id: int) -> None:
        """Chase the nearest enemy anywhere, unless the home itself is attacked."""
        target: Optional[Square] = None
        home_attacked = False
        best = _VERY_BIG
        for other in _enemies(world_ants, hill_id):
            distance = Vector.between(self.body, other.body).norm()
            best = min(best, distance)
            if other.body.superpose(border):
                home_attacked = True
            if distance == best and not home_attacked:
                target = other.body
        if home_attacked:
            self.act_free(grid, border, anthill, world_ants, hill_id)
        elif target is not None:
            self.predator_move(grid, target)

    def act_free(self, grid: Grid, border: Square, anthill: Square,
                 world_ants: Sequence[Sequence[Ant]], hill_id: int) -> None:
        """Chase the nearest enemy inside the home, or return home if none."""
        target: Optional[Square] = None
        best = _VERY_BIG
        for other in _enemies(world_ants, hill_id):
            if not other.body.superpose(border):
                continue
            distance = Vector.between(self.body, other.body).norm()
            best = min(best, distance)
            if distance == best:
                target = other.body
        if target is not None:
            self.predator_move(grid, target)
        elif not self.body.within(anthill):
            self.back_home(grid, anthill)

    def predator_move(self, grid: Grid, target: Square) -> None:
        """Jump like a knight toward the target, if the landing cell allows it."""
        grid.clear(self.body)
        first_step, second_step = _knight_steps(Vector.between(self.body, target))
        first = self.body.shifted(*first_step)
        second = self.body.shifted(*second_step)
        first_dist = Vector.between(first, target).norm()
        second_dist = Vector.between(second, target).norm()
        if first_dist <= second_dist:
            if (grid.is_free(first) or first.superpose(target)) and first.in_grid():
                self.body = first
        elif (grid.is_free(second) or target.superpose(second)) and second.in_grid():
            self.body = second
        grid.fill(self.body)

    def back_home(self, grid: Grid, anthill: Square) -> None:
        """Jump toward the centre of the anthill."""
        centre = Point(anthill.origin.x + anthill.side // 2,
                       anthill.origin.y + anthill.side // 2)
        self.predator_move(grid, Square(centre, 1))