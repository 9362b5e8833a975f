"""Ants of an anthill: the generator, collectors and defensors."""

from __future__ import annotations

from typing import Iterator, Sequence

from .constants import BUG_LIFE, FOOD_RATE, G_MAX, SIZE_G, AntKind, Direction
from .food import FoodStore
from .geometry import Grid, Point, Square, Vector
from .messages import (
    ConfigError,
    collector_overlap,
    defensor_overlap,
    generator_overlap,
    predator_overlap,
)

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
_TOWARD = {step: direction for direction, step in _STEP.items()}

_OVERLAP_AT = {
    AntKind.COLLECTOR: collector_overlap,
    AntKind.DEFENSOR: defensor_overlap,
    AntKind.GENERATOR: generator_overlap,
}

_HALF_WORLD = G_MAX // 2


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _others(world_ants: Sequence[Sequence["Ant"]], hill_id: int) -> Iterator["Ant"]:
    """Every ant that belongs to an anthill other than hill_id."""
    for index, ants in enumerate(world_ants):
        if index != hill_id:
            yield from ants


class Ant:
    """An ant with a body on the grid and an age."""

    kind: AntKind
    loaded = False

    def __init__(self, body: Square, age: int = 0) -> None:
        self.body = body
        self.age = age
        self.end_of_life = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(body={self.body!r}, age={self.age})"

    def grow_older(self) -> None:
        """Add one step to the ant's age."""
        self.age += 1

    def life_ended(self) -> bool:
        """Whether the ant is too old or has been killed."""
        return self.age >= BUG_LIFE or self.end_of_life

    def die(self) -> None:
        """Mark the ant dead."""
        self.end_of_life = True

    def occupy(self, grid: Grid) -> None:
        """Mark the body on the grid, raising ConfigError if it overlaps."""
        if not grid.is_free(self.body):
            x, y = self.body.origin.x, self.body.origin.y
            report = _OVERLAP_AT.get(self.kind)
            if report is None:
                message = predator_overlap(x, y)
            else:
                cell = grid.first_overlap(self.body)
                message = report(x, y, cell.x, cell.y)
            raise ConfigError(message)
        grid.fill(self.body)

    def move(self, direction: int, grid: Grid) -> None:
        """Step one cell in a direction if the new place is free and in the grid."""
        grid.clear(self.body)
        dx, dy = _STEP[Direction(direction)]
        future = self.body.shifted(dx, dy)
        if future.in_grid() and grid.is_free(future):
            self.body = future
        grid.fill(self.body)

    def check_death(self, world_ants: Sequence[Sequence["Ant"]], hill_id: int) -> None:
        """Apply the effects of contact with ants of other anthills."""

    def act(
        self,
        grid: Grid,
        foods: FoodStore,
        border: Square,
        interior: Square,
        generator_body: Square,
        world_ants: Sequence[Sequence["Ant"]],
        hill_id: int,
        constrained: bool,
    ) -> bool:
        """Take one step of behaviour; return whether food was delivered home."""
        return False

    def to_line(self) -> str:
        """The ant as (part of) a configuration line."""
        return f"{self.body.origin.x} {self.body.origin.y} "


class Generator(Ant):
    """The queen of an anthill, which holds its food reserve."""

    kind = AntKind.GENERATOR

    def __init__(self, body: Square, total_food: float, age: int = 0) -> None:
        super().__init__(body, age)
        self.total_food = total_food
        self.end_of_klan = False

    def eat(self, population: int) -> None:
        """Consume food for the whole population; starve when the reserve runs low."""
        self.total_food -= population * FOOD_RATE
        if self.total_food < FOOD_RATE:
            self.end_of_klan = True

    def feed(self, amount: float) -> None:
        """Add food to the reserve."""
        self.total_food += amount

    def die(self) -> None:
        self.end_of_life = True
        self.end_of_klan = True

    def act(self, grid, foods, border, interior, generator_body, world_ants,
            hill_id, constrained) -> bool:
        target_x = interior.origin.x + SIZE_G // 2
        target_y = interior.origin.y + SIZE_G // 2
        step = (
            _sign(target_x - self.body.origin.x),
            _sign(target_y - self.body.origin.y),
        )
        if step in _TOWARD:
            self.move(_TOWARD[step], grid)
        if not self.body.within(interior):
            self.die()
        return False

    def to_line(self) -> str:
        return f"{super().to_line()}{self.total_food:g} "


class Collector(Ant):
    """An ant that fetches food and brings it back to the anthill."""

    kind = AntKind.COLLECTOR

    def __init__(self, body: Square, age: int = 0, loaded: bool = False) -> None:
        super().__init__(body, age)
        self.loaded = loaded

    def to_line(self) -> str:
        state = "true" if self.loaded else "false"
        return f"{super().to_line()}{self.age} {state}\n"

    def act(self, grid, foods, border, interior, generator_body, world_ants,
            hill_id, constrained) -> bool:
        if not self.loaded:
            self.look_for_food(grid, foods, border)
            return False
        return self.back_home(grid, border)

    def reachable(self, point: Point) -> bool:
        """Whether the point can be reached by diagonal steps alone."""
        origin = self.body.origin
        own_parity = origin.x % 2 == origin.y % 2
        target_parity = point.x % 2 == point.y % 2
        return own_parity == target_parity

    def look_for_food(self, grid: Grid, foods: FoodStore, border: Square) -> None:
        """Head for the nearest reachable food, picking it up when adjacent."""
        success = False
        if len(foods):
            min_dist = Vector.between(self.body, foods[0].position).norm_inf() + 1
            chosen = 0
            for index, food in enumerate(foods):
                dist = Vector.between(self.body, food.position).norm_inf()
                if dist < min_dist and self.reachable(food.position):
                    success = True
                    min_dist = dist
                    chosen = index
            if success:
                food = foods[chosen]
                if self.body.contact(food.place, True):
                    before = self.body.origin
                    grid.clear(food.place)
                    self.move(grid.best_direction_diagonal(self.body, food.position), grid)
                    if self.body.origin == before:
                        grid.fill(food.place)
                    else:
                        self.loaded = True
                        foods.remove(chosen)
                else:
                    self.move(grid.best_direction_diagonal(self.body, food.position), grid)
        if not success and self.body.superpose(border):
            self.go_outside(grid, border)

    def go_outside(self, grid: Grid, border: Square) -> None:
        """Step diagonally toward the nearest corner of the anthill border."""
        origin = self.body.origin
        d_ll = Vector.between(origin, border.lower_left()).norm_inf()
        d_ul = Vector.between(origin, border.upper_left()).norm_inf()
        d_ur = Vector.between(origin, border.upper_right()).norm_inf()
        d_lr = Vector.between(origin, border.lower_right()).norm_inf()
        distances = sorted((d_ll, d_ul, d_ur, d_lr))
        nearest = distances[0]
        if nearest == distances[1]:
            direction = self._equidistant_exit(d_ll, d_ul, d_ur, d_lr, distances)
        elif nearest == d_ll:
            direction = Direction.SW
        elif nearest == d_lr:
            direction = Direction.SE
        elif nearest == d_ul:
            direction = Direction.NW
        else:
            direction = Direction.NE
        self.move(direction, grid)

    def _equidistant_exit(self, d_ll: int, d_ul: int, d_ur: int, d_lr: int,
                          distances: list[int]) -> Direction:
        x, y = self.body.origin.x, self.body.origin.y
        nearest = distances[0]
        if nearest == distances[2]:
            if x > _HALF_WORLD and y > _HALF_WORLD:
                return Direction.SW
            if x > _HALF_WORLD and y < _HALF_WORLD:
                return Direction.NW
            if x < _HALF_WORLD and y < _HALF_WORLD:
                return Direction.NE
            return Direction.SE
        if d_ul == d_ur == nearest:
            return Direction.NW if x > _HALF_WORLD else Direction.NE
        if d_ul == d_ll == nearest:
            return Direction.SW if y > _HALF_WORLD else Direction.NW
        if d_ll == d_lr == nearest:
            return Direction.SW if x > _HALF_WORLD else Direction.SE
        return Direction.SE if y > _HALF_WORLD else Direction.NE

    def back_home(self, grid: Grid, anthill: Square) -> bool:
        """Carry food toward the anthill centre; return whether it was delivered."""
        target = Point(anthill.origin.x + anthill.side // 2,
                       anthill.origin.y + anthill.side // 2)
        if not self.reachable(target):
            target = Point(target.x, target.y + 1)
        self.move(grid.best_direction_diagonal(self.body, target), grid)
        if self.body.contact(anthill, True):
            self.loaded = False
            return True
        return False

    def check_death(self, world_ants, hill_id) -> None:
        for other in _others(world_ants, hill_id):
            if other.kind == AntKind.PREDATOR and self.body.contact(other.body, True):
                self.die()


class Defensor(Ant):
    """An ant that patrols the edge of its anthill and kills intruding collectors."""

    kind = AntKind.DEFENSOR

    def to_line(self) -> str:
        return f"{super().to_line()}{self.age}\n"

    def act(self, grid, foods, border, interior, generator_body, world_ants,
            hill_id, constrained) -> bool:
        origin = self.body.origin
        corners = (
            interior.lower_left(),
            interior.upper_left(),
            interior.upper_right(),
            interior.lower_right(),
        )
        distances = tuple(Vector.between(origin, corner).norm() for corner in corners)
        if self.body.within(interior):
            self.stick_to_border(grid, distances)
        if not self.body.within(interior):
            self.stay_inside(grid, distances)
        if not self.body.within(interior):
            self.die()
        return False

    def stick_to_border(self, grid: Grid, distances: Sequence[float]) -> None:
        """Move toward the border near the closest corner.

        distances are to the lower-left, upper-left, upper-right and
        lower-right corners of the anthill interior.
        """
        d_ll, d_ul, d_ur, d_lr = distances
        nearest = min(distances)
        if nearest == d_ul:
            self.move(Direction.N if d_ur < d_ll else Direction.W, grid)
        elif nearest == d_ur:
            if d_ul < d_lr:
                self.move(Direction.N, grid)
            self.move(Direction.E, grid)
        elif nearest == d_lr:
            self.move(Direction.E if d_ur < d_ll else Direction.S, grid)
        elif nearest == d_ll:
            self.move(Direction.W if d_ul < d_lr else Direction.S, grid)

    def stay_inside(self, grid: Grid, distances: Sequence[float]) -> None:
        """Move back inward from the closest corner."""
        d_ll, d_ul, d_ur, d_lr = distances
        nearest = min(distances)
        if nearest == d_ul:
            self.move(Direction.S if d_ur < d_ll else Direction.E, grid)
        elif nearest == d_ur:
            self.move(Direction.S if d_ul < d_lr else Direction.W, grid)
        elif nearest == d_lr:
            self.move(Direction.W if d_ur < d_ll else Direction.N, grid)
        elif nearest == d_ll:
            self.move(Direction.E if d_ul < d_lr else Direction.N, grid)

    def check_death(self, world_ants, hill_id) -> None:
        for other in _others(world_ants, hill_id):
            if other.kind == AntKind.COLLECTOR and self.body.contact(other.body, True):
                other.die()