"""Anthills: a border, a generator and the ants that live inside."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .ants import Ant, Collector, Defensor, Generator
from .constants import (
    PROP_CONSTRAINED_COLLECTOR,
    PROP_CONSTRAINED_DEFENSOR,
    PROP_FREE_COLLECTOR,
    PROP_FREE_DEFENSOR,
    SIZE_C,
    SIZE_D,
    SIZE_G,
    SIZE_P,
    VAL_FOOD,
    AntKind,
)
from .food import Food, FoodStore
from .geometry import Grid, Point, Square
from .messages import ConfigError, defensor_not_within_home, generator_not_within_home
from .predator import Predator

_ANT_SIDE = {
    AntKind.COLLECTOR: SIZE_C,
    AntKind.DEFENSOR: SIZE_D,
    AntKind.PREDATOR: SIZE_P,
}

_KIND_NAMES = {
    AntKind.COLLECTOR: "collector",
    AntKind.DEFENSOR: "defensor",
    AntKind.PREDATOR: "predator",
}


class Anthill:
    """An anthill with its border, generator, ants and population counts."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        side: int = 128,
        generator_body: Optional[Square] = None,
        total_food: float = 0.0,
        nb_c: int = 0,
        nb_d: int = 0,
        nb_p: int = 0,
        grid: Optional[Grid] = None,
    ) -> None:
        if generator_body is None:
            generator_body = Square(Point(2, 2), SIZE_G, True)
        self.grid = grid if grid is not None else Grid()
        self.border = Square(Point(x, y), side)
        self.generator = Generator(generator_body, total_food)
        self.nb_c = nb_c
        self.nb_d = nb_d
        self.nb_p = nb_p
        self.nb_t = 1 + nb_c + nb_d + nb_p
        self.size_f = side - 2
        self.hill_id = 0
        self.ants: list[Ant] = []
        self.constrained = False

    def __repr__(self) -> str:
        return (f"Anthill(id={self.hill_id}, border={self.border!r}, "
                f"ants={len(self.ants)})")

    def interior(self) -> Square:
        """The square inside the border line."""
        return Square(
            Point(self.border.origin.x + 1, self.border.origin.y + 1),
            self.border.side - 2,
        )

    def overlaps(self, other: "Anthill") -> bool:
        """Whether the borders of two anthills overlap."""
        return self.border.superpose(other.border)

    def check_generator_within_home(self) -> None:
        """Raise ConfigError if the generator is not inside the anthill."""
        body = self.generator.body
        if not body.within(self.interior()):
            raise ConfigError(
                generator_not_within_home(body.origin.x, body.origin.y, self.hill_id)
            )

    def check_defensor_within_home(self, ant: Ant) -> None:
        """Raise ConfigError if a defensor is not inside the anthill."""
        if not ant.body.within(self.interior()):
            raise ConfigError(
                defensor_not_within_home(ant.body.origin.x, ant.body.origin.y,
                                         self.hill_id)
            )

    def adjust_border(self, border: Square) -> None:
        """Replace the border after the anthill grew or shrank."""
        self.border = border
        self.size_f = border.side - 2

    def info(self) -> str:
        """A short description for display."""
        return (
            f"id: {self.hill_id}\n"
            f"Total food: {self.generator.total_food:g}\n\n"
            f"nbC: {self.nb_c}\nnbD: {self.nb_d}\nnbP: {self.nb_p}"
        )

    def to_text(self) -> str:
        """The anthill and its ants as lines of a configuration file."""
        origin = self.border.origin
        parts = [
            f"\t{origin.x} {origin.y} {self.border.side} ",
            self.generator.to_line(),
            f"{self.nb_c} {self.nb_d} {self.nb_p} # anthill #{self.hill_id + 1}\n",
        ]
        for kind, name in _KIND_NAMES.items():
            parts.append(f"\t# {name}(s):\n")
            parts.extend(f" \t{ant.to_line()}" for ant in self.ants if ant.kind == kind)
            parts.append("\n")
        return "".join(parts)

    def compute_size(self) -> int:
        """The interior side needed for the current population."""
        area = (SIZE_G ** 2 + SIZE_C ** 2 * self.nb_c
                + SIZE_D ** 2 * self.nb_d + SIZE_P ** 2 * self.nb_p)
        return int(math.sqrt(4 * area))

    def next_step(self, ant_birth: bool, anthills: Sequence["Anthill"], index: int,
                  foods: FoodStore) -> None:
        """Advance the anthill by one step of the simulation."""
        world_ants = [hill.ants for hill in anthills]
        self.generator.eat(self.nb_t)
        if ant_birth:
            self.create_ant()
        self.generator.act(self.grid, foods, self.border, self.interior(),
                           self.generator.body, world_ants, index, self.constrained)
        if self.generator.end_of_klan:
            return
        delivered = 0
        for ant in self.ants:
            ant.grow_older()
            ant.check_death(world_ants, index)
            if not ant.life_ended():
                if ant.act(self.grid, foods, self.border, self.interior(),
                           self.generator.body, world_ants, index, self.constrained):
                    delivered += 1
                ant.check_death(world_ants, index)
        if delivered:
            self.generator.feed(VAL_FOOD * delivered)

    def purge(self, foods: FoodStore) -> None:
        """Remove dead ants; a loaded collector drops its food where it died."""
        i = 0
        while i < len(self.ants):
            ant = self.ants[i]
            if not ant.life_ended():
                i += 1
                continue
            if ant.kind == AntKind.COLLECTOR:
                self.nb_c -= 1
            elif ant.kind == AntKind.DEFENSOR:
                self.nb_d -= 1
            elif ant.kind == AntKind.PREDATOR:
                self.nb_p -= 1
            self.nb_t -= 1
            self.grid.clear(ant.body)
            if ant.loaded:
                foods.add(Food(ant.body.origin))
            self.ants[i] = self.ants[-1]
            self.ants.pop()

    def create_ant(self) -> Optional[Ant]:
        """Give birth to the kind of ant the population lacks most."""
        if self.constrained:
            prop_collector, prop_defensor = (PROP_CONSTRAINED_COLLECTOR,
                                             PROP_CONSTRAINED_DEFENSOR)
        else:
            prop_collector, prop_defensor = PROP_FREE_COLLECTOR, PROP_FREE_DEFENSOR
        others = self.nb_t - 1
        if others == 0 or self.nb_c / others < prop_collector:
            kind = AntKind.COLLECTOR
        elif self.nb_d / others < prop_defensor:
            kind = AntKind.DEFENSOR
        else:
            kind = AntKind.PREDATOR
        return self.place_ant(kind)

    def place_ant(self, kind: int) -> Optional[Ant]:
        """Place a new ant of a kind in free space inside the anthill.

        Returns the new ant, or None when there is no room for it.
        """
        kind = AntKind(kind)
        side = _ANT_SIDE[kind]
        interior = self.interior()
        if not self.grid.enough_space(interior, side):
            return None
        body = self.grid.find_space(interior, side, True)
        if kind == AntKind.COLLECTOR:
            ant: Ant = Collector(body, 0, False)
            self.nb_c += 1
        elif kind == AntKind.DEFENSOR:
            ant = Defensor(body, 0)
            self.nb_d += 1
        else:
            ant = Predator(body, 0)
            self.nb_p += 1
        self.nb_t += 1
        self.grid.fill(body)
        self.add_ant(ant)
        return ant

    def apocalypse(self, foods: FoodStore) -> None:
        """Destroy the generator and every ant of the anthill."""
        self.grid.clear(self.generator.body)
        for ant in self.ants:
            ant.die()
        self.purge(foods)

    def add_ant(self, ant: Optional[Ant]) -> None:
        """Add an ant to the anthill."""
        if ant is not None:
            self.ants.append(ant)

    def redraw(self) -> None:
        """Mark every ant's body on the grid again."""
        for ant in self.ants:
            self.grid.fill(ant.body)


def parse_ant_line(line: str, kind: int, grid: Grid) -> Ant:
    """Read an ant of a given kind from a configuration line and place it."""
    kind = AntKind(kind)
    if kind not in _ANT_SIDE:
        raise ValueError(f"ants of kind {kind.name} are not read from ant lines")
    tokens = line.split()
    try:
        x, y, age = (int(token) for token in tokens[:3])
    except ValueError:
        raise ConfigError(f"cannot read ant from line: {line.strip()}\n") from None
    loaded = False
    if kind == AntKind.COLLECTOR:
        if len(tokens) < 4:
            raise ConfigError(f"cannot read collector from line: {line.strip()}\n")
        loaded = tokens[3] == "true"
    position = Point(x, y)
    position.validate()
    body = Square(position, _ANT_SIDE[kind], True)
    body.validate()
    if kind == AntKind.COLLECTOR:
        ant: Ant = Collector(body, age, loaded)
    elif kind == AntKind.DEFENSOR:
        ant = Defensor(body, age)
    else:
        ant = Predator(body, age)
    ant.occupy(grid)
    return ant


def parse_anthill_line(line: str, grid: Grid) -> Anthill:
    """Read an anthill from a configuration line and place its generator."""
    tokens = line.split()
    try:
        if len(tokens) < 9:
            raise ValueError
        x, y, side, xg, yg = (int(token) for token in tokens[:5])
        total_food = float(tokens[5])
        nb_c, nb_d, nb_p = (int(token) for token in tokens[6:9])
    except ValueError:
        raise ConfigError(f"cannot read anthill from line: {line.strip()}\n") from None
    generator_position = Point(xg, yg)
    generator_position.validate()
    Point(x, y).validate()
    anthill = Anthill(x, y, side, Square(generator_position, SIZE_G, True),
                      total_food, nb_c, nb_d, nb_p, grid)
    anthill.generator.occupy(grid)
    anthill.border.validate()
    return anthill