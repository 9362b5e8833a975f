"""The world of anthills and food, its configuration files and its update step."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .anthill import Anthill, parse_ant_line, parse_anthill_line
from .constants import BIRTH_RATE, FOOD_RATE, MAX_FOOD_TRIAL, AntKind
from .food import Food, FoodStore, parse_food_line
from .geometry import Grid, Point, Square, random_bool, random_coordinate
from .messages import ConfigError, homes_overlap, success


class _State(Enum):
    NB_FOOD = auto()
    FOOD = auto()
    NB_ANTHILL = auto()
    ANTHILL = auto()
    ANT = auto()


def _read_count(line: str) -> int:
    try:
        return int(line.split()[0])
    except (IndexError, ValueError):
        raise ConfigError(f"cannot read a count from line: {line.strip()}\n") from None


class Simulation:
    """Anthills and food sharing one world grid."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.grid = Grid()
        self.foods = FoodStore(self.grid)
        self.anthills: list[Anthill] = []

    def __repr__(self) -> str:
        return f"Simulation(anthills={len(self.anthills)}, foods={len(self.foods)})"

    # configuration files
    def load(self, path) -> None:
        """Read a configuration file, replacing the current world."""
        self.loads(Path(path).read_text())

    def loads(self, text: str) -> None:
        """Read a configuration from text, replacing the current world.

        Raises ConfigError, leaving the world empty, if the text is invalid.
        """
        self.reset()
        try:
            self._read(text.splitlines())
        except ConfigError:
            self.reset()
            raise

    def _read(self, lines: Iterable[str]) -> None:
        state = _State.NB_FOOD
        remaining = 0
        hill_index = -1
        pending: deque[AntKind] = deque()
        for raw in lines:
            line = raw.lstrip()
            if not line or line.startswith("#"):
                continue
            if state is _State.NB_FOOD:
                remaining = _read_count(line)
                state = _State.NB_ANTHILL if remaining == 0 else _State.FOOD
            elif state is _State.FOOD:
                if remaining > 0:
                    self.foods.add(parse_food_line(line, self.grid))
                    remaining -= 1
                    if remaining == 0:
                        state = _State.NB_ANTHILL
            elif state is _State.NB_ANTHILL:
                remaining = _read_count(line)
                state = _State.ANTHILL
            elif state is _State.ANTHILL:
                hill_index += 1
                if remaining >= 0:
                    remaining -= 1
                    hill = self._read_anthill(line, hill_index)
                    pending = deque(
                        [AntKind.COLLECTOR] * max(hill.nb_c, 0)
                        + [AntKind.DEFENSOR] * max(hill.nb_d, 0)
                        + [AntKind.PREDATOR] * max(hill.nb_p, 0)
                    )
                    state = _State.ANT if pending else _State.ANTHILL
            else:
                hill = self.anthills[hill_index]
                kind = pending.popleft()
                ant = parse_ant_line(line, kind, self.grid)
                if kind == AntKind.DEFENSOR:
                    hill.check_defensor_within_home(ant)
                hill.add_ant(ant)
                if not pending:
                    state = _State.ANTHILL

    def _read_anthill(self, line: str, hill_index: int) -> Anthill:
        hill = parse_anthill_line(line, self.grid)
        hill.hill_id = hill_index
        hill.check_generator_within_home()
        for other in self.anthills:
            if hill.overlaps(other):
                raise ConfigError(homes_overlap(other.hill_id, hill_index))
        self.anthills.append(hill)
        return hill

    def save(self, path) -> None:
        """Write the world to a configuration file."""
        Path(path).write_text(self.dumps())

    def dumps(self) -> str:
        """The world as the text of a configuration file."""
        parts = [f"# nb food\n{len(self.foods)}\n\n", "# food\n"]
        parts.extend(food.to_line() for food in self.foods)
        parts.append("\n\n")
        parts.append(f"{len(self.anthills)} # nb anthill\n\n")
        parts.extend(hill.to_text() for hill in self.anthills)
        return "".join(parts)

    def reset(self) -> None:
        """Empty the world."""
        self.anthills = []
        self.foods.clear()
        self.grid.reset()

    def anthill_info(self, index: int) -> str:
        """The description of the anthill at index."""
        return self.anthills[index].info()

    # update
    def step(self) -> None:
        """Advance the world by one step."""
        if random_bool(self.rng, FOOD_RATE):
            self.create_food()

        borders = [(hill.hill_id, hill.border) for hill in self.anthills]
        for index, hill in enumerate(self.anthills):
            self._grow(hill, borders)
            probability = min(1.0, max(0.0, hill.generator.total_food * BIRTH_RATE))
            ant_birth = random_bool(self.rng, probability)
            hill.next_step(ant_birth, self.anthills, index, self.foods)

        survivors = []
        for hill in self.anthills:
            hill.purge(self.foods)
            if hill.generator.end_of_klan:
                hill.apocalypse(self.foods)
            else:
                survivors.append(hill)
        self.anthills = survivors

        # a predator landing on a collector may have freed shared cells
        for hill in self.anthills:
            hill.redraw()

    def create_food(self) -> Optional[Food]:
        """Try to drop food on a free cell outside every anthill.

        Returns the new food, or None if every trial failed.
        """
        for _ in range(int(MAX_FOOD_TRIAL) + 1):
            position = Point(random_coordinate(self.rng), random_coordinate(self.rng))
            place = Square(position, 1)
            if not self.grid.is_free(place):
                continue
            if any(place.within(hill.border) for hill in self.anthills):
                continue
            food = Food(position)
            self.foods.add(food)
            return food
        return None

    def growth(self, anthill: Anthill) -> bool:
        """Resize an anthill to fit its population if space allows.

        Returns whether the anthill could take its new size; otherwise it is
        marked constrained.
        """
        borders = [(hill.hill_id, hill.border) for hill in self.anthills]
        return self._grow(anthill, borders)

    def _grow(self, anthill: Anthill,
              borders: Sequence[tuple[int, Square]]) -> bool:
        border = anthill.border
        new_side = anthill.compute_size() + 2
        difference = new_side - border.side
        candidate = Square(border.origin, new_side)

        def fits(square: Square) -> bool:
            if not square.in_grid():
                return False
            return not any(
                hill_id != anthill.hill_id and square.superpose(other)
                for hill_id, other in borders
            )

        # anchored at the lower-left, upper-left, upper-right, lower-right corner
        for dx, dy in ((0, 0), (0, -difference), (-difference, 0), (0, difference)):
            candidate = candidate.shifted(dx, dy)
            if fits(candidate):
                anthill.constrained = False
                anthill.adjust_border(candidate)
                return True
        anthill.constrained = True
        return False


def main(argv=None) -> int:
    """Load a configuration file, optionally run and save the simulation."""
    parser = argparse.ArgumentParser(
        prog="tchanz", description="Simulate anthills competing for food."
    )
    parser.add_argument("config", help="configuration file to read")
    parser.add_argument("--steps", type=int, default=0,
                        help="number of simulation steps to run")
    parser.add_argument("--save", help="file to write the final world to")
    parser.add_argument("--seed", type=int, help="seed of the random generator")
    args = parser.parse_args(argv)

    simulation = Simulation(random.Random(args.seed))
    try:
        simulation.load(args.config)
    except ConfigError as error:
        sys.stdout.write(str(error))
        return 1
    except OSError as error:
        print(f"cannot read {args.config}: {error.strerror}", file=sys.stderr)
        return 1
    sys.stdout.write(success())

    for number in range(1, args.steps + 1):
        print(f"This is simulation update number : {number}")
        simulation.step()

    if args.save:
        simulation.save(args.save)
    print(f"nb food: {len(simulation.foods)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())