"""Food items lying on the world grid and the store that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .geometry import Grid, Point, Square
from .messages import ConfigError, food_overlap


@dataclass(frozen=True)
class Food:
    """One unit of food occupying a single cell."""

    position: Point

    @property
    def place(self) -> Square:
        """The one-cell square the food occupies."""
        return Square(self.position, 1)

    def to_line(self) -> str:
        """The food as a line of a configuration file."""
        return f"{self.position.x} {self.position.y}\n"


class FoodStore:
    """The food items of the world, each marked on the occupancy grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._items: list[Food] = []

    def add(self, food: Food) -> None:
        """Store a food item and mark its cell occupied."""
        self.grid.fill(food.place)
        self._items.append(food)

    def remove(self, index: int) -> None:
        """Drop the item at index by moving the last item into its slot.

        Indices outside the store are ignored. The grid is left untouched.
        """
        if 0 <= index < len(self._items):
            self._items[index] = self._items[-1]
            self._items.pop()

    def clear(self) -> None:
        """Forget every stored item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Food]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Food:
        return self._items[index]


def parse_food_line(line: str, grid: Grid) -> Food:
    """Read a food item from a configuration line and mark it on the grid."""
    try:
        x, y = (int(token) for token in line.split()[:2])
    except ValueError:
        raise ConfigError(f"cannot read food from line: {line.strip()}\n") from None
    position = Point(x, y)
    position.validate()
    place = Square(position, 1)
    if not grid.is_free(place):
        raise ConfigError(food_overlap(x, y))
    place.validate()
    grid.fill(place)
    return Food(position)