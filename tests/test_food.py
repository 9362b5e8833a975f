import pytest

from tchanz.food import Food, FoodStore, parse_food_line
from tchanz.geometry import Grid, Point, Square
from tchanz.messages import ConfigError, food_overlap, print_index


def test_food_to_line():
    assert Food(Point(3, 7)).to_line() == "3 7\n"


def test_food_place_is_single_cell():
    place = Food(Point(4, 9)).place
    assert place.origin == Point(4, 9)
    assert place.side == 1


def test_add_marks_grid_and_stores():
    grid = Grid()
    store = FoodStore(grid)
    food = Food(Point(3, 7))
    store.add(food)
    assert len(store) == 1
    assert store[0] == food
    assert not grid.is_free(food.place)


def test_remove_moves_last_into_slot():
    store = FoodStore(Grid())
    a, b, c = Food(Point(1, 1)), Food(Point(2, 2)), Food(Point(3, 3))
    for food in (a, b, c):
        store.add(food)
    store.remove(0)
    assert list(store) == [c, b]


def test_remove_out_of_range_is_ignored():
    store = FoodStore(Grid())
    store.add(Food(Point(1, 1)))
    store.remove(5)
    store.remove(-1)
    assert len(store) == 1


def test_clear_empties_store_but_keeps_grid():
    grid = Grid()
    store = FoodStore(grid)
    food = Food(Point(6, 6))
    store.add(food)
    store.clear()
    assert len(store) == 0
    assert not grid.is_free(food.place)


def test_parse_food_line_marks_grid():
    grid = Grid()
    food = parse_food_line("  12 34  ", grid)
    assert food == Food(Point(12, 34))
    assert not grid.is_free(food.place)


def test_parse_food_line_ignores_extra_tokens():
    food = parse_food_line("5 6 # comment", Grid())
    assert food.position == Point(5, 6)


def test_parse_food_line_overlap():
    grid = Grid()
    grid.fill(Square(Point(5, 5), 1))
    with pytest.raises(ConfigError) as info:
        parse_food_line("5 5", grid)
    assert str(info.value) == food_overlap(5, 5)


def test_parse_food_line_outside_grid():
    with pytest.raises(ConfigError) as info:
        parse_food_line("128 3", Grid())
    assert str(info.value) == print_index(128, 127)


@pytest.mark.parametrize("line", ["", "7", "a b", "3 x"])
def test_parse_food_line_malformed(line):
    with pytest.raises(ConfigError):
        parse_food_line(line, Grid())