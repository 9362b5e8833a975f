import pytest

from tchanz.ants import Collector, Defensor
from tchanz.constants import AntKind
from tchanz.geometry import Grid, Point, Square, Vector
from tchanz.messages import ConfigError, predator_overlap
from tchanz.predator import Predator

BORDER = Square(Point(0, 0), 20)
INTERIOR = Square(Point(1, 1), 18)


def _predator(grid, x, y, age=0):
    predator = Predator(Square(Point(x, y), 1, True), age)
    predator.occupy(grid)
    return predator


def test_kind_and_line():
    predator = Predator(Square(Point(10, 20), 1, True), 7)
    assert predator.kind == AntKind.PREDATOR
    assert predator.to_line() == "10 20 7\n"


def test_occupy_overlap_reports_predator_message():
    grid = Grid()
    grid.fill(Square(Point(5, 5), 1))
    with pytest.raises(ConfigError) as info:
        Predator(Square(Point(5, 5), 1, True)).occupy(grid)
    assert str(info.value) == predator_overlap(5, 5)


def test_predator_move_is_a_knight_jump_closer():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    target = Square(Point(20, 15), 1)
    before = Vector.between(predator.body, target).norm()
    start = predator.body.origin
    predator.predator_move(grid, target)
    jump = Vector.between(start, predator.body.origin)
    assert sorted((abs(jump.x), abs(jump.y))) == [1, 2]
    assert Vector.between(predator.body, target).norm() < before
    assert not grid.is_free(predator.body)
    assert grid.is_free(Square(start, 1))


def test_predator_move_blocked_by_occupied_cells():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    grid.fill(Square(Point(5, 5), 20))
    start = predator.body
    predator.predator_move(grid, Square(Point(50, 50), 1))
    assert predator.body == start
    assert not grid.is_free(start)


def test_predator_move_stays_in_grid():
    grid = Grid()
    predator = _predator(grid, 0, 1)
    start = predator.body
    predator.predator_move(grid, Square(Point(0, 50), 1))
    assert predator.body == start


def test_check_death_kills_touching_collector():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    collector = Collector(Square(Point(12, 10), 3, True))
    predator.check_death([[predator], [collector]], 0)
    assert collector.life_ended()
    assert not predator.life_ended()


def test_check_death_predators_kill_each_other():
    grid = Grid()
    first = _predator(grid, 10, 10)
    second = Predator(Square(Point(11, 11), 1, True))
    first.check_death([[first], [second]], 0)
    assert first.life_ended()
    assert second.life_ended()


def test_check_death_spares_defensors_and_own_hill():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    defensor = Defensor(Square(Point(12, 10), 3, True))
    friend = Collector(Square(Point(8, 10), 3, True))
    predator.check_death([[predator, friend], [defensor]], 0)
    assert not defensor.life_ended()
    assert not friend.life_ended()
    assert not predator.life_ended()


def test_act_free_chases_intruder_inside_border():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    intruder = Collector(Square(Point(15, 10), 3, True))
    intruder.occupy(grid)
    before = Vector.between(predator.body, intruder.body).norm()
    predator.act_free(grid, BORDER, INTERIOR, [[predator], [intruder]], 0)
    assert Vector.between(predator.body, intruder.body).norm() < before


def test_act_free_ignores_enemy_outside_home():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    enemy = Collector(Square(Point(50, 50), 3, True))
    start = predator.body
    predator.act_free(grid, BORDER, INTERIOR, [[predator], [enemy]], 0)
    assert predator.body == start


def test_act_constrained_chases_enemy_outside_home():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    enemy = Collector(Square(Point(50, 50), 3, True))
    before = Vector.between(predator.body, enemy.body).norm()
    predator.act(grid, None, BORDER, INTERIOR, None, [[predator], [enemy]], 0, True)
    assert Vector.between(predator.body, enemy.body).norm() < before


def test_act_constrained_defends_attacked_home():
    grid = Grid()
    predator = _predator(grid, 10, 10)
    far = Collector(Square(Point(11, 40), 3, True))
    intruder = Collector(Square(Point(15, 10), 3, True))
    intruder.occupy(grid)
    before = Vector.between(predator.body, intruder.body).norm()
    predator.act_constrained(grid, BORDER, INTERIOR, [[predator], [intruder, far]], 0)
    assert Vector.between(predator.body, intruder.body).norm() < before


def test_act_free_returns_home_when_outside():
    grid = Grid()
    predator = _predator(grid, 40, 40)
    centre = Square(Point(10, 10), 1)
    before = Vector.between(predator.body, centre).norm()
    predator.act_free(grid, BORDER, INTERIOR, [[predator]], 0)
    assert Vector.between(predator.body, centre).norm() < before


def test_back_home_moves_toward_centre():
    grid = Grid()
    predator = _predator(grid, 2, 40)
    centre = Square(Point(10, 10), 1)
    before = Vector.between(predator.body, centre).norm()
    predator.back_home(grid, INTERIOR)
    assert Vector.between(predator.body, centre).norm() < before