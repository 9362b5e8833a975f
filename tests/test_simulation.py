import random

import pytest

from tchanz import messages
from tchanz.geometry import Point, Square
from tchanz.messages import ConfigError
from tchanz.simulation import Simulation, main

CONFIG = """\
# nb food
2
# food
50 50
60 60

# nb anthill
1
10 10 20 15 15 100 1 1 1
\t# collector(s):
 \t20 20 0 false
\t# defensor(s):
 \t25 25 0
\t# predator(s):
 \t12 25 0
"""


def _loaded(text=CONFIG, seed=1):
    sim = Simulation(random.Random(seed))
    sim.loads(text)
    return sim


def test_loads_reads_foods_and_anthills():
    sim = _loaded()
    assert len(sim.foods) == 2
    assert [food.position for food in sim.foods] == [Point(50, 50), Point(60, 60)]
    assert len(sim.anthills) == 1
    hill = sim.anthills[0]
    assert (hill.nb_c, hill.nb_d, hill.nb_p) == (1, 1, 1)
    assert len(hill.ants) == 3
    assert hill.hill_id == 0


def test_loads_marks_grid():
    sim = _loaded()
    assert not sim.grid.is_free(Square(Point(50, 50), 1))
    assert not sim.grid.is_free(Square(Point(15, 15), 5, True))


def test_dumps_header_format():
    text = _loaded().dumps()
    assert text.startswith("# nb food\n2\n\n# food\n50 50\n60 60\n\n\n1 # nb anthill\n\n")


def test_dumps_round_trip():
    sim = _loaded()
    again = Simulation(random.Random(2))
    again.loads(sim.dumps())
    assert again.dumps() == sim.dumps()


def test_save_and_load(tmp_path):
    sim = _loaded()
    path = tmp_path / "world.txt"
    sim.save(path)
    again = Simulation()
    again.load(path)
    assert again.dumps() == sim.dumps()


def test_anthill_info():
    info = _loaded().anthill_info(0)
    assert info.startswith("id: 0\nTotal food: 100")
    assert info.endswith("nbC: 1\nnbD: 1\nnbP: 1")


def test_food_overlap_is_reported_and_world_reset():
    sim = Simulation()
    with pytest.raises(ConfigError) as caught:
        sim.loads("2\n50 50\n50 50\n0\n")
    assert str(caught.value) == messages.food_overlap(50, 50)
    assert len(sim.foods) == 0
    assert sim.grid.is_free(Square(Point(50, 50), 1))


def test_food_outside_grid():
    with pytest.raises(ConfigError) as caught:
        Simulation().loads("1\n200 5\n0\n")
    assert str(caught.value) == messages.print_index(200, 127)


def test_homes_overlap():
    text = "0\n2\n10 10 20 15 15 100 0 0 0\n20 20 20 25 25 100 0 0 0\n"
    sim = Simulation()
    with pytest.raises(ConfigError) as caught:
        sim.loads(text)
    assert str(caught.value) == messages.homes_overlap(0, 1)
    assert sim.anthills == []


def test_generator_not_within_home():
    with pytest.raises(ConfigError) as caught:
        Simulation().loads("0\n1\n10 10 20 12 12 100 0 0 0\n")
    assert str(caught.value) == messages.generator_not_within_home(12, 12, 0)


def test_defensor_not_within_home():
    with pytest.raises(ConfigError) as caught:
        Simulation().loads("0\n1\n10 10 20 15 15 100 0 1 0\n40 40 0\n")
    assert str(caught.value) == messages.defensor_not_within_home(40, 40, 0)


def test_unreadable_count():
    with pytest.raises(ConfigError):
        Simulation().loads("abc\n")


def test_reset_empties_world():
    sim = _loaded()
    sim.reset()
    assert len(sim.foods) == 0
    assert sim.anthills == []
    assert sim.grid.is_free(Square(Point(15, 15), 5, True))


def test_step_ages_ants_and_keeps_counts():
    sim = _loaded(seed=3)
    sim.step()
    hill = sim.anthills[0]
    assert hill.generator.total_food < 100
    assert all(ant.age == 1 for ant in hill.ants)
    assert hill.nb_c + hill.nb_d + hill.nb_p == len(hill.ants)


def test_starving_anthill_is_removed():
    sim = _loaded("0\n1\n10 10 20 15 15 0 0 0 0\n")
    sim.step()
    assert sim.anthills == []
    assert sim.grid.is_free(Square(Point(15, 15), 5, True))


def test_create_food_avoids_anthills():
    sim = _loaded("0\n1\n0 0 120 60 60 100 0 0 0\n", seed=5)
    border = sim.anthills[0].border
    created = [sim.create_food() for _ in range(30)]
    placed = [food for food in created if food is not None]
    assert len(sim.foods) == len(placed)
    assert placed
    for food in placed:
        assert not food.place.within(border)
        assert 1 <= food.position.x <= 126 and 1 <= food.position.y <= 126


def test_growth_resizes_free_anthill():
    sim = _loaded("0\n1\n10 10 20 15 15 100 0 0 0\n")
    hill = sim.anthills[0]
    assert sim.growth(hill) is True
    assert hill.border.side == hill.compute_size() + 2
    assert hill.border.origin == Point(10, 10)
    assert hill.constrained is False


def test_growth_constrained_when_no_room():
    sim = _loaded("0\n1\n10 10 20 15 15 100 0 0 0\n")
    hill = sim.anthills[0]
    hill.nb_c = 5000
    assert sim.growth(hill) is False
    assert hill.constrained is True
    assert hill.border.side == 20


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "world.txt"
    path.write_text(CONFIG)
    out = tmp_path / "out.txt"
    assert main([str(path), "--steps", "2", "--seed", "4", "--save", str(out)]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith(messages.success())
    assert out.read_text().startswith("# nb food\n")


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1\n200 5\n0\n")
    assert main([str(path)]) == 1
    assert messages.print_index(200, 127) in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1