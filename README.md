# tchanz

A small artificial-life simulation of competing ant colonies on a
128 × 128 grid of square cells.

Each anthill holds a generator ant that eats the colony's food stock and
may give birth to new ants:

- **collectors** go out for food and carry it home, where each delivery
  adds 50 to the colony's food stock;
- **defensors** patrol the inside edge of their anthill and kill enemy
  collectors they touch;
- **predators** jump like chess knights toward enemy collectors and
  predators and kill the ones they reach.

Food appears at random in free cells outside the anthills. An anthill
grows or shrinks to fit its population when there is room for it
(otherwise it is marked constrained), and it dies out, together with all
its ants, when its generator runs out of food or leaves its home.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Configuration files

A configuration is plain text. Blank lines and lines starting with `#`
are skipped. In order it gives:

1. the number of food items, then one `x y` line for each;
2. the number of anthills;
3. for each anthill, a line
   `x y side xg yg total_food nbC nbD nbP`
   (border origin and side, generator centre, food stock and counts of
   collectors, defensors and predators), followed by `nbC` collector
   lines `x y age true|false`, `nbD` defensor lines `x y age` and `nbP`
   predator lines `x y age`. Ant positions are the centres of their
   bodies; a collector carries food when its last field is `true`.

For example:

```
# nb food
1
60 60

# nb anthill
1
10 10 20 15 15 100 1 0 0
    20 20 0 false
```

Reading a configuration checks coordinates and squares against the
grid, overlaps between food, generators and ants, that generators and
defensors lie inside their home and that homes do not overlap. The first
violation raises `tchanz.messages.ConfigError`, whose text is the error
message, and leaves the world empty.

## Command line

```
tchanz CONFIG_FILE [--steps N] [--save OUT_FILE] [--seed SEED]
```

reads the configuration and prints `Correct file`, or prints the error
message and exits with status 1. With `--steps` it then runs that many
simulation steps, printing the number of each; `--save` writes the final
world as a configuration file; `--seed` seeds the random generator so a
run can be repeated. It ends by printing the number of food items.

## From Python

```python
import random
from tchanz.simulation import Simulation

sim = Simulation(random.Random(0))
sim.load("colony.txt")
for _ in range(100):
    sim.step()
if sim.anthills:
    print(sim.anthill_info(0))
sim.save("after.txt")
```

`Simulation.loads` and `Simulation.dumps` read and write the same format
from and to strings; `Simulation.reset` empties the world. The world is
held in `sim.anthills` (a list of `tchanz.anthill.Anthill`), `sim.foods`
(a `tchanz.food.FoodStore`) and `sim.grid` (a `tchanz.geometry.Grid`
recording which cells are occupied).

## What it does not do

There is no graphical display: the simulation is not drawn and cannot be
watched or stepped interactively. It runs from the command line or from
Python, and its state is seen through `anthill_info`, the configuration
text it writes and the objects above.