"""Simulation-wide constants and enumerations."""

from enum import IntEnum


class Direction(IntEnum):
    """The eight compass directions an ant can step in."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7


class AntKind(IntEnum):
    """The kinds of ants living in an anthill."""

    COLLECTOR = 0
    DEFENSOR = 1
    PREDATOR = 2
    GENERATOR = 3


# Maximum number of anthills.
MAX_F = 25

# Side lengths of each kind of ant.
SIZE_G = 5
SIZE_C = 3
SIZE_D = 3
SIZE_P = 1

# Age at which an ant dies.
BUG_LIFE = 300

# Food value brought back by one collector delivery.
VAL_FOOD = 50

FOOD_RATE = 0.1
MAX_FOOD_TRIAL = 10
BIRTH_RATE = 0.00005
PROP_FREE_COLLECTOR = 0.85
PROP_FREE_DEFENSOR = 0.10
PROP_CONSTRAINED_COLLECTOR = 0.6
PROP_CONSTRAINED_DEFENSOR = 0.1

# Drawing area size in pixels.
DRAWING_SIZE = 500

# Side of the world grid, in cells.
G_MAX = 128

# Width of one grid cell in pixels.
SQ_WIDTH = DRAWING_SIZE / G_MAX