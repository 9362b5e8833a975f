"""Messages reported while reading and validating a configuration."""

_UNSIGNED_RANGE = 2**32


class ConfigError(Exception):
    """Raised when a configuration file fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _u(value: int) -> str:
    """Render a value the way an unsigned 32-bit integer is printed."""
    return str(int(value) % _UNSIGNED_RANGE)


def success() -> str:
    """Message for a file that was read and validated without error."""
    return "Correct file\n"


def homes_overlap(h1: int, h2: int) -> str:
    """Two anthills overlap; the identifiers are reported in ascending order."""
    low, high = sorted((int(h1) % _UNSIGNED_RANGE, int(h2) % _UNSIGNED_RANGE))
    return f"home {low} overlaps with home {high}\n"


def food_overlap(fx: int, fy: int) -> str:
    """A food item overlaps with another exclusive entity."""
    return (
        f"food with coordinates {_u(fx)} {_u(fy)}"
        " overlaps with another exclusive entity\n"
    )


def predator_overlap(px: int, py: int) -> str:
    """A predator overlaps with another exclusive entity."""
    return (
        f"predator with coordinates {_u(px)} {_u(py)}"
        " overlaps with another exclusive entity\n"
    )


def _overlap_at(kind: str, ox: int, oy: int, x: int, y: int) -> str:
    return (
        f"{kind} with coordinates {_u(ox)} {_u(oy)}"
        f" overlaps with another exclusive entity at least on {_u(x)} {_u(y)}\n"
    )


def defensor_overlap(dx: int, dy: int, x: int, y: int) -> str:
    """A defensor overlaps with another entity, first at cell (x, y)."""
    return _overlap_at("defensor", dx, dy, x, y)


def collector_overlap(cx: int, cy: int, x: int, y: int) -> str:
    """A collector overlaps with another entity, first at cell (x, y)."""
    return _overlap_at("collector", cx, cy, x, y)


def generator_overlap(gx: int, gy: int, x: int, y: int) -> str:
    """A generator overlaps with another entity, first at cell (x, y)."""
    return _overlap_at("generator", gx, gy, x, y)


def generator_not_within_home(gx: int, gy: int, h: int) -> str:
    """A generator is not fully inside its anthill."""
    return (
        f"generator with coordinates {_u(gx)} {_u(gy)}"
        f" is not fully within its home: {_u(h)}\n"
    )


def defensor_not_within_home(dx: int, dy: int, h: int) -> str:
    """A defensor is not fully inside its anthill."""
    return (
        f"defensor with coordinates {_u(dx)} {_u(dy)}"
        f" is not fully within its home: {_u(h)}\n"
    )


def print_index(index: int, max_value: int) -> str:
    """A coordinate lies outside [0, max_value]."""
    return f"coordinate {_u(index)} does not belong to [ 0, {_u(max_value)} ]\n"


def print_outside(index: int, side: int, max_value: int) -> str:
    """A square's origin and side reach outside [0, max_value]."""
    return (
        f"combined coordinate {_u(index)} and square side {_u(side)}"
        f" do not belong to [ 0, {_u(max_value)} ]\n"
    )