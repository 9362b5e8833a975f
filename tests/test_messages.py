import pytest

from tchanz import messages
from tchanz.messages import ConfigError


def test_success():
    assert messages.success() == "Correct file\n"


def test_homes_overlap_in_order():
    assert messages.homes_overlap(1, 2) == "home 1 overlaps with home 2\n"


def test_homes_overlap_is_symmetric():
    assert messages.homes_overlap(7, 3) == messages.homes_overlap(3, 7)
    assert messages.homes_overlap(7, 3).startswith("home 3 ")


def test_food_overlap():
    assert messages.food_overlap(4, 5) == (
        "food with coordinates 4 5 overlaps with another exclusive entity\n"
    )


def test_predator_overlap():
    assert messages.predator_overlap(10, 20) == (
        "predator with coordinates 10 20 overlaps with another exclusive entity\n"
    )


@pytest.mark.parametrize(
    "func, kind",
    [
        (messages.defensor_overlap, "defensor"),
        (messages.collector_overlap, "collector"),
        (messages.generator_overlap, "generator"),
    ],
)
def test_overlap_at_cell(func, kind):
    assert func(1, 2, 3, 4) == (
        f"{kind} with coordinates 1 2 overlaps with another exclusive entity"
        " at least on 3 4\n"
    )


def test_generator_not_within_home():
    assert messages.generator_not_within_home(6, 7, 0) == (
        "generator with coordinates 6 7 is not fully within its home: 0\n"
    )


def test_defensor_not_within_home():
    assert messages.defensor_not_within_home(8, 9, 2) == (
        "defensor with coordinates 8 9 is not fully within its home: 2\n"
    )


def test_print_index():
    assert messages.print_index(130, 127) == (
        "coordinate 130 does not belong to [ 0, 127 ]\n"
    )


def test_print_outside():
    assert messages.print_outside(126, 5, 127) == (
        "combined coordinate 126 and square side 5 do not belong to [ 0, 127 ]\n"
    )


def test_every_message_ends_with_newline():
    produced = [
        messages.success(),
        messages.homes_overlap(0, 1),
        messages.food_overlap(0, 0),
        messages.print_index(0, 127),
        messages.print_outside(0, 1, 127),
    ]
    assert all(text.endswith("\n") for text in produced)


def test_config_error_carries_message():
    text = messages.food_overlap(2, 3)
    with pytest.raises(ConfigError) as info:
        raise ConfigError(text)
    assert str(info.value) == text
    assert info.value.message == text