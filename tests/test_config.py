import pytest

from diningtable.config import (
    InvalidInput,
    Settings,
    lone_philosopher_lines,
    parse_long,
    parse_settings,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17abc", -17),
        ("+5", 5),
        ("\t\n\v\f\r 9", 9),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("12 34", 12),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_settings_without_limit():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, 0)
    assert not settings.has_meal_limit


def test_parse_settings_with_limit():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.meal_limit == 7
    assert settings.has_meal_limit
    assert settings.philosophers == 4


def test_parse_settings_accepts_upper_bound():
    assert parse_settings(["200", "60", "60", "60"]).philosophers == 200


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "-3"],
        ["0", "800", "200", "200"],
        ["201", "800", "200", "200"],
        ["5", "59", "200", "200"],
        ["5", "800", "59", "200"],
        ["5", "800", "200", "59"],
        ["abc", "800", "200", "200"],
    ],
)
def test_parse_settings_rejects(args):
    with pytest.raises(InvalidInput) as info:
        parse_settings(args)
    assert str(info.value) == "wrong input"


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["1"])


def test_lone_philosopher_lines():
    settings = parse_settings(["1", "800", "200", "200"])
    assert lone_philosopher_lines(settings) == [
        "0 1 has taken a fork",
        "800 1 has died",
    ]


def test_lone_philosopher_lines_requires_one_philosopher():
    with pytest.raises(ValueError):
        lone_philosopher_lines(parse_settings(["2", "800", "200", "200"]))