import pytest

from fixmixedtabs.columns import (
    InvalidTabWidthError,
    advance_column,
    check_tab_width,
    leading_whitespace,
    next_tab_stop,
    visual_column,
)


@pytest.mark.parametrize(
    "column, tab_width, expected",
    [
        (0, 4, 4),
        (1, 4, 4),
        (3, 4, 4),
        (4, 4, 8),
        (5, 1, 6),
        (2, 8, 8),
    ],
)
def test_next_tab_stop(column, tab_width, expected):
    assert next_tab_stop(column, tab_width) == expected


def test_advance_column_counts_spaces_as_one():
    assert advance_column(3, " ", 4) == 4
    assert advance_column(3, "\t", 4) == 4
    assert advance_column(4, "\t", 4) == 8


@pytest.mark.parametrize(
    "whitespace, tab_width, expected",
    [
        ("", 4, 0),
        ("    ", 4, 4),
        ("\t\t", 4, 8),
        ("  \t", 4, 4),
        (" \t ", 4, 5),
        ("\t  \t", 3, 6),
        ("  x  ", 4, 2),
    ],
)
def test_visual_column(whitespace, tab_width, expected):
    assert visual_column(whitespace, tab_width) == expected


def test_leading_whitespace_stops_at_first_other_character():
    assert leading_whitespace(" \t foo\tbar") == " \t "
    assert leading_whitespace("foo") == ""
    assert leading_whitespace("") == ""
    assert leading_whitespace("   ") == "   "


@pytest.mark.parametrize("bad", [0, -1, True, 2.0, "4", None])
def test_check_tab_width_rejects_invalid_values(bad):
    with pytest.raises(InvalidTabWidthError):
        check_tab_width(bad)


def test_check_tab_width_is_a_value_error():
    with pytest.raises(ValueError):
        visual_column("\t", 0)
    assert check_tab_width(1) == 1
