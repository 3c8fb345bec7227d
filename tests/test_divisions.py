"""Tests for the time division ladder."""

import pytest

from elapsed import LADDER, Ladder, day, hour, millisecond, minute, month, second, year
from elapsed.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR


def test_ladder_order_and_lengths():
    """Test that the default ladder runs from millisecond up to year."""
    assert [d.name for d in LADDER] == [
        "millisecond",
        "second",
        "minute",
        "hour",
        "day",
        "month",
        "year",
    ]
    assert [d.millis for d in LADDER] == [1, SECOND, MINUTE, HOUR, DAY, MONTH, YEAR]
    assert YEAR == 31_104_000_000  # 12 months of 30 days
    assert LADDER.smallest == millisecond
    assert LADDER.largest == year
    assert len(LADDER) == 7


def test_thresholds():
    """Test the promotion thresholds of each division."""
    assert [d.threshold for d in LADDER] == [750, 45, 45, 22, 26, 11, 0]
    assert second.threshold_millis == 45 * SECOND
    assert millisecond.threshold_millis == 750


def test_neighbour_links_are_consistent():
    """Test that sub and super links mirror each other."""
    assert millisecond.sub_division is None
    assert year.super_division is None

    for division in LADDER:
        sub = division.sub_division
        if sub is not None:
            assert sub.super_division == division
            assert division.millis % sub.millis == 0

    assert minute.sub_division == second
    assert minute.super_division == hour


def test_template_keys():
    """Test singular and plural template keys."""
    assert day.singular_key == "day_ago"
    assert day.plural_key == "days_ago"
    assert month.plural_key == "months_ago"


def test_iter_below_walks_the_full_chain():
    """Test that iter_below yields every smaller division, nearest first."""
    assert list(millisecond.iter_below()) == []
    assert list(second.iter_below()) == [millisecond]
    assert list(hour.iter_below()) == [minute, second, millisecond]

    assert millisecond.is_below(minute)
    assert second.is_below(minute)
    assert not minute.is_below(minute)
    assert not hour.is_below(minute)


def test_named_lookup():
    """Test looking up divisions by name."""
    assert LADDER.named("hour") == hour
    assert LADDER.named("Second") == second

    with pytest.raises(ValueError, match="Unknown time division 'fortnight'"):
        LADDER.named("fortnight")


def test_ladder_is_read_only():
    """Test that divisions cannot be reassigned."""
    with pytest.raises(AttributeError):
        second.threshold = 10  # type: ignore[misc]


def test_custom_ladder_links_by_position():
    """Test that a custom ladder derives its own neighbour links."""
    ladder = Ladder([("tick", 1, 5), ("tock", 10, 0)])

    tick, tock = ladder
    assert tick.super_division == tock
    assert tock.sub_division == tick
    assert str(tock) == "tock"


def test_ladder_requires_rows():
    with pytest.raises(ValueError, match="at least one division"):
        Ladder([])


def test_ladder_rejects_duplicate_names():
    with pytest.raises(ValueError, match="unique"):
        Ladder([("tick", 1, 5), ("tick", 10, 0)])


def test_ladder_must_increase():
    with pytest.raises(ValueError, match="strictly increasing"):
        Ladder([("a", 10, 5), ("b", 10, 0)])


def test_ladder_requires_exact_multiples():
    with pytest.raises(ValueError, match="exact multiple"):
        Ladder([("a", 2, 1), ("b", 3, 0)])


def test_ladder_largest_threshold_must_be_zero():
    with pytest.raises(ValueError, match="threshold must be 0"):
        Ladder([("a", 1, 5), ("b", 10, 3)])


def test_ladder_thresholds_must_be_positive():
    with pytest.raises(ValueError, match="positive integer"):
        Ladder([("a", 1, 0), ("b", 10, 0)])
