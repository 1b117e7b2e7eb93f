from __future__ import annotations

from collections import namedtuple
from datetime import date, datetime, timedelta

from gym_app.services.streaks import compute_streak, streak_summary

Entry = namedtuple("Entry", ["workout_date", "is_rest_day"])


def _dates(*days: int) -> list:
    return [date(2024, 6, d) for d in days]


def test_streak_with_a_gap() -> None:
    streak = compute_streak(_dates(1, 2, 3, 5, 6), date(2024, 6, 6))
    assert streak.current == 2
    assert streak.longest == 3


def test_missing_today_does_not_break_current_streak() -> None:
    streak = compute_streak(_dates(3, 4, 5), date(2024, 6, 6))
    assert streak.current == 3


def test_two_day_gap_resets_current_streak() -> None:
    streak = compute_streak(_dates(1, 2, 3), date(2024, 6, 5))
    assert streak.current == 0
    assert streak.longest == 3


def test_empty_history() -> None:
    assert compute_streak([], date(2024, 6, 6)) == (0, 0)


def test_duplicate_dates_and_datetimes_count_once() -> None:
    entries = [date(2024, 6, 1), datetime(2024, 6, 1, 18, 30), date(2024, 6, 2)]
    streak = compute_streak(entries, date(2024, 6, 2))
    assert streak == (2, 2)


def test_logging_as_of_day_never_lowers_current_streak() -> None:
    histories = [_dates(1, 2, 3), _dates(1, 3, 4), _dates(), _dates(2, 5), _dates(4)]
    as_of = date(2024, 6, 5)
    for history in histories:
        before = [d for d in history if d != as_of]
        previous = compute_streak(before, as_of).current
        assert compute_streak(before + [as_of], as_of).current >= previous


def test_logging_as_of_day_extends_yesterdays_run() -> None:
    as_of = date(2024, 6, 5)
    assert compute_streak(_dates(3, 4), as_of).current == 2
    assert compute_streak(_dates(3, 4, 5), as_of).current == 3


def test_summary_counts_rest_and_workout_days() -> None:
    entries = [
        Entry(date(2024, 6, 1), False),
        Entry(date(2024, 6, 2), True),
        Entry(date(2024, 6, 3), False),
    ]
    summary = streak_summary(entries, date(2024, 6, 3))
    assert summary["current"] == 3
    assert summary["logged_today"] is True
    assert summary["total_days"] == 3
    assert summary["rest_days"] == 1
    assert summary["workout_days"] == 2
    assert summary["as_of"] == "2024-06-03"
