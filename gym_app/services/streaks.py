from collections import namedtuple
from datetime import date, datetime, timedelta

Streak = namedtuple("Streak", ["current", "longest"])


def _entry_date(entry):
    value = entry if isinstance(entry, (date, datetime)) else entry.workout_date
    if isinstance(value, datetime):
        return value.date()
    return value


def distinct_dates(entries):
    return {_entry_date(e) for e in entries if _entry_date(e) is not None}


def compute_streak(entries, as_of):
    """Current and longest run of consecutive logged days.

    Workouts and rest days both count. A missing entry for `as_of` itself
    does not break the current streak; counting then starts the day before.
    """
    days = distinct_dates(entries)

    current = 0
    check = as_of if as_of in days else as_of - timedelta(days=1)
    while check in days:
        current += 1
        check -= timedelta(days=1)

    longest = 0
    run = 0
    previous = None
    for day in sorted(days):
        if previous is not None and (day - previous).days == 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day

    return Streak(current=current, longest=longest)


def streak_summary(entries, as_of):
    entries = list(entries)
    streak = compute_streak(entries, as_of)
    rest_days = {_entry_date(e) for e in entries if getattr(e, "is_rest_day", False)}
    active_days = distinct_dates(entries)
    return {
        "as_of": as_of.isoformat(),
        "current": streak.current,
        "longest": streak.longest,
        "logged_today": as_of in active_days,
        "total_days": len(active_days),
        "rest_days": len(rest_days),
        "workout_days": len(active_days - rest_days),
    }
