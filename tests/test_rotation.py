from __future__ import annotations

from collections import namedtuple
from datetime import date

import pytest

from gym_app.services.errors import ValidationError
from gym_app.services.rotation import (
    SOURCE_LOGGED,
    SOURCE_NONE,
    SOURCE_OVERRIDE,
    SOURCE_REST,
    SOURCE_ROTATION,
    resolve_day_plan,
    select_rotation_plan,
    upcoming_schedule,
)

Plan = namedtuple("Plan", ["id", "name"])
Entry = namedtuple("Entry", ["id", "is_rest_day", "workout_plan", "workout_plan_id"])

A, B, C = Plan(1, "A"), Plan(2, "B"), Plan(3, "C")


def test_fresh_rotation_cycles_through_plans() -> None:
    plans = [A, B, C]
    assert select_rotation_plan(0, plans) is A
    assert select_rotation_plan(3, plans) is A
    assert select_rotation_plan(4, plans) is B


def test_selection_is_count_modulo_plan_count() -> None:
    plans = [A, B, C]
    for n in range(20):
        assert select_rotation_plan(n, plans) is plans[n % 3]


def test_no_plans_selects_nothing() -> None:
    assert select_rotation_plan(5, []) is None


def test_negative_count_is_rejected() -> None:
    with pytest.raises(ValidationError):
        select_rotation_plan(-1, [A])


def test_logged_entry_wins_over_override_and_rotation() -> None:
    entry = Entry(10, False, C, C.id)
    resolved = resolve_day_plan(date(2024, 6, 1), [A, B, C], 0, override_plan_id=B.id, entry=entry)
    assert resolved.source == SOURCE_LOGGED
    assert resolved.plan is C


def test_rest_day_entry_has_no_plan() -> None:
    resolved = resolve_day_plan(date(2024, 6, 1), [A, B], 0, entry=Entry(3, True, None, None))
    assert resolved.source == SOURCE_REST
    assert resolved.plan is None
    assert resolved.to_dict()["activity_id"] == 3


def test_override_beats_rotation() -> None:
    resolved = resolve_day_plan(date(2024, 6, 1), [A, B, C], 0, override_plan_id=C.id)
    assert resolved.source == SOURCE_OVERRIDE
    assert resolved.plan is C


def test_override_to_unknown_plan_falls_back_to_rotation() -> None:
    resolved = resolve_day_plan(date(2024, 6, 1), [A, B], 1, override_plan_id=99)
    assert resolved.source == SOURCE_ROTATION
    assert resolved.plan is B


def test_no_plans_resolves_to_none() -> None:
    resolved = resolve_day_plan(date(2024, 6, 1), [], 0)
    assert resolved.source == SOURCE_NONE
    assert resolved.to_dict()["workout_plan_id"] is None


def test_upcoming_schedule_advances_rotation_per_projected_day() -> None:
    start = date(2024, 6, 1)
    days = upcoming_schedule(start, 4, [A, B, C], 1)
    assert [d.plan.name for d in days] == ["B", "C", "A", "B"]
    assert [d.day.day for d in days] == [1, 2, 3, 4]


def test_upcoming_schedule_skips_logged_days() -> None:
    start = date(2024, 6, 1)
    entries = {start: Entry(1, True, None, None)}
    overrides = {date(2024, 6, 2): C.id}
    days = upcoming_schedule(start, 4, [A, B, C], 0, overrides=overrides, entries=entries)
    assert [d.source for d in days] == [SOURCE_REST, SOURCE_OVERRIDE, SOURCE_ROTATION, SOURCE_ROTATION]
    assert [d.plan.name if d.plan else None for d in days] == [None, "C", "B", "C"]
