"""Which plan is due on a given day.

The rotation keeps no state of its own: the number of sessions already
logged is the position in the cycle.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Optional

from .errors import ValidationError

SOURCE_LOGGED = "logged"
SOURCE_REST = "rest"
SOURCE_OVERRIDE = "override"
SOURCE_ROTATION = "rotation"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class DayPlan:
    day: date
    source: str
    plan: Optional[Any] = None
    entry: Optional[Any] = None

    def to_dict(self):
        return {
            "date": self.day.isoformat(),
            "source": self.source,
            "workout_plan_id": self.plan.id if self.plan is not None else None,
            "workout_plan_name": self.plan.name if self.plan is not None else None,
            "activity_id": self.entry.id if self.entry is not None else None,
        }


def select_rotation_plan(logged_count: int, plans: list):
    if logged_count < 0:
        raise ValidationError("logged_count must not be negative")
    if not plans:
        return None
    return plans[logged_count % len(plans)]


def _find_plan(plans, plan_id):
    for plan in plans:
        if plan.id == plan_id:
            return plan
    return None


def resolve_day_plan(day, plans, logged_count, override_plan_id=None, entry=None) -> DayPlan:
    """Existing log for the day wins, then a per-date override, then the rotation."""
    if entry is not None:
        if entry.is_rest_day:
            return DayPlan(day, SOURCE_REST, None, entry)
        plan = entry.workout_plan or _find_plan(plans, entry.workout_plan_id)
        return DayPlan(day, SOURCE_LOGGED, plan, entry)

    if override_plan_id is not None:
        plan = _find_plan(plans, override_plan_id)
        # An override pointing at a plan that no longer exists is ignored
        if plan is not None:
            return DayPlan(day, SOURCE_OVERRIDE, plan)

    plan = select_rotation_plan(logged_count, plans)
    if plan is None:
        return DayPlan(day, SOURCE_NONE)
    return DayPlan(day, SOURCE_ROTATION, plan)


def upcoming_schedule(start, days, plans, logged_count, overrides=None, entries=None):
    """Project the rotation over `days` calendar days starting at `start`.

    overrides maps date -> plan id, entries maps date -> ActivityLog. A
    projected workout day takes the next rotation slot; days that are already
    logged were counted in logged_count and do not.
    """
    overrides = overrides or {}
    entries = entries or {}
    schedule = []
    offset = 0
    for i in range(max(0, days)):
        day = start + timedelta(days=i)
        resolved = resolve_day_plan(
            day,
            plans,
            logged_count + offset,
            override_plan_id=overrides.get(day),
            entry=entries.get(day),
        )
        if resolved.source in (SOURCE_OVERRIDE, SOURCE_ROTATION):
            offset += 1
        schedule.append(resolved)
    return schedule
