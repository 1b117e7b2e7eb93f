from datetime import timedelta

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from gym_app.extensions import db
from gym_app.models import PlanOverride, WorkoutPlan

from .activity_log import count_logged_sessions, entries_between, entry_for_day
from .errors import StoreError
from .rotation import resolve_day_plan, upcoming_schedule


def ordered_plans(user_id):
    """Plans in rotation order: oldest first."""
    return (
        WorkoutPlan.query
        .filter_by(user_id=user_id)
        .order_by(WorkoutPlan.created_at, WorkoutPlan.id)
        .all()
    )


def override_for_day(user_id, day):
    override = PlanOverride.query.filter_by(user_id=user_id, override_date=day).first()
    return override.workout_plan_id if override else None


def overrides_between(user_id, start, end):
    rows = PlanOverride.query.filter(
        PlanOverride.user_id == user_id,
        PlanOverride.override_date >= start,
        PlanOverride.override_date < end,
    ).all()
    return {row.override_date: row.workout_plan_id for row in rows}


def set_override(user_id, day, plan):
    override = PlanOverride.query.filter_by(user_id=user_id, override_date=day).first()
    try:
        if override is None:
            override = PlanOverride(user_id=user_id, override_date=day, workout_plan_id=plan.id)
            db.session.add(override)
        else:
            override.workout_plan_id = plan.id
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving override for {day}: {e}")
        raise StoreError(f"Failed to save override for {day.isoformat()}", e)
    return override


def clear_override(user_id, day):
    try:
        deleted = PlanOverride.query.filter_by(user_id=user_id, override_date=day).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error clearing override for {day}: {e}")
        raise StoreError(f"Failed to clear override for {day.isoformat()}", e)
    return deleted > 0


def plan_for_day(user_id, day):
    """Resolve what `day` looks like for the user (see rotation.resolve_day_plan)."""
    return resolve_day_plan(
        day,
        ordered_plans(user_id),
        count_logged_sessions(user_id),
        override_plan_id=override_for_day(user_id, day),
        entry=entry_for_day(user_id, day),
    )


def schedule_for(user_id, start, days):
    end = start + timedelta(days=days)
    return upcoming_schedule(
        start,
        days,
        ordered_plans(user_id),
        count_logged_sessions(user_id),
        overrides=overrides_between(user_id, start, end),
        entries=entries_between(user_id, start, end),
    )
