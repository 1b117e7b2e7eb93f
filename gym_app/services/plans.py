"""Workout plan editing.

Plan entries always carry positions 1..N in display order. Every mutation
renumbers the whole list and writes each entry's position back.
"""

import enum

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from gym_app.extensions import db
from gym_app.models import PlanExercise, WorkoutPlan

from .errors import NotFoundError, StoreError, ValidationError


class MoveDirection(str, enum.Enum):
    UP = "up"
    DOWN = "down"


def _clean_name(name):
    name = (name or "").strip()
    if not name:
        raise ValidationError("Workout name is required")
    if len(name) > 150:
        raise ValidationError("Workout name must be at most 150 characters")
    return name


def _positive(value, label):
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be an integer")
    if value < 1:
        raise ValidationError(f"{label} must be at least 1")
    return value


def _commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error while trying to {action}: {e}")
        raise StoreError(f"Failed to {action}", e)


def renumber_positions(entries):
    """Assign positions 1..N following the list order."""
    for index, entry in enumerate(entries, start=1):
        entry.position = index
    return entries


def sorted_entries(plan):
    return sorted(plan.entries, key=lambda e: (e.position, e.id or 0))


def get_plan(user_id, plan_id):
    plan = WorkoutPlan.query.filter_by(id=plan_id, user_id=user_id).first()
    if plan is None:
        raise NotFoundError("Workout plan not found")
    return plan


def _get_entry(plan, entry_id):
    for entry in plan.entries:
        if entry.id == entry_id:
            return entry
    raise NotFoundError("Exercise is not part of this workout")


def create_plan(user_id, name, description=None, image_url=None):
    plan = WorkoutPlan(
        user_id=user_id,
        name=_clean_name(name),
        description=(description or "").strip() or None,
        image_url=image_url,
    )
    db.session.add(plan)
    _commit("create workout plan")
    return plan


def update_plan(plan, name=None, description=None):
    if name is not None:
        plan.name = _clean_name(name)
    if description is not None:
        plan.description = description.strip() or None
    _commit("update workout plan")
    return plan


def set_plan_image(plan, image_url):
    plan.image_url = image_url
    _commit("update workout image")
    return plan


def delete_plan(plan):
    db.session.delete(plan)
    _commit("delete workout plan")


def add_exercise(plan, exercise, sets=None, reps=None):
    if exercise.user_id != plan.user_id:
        raise NotFoundError("Exercise not found")
    entries = sorted_entries(plan)
    entry = PlanExercise(
        exercise=exercise,
        position=len(entries) + 1,
        sets=_positive(sets if sets is not None else exercise.default_sets or 3, "sets"),
        reps=_positive(reps if reps is not None else exercise.default_reps or 10, "reps"),
    )
    plan.entries.append(entry)
    renumber_positions(entries + [entry])
    _commit("add exercise to workout")
    return entry


def remove_exercise(plan, entry_id):
    entry = _get_entry(plan, entry_id)
    remaining = [e for e in sorted_entries(plan) if e.id != entry.id]
    plan.entries.remove(entry)
    renumber_positions(remaining)
    _commit("remove exercise from workout")
    return plan


def move_exercise(plan, entry_id, direction):
    """Swap an entry with its neighbour. Moving past either end is a no-op."""
    try:
        direction = MoveDirection(direction)
    except ValueError:
        raise ValidationError("direction must be 'up' or 'down'")
    entries = sorted_entries(plan)
    index = next((i for i, e in enumerate(entries) if e.id == entry_id), None)
    if index is None:
        raise NotFoundError("Exercise is not part of this workout")

    target = index - 1 if direction is MoveDirection.UP else index + 1
    if target < 0 or target >= len(entries):
        return plan

    entries[index], entries[target] = entries[target], entries[index]
    renumber_positions(entries)
    _commit("reorder workout exercises")
    return plan


def update_targets(plan, entry_id, sets=None, reps=None):
    entry = _get_entry(plan, entry_id)
    if sets is not None:
        entry.sets = _positive(sets, "sets")
    if reps is not None:
        entry.reps = _positive(reps, "reps")
    _commit("update exercise targets")
    return entry


def normalize_all_positions(plans):
    """Renumber entries of several plans, used after an exercise is deleted."""
    for plan in plans:
        renumber_positions(sorted_entries(plan))
