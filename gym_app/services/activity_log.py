"""Recording one activity (workout or rest day) per calendar day."""

from flask import current_app
from sqlalchemy import desc, func, insert, inspect, select, update
from sqlalchemy.exc import (
    IntegrityError,
    NoSuchTableError,
    OperationalError,
    ProgrammingError,
    SQLAlchemyError,
)

from gym_app.extensions import db
from gym_app.models import (
    ACTIVITY_KINDS,
    ACTIVITY_REST,
    ACTIVITY_WORKOUT,
    ActivityLog,
    Exercise,
)

from .dates import day_bounds, to_date
from .errors import StoreError, ValidationError
from .payload import embed_payload, normalize_sets, split_notes, zero_filled_sets

DETAILS_COLUMN = "exercise_details"


# ---------------------------------------------------------------------------
# Storage capability
# ---------------------------------------------------------------------------

def _state():
    return current_app.extensions.setdefault("gym_app", {})


def details_column_enabled():
    """Whether activity_logs.exercise_details can be written.

    Taken from ACTIVITY_DETAILS_COLUMN, or read from the live schema once and
    cached for the lifetime of the application.
    """
    state = _state()
    if "details_column" in state:
        return state["details_column"]

    configured = current_app.config.get("ACTIVITY_DETAILS_COLUMN")
    if configured is not None:
        state["details_column"] = bool(configured)
        return state["details_column"]

    try:
        columns = inspect(db.engine).get_columns(ActivityLog.__tablename__)
    except NoSuchTableError:
        # Schema not created yet, decide on the next call
        return False
    state["details_column"] = any(c["name"] == DETAILS_COLUMN for c in columns)
    current_app.logger.info(f"activity_logs.{DETAILS_COLUMN} available: {state['details_column']}")
    return state["details_column"]


def set_details_column_enabled(enabled):
    _state()["details_column"] = bool(enabled)


def _missing_details_column(exc):
    return DETAILS_COLUMN in str(getattr(exc, "orig", None) or exc)


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------

def _as_int(value, label):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be an integer")


def _exercise_result(exercise_id, name, sets, notes=""):
    return {
        "exercise_id": exercise_id,
        "exercise_name": name,
        "sets": sets,
        "notes": notes,
    }


def build_payload(plan, exercise_inputs=None):
    """Normalise per-exercise inputs against the plan.

    Inputs are matched to plan entries by plan_exercise_id, else by
    exercise_id. Plan entries without input are zero-filled from their
    targets. Inputs for exercises outside the plan are appended in the order
    given.
    """
    by_entry = {}
    by_exercise = {}
    for item in exercise_inputs or []:
        if not isinstance(item, dict):
            raise ValidationError("Each exercise entry must be an object")
        if item.get("plan_exercise_id") is not None:
            by_entry[_as_int(item["plan_exercise_id"], "plan_exercise_id")] = item
        else:
            exercise_id = _as_int(item.get("exercise_id"), "exercise_id")
            by_exercise.setdefault(exercise_id, []).append(item)

    payload = []
    for entry in plan.entries:
        item = by_entry.pop(entry.id, None)
        if item is None and by_exercise.get(entry.exercise_id):
            item = by_exercise[entry.exercise_id].pop(0)

        exercise = entry.exercise
        if item is None:
            sets = zero_filled_sets(
                entry.sets or exercise.default_sets,
                entry.reps or exercise.default_reps,
            )
            payload.append(_exercise_result(exercise.id, exercise.name, sets))
        else:
            payload.append(_exercise_result(
                exercise.id,
                exercise.name,
                normalize_sets(item.get("sets")),
                str(item.get("notes") or ""),
            ))

    if by_entry:
        raise ValidationError(f"Unknown plan exercise ids: {sorted(by_entry)}")

    for exercise_id, items in by_exercise.items():
        if not items:
            continue
        exercise = Exercise.query.filter_by(id=exercise_id, user_id=plan.user_id).first()
        if exercise is None:
            raise ValidationError(f"Unknown exercise id: {exercise_id}")
        for item in items:
            payload.append(_exercise_result(
                exercise.id,
                exercise.name,
                normalize_sets(item.get("sets")),
                str(item.get("notes") or ""),
            ))
    return payload


def log_form(plan):
    """Blank log for a plan: every entry at its target sets and reps, weight 0."""
    if plan is None:
        return []
    return build_payload(plan)


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------

def _existing_id(user_id, day):
    start, end = day_bounds(day)
    return db.session.execute(
        select(ActivityLog.id)
        .where(
            ActivityLog.user_id == user_id,
            ActivityLog.workout_date >= start,
            ActivityLog.workout_date < end,
        )
        .order_by(ActivityLog.id)
        .limit(1)
    ).scalar()


def _row_values(user_id, day, kind, plan, notes, payload, use_details):
    values = {
        "user_id": user_id,
        "workout_date": day,
        "is_rest_day": kind == ACTIVITY_REST,
        "workout_plan_id": plan.id if plan is not None else None,
    }
    if use_details:
        values["notes"] = notes
        values[DETAILS_COLUMN] = payload
    else:
        # Always embedded, even when empty, so the last delimiter is the one we wrote
        values["notes"] = embed_payload(notes, payload)
    return values


def _save(user_id, day, values):
    table = ActivityLog.__table__
    update_values = {k: v for k, v in values.items() if k not in ("user_id", "workout_date")}
    try:
        entry_id = _existing_id(user_id, day)
        if entry_id is None:
            try:
                result = db.session.execute(insert(table).values(**values))
                entry_id = result.inserted_primary_key[0]
                db.session.commit()
                return entry_id
            except IntegrityError:
                # Another request logged this day between the check and the insert
                db.session.rollback()
                entry_id = _existing_id(user_id, day)
                if entry_id is None:
                    raise
        db.session.execute(update(table).where(table.c.id == entry_id).values(**update_values))
        db.session.commit()
        return entry_id
    except (OperationalError, ProgrammingError):
        db.session.rollback()
        raise
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving activity for {day}: {e}")
        raise StoreError(f"Failed to save activity for {day.isoformat()}", e)


def log_activity(user_id, day, kind, plan=None, exercise_inputs=None, notes=""):
    """Create or update the single activity entry for `day`.

    Returns the stored ActivityLog. Calling it again for the same day updates
    the existing row in place.
    """
    day = to_date(day)
    notes = notes or ""
    if kind not in ACTIVITY_KINDS:
        raise ValidationError(f"kind must be one of {', '.join(ACTIVITY_KINDS)}")

    if kind == ACTIVITY_WORKOUT:
        if plan is None:
            raise ValidationError("A workout must reference a workout plan")
        if plan.user_id != user_id:
            raise ValidationError("Workout plan not found")
        payload = build_payload(plan, exercise_inputs)
    else:
        if plan is not None:
            raise ValidationError("A rest day cannot reference a workout plan")
        payload = []

    use_details = details_column_enabled()
    try:
        entry_id = _save(user_id, day, _row_values(user_id, day, kind, plan, notes, payload, use_details))
    except (OperationalError, ProgrammingError) as e:
        if not (use_details and _missing_details_column(e)):
            current_app.logger.error(f"Error saving activity for {day}: {e}")
            raise StoreError(f"Failed to save activity for {day.isoformat()}", e)
        current_app.logger.warning(
            f"activity_logs.{DETAILS_COLUMN} rejected by the database, storing exercise data in notes"
        )
        set_details_column_enabled(False)
        try:
            entry_id = _save(user_id, day, _row_values(user_id, day, kind, plan, notes, payload, False))
        except (OperationalError, ProgrammingError) as retry_error:
            current_app.logger.error(f"Fallback save failed for {day}: {retry_error}")
            raise StoreError(f"Failed to save activity for {day.isoformat()}", retry_error)

    current_app.logger.info(f"Logged {kind} for user {user_id} on {day.isoformat()}")
    return db.session.get(ActivityLog, entry_id, populate_existing=True)


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

def entry_for_day(user_id, day):
    start, end = day_bounds(day)
    return (
        ActivityLog.query
        .filter(
            ActivityLog.user_id == user_id,
            ActivityLog.workout_date >= start,
            ActivityLog.workout_date < end,
        )
        .order_by(ActivityLog.id)
        .first()
    )


def entries_between(user_id, start, end):
    """Entries with start <= date < end, keyed by date."""
    rows = (
        ActivityLog.query
        .filter(
            ActivityLog.user_id == user_id,
            ActivityLog.workout_date >= start,
            ActivityLog.workout_date < end,
        )
        .order_by(ActivityLog.workout_date, ActivityLog.id)
        .all()
    )
    entries = {}
    for row in rows:
        entries.setdefault(row.workout_date, row)
    return entries


def list_entries(user_id, limit=None):
    query = ActivityLog.query.filter_by(user_id=user_id).order_by(
        desc(ActivityLog.workout_date), desc(ActivityLog.id)
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def count_logged_sessions(user_id):
    query = db.session.query(func.count(ActivityLog.id)).filter(ActivityLog.user_id == user_id)
    if not current_app.config.get("ROTATION_COUNTS_REST_DAYS"):
        query = query.filter(ActivityLog.is_rest_day.is_(False))
    return query.scalar() or 0


def entry_payload(entry):
    """(human notes, exercise payload) from whichever representation was stored.

    Rows with exercise_details keep their notes verbatim. Rows without it
    were written in the notes-embedded form.
    """
    if details_column_enabled() and entry.exercise_details is not None:
        return entry.notes or "", entry.exercise_details
    human, embedded = split_notes(entry.notes)
    return human, embedded or []


def entry_to_dict(entry):
    notes, exercises = entry_payload(entry)
    return {
        "id": entry.id,
        "date": entry.workout_date.isoformat(),
        "kind": entry.kind,
        "is_rest_day": entry.is_rest_day,
        "workout_plan_id": entry.workout_plan_id,
        "workout_plan_name": entry.workout_plan.name if entry.workout_plan else None,
        "notes": notes,
        "exercises": exercises,
        "logged_at": entry.logged_at.isoformat() if entry.logged_at else None,
        "updated_at": entry.updated_at.isoformat() if entry.updated_at else None,
    }
