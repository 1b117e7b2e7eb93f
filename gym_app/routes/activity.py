from datetime import timedelta

from flask import Blueprint, request, jsonify
from marshmallow import ValidationError as SchemaError

from gym_app.models import ACTIVITY_WORKOUT
from gym_app.schemas import ActivitySchema, OverrideSchema
from gym_app.services import activity_log, plans, schedule
from gym_app.services.dates import local_today, parse_day
from gym_app.services.errors import NotFoundError, ValidationError
from gym_app.services.records import personal_records
from gym_app.services.streaks import streak_summary
from gym_app.sockets import notify_activity
from gym_app.utils.decorators import current_user_required

activity_bp = Blueprint("activity", __name__)
activity_schema = ActivitySchema()
override_schema = OverrideSchema()

MAX_SCHEDULE_DAYS = 31


# =========================================================
# Today / a given day
# =========================================================

@activity_bp.route("/today", methods=["GET"])
@current_user_required
def today(current_user):
    """What is due on `date` (default today) and the form to log it."""
    day = parse_day(request.args.get("date"))
    resolved = schedule.plan_for_day(current_user.id, day)

    data = resolved.to_dict()
    data["plan"] = resolved.plan.to_dict() if resolved.plan is not None else None
    if resolved.entry is not None:
        data["logged"] = True
        data["activity"] = activity_log.entry_to_dict(resolved.entry)
        data["form"] = data["activity"]["exercises"]
    else:
        data["logged"] = False
        data["activity"] = None
        data["form"] = activity_log.log_form(resolved.plan)
    return jsonify(data)


# =========================================================
# Activity log
# =========================================================

@activity_bp.route("/activity", methods=["POST"])
@current_user_required
def log_activity(current_user):
    try:
        data = activity_schema.load(request.get_json(silent=True) or {})
    except SchemaError as err:
        return jsonify({"msg": "Invalid activity", "errors": err.messages}), 400

    day = data["date"] or local_today()
    plan = None
    if data["kind"] == ACTIVITY_WORKOUT:
        plan = plans.get_plan(current_user.id, data["workout_plan_id"])

    entry = activity_log.log_activity(
        current_user.id,
        day,
        data["kind"],
        plan=plan,
        exercise_inputs=data["exercises"],
        notes=data["notes"] or "",
    )
    result = activity_log.entry_to_dict(entry)
    notify_activity(current_user.id, result)
    return jsonify({"msg": "Activity logged", "activity": result}), 200


@activity_bp.route("/activity", methods=["GET"])
@current_user_required
def history(current_user):
    limit = request.args.get("limit", type=int)
    if limit is not None and limit < 1:
        raise ValidationError("limit must be at least 1")
    entries = activity_log.list_entries(current_user.id, limit=limit)
    return jsonify([activity_log.entry_to_dict(e) for e in entries])


@activity_bp.route("/activity/<day>", methods=["GET"])
@current_user_required
def activity_for_day(day, current_user):
    entry = activity_log.entry_for_day(current_user.id, parse_day(day))
    if entry is None:
        raise NotFoundError("Nothing logged for this date")
    return jsonify(activity_log.entry_to_dict(entry))


# =========================================================
# Read models
# =========================================================

@activity_bp.route("/streak", methods=["GET"])
@current_user_required
def streak(current_user):
    as_of = parse_day(request.args.get("as_of"))
    entries = activity_log.list_entries(current_user.id)
    return jsonify(streak_summary(entries, as_of))


@activity_bp.route("/schedule", methods=["GET"])
@current_user_required
def upcoming(current_user):
    start = parse_day(request.args.get("start"))
    days = min(max(request.args.get("days", 7, type=int), 1), MAX_SCHEDULE_DAYS)
    days_out = schedule.schedule_for(current_user.id, start, days)
    return jsonify({
        "start": start.isoformat(),
        "end": (start + timedelta(days=days - 1)).isoformat(),
        "days": [d.to_dict() for d in days_out],
    })


@activity_bp.route("/records", methods=["GET"])
@current_user_required
def records(current_user):
    logged = []
    for entry in activity_log.list_entries(current_user.id):
        if entry.is_rest_day:
            continue
        _, payload = activity_log.entry_payload(entry)
        logged.append((entry.workout_date, payload))
    return jsonify(personal_records(logged))


# =========================================================
# Overrides
# =========================================================

@activity_bp.route("/overrides/<day>", methods=["PUT"])
@current_user_required
def set_override(day, current_user):
    day = parse_day(day)
    try:
        data = override_schema.load(request.get_json(silent=True) or {})
    except SchemaError as err:
        return jsonify({"msg": "Invalid override", "errors": err.messages}), 400

    plan = plans.get_plan(current_user.id, data["workout_plan_id"])
    override = schedule.set_override(current_user.id, day, plan)
    return jsonify({"msg": "Override saved", "override": override.to_dict()})


@activity_bp.route("/overrides/<day>", methods=["DELETE"])
@current_user_required
def clear_override(day, current_user):
    if not schedule.clear_override(current_user.id, parse_day(day)):
        raise NotFoundError("No override for this date")
    return jsonify({"msg": "Override removed"})
