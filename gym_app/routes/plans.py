from flask import Blueprint, request, jsonify
from marshmallow import ValidationError as SchemaError

from gym_app.schemas import ImageUrlSchema, MoveSchema, PlanExerciseSchema, PlanSchema, TargetsSchema
from gym_app.services import catalog, plans
from gym_app.services.schedule import ordered_plans
from gym_app.utils.decorators import current_user_required
from gym_app.utils.uploads import save_image

plans_bp = Blueprint("plans", __name__)
plan_schema = PlanSchema()
plan_exercise_schema = PlanExerciseSchema()
targets_schema = TargetsSchema()
move_schema = MoveSchema()
image_url_schema = ImageUrlSchema()


def _load(schema, **kwargs):
    return schema.load(request.get_json(silent=True) or {}, **kwargs)


# =========================================================
# Plans
# =========================================================

@plans_bp.route("", methods=["GET"])
@current_user_required
def list_plans(current_user):
    return jsonify([p.to_dict() for p in ordered_plans(current_user.id)])


@plans_bp.route("", methods=["POST"])
@current_user_required
def create_plan(current_user):
    try:
        data = _load(plan_schema)
    except SchemaError as err:
        return jsonify({"msg": "Invalid workout", "errors": err.messages}), 400

    plan = plans.create_plan(
        current_user.id,
        data["name"],
        description=data.get("description"),
        image_url=data.get("image_url"),
    )
    return jsonify({"msg": "Workout created", "plan": plan.to_dict()}), 201


@plans_bp.route("/<int:plan_id>", methods=["GET"])
@current_user_required
def get_plan(plan_id, current_user):
    return jsonify(plans.get_plan(current_user.id, plan_id).to_dict())


@plans_bp.route("/<int:plan_id>", methods=["PUT"])
@current_user_required
def update_plan(plan_id, current_user):
    plan = plans.get_plan(current_user.id, plan_id)
    try:
        data = _load(plan_schema, partial=True)
    except SchemaError as err:
        return jsonify({"msg": "Invalid workout", "errors": err.messages}), 400

    plans.update_plan(plan, name=data.get("name"), description=data.get("description"))
    return jsonify({"msg": "Workout updated", "plan": plan.to_dict()})


@plans_bp.route("/<int:plan_id>", methods=["DELETE"])
@current_user_required
def delete_plan(plan_id, current_user):
    plans.delete_plan(plans.get_plan(current_user.id, plan_id))
    return jsonify({"msg": "Workout deleted"})


@plans_bp.route("/<int:plan_id>/image", methods=["POST"])
@current_user_required
def set_plan_image(plan_id, current_user):
    plan = plans.get_plan(current_user.id, plan_id)
    if "image" in request.files:
        image_url = save_image(request.files["image"], f"workout_{plan.id}")
    else:
        try:
            image_url = _load(image_url_schema)["image_url"]
        except SchemaError as err:
            return jsonify({"msg": "Invalid image", "errors": err.messages}), 400

    plans.set_plan_image(plan, image_url)
    return jsonify({"msg": "Image updated", "image_url": plan.image_url})


# =========================================================
# Plan exercises
# =========================================================

@plans_bp.route("/<int:plan_id>/exercises", methods=["POST"])
@current_user_required
def add_plan_exercise(plan_id, current_user):
    plan = plans.get_plan(current_user.id, plan_id)
    try:
        data = _load(plan_exercise_schema)
    except SchemaError as err:
        return jsonify({"msg": "Invalid exercise", "errors": err.messages}), 400

    exercise = catalog.get_exercise(current_user.id, data["exercise_id"])
    entry = plans.add_exercise(plan, exercise, sets=data.get("sets"), reps=data.get("reps"))
    return jsonify({"msg": "Exercise added", "entry": entry.to_dict(), "plan": plan.to_dict()}), 201


@plans_bp.route("/<int:plan_id>/exercises/<int:entry_id>", methods=["PUT"])
@current_user_required
def update_plan_exercise(plan_id, entry_id, current_user):
    plan = plans.get_plan(current_user.id, plan_id)
    try:
        data = _load(targets_schema)
    except SchemaError as err:
        return jsonify({"msg": "Invalid sets/reps", "errors": err.messages}), 400

    entry = plans.update_targets(plan, entry_id, sets=data.get("sets"), reps=data.get("reps"))
    return jsonify({"msg": "Exercise updated", "entry": entry.to_dict()})


@plans_bp.route("/<int:plan_id>/exercises/<int:entry_id>", methods=["DELETE"])
@current_user_required
def remove_plan_exercise(plan_id, entry_id, current_user):
    plan = plans.remove_exercise(plans.get_plan(current_user.id, plan_id), entry_id)
    return jsonify({"msg": "Exercise removed", "plan": plan.to_dict()})


@plans_bp.route("/<int:plan_id>/exercises/<int:entry_id>/move", methods=["POST"])
@current_user_required
def move_plan_exercise(plan_id, entry_id, current_user):
    plan = plans.get_plan(current_user.id, plan_id)
    try:
        data = _load(move_schema)
    except SchemaError as err:
        return jsonify({"msg": "Invalid direction", "errors": err.messages}), 400

    plans.move_exercise(plan, entry_id, data["direction"])
    return jsonify({"msg": "Exercise moved", "plan": plan.to_dict()})
