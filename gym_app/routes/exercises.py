from flask import Blueprint, request, jsonify
from marshmallow import ValidationError as SchemaError

from gym_app.schemas import ExerciseSchema, ImageUrlSchema
from gym_app.services import catalog
from gym_app.utils.decorators import current_user_required
from gym_app.utils.uploads import save_image

exercises_bp = Blueprint("exercises", __name__)
exercise_schema = ExerciseSchema()
image_url_schema = ImageUrlSchema()


@exercises_bp.route("", methods=["GET"])
@current_user_required
def list_exercises(current_user):
    exercises = catalog.search_exercises(
        current_user.id,
        q=request.args.get("q"),
        muscle_group=request.args.get("muscle_group"),
    )
    return jsonify([e.to_dict() for e in exercises])


@exercises_bp.route("", methods=["POST"])
@current_user_required
def create_exercise(current_user):
    try:
        data = exercise_schema.load(request.get_json(silent=True) or {})
    except SchemaError as err:
        return jsonify({"msg": "Invalid exercise", "errors": err.messages}), 400

    exercise = catalog.create_exercise(current_user.id, data)
    return jsonify({"msg": "Exercise created", "exercise": exercise.to_dict()}), 201


@exercises_bp.route("/<int:exercise_id>", methods=["GET"])
@current_user_required
def get_exercise(exercise_id, current_user):
    return jsonify(catalog.get_exercise(current_user.id, exercise_id).to_dict())


@exercises_bp.route("/<int:exercise_id>", methods=["PUT"])
@current_user_required
def update_exercise(exercise_id, current_user):
    exercise = catalog.get_exercise(current_user.id, exercise_id)
    try:
        data = exercise_schema.load(request.get_json(silent=True) or {}, partial=True)
    except SchemaError as err:
        return jsonify({"msg": "Invalid exercise", "errors": err.messages}), 400

    catalog.update_exercise(exercise, data)
    return jsonify({"msg": "Exercise updated", "exercise": exercise.to_dict()})


@exercises_bp.route("/<int:exercise_id>", methods=["DELETE"])
@current_user_required
def delete_exercise(exercise_id, current_user):
    catalog.delete_exercise(catalog.get_exercise(current_user.id, exercise_id))
    return jsonify({"msg": "Exercise deleted"})


@exercises_bp.route("/<int:exercise_id>/image", methods=["POST"])
@current_user_required
def set_exercise_image(exercise_id, current_user):
    """Multipart upload under `image`, or JSON {"image_url": ...} for an external picture."""
    exercise = catalog.get_exercise(current_user.id, exercise_id)
    if "image" in request.files:
        image_url = save_image(request.files["image"], f"exercise_{exercise.id}")
    else:
        try:
            image_url = image_url_schema.load(request.get_json(silent=True) or {})["image_url"]
        except SchemaError as err:
            return jsonify({"msg": "Invalid image", "errors": err.messages}), 400

    catalog.update_exercise(exercise, {"image_url": image_url})
    return jsonify({"msg": "Image updated", "image_url": exercise.image_url})
