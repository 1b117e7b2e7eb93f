from flask import Blueprint, request, jsonify
from marshmallow import ValidationError as SchemaError

from gym_app.schemas import MeasurementSchema
from gym_app.services import measurements
from gym_app.services.dates import local_today
from gym_app.utils.decorators import current_user_required

measurements_bp = Blueprint("measurements", __name__)
measurement_schema = MeasurementSchema()


@measurements_bp.route("", methods=["GET"])
@current_user_required
def list_measurements(current_user):
    return jsonify([s.to_dict() for s in measurements.list_measurements(current_user.id)])


@measurements_bp.route("", methods=["POST"])
@current_user_required
def add_measurement(current_user):
    try:
        data = measurement_schema.load(request.get_json(silent=True) or {})
    except SchemaError as err:
        return jsonify({"msg": "Invalid measurement", "errors": err.messages}), 400

    stat = measurements.add_measurement(
        current_user.id,
        data["stat_date"] or local_today(),
        weight=data["weight"],
        body_fat=data["body_fat"],
        muscle_mass=data["muscle_mass"],
    )
    return jsonify({"msg": "Measurement added", "measurement": stat.to_dict()}), 201


@measurements_bp.route("/<int:stat_id>", methods=["DELETE"])
@current_user_required
def delete_measurement(stat_id, current_user):
    measurements.delete_measurement(current_user.id, stat_id)
    return jsonify({"msg": "Measurement deleted"})


@measurements_bp.route("/series", methods=["GET"])
@current_user_required
def series(current_user):
    """Chart data for weight / body fat / muscle mass, oldest first."""
    return jsonify(measurements.measurement_series(measurements.list_measurements(current_user.id)))
