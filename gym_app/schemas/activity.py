from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError

from gym_app.extensions import ma
from gym_app.models import ACTIVITY_KINDS, ACTIVITY_REST, ACTIVITY_WORKOUT


class SetSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    weight = fields.Float(load_default=0.0, validate=validate.Range(min=0))
    reps = fields.Integer(load_default=0, validate=validate.Range(min=0))


class ExerciseInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    plan_exercise_id = fields.Integer(allow_none=True)
    exercise_id = fields.Integer(allow_none=True)
    sets = fields.List(fields.Nested(SetSchema), load_default=list)
    notes = fields.String(load_default="", allow_none=True)

    @validates_schema
    def validate_reference(self, data, **kwargs):
        if data.get("plan_exercise_id") is None and data.get("exercise_id") is None:
            raise ValidationError("plan_exercise_id or exercise_id is required")


class ActivitySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Date(load_default=None)
    kind = fields.String(load_default=ACTIVITY_WORKOUT, validate=validate.OneOf(ACTIVITY_KINDS))
    workout_plan_id = fields.Integer(allow_none=True, load_default=None)
    exercises = fields.List(fields.Nested(ExerciseInputSchema), load_default=list)
    notes = fields.String(load_default="", allow_none=True)

    @validates_schema
    def validate_plan(self, data, **kwargs):
        if data.get("kind") == ACTIVITY_WORKOUT and data.get("workout_plan_id") is None:
            raise ValidationError("workout_plan_id is required for a workout", "workout_plan_id")
        if data.get("kind") == ACTIVITY_REST and data.get("workout_plan_id") is not None:
            raise ValidationError("A rest day cannot reference a workout plan", "workout_plan_id")


class OverrideSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    workout_plan_id = fields.Integer(required=True)
