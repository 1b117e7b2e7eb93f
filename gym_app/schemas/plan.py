from marshmallow import EXCLUDE, fields, validate

from gym_app.extensions import ma


class PlanSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True)
    description = fields.String(allow_none=True)
    image_url = fields.String(allow_none=True, validate=validate.Length(max=255))


class PlanExerciseSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    exercise_id = fields.Integer(required=True)
    sets = fields.Integer(allow_none=True, validate=validate.Range(min=1))
    reps = fields.Integer(allow_none=True, validate=validate.Range(min=1))


class TargetsSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    sets = fields.Integer(validate=validate.Range(min=1))
    reps = fields.Integer(validate=validate.Range(min=1))


class MoveSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    direction = fields.String(required=True, validate=validate.OneOf(["up", "down"]))
