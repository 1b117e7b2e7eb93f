from marshmallow import EXCLUDE, fields, validate

from gym_app.extensions import ma


class ExerciseSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    description = fields.String(allow_none=True)
    muscle_group = fields.String(allow_none=True, validate=validate.Length(max=50))
    equipment = fields.String(allow_none=True, validate=validate.Length(max=50))
    default_sets = fields.Integer(load_default=3, validate=validate.Range(min=1))
    default_reps = fields.Integer(load_default=10, validate=validate.Range(min=1))
    image_url = fields.String(allow_none=True, validate=validate.Length(max=255))


class ImageUrlSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    image_url = fields.String(required=True, allow_none=True, validate=validate.Length(max=255))
