from marshmallow import EXCLUDE, fields, validate

from gym_app.extensions import ma


class MeasurementSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    stat_date = fields.Date(load_default=None)
    weight = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    body_fat = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0, max=100))
    muscle_mass = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
