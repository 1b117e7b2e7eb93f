from .user import RegisterSchema, LoginSchema
from .exercise import ExerciseSchema, ImageUrlSchema
from .plan import PlanSchema, PlanExerciseSchema, TargetsSchema, MoveSchema
from .activity import ActivitySchema, ExerciseInputSchema, SetSchema, OverrideSchema
from .measurement import MeasurementSchema

__all__ = [
    "RegisterSchema", "LoginSchema",
    "ExerciseSchema", "ImageUrlSchema",
    "PlanSchema", "PlanExerciseSchema", "TargetsSchema", "MoveSchema",
    "ActivitySchema", "ExerciseInputSchema", "SetSchema", "OverrideSchema",
    "MeasurementSchema",
]
