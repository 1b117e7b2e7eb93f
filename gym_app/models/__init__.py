from .user import User
from .exercise import Exercise
from .workout_plan import WorkoutPlan
from .plan_exercise import PlanExercise
from .activity_log import ActivityLog, ACTIVITY_WORKOUT, ACTIVITY_REST, ACTIVITY_KINDS
from .plan_override import PlanOverride
from .body_stat import BodyStat

__all__ = [
    "User", "Exercise", "WorkoutPlan", "PlanExercise",
    "ActivityLog", "ACTIVITY_WORKOUT", "ACTIVITY_REST", "ACTIVITY_KINDS",
    "PlanOverride", "BodyStat",
]
