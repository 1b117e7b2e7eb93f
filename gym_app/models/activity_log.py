from datetime import datetime, date
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import deferred
from gym_app.extensions import db

ACTIVITY_WORKOUT = "workout"
ACTIVITY_REST = "rest"
ACTIVITY_KINDS = (ACTIVITY_WORKOUT, ACTIVITY_REST)


class ActivityLog(db.Model):
    """One row per user and calendar day: a performed workout or a rest day."""

    __tablename__ = "activity_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    workout_date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    is_rest_day = db.Column(db.Boolean, nullable=False, default=False)
    workout_plan_id = db.Column(db.Integer, db.ForeignKey("workout_plans.id", ondelete="SET NULL"), nullable=True)
    notes = db.Column(db.Text)

    # Added by a later migration. Deferred so reads never touch it on
    # databases that predate it.
    exercise_details = deferred(db.Column(
        db.JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql"),
        nullable=True
    ))

    logged_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="activity_logs")
    workout_plan = db.relationship("WorkoutPlan", back_populates="activity_logs")

    __table_args__ = (
        db.UniqueConstraint("user_id", "workout_date", name="uq_activity_logs_user_date"),
    )

    @property
    def kind(self):
        return ACTIVITY_REST if self.is_rest_day else ACTIVITY_WORKOUT

    def __repr__(self):
        return f"<ActivityLog {self.workout_date} {self.kind}>"
