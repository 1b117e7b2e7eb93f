from datetime import datetime
from gym_app.extensions import db


class PlanOverride(db.Model):
    __tablename__ = "plan_overrides"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    override_date = db.Column(db.Date, nullable=False)
    workout_plan_id = db.Column(db.Integer, db.ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", back_populates="plan_overrides")
    workout_plan = db.relationship(
        "WorkoutPlan",
        backref=db.backref("overrides", cascade="all, delete-orphan")
    )

    __table_args__ = (
        db.UniqueConstraint("user_id", "override_date", name="uq_plan_overrides_user_date"),
    )

    def to_dict(self):
        return {
            "date": self.override_date.isoformat(),
            "workout_plan_id": self.workout_plan_id,
        }
