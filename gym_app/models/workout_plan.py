from datetime import datetime
from gym_app.extensions import db


class WorkoutPlan(db.Model):
    __tablename__ = "workout_plans"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = db.relationship("User", back_populates="workout_plans")
    # Ties on position fall back to insertion order
    entries = db.relationship(
        "PlanExercise",
        back_populates="plan",
        order_by="(PlanExercise.position, PlanExercise.id)",
        cascade="all, delete-orphan"
    )
    activity_logs = db.relationship("ActivityLog", back_populates="workout_plan")

    def to_dict(self, with_exercises=True):
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_exercises:
            data["exercises"] = [entry.to_dict() for entry in self.entries]
        return data

    def __repr__(self):
        return f"<WorkoutPlan {self.name}>"
