from datetime import datetime
from gym_app.extensions import db


class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)

    # Standardised through services.catalog, free text is kept when nothing matches
    muscle_group = db.Column(db.String(50))
    equipment = db.Column(db.String(50))

    default_sets = db.Column(db.Integer, nullable=False, default=3)
    default_reps = db.Column(db.Integer, nullable=False, default=10)

    image_url = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = db.relationship("User", back_populates="exercises")
    plan_entries = db.relationship(
        "PlanExercise",
        back_populates="exercise",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.CheckConstraint("default_sets >= 1", name="check_exercise_default_sets"),
        db.CheckConstraint("default_reps >= 1", name="check_exercise_default_reps"),
        db.Index("idx_exercises_user_name", "user_id", "name"),
        db.Index("idx_exercises_muscle_group", "muscle_group"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "muscle_group": self.muscle_group,
            "equipment": self.equipment,
            "default_sets": self.default_sets,
            "default_reps": self.default_reps,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Exercise {self.name}>"
