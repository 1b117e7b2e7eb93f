from gym_app.extensions import db


class PlanExercise(db.Model):
    __tablename__ = "workout_plan_exercises"

    id = db.Column(db.Integer, primary_key=True)
    workout_plan_id = db.Column(db.Integer, db.ForeignKey("workout_plans.id"), nullable=False)
    exercise_id = db.Column(db.Integer, db.ForeignKey("exercises.id"), nullable=False)

    position = db.Column(db.Integer, nullable=False)
    sets = db.Column(db.Integer, nullable=False, default=3)
    reps = db.Column(db.Integer, nullable=False, default=10)

    plan = db.relationship("WorkoutPlan", back_populates="entries")
    exercise = db.relationship("Exercise", back_populates="plan_entries")

    __table_args__ = (
        db.CheckConstraint("sets >= 1", name="check_plan_exercise_sets"),
        db.CheckConstraint("reps >= 1", name="check_plan_exercise_reps"),
        db.Index("idx_plan_exercises_plan_position", "workout_plan_id", "position"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "workout_plan_id": self.workout_plan_id,
            "exercise_id": self.exercise_id,
            "position": self.position,
            "sets": self.sets,
            "reps": self.reps,
            "exercise": self.exercise.to_dict() if self.exercise else None
        }

    def __repr__(self):
        return f"<PlanExercise {self.workout_plan_id}-{self.exercise_id}@{self.position}>"
