from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from gym_app.extensions import db

USERS_TABLE = "users"


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    last_active = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    exercises = db.relationship("Exercise", back_populates="owner", lazy="dynamic", cascade="all, delete-orphan")
    workout_plans = db.relationship("WorkoutPlan", back_populates="owner", lazy="dynamic", cascade="all, delete-orphan")
    activity_logs = db.relationship("ActivityLog", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")
    plan_overrides = db.relationship("PlanOverride", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")
    body_stats = db.relationship("BodyStat", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email}>"
