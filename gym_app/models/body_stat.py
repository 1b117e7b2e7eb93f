from datetime import datetime, date
from gym_app.extensions import db


class BodyStat(db.Model):
    __tablename__ = "body_stats"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    stat_date = db.Column(db.Date, nullable=False, default=date.today, index=True)

    weight = db.Column(db.Float)       # kg
    body_fat = db.Column(db.Float)     # %
    muscle_mass = db.Column(db.Float)  # kg

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", back_populates="body_stats")

    def to_dict(self):
        return {
            "id": self.id,
            "stat_date": self.stat_date.isoformat() if self.stat_date else None,
            "weight": self.weight,
            "body_fat": self.body_fat,
            "muscle_mass": self.muscle_mass,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
