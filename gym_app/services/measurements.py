from flask import current_app
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from gym_app.extensions import db
from gym_app.models import BodyStat

from .errors import NotFoundError, StoreError, ValidationError

MEASUREMENT_FIELDS = ("weight", "body_fat", "muscle_mass")


def list_measurements(user_id):
    return (
        BodyStat.query
        .filter_by(user_id=user_id)
        .order_by(desc(BodyStat.stat_date), desc(BodyStat.id))
        .all()
    )


def add_measurement(user_id, stat_date, weight=None, body_fat=None, muscle_mass=None):
    if weight is None and body_fat is None and muscle_mass is None:
        raise ValidationError("At least one measurement is required")
    stat = BodyStat(
        user_id=user_id,
        stat_date=stat_date,
        weight=weight,
        body_fat=body_fat,
        muscle_mass=muscle_mass,
    )
    db.session.add(stat)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding measurement: {e}")
        raise StoreError("Failed to add measurement", e)
    return stat


def delete_measurement(user_id, stat_id):
    stat = BodyStat.query.filter_by(id=stat_id, user_id=user_id).first()
    if stat is None:
        raise NotFoundError("Measurement not found")
    db.session.delete(stat)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting measurement {stat_id}: {e}")
        raise StoreError("Failed to delete measurement", e)


def measurement_series(stats):
    """Chart data, oldest first, with the change against the previous value."""
    ordered = sorted(stats, key=lambda s: (s.stat_date, s.id or 0))
    series = {"labels": [s.stat_date.isoformat() for s in ordered]}
    for field in MEASUREMENT_FIELDS:
        values = []
        changes = []
        previous = None
        for stat in ordered:
            value = getattr(stat, field)
            values.append(value)
            if value is None or previous is None:
                changes.append(None)
            else:
                changes.append(round(value - previous, 2))
            if value is not None:
                previous = value
        series[field] = values
        series[f"{field}_change"] = changes
    return series
