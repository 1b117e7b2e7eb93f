"""Exercise catalogue: standard vocabularies and exercise CRUD."""

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from gym_app.extensions import db
from gym_app.models import Exercise

from .errors import NotFoundError, StoreError, ValidationError
from .plans import normalize_all_positions

MUSCLE_GROUPS = {
    "Chest": "Pectoralis major and minor muscles in the chest",
    "Back": "Latissimus dorsi, rhomboids, and trapezius muscles",
    "Shoulders": "Deltoid muscles (anterior, lateral, and posterior)",
    "Biceps": "Biceps brachii muscles in the front of the upper arms",
    "Triceps": "Triceps brachii muscles in the back of the upper arms",
    "Forearms": "Muscles in the lower arm including brachioradialis",
    "Abs": "Rectus abdominis, obliques, and transverse abdominis",
    "Quads": "Quadriceps muscles in the front of the thighs",
    "Hamstrings": "Hamstring muscles in the back of the thighs",
    "Glutes": "Gluteus maximus, medius, and minimus muscles",
    "Calves": "Gastrocnemius and soleus muscles in the lower legs",
    "Full Body": "Exercises that work multiple major muscle groups",
    "Core": "Abdominal, oblique, and lower back muscles",
    "Lower Body": "All muscles in the legs and glutes",
    "Upper Body": "All muscles in the chest, back, shoulders, and arms",
}

EQUIPMENT_TYPES = {
    "Barbell": "Standard straight bar used with weight plates",
    "Dumbbell": "Hand-held weights used individually or in pairs",
    "Kettlebell": "Cast iron or steel ball with a handle",
    "Machine": "Fixed resistance training equipment",
    "Cable": "Pulley system with adjustable resistance",
    "Bodyweight": "Exercises using only your body weight as resistance",
    "Resistance Band": "Elastic bands providing variable resistance",
    "Smith Machine": "Barbell fixed within steel rails",
    "TRX/Suspension": "Suspension training system using body weight",
    "Medicine Ball": "Weighted ball used for functional training",
    "Bench": "Flat, incline, or decline bench for support",
    "Pull-up Bar": "Horizontal bar for pull-up exercises",
    "Foam Roller": "Cylindrical foam tool for myofascial release",
    "Stability Ball": "Large inflatable ball for core and stability training",
    "BOSU Ball": "Half-ball platform for balance training",
    "Battle Ropes": "Heavy ropes for dynamic training",
    "Sled": "Weighted platform for pushing/pulling exercises",
    "None": "No equipment required",
}

# Checked in order after exact and partial matches fail
_MUSCLE_ALIASES = [
    (("pec",), "Chest"),
    (("lat",), "Back"),
    (("delt",), "Shoulders"),
    (("trap",), "Back"),
    (("quad",), "Quads"),
    (("ham",), "Hamstrings"),
    (("glut",), "Glutes"),
    (("calf", "calv"), "Calves"),
    (("ab",), "Abs"),
    (("core",), "Core"),
    (("leg",), "Lower Body"),
    (("arm",), "Upper Body", ("fore",)),
]

_EQUIPMENT_ALIASES = [
    (("body weight", "bodyweight"), "Bodyweight"),
    (("db",), "Dumbbell"),
    (("bb",), "Barbell"),
    (("kb",), "Kettlebell"),
    (("band",), "Resistance Band"),
    (("suspension",), "TRX/Suspension"),
    (("none", "n/a"), "None"),
]


def _standardize(value, vocabulary, aliases):
    if value is None:
        return None
    raw = str(value).strip()
    if not raw:
        return None
    lowered = raw.lower()

    for key in vocabulary:
        if key.lower() == lowered:
            return key
    for key in vocabulary:
        if lowered in key.lower() or key.lower() in lowered:
            return key
    for alias in aliases:
        needles, key = alias[0], alias[1]
        excluded = alias[2] if len(alias) > 2 else ()
        if any(n in lowered for n in needles) and not any(x in lowered for x in excluded):
            return key
    return raw


def standardize_muscle_group(value):
    return _standardize(value, MUSCLE_GROUPS, _MUSCLE_ALIASES)


def standardize_equipment(value):
    return _standardize(value, EQUIPMENT_TYPES, _EQUIPMENT_ALIASES)


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

def _commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error while trying to {action}: {e}")
        raise StoreError(f"Failed to {action}", e)


def get_exercise(user_id, exercise_id):
    exercise = Exercise.query.filter_by(id=exercise_id, user_id=user_id).first()
    if exercise is None:
        raise NotFoundError("Exercise not found")
    return exercise


def search_exercises(user_id, q=None, muscle_group=None):
    query = Exercise.query.filter_by(user_id=user_id)
    if q:
        query = query.filter(func.lower(Exercise.name).contains(q.strip().lower()))
    if muscle_group:
        query = query.filter(Exercise.muscle_group == standardize_muscle_group(muscle_group))
    return query.order_by(Exercise.name).all()


def create_exercise(user_id, data):
    """data is the output of ExerciseSchema().load()."""
    name = (data.get("name") or "").strip()
    if not name:
        raise ValidationError("Exercise name is required")
    exercise = Exercise(
        user_id=user_id,
        name=name,
        description=data.get("description"),
        muscle_group=standardize_muscle_group(data.get("muscle_group")),
        equipment=standardize_equipment(data.get("equipment")),
        default_sets=data.get("default_sets") or 3,
        default_reps=data.get("default_reps") or 10,
        image_url=data.get("image_url"),
    )
    db.session.add(exercise)
    _commit("create exercise")
    return exercise


def update_exercise(exercise, data):
    if "name" in data:
        name = (data["name"] or "").strip()
        if not name:
            raise ValidationError("Exercise name is required")
        exercise.name = name
    if "description" in data:
        exercise.description = data["description"]
    if "muscle_group" in data:
        exercise.muscle_group = standardize_muscle_group(data["muscle_group"])
    if "equipment" in data:
        exercise.equipment = standardize_equipment(data["equipment"])
    for field in ("default_sets", "default_reps"):
        if data.get(field) is not None:
            setattr(exercise, field, data[field])
    if "image_url" in data:
        exercise.image_url = data["image_url"]
    _commit("update exercise")
    return exercise


def delete_exercise(exercise):
    """Delete an exercise and close the gaps it leaves in plans that used it."""
    plans = {entry.plan for entry in exercise.plan_entries}
    for entry in list(exercise.plan_entries):
        entry.plan.entries.remove(entry)
    db.session.delete(exercise)
    normalize_all_positions(plans)
    _commit("delete exercise")
