from __future__ import annotations

import pytest
from flask_jwt_extended import create_access_token

from gym_app import create_app
from gym_app.extensions import db
from gym_app.models import User
from gym_app.services import catalog, plans


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app) -> User:
    return make_user("lifter@example.com")


@pytest.fixture
def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(identity=str(user.id))}"}


def make_user(email: str, password: str = "password123") -> User:
    user = User(email=email, name=email.split("@")[0])
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def make_exercise(user: User, name: str, **data):
    return catalog.create_exercise(user.id, {"name": name, **data})


def make_plan(user: User, name: str, exercises=()):
    """exercises: Exercise objects or (exercise, sets, reps) tuples."""
    plan = plans.create_plan(user.id, name)
    for item in exercises:
        if isinstance(item, tuple):
            exercise, sets, reps = item
            plans.add_exercise(plan, exercise, sets=sets, reps=reps)
        else:
            plans.add_exercise(plan, item)
    return plan
