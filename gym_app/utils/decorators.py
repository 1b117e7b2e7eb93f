# gym_app/utils/decorators.py
from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from gym_app.extensions import db
from gym_app.models.user import User


def current_user_required(view_func):
    """
    Require a valid JWT and pass the matching User to the view as
    `current_user`.
    """
    @wraps(view_func)
    @jwt_required()
    def wrapper(*args, **kwargs):
        user_id = get_jwt_identity()
        user = db.session.get(User, int(user_id)) if user_id else None
        if not user:
            return jsonify({"msg": "User not found"}), 401
        kwargs['current_user'] = user
        return view_func(*args, **kwargs)
    return wrapper
