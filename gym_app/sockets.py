"""Socket.IO push so open tabs re-read after the activity log changes."""

from flask import current_app
from flask_jwt_extended import decode_token, get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from flask_socketio import join_room
from jwt.exceptions import PyJWTError

from gym_app.extensions import socketio


def user_room(user_id):
    return f"user_{user_id}"


def notify_activity(user_id, entry):
    socketio.emit("activity_logged", entry, to=user_room(user_id))


@socketio.on("connect")
def handle_connect(auth=None):
    try:
        if auth and auth.get("token"):
            identity = decode_token(auth["token"])["sub"]
        else:
            verify_jwt_in_request(locations=["cookies"])
            identity = get_jwt_identity()
    except (JWTExtendedException, PyJWTError) as e:
        current_app.logger.info(f"Rejected socket connection: {e}")
        return False
    join_room(user_room(identity))
