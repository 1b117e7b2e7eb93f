from datetime import datetime, timedelta

from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies
from marshmallow import ValidationError as SchemaError
from sqlalchemy.exc import SQLAlchemyError

from gym_app.extensions import db
from gym_app.models.user import User
from gym_app.schemas import RegisterSchema, LoginSchema
from gym_app.utils.decorators import current_user_required

auth_bp = Blueprint("auth", __name__)
register_schema = RegisterSchema()
login_schema = LoginSchema()


@auth_bp.route("/register", methods=["POST"])
def register():
    try:
        data = register_schema.load(request.get_json(silent=True) or {})
    except SchemaError as err:
        return jsonify({"msg": "Invalid registration data", "errors": err.messages}), 400

    email = data["email"].strip().lower()
    if User.query.filter_by(email=email).first():
        return jsonify({"msg": "Registration failed"}), 400

    user = User(email=email, name=data["name"].strip())
    user.set_password(data["password"])
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error registering {email}: {e}")
        return jsonify({"msg": "Registration failed"}), 500

    return jsonify({"msg": "Registered successfully", "user": user.to_dict()}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    if not request.is_json:
        return jsonify({"msg": "Missing JSON"}), 400
    try:
        data = login_schema.load(request.get_json())
    except SchemaError as err:
        return jsonify({"msg": "Email and password are required", "errors": err.messages}), 400

    user = User.query.filter_by(email=data["email"].strip().lower()).first()
    if not user or not user.check_password(data["password"]):
        current_app.logger.info(f"Failed login for {data['email']}")
        return jsonify({"msg": "Invalid credentials"}), 401

    user.last_active = datetime.utcnow()
    db.session.commit()

    access_token = create_access_token(
        identity=str(user.id),
        expires_delta=timedelta(hours=24)
    )
    response = jsonify({
        "msg": "Login successful",
        "access_token": access_token,
        "user": user.to_dict()
    })
    set_access_cookies(response, access_token)
    return response


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"msg": "Logout successful"})
    unset_jwt_cookies(response)
    return response


@auth_bp.route("/me", methods=["GET"])
@current_user_required
def me(current_user):
    return jsonify(current_user.to_dict())
