import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify
from flask_cors import CORS
from marshmallow import ValidationError as SchemaError

from gym_app.config import config
from gym_app.extensions import db, ma, jwt, migrate, socketio
from gym_app.services.errors import NotFoundError, StoreError, ValidationError


def configure_logging(app):
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    log_file = app.config.get("LOG_FILE")
    if not log_file or app.testing:
        return

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    ))
    handler.setLevel(app.logger.level)
    app.logger.addHandler(handler)


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"msg": str(e)}), 400

    @app.errorhandler(SchemaError)
    def handle_schema_error(e):
        return jsonify({"msg": "Invalid request", "errors": e.messages}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return jsonify({"msg": str(e)}), 404

    @app.errorhandler(StoreError)
    def handle_store_error(e):
        db.session.rollback()
        return jsonify({"msg": str(e)}), 500

    @app.errorhandler(404)
    def handle_404(e):
        return jsonify({"msg": "Not found"}), 404

    @app.errorhandler(413)
    def handle_too_large(e):
        return jsonify({"msg": "File too large"}), 413


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config[config_name])

    configure_logging(app)

    # تهيئة الإضافات
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    CORS(app, supports_credentials=True, resources={r"/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    }})
    # Socket.IO handlers must be registered before init_app binds the server
    from gym_app import sockets  # noqa: F401
    socketio.init_app(app)

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"msg": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"msg": f"Invalid token: {error}"}), 422

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return jsonify({"msg": error}), 401

    register_error_handlers(app)

    # استيراد الـ Blueprints
    from gym_app.routes.home import home_bp
    from gym_app.routes.auth import auth_bp
    from gym_app.routes.exercises import exercises_bp
    from gym_app.routes.plans import plans_bp
    from gym_app.routes.activity import activity_bp
    from gym_app.routes.measurements import measurements_bp

    # تسجيل الـ Blueprints
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(exercises_bp, url_prefix="/api/exercises")
    app.register_blueprint(plans_bp, url_prefix="/api/plans")
    app.register_blueprint(activity_bp, url_prefix="/api")
    app.register_blueprint(measurements_bp, url_prefix="/api/measurements")

    app.logger.info(f"Gym tracker started with '{config_name}' config")
    return app
