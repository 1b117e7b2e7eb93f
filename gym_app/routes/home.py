import os
from flask import Blueprint, jsonify, current_app, send_from_directory
from sqlalchemy import text

from gym_app.extensions import db
from gym_app.services.catalog import EQUIPMENT_TYPES, MUSCLE_GROUPS

home_bp = Blueprint("home", __name__)


@home_bp.route("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
        return jsonify({"status": "ok"})
    except Exception as e:
        current_app.logger.error(f"Health check failed: {e}")
        return jsonify({"status": "error", "msg": str(e)}), 503


@home_bp.route("/api/catalog")
def catalog():
    return jsonify({
        "muscle_groups": [{"name": k, "description": v} for k, v in MUSCLE_GROUPS.items()],
        "equipment": [{"name": k, "description": v} for k, v in EQUIPMENT_TYPES.items()],
    })


@home_bp.route("/uploads/<path:filename>")
def uploaded_file(filename):
    folder = current_app.config["UPLOAD_FOLDER"]
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.root_path, folder)
    return send_from_directory(folder, filename)
