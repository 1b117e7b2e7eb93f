import os
from datetime import datetime
from flask import current_app
from werkzeug.utils import secure_filename

from gym_app.services.errors import ValidationError


def allowed_file(filename):
    allowed = current_app.config.get("ALLOWED_IMAGE_EXTENSIONS", set())
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed


def save_image(file, prefix):
    """Store an uploaded image under UPLOAD_FOLDER and return its public URL."""
    if file is None or file.filename == '':
        raise ValidationError("No image uploaded")
    if not allowed_file(file.filename):
        raise ValidationError("Unsupported image type")

    filename = secure_filename(f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{file.filename}")
    folder = current_app.config["UPLOAD_FOLDER"]
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.root_path, folder)
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, filename))
    current_app.logger.info(f"Saved upload {filename}")
    return f"/uploads/{filename}"
