import os

from gym_app import create_app
from gym_app.extensions import socketio

app = create_app()

if __name__ == '__main__':
    socketio.run(app, debug=app.config.get('DEBUG', False), port=int(os.getenv('PORT', 5000)))
