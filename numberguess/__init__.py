"""
Number Guess Game Server Application Package

Real-time two-player number guessing game served over Flask-SocketIO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO server) with all handlers registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    origins = app.config['CORS_ORIGINS']
    CORS(app, origins=origins, methods=app.config['CORS_METHODS'])
    socketio = SocketIO(app, cors_allowed_origins=origins, logger=False, engineio_logger=False)

    # Game state lives for the lifetime of this app
    from .services.room_store import RoomStore
    from .services.session_coordinator import SessionCoordinator
    coordinator = SessionCoordinator(RoomStore(), strict_numbers=app.config['STRICT_NUMBERS'])

    # Register blueprints
    from .controllers.room_controller import room_bp
    app.register_blueprint(room_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, coordinator)

    # Store instances for use in other modules
    app.socketio = socketio
    app.coordinator = coordinator

    return app, socketio
