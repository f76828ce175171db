"""
Number Guess Game Server - Main Entry Point

This is the main entry point for the game server.
It builds the Flask-SocketIO application and starts listening.
"""

from numberguess import create_app
from numberguess.config import get_config
from numberguess.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    config_class = get_config()
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Number Guess Server starting ({config_class.APP_ENV}) - allowed origins: {config_class.CORS_ORIGINS}"
        )

        print(f"\nStarting Number Guess Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        # Start the server
        socketio.run(
            app,
            host=config_class.HOST,
            port=config_class.PORT,
            debug=config_class.DEBUG,
            allow_unsafe_werkzeug=True
        )

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Number Guess Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
