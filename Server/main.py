"""
Host-Cheat Wordle Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

import os

from hostcheat import create_app, create_game_service
from hostcheat.config import config
from hostcheat.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        print("Initializing services...")

        game_service = create_game_service(config_class)
        print(f"✓ Game service initialized with {len(game_service.word_list)} words")

        print("Creating Flask application...")
        app, socketio = create_app(config_class, game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Host-Cheat Wordle Server starting")

        print(f"\nStarting Host-Cheat Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Host-Cheat Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
