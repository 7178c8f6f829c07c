"""
Host-Cheat Wordle Server Application Package

A word-guessing game server whose host delays choosing the answer for as long
as it can, answering every guess with the least helpful honest feedback.
"""

import random

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config, load_word_list


def create_game_service(config_class=Config):
    """Build a GameService from configuration settings."""
    from .services.game_service import GameService

    word_list = load_word_list(config_class.WORD_LIST_PATH) if config_class.WORD_LIST_PATH else None
    rng = random.Random(config_class.RANDOM_SEED) if config_class.RANDOM_SEED is not None else None
    return GameService(word_list=word_list, max_rounds=config_class.MAX_ROUNDS, rng=rng)


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        game_service: GameService to serve; built from config_class when omitted
        
    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)
    
    # Game sessions live in the service owned by this app
    app.game_service = game_service if game_service is not None else create_game_service(config_class)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, app.game_service)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
