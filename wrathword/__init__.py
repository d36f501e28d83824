"""
WrathWord Game Server Package

A Wordle-style word game: a pure, immutable game core (word selection, guess
evaluation, sessions, hints, keyboard tracking), the use cases that
orchestrate it with its repositories, and a thin Flask HTTP surface.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_module=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_module: GameModule to serve; built from the configuration if omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    from .game_module import GameModule
    app.extensions['game_module'] = game_module or GameModule.from_config(app.config)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
