"""
Word Ladder Engine Application Package

Shortest-path search and AI opponents over a word-ladder dictionary graph,
exposed to the game UI through a JSON request/response interface.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, engine=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        engine: Prebuilt LadderEngine; when omitted one is created and its
            dictionary is loaded in the background from WORDLIST_PATH

    Returns:
        Flask application instance with the engine attached
    """
    from .services.ladder_engine import LadderEngine

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    if engine is None:
        engine = LadderEngine(
            heuristic=config_class.PATH_HEURISTIC,
            seed=config_class.RANDOM_SEED,
            expert_depth=config_class.EXPERT_SEARCH_DEPTH
        )
        engine.start_loading(config_class.WORDLIST_PATH)

    # Register blueprints
    from .controllers.ladder_controller import ladder_bp

    app.register_blueprint(ladder_bp, url_prefix='/api')

    # Store engine instance for use in the controllers
    app.engine = engine

    return app
