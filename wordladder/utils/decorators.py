"""
Engine Decorators

Contains decorators guarding HTTP endpoints that need a loaded dictionary.
"""

from functools import wraps
from flask import jsonify, current_app


def require_engine_ready(f):
    """
    Decorator answering 503 while the dictionary is still loading and 500 when
    it failed to load. The engine is passed to the view as the `engine` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        engine = getattr(current_app, 'engine', None)
        if engine is None:
            return jsonify({
                'success': False,
                'error': 'Ladder engine unavailable'
            }), 500

        if engine.load_error is not None:
            return jsonify({
                'success': False,
                'error': f'Dictionary failed to load: {engine.load_error}'
            }), 500

        if not engine.is_ready:
            return jsonify({
                'success': False,
                'error': 'Dictionary is still loading'
            }), 503

        kwargs['engine'] = engine
        return f(*args, **kwargs)

    return decorated_function
