"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify

from .helpers import PLAYER_HEADER, get_player_id


def require_player(f):
    """
    Decorator to require a player id for game endpoints.

    The id is read from the X-Player-Id header and passed to the view as the
    `player_id` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        player_id = get_player_id(request)
        if not player_id:
            return jsonify({
                'success': False,
                'error': f'{PLAYER_HEADER} header required'
            }), 400

        kwargs['player_id'] = player_id
        return f(*args, **kwargs)

    return decorated_function
