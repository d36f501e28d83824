"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

PLAYER_HEADER = 'X-Player-Id'


def get_player_id(request_obj) -> Optional[str]:
    """Player id sent by the client, or None."""
    player_id = (request_obj.headers.get(PLAYER_HEADER) or '').strip()
    return player_id or None


def get_player_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract player identity information from request."""
    return {
        'player_id': get_player_id(request_obj),
        'user_ip': request_obj.remote_addr or 'unknown'
    }


def session_to_dict(session) -> Dict[str, Any]:
    """
    JSON view of a GameSession.

    The answer and share string are only included once the game is over.
    """
    config = session.config
    cell = session.hinted_cell
    game_over = session.is_game_over()

    return {
        'length': config.length,
        'max_rows': config.max_rows,
        'mode': config.mode.value,
        'date': config.date_iso,
        'guesses': list(session.guesses),
        'feedback': [row.to_list() for row in session.feedback],
        'status': session.status.value,
        'current_row': session.current_row,
        'remaining_guesses': session.remaining_guesses,
        'game_over': game_over,
        'hint_used': session.hint_used,
        'hinted_cell': {'row': cell.row, 'col': cell.col} if cell else None,
        'hinted_letter': session.hinted_letter,
        'keyboard': {letter: state.value for letter, state in sorted(session.keyboard_states.items())},
        'answer': session.answer if game_over else None,
        'share': session.to_share_string() if game_over else None
    }
