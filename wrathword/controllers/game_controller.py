"""
Game Controller

Handles all game-related HTTP endpoints. Each request builds its use case
from the GameModule held by the app, scoped to the requesting player.
"""

from datetime import date

from flask import Blueprint, current_app, jsonify, request

from ..config.game_settings import VALID_LENGTHS
from ..models.errors import CorruptSnapshotError, InvalidConfigurationError
from ..models.game_config import GameConfig, GameMode
from ..models.game_session import GameStatus
from ..use_cases import StartOutcome, restore_session
from ..utils.decorators import require_player
from ..utils.game_logger import game_logger
from ..utils.helpers import session_to_dict

game_bp = Blueprint('game', __name__)


def get_game_module():
    return current_app.extensions['game_module']


def _load_session(module, player_id):
    """Current session of a player, or None if there is no usable saved game."""
    snapshot = module.game_repository(player_id).load()
    if snapshot is None:
        return None
    try:
        return restore_session(snapshot, module.evaluator)
    except CorruptSnapshotError as e:
        game_logger.logger.warning(f"Player {player_id}: discarding unreadable saved game ({e})")
        module.game_repository(player_id).clear()
        return None


def _error(action, message, status_code, **kwargs):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, **kwargs)
    return jsonify(error_response), status_code


def _log_game_over(player_id, session, final_guess):
    event = 'game_won' if session.status is GameStatus.WON else 'game_lost'
    game_logger.log_game_event(
        player_id, event,
        rounds_used=session.current_row, target_word=session.answer,
        final_guess=final_guess, mode=session.config.mode.value,
        date=session.config.date_iso, hint_used=session.hint_used
    )


@game_bp.route('/game/start', methods=['POST'])
@require_player
def start_game(player_id):
    """Start a new game or restore the saved one."""
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _error('start_game', 'Request body must be a JSON object', 400)
        game_logger.log_user_action(request, 'start_game', request_data=data)

        mode = data.get('mode', GameMode.DAILY.value)
        date_iso = data.get('date')
        if mode == GameMode.DAILY.value and not date_iso:
            date_iso = date.today().isoformat()

        try:
            config = GameConfig.create(
                length=data.get('length', current_app.config['DEFAULT_LENGTH']),
                max_rows=data.get('max_rows', current_app.config['DEFAULT_MAX_ROWS']),
                mode=mode,
                date_iso=date_iso
            )
        except InvalidConfigurationError as e:
            return _error('start_game', str(e), 400)

        result = get_game_module().start_game(player_id).execute(config)

        if result.outcome is StartOutcome.ALREADY_COMPLETED:
            return _error('start_game', 'Daily puzzle already completed', 409,
                          outcome=result.outcome.value, date=config.date_iso)

        response_data = {
            'success': True,
            'outcome': result.outcome.value,
            'session': session_to_dict(result.session),
            'stale_session': session_to_dict(result.stale_session) if result.stale_session else None
        }

        game_logger.log_server_response(
            request, 'start_game', True, response_data,
            outcome=result.outcome.value, length=config.length, max_rows=config.max_rows
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'start_game')
        return _error('start_game', str(e), 500)


@game_bp.route('/game/state', methods=['GET'])
@require_player
def get_state(player_id):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state')

        session = _load_session(get_game_module(), player_id)
        if session is None:
            return _error('get_state', 'No game in progress', 404)

        response_data = {
            'success': True,
            'session': session_to_dict(session)
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data,
            current_row=session.current_row, status=session.status.value
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        return _error('get_state', str(e), 500)


@game_bp.route('/game/guess', methods=['POST'])
@require_player
def submit_guess(player_id):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            return _error('submit_guess', 'Guess is required', 400)

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', guess=guess, guess_length=len(guess))

        module = get_game_module()
        session = _load_session(module, player_id)
        if session is None:
            return _error('submit_guess', 'No game in progress', 404)

        result = module.submit_guess(player_id).execute(session, guess)
        if not result.success:
            return _error('submit_guess', result.error.value, 400, attempted_guess=guess)

        new_session = result.session
        response_data = {
            'success': True,
            'is_win': result.is_win,
            'is_loss': result.is_loss,
            'session': session_to_dict(new_session)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            guess=guess, round=new_session.current_row, status=new_session.status.value
        )

        if new_session.is_game_over():
            _log_game_over(player_id, new_session, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        return _error('submit_guess', str(e), 500)


@game_bp.route('/game/hint', methods=['POST'])
@require_player
def use_hint(player_id):
    """Reveal one letter of the answer (once per game)."""
    try:
        game_logger.log_user_action(request, 'use_hint')

        module = get_game_module()
        session = _load_session(module, player_id)
        if session is None:
            return _error('use_hint', 'No game in progress', 404)

        result = module.use_hint(player_id).execute(session)
        if not result.success:
            return _error('use_hint', result.error.value, 400)

        response_data = {
            'success': True,
            'position': {'row': result.position.row, 'col': result.position.col},
            'letter': result.letter,
            'session': session_to_dict(result.session)
        }
        game_logger.log_server_response(request, 'use_hint', True, response_data)
        game_logger.log_game_event(
            player_id, 'hint_used',
            row=result.position.row, col=result.position.col
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'use_hint')
        return _error('use_hint', str(e), 500)


@game_bp.route('/game/abandon', methods=['POST'])
@require_player
def abandon_game(player_id):
    """Discard the saved game (daily puzzles count as played)."""
    try:
        game_logger.log_user_action(request, 'abandon_game')

        abandoned = get_game_module().abandon_game(player_id).execute()

        response_data = {
            'success': True,
            'abandoned_game': {
                'guess_count': abandoned.guess_count,
                'hint_was_used': abandoned.hint_was_used,
                'mode': abandoned.mode,
                'date': abandoned.date_iso,
                'length': abandoned.length,
                'max_rows': abandoned.max_rows
            } if abandoned else None
        }
        game_logger.log_server_response(request, 'abandon_game', True, response_data)

        if abandoned:
            game_logger.log_game_event(
                player_id, 'game_abandoned',
                mode=abandoned.mode, date=abandoned.date_iso, guess_count=abandoned.guess_count
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'abandon_game')
        return _error('abandon_game', str(e), 500)


@game_bp.route('/daily/completed', methods=['GET'])
@require_player
def completed_dates(player_id):
    """List the dates whose daily puzzle the player finished for a word length."""
    try:
        game_logger.log_user_action(request, 'completed_dates')

        length = request.args.get('length', type=int, default=current_app.config['DEFAULT_LENGTH'])
        if not GameConfig.is_valid_length(length):
            return _error('completed_dates', f'Invalid word length: {length}', 400)

        dates = get_game_module().completion_repository(player_id).get_completed_dates(length)
        response_data = {
            'success': True,
            'length': length,
            'dates': dates
        }
        game_logger.log_server_response(request, 'completed_dates', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'completed_dates')
        return _error('completed_dates', str(e), 500)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        module = get_game_module()
        response_data = {
            'status': 'healthy',
            'storage_backend': module.storage_backend,
            'answer_counts': {
                str(length): module.word_list.get_answer_count(length)
                for length in VALID_LENGTHS
            },
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
