"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, jsonify, request
from ..services.errors import GameError
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_error_response(action, error, game_id=None, **kwargs):
    error_response = error.to_dict()
    game_logger.log_server_response(
        request, action, False, error_response, game_id,
        error_kind=error.kind, **kwargs
    )
    return jsonify(error_response), error.status_code


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = getattr(current_app, 'game_service', None)
    if not game_service:
        return _service_unavailable()

    try:
        data = request.get_json(silent=True) or {}
        game_mode = data.get('game_mode', 'host_cheat')
        max_rounds = data.get('max_rounds')
        hard_mode = data.get('hard_mode', False)

        # Log user action
        game_logger.log_user_action(
            request, 'new_game',
            game_mode=game_mode, max_rounds=max_rounds, hard_mode=hard_mode
        )

        game_id = game_service.create_new_game(game_mode, max_rounds=max_rounds, hard_mode=hard_mode)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=game_service.word_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except ValueError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = getattr(current_app, 'game_service', None)
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response('get_state', e, game_id)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_service = getattr(current_app, 'game_service', None)
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not data or not isinstance(data.get('guess'), str):
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']
    player_index = data.get('player_index')

    try:
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess), player_index=player_index
        )

        outcome = game_service.make_guess(game_id, guess, player_index=player_index)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'result': outcome.result,
            'game_over': outcome.game_over,
            'won': outcome.won,
            'state': asdict(state),
            **outcome.extras()
        }
        if outcome.game_over:
            response_data['answer'] = outcome.answer

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=outcome.round, **game_service.resolver_status(game_id)
        )

        if outcome.game_over:
            game_logger.log_answer_revealed(request, game_id, outcome, guess)

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(
            'submit_guess', e, game_id,
            validation_error=e.message, attempted_guess=guess
        )

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = getattr(current_app, 'game_service', None)
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_deleted(request, game_id)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        response_data['kind'] = 'NotFound'
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = getattr(current_app, 'game_service', None)

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_games if game_service else 0,
            'word_count': len(game_service.word_list) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
