"""
WebSocket Event Handlers

Handles WebSocket events for real-time game updates.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.errors import GameError
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio, game_service):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'socket_connect')

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room to receive guess results for that game."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            state = game_service.get_game_state(game_id)
        except GameError as e:
            emit('error', e.to_dict())
            return

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', {'success': True, 'state': asdict(state)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(game_room(game_id))
            game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Submit a guess and broadcast the result to everyone watching the game."""
        data = data or {}
        game_id = data.get('game_id')
        guess = data.get('guess')
        if not game_id or not isinstance(guess, str):
            emit('error', {'success': False, 'error': 'Game ID and guess are required'})
            return

        player_index = data.get('player_index')
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, player_index=player_index, transport='websocket'
        )

        try:
            outcome = game_service.make_guess(game_id, guess, player_index=player_index)
        except GameError as e:
            game_logger.log_server_response(request, 'submit_guess', False, e.to_dict(), game_id, error_kind=e.kind)
            emit('error', e.to_dict())
            return
        except Exception as e:
            game_logger.log_error(request, e, 'submit_guess', game_id)
            emit('error', {'success': False, 'error': str(e)})
            return

        payload = {
            'success': True,
            'game_id': game_id,
            'guess': guess.strip().upper(),
            'result': outcome.result,
            'game_over': outcome.game_over,
            'won': outcome.won,
            'round': outcome.round,
            **outcome.extras()
        }
        if outcome.game_over:
            payload['answer'] = outcome.answer

        game_logger.log_server_response(request, 'submit_guess', True, payload, game_id, transport='websocket')

        # Make sure the guessing client receives its own result
        join_room(game_room(game_id))
        emit('guess_result', payload, to=game_room(game_id))

        if outcome.game_over:
            game_logger.log_answer_revealed(request, game_id, outcome, guess)
