"""
Game Logger

Writes one JSON entry per line for client requests, server responses and the
two moments that matter in a host-cheat game: the host committing to an
answer and the answer being revealed when the game ends.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config

USER_ACTION = 'USER_ACTION'
RESPONSE_SUCCESS = 'SERVER_RESPONSE_SUCCESS'
RESPONSE_ERROR = 'SERVER_RESPONSE_ERROR'
GAME_EVENT = 'GAME_EVENT'
ERROR = 'ERROR'

ANSWER_COMMITTED = 'answer_committed'
ANSWER_REVEALED = 'answer_revealed'
GAME_DELETED = 'game_deleted'

# Game state fields worth keeping in logged responses
LOGGED_STATE_FIELDS = (
    'game_mode', 'hard_mode', 'current_round', 'max_rounds',
    'game_over', 'won', 'score', 'current_player', 'winner',
)


class GameLogger:
    """
    JSON-structured logging for the game server.

    Every entry carries an event type, the action, the client it came from
    (when there is one) and free-form details. Entries go to a daily file;
    warnings and errors are echoed to the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self,
               event_type: str,
               action: str,
               details: Dict[str, Any],
               request=None,
               level: int = logging.INFO):
        client = None
        if request is not None:
            client = {
                'ip': getattr(request, 'remote_addr', None) or 'unknown',
                'sid': getattr(request, 'sid', None)
            }
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'client': client,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log an incoming HTTP request or socket event.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'join_game'
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, 'method': getattr(request, 'method', None), **kwargs}
        self._write(USER_ACTION, action, details, request)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Log what was sent back; failures are logged as warnings."""
        details = {
            'game_id': game_id,
            'response': self._sanitize_response_data(response_data),
            **kwargs
        }
        if success:
            self._write(RESPONSE_SUCCESS, action, details, request)
        else:
            self._write(RESPONSE_ERROR, action, details, request, logging.WARNING)

    def log_answer_committed(self, game_id: str, target_word: str, round: int, pool_size: int):
        """
        Log the guess on which the host stopped cheating.

        Args:
            game_id: Game identifier
            target_word: The word the host is now bound to
            round: Round of the guess that forced the commitment
            pool_size: Candidates that were still open at that point
        """
        self._write(GAME_EVENT, ANSWER_COMMITTED, {
            'game_id': game_id,
            'target_word': target_word,
            'round': round,
            'pool_size': pool_size
        })

    def log_answer_revealed(self, request, game_id: str, outcome, final_guess: str):
        """Log the end of a game, where the answer goes out to the client."""
        details = {
            'game_id': game_id,
            'target_word': outcome.answer,
            'won': outcome.won,
            'rounds_used': outcome.round,
            'final_guess': final_guess,
            **outcome.extras()
        }
        self._write(GAME_EVENT, ANSWER_REVEALED, details, request)

    def log_game_deleted(self, request, game_id: str):
        self._write(GAME_EVENT, GAME_DELETED, {'game_id': game_id}, request)

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        """Log an unexpected exception raised while handling a request."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write(ERROR, action, details, request, logging.ERROR)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce a nested game state to its summary fields."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = {key: value for key, value in data.items() if key != 'state'}
        state = data.get('state')
        if isinstance(state, dict):
            summary = {name: state[name] for name in LOGGED_STATE_FIELDS if state.get(name) is not None}
            summary['answer_revealed'] = state.get('answer') is not None
            sanitized['state'] = summary
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type, plus commits and reveals."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    parts = line.split(' | ', 2)
                    if len(parts) < 3:
                        continue
                    try:
                        entry = json.loads(parts[2])
                    except ValueError:
                        # Plain startup/shutdown messages
                        continue
                    counts[entry.get('event_type')] += 1
                    if entry.get('event_type') == GAME_EVENT:
                        counts[entry.get('action')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'user_actions': counts[USER_ACTION],
            'server_responses': counts[RESPONSE_SUCCESS] + counts[RESPONSE_ERROR],
            'errors': counts[ERROR],
            'answers_committed': counts[ANSWER_COMMITTED],
            'answers_revealed': counts[ANSWER_REVEALED]
        }


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
