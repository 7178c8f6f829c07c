"""
Services Package

Contains all business logic and service classes.
"""

from .errors import (
    DuplicateGuessError,
    GameAlreadyOverError,
    GameError,
    GameNotFoundError,
    InvalidGuessLengthError,
    InvalidHardModeGuessError,
    NotYourTurnError,
)
from .game_service import GameService
from .host_cheat import HostCheatResolver, ResolverState
from .session_store import SessionStore

__all__ = [
    'GameService', 'HostCheatResolver', 'ResolverState', 'SessionStore',
    'GameError', 'GameNotFoundError', 'GameAlreadyOverError', 'InvalidGuessLengthError',
    'DuplicateGuessError', 'InvalidHardModeGuessError', 'NotYourTurnError'
]
