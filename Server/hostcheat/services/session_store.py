"""
Session Store

In-memory game sessions keyed by game id, each guarded by its own lock so
that two requests for the same game never interleave.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..models.game import GameSession
from .errors import GameNotFoundError


class SessionStore:
    """Process-local session storage owned by the game service."""

    def __init__(self):
        self._sessions: Dict[str, GameSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._sessions)

    def __contains__(self, game_id: str) -> bool:
        with self._registry_lock:
            return game_id in self._sessions

    def ids(self) -> List[str]:
        with self._registry_lock:
            return list(self._sessions)

    def add(self, session: GameSession) -> None:
        with self._registry_lock:
            if session.game_id in self._sessions:
                raise ValueError(f"Game id already in use: {session.game_id}")
            self._sessions[session.game_id] = session
            self._locks[session.game_id] = threading.Lock()

    def get(self, game_id: str) -> Optional[GameSession]:
        with self._registry_lock:
            return self._sessions.get(game_id)

    @contextmanager
    def locked(self, game_id: str) -> Iterator[GameSession]:
        """
        Yields the session while holding its lock.

        Raises:
            GameNotFoundError: If the game does not exist (or was deleted
                while waiting for the lock)
        """
        with self._registry_lock:
            lock = self._locks.get(game_id)
        if lock is None:
            raise GameNotFoundError(game_id)

        with lock:
            session = self.get(game_id)
            if session is None:
                raise GameNotFoundError(game_id)
            yield session

    def remove(self, game_id: str) -> bool:
        with self._registry_lock:
            lock = self._locks.get(game_id)
        if lock is None:
            return False

        # Wait for any in-flight guess on this game to finish
        with lock:
            with self._registry_lock:
                self._locks.pop(game_id, None)
                return self._sessions.pop(game_id, None) is not None
