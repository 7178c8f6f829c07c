"""
Game Service

Contains the core game logic for host-cheat, normal, infinite and multi-player games.
"""

import random
import uuid
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, WORD_LIST
from ..models.game import Feedback, GameMode, GameSession, GameState, GuessOutcome, LetterStatus
from ..utils.game_logger import game_logger
from .errors import (
    DuplicateGuessError,
    GameAlreadyOverError,
    InvalidGuessLengthError,
    InvalidHardModeGuessError,
    NotYourTurnError,
)
from .evaluator import count_statuses, is_valid_hard_mode_guess
from .host_cheat import HostCheatResolver
from .session_store import SessionStore


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Answer selection (adversarial pool or a single secret word)
    - Guess validation and evaluation
    - Game state management without exposing answers to clients
    """

    def __init__(self,
                 word_list: Optional[Iterable[str]] = None,
                 max_rounds: int = MAX_ROUNDS,
                 word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None,
                 store: Optional[SessionStore] = None):
        self.word_list: List[str] = list(word_list) if word_list is not None else WORD_LIST.copy()
        if not self.word_list:
            raise ValueError("Word list cannot be empty")
        self.max_rounds = max_rounds
        self.word_length = word_length
        self.rng = rng or random.Random()
        self.games = store if store is not None else SessionStore()

    def create_new_game(self,
                        game_mode: str = GameMode.HOST_CHEAT.value,
                        max_rounds: Optional[int] = None,
                        hard_mode: bool = False) -> str:
        """
        Creates a new game session.

        Args:
            game_mode: "host_cheat", "normal", "infinite" or "multi_player"
            max_rounds: Guess limit, per player in multi-player games (ignored in
                infinite mode, defaults to the service setting)
            hard_mode: Whether revealed letters must be reused

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the mode is unknown, max_rounds is not positive or
                hard_mode is not a boolean
        """
        try:
            mode = GameMode(game_mode)
        except ValueError:
            valid = ', '.join(f'"{m.value}"' for m in GameMode)
            raise ValueError(f"Invalid game mode. Must be one of {valid}")

        if not isinstance(hard_mode, bool):
            raise ValueError("hard_mode must be true or false")

        if mode is GameMode.INFINITE:
            max_rounds = None
        else:
            max_rounds = self.max_rounds if max_rounds is None else max_rounds
            if isinstance(max_rounds, bool) or not isinstance(max_rounds, int) or max_rounds < 1:
                raise ValueError("max_rounds must be a positive integer")

        if mode is GameMode.HOST_CHEAT:
            # The host keeps every word open until forced to choose
            words = self.word_list
        else:
            # Select random word (server keeps this secret)
            words = [self.rng.choice(self.word_list)]

        session = GameSession(
            game_id=self._new_game_id(),
            game_mode=mode,
            resolver=HostCheatResolver(words),
            max_rounds=max_rounds,
            hard_mode=hard_mode,
            current_player=0 if mode is GameMode.MULTI_PLAYER else None,
        )
        self.games.add(session)
        return session.game_id

    def _new_game_id(self) -> str:
        while True:
            game_id = str(uuid.UUID(int=self.rng.getrandbits(128), version=4))
            if game_id not in self.games:
                return game_id

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state for a session (without revealing the answer).

        Raises:
            GameNotFoundError: If the game does not exist
        """
        with self.games.locked(game_id) as session:
            return self._snapshot(session)

    def resolver_status(self, game_id: str) -> Dict[str, object]:
        """Server-side view of the host's position, for logging only."""
        with self.games.locked(game_id) as session:
            return {
                'resolver_state': session.resolver.state.value,
                'pool_size': len(session.resolver.pool)
            }

    def _snapshot(self, session: GameSession) -> GameState:
        return GameState(
            game_id=session.game_id,
            current_round=session.current_round,
            max_rounds=session.max_rounds,
            game_over=session.game_over,
            won=session.won,
            guesses=session.guesses.copy(),
            guess_results=[
                [(letter, status.value) for letter, status in zip(guess, feedback)]
                for guess, feedback in zip(session.guesses, session.feedback)
            ],
            letter_status=session.letter_status.copy(),
            game_mode=session.game_mode.value,
            hard_mode=session.hard_mode,
            answer=session.resolver.answer if session.game_over else None,
            hit_count=session.hit_count,
            present_count=session.present_count,
            miss_count=session.miss_count,
            score=session.score,
            current_player=session.current_player,
            winner=session.winner,
            guess_players=session.guess_players.copy(),
        )

    def _previous_turn(self, session: GameSession, player: Optional[int]):
        """The last (guess, feedback) this player made, or None."""
        for index in range(len(session.guesses) - 1, -1, -1):
            if player is None or session.guess_players[index] == player:
                return session.guesses[index], session.feedback[index]
        return None

    def _validate_guess(self, session: GameSession, guess: str, player: Optional[int]) -> None:
        """
        Checks a normalized guess against the session rules.

        Raises:
            GameAlreadyOverError, InvalidGuessLengthError, NotYourTurnError,
            DuplicateGuessError, InvalidHardModeGuessError
        """
        if session.game_over:
            raise GameAlreadyOverError()

        if len(guess) != self.word_length:
            raise InvalidGuessLengthError(self.word_length)

        if session.game_mode is GameMode.MULTI_PLAYER and (
                isinstance(player, bool) or player != session.current_player):
            raise NotYourTurnError(session.current_player)

        if session.game_mode is GameMode.INFINITE and guess in session.guesses:
            raise DuplicateGuessError(guess)

        if session.hard_mode:
            previous = self._previous_turn(session, player)
            if previous and not is_valid_hard_mode_guess(guess, *previous):
                raise InvalidHardModeGuessError()

    def make_guess(self, game_id: str, guess: str, player_index: Optional[int] = None) -> GuessOutcome:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The guessed word
            player_index: 0 or 1, required in multi-player games only

        Returns:
            GuessOutcome for the accepted guess

        Raises:
            GameError: If the game is unknown or the guess is rejected; the
                session is left untouched in that case
        """
        normalized_guess = guess.strip().upper()

        with self.games.locked(game_id) as session:
            multi_player = session.game_mode is GameMode.MULTI_PLAYER
            player = player_index if multi_player else None
            self._validate_guess(session, normalized_guess, player)

            was_committed = session.resolver.committed
            feedback = session.resolver.resolve(normalized_guess)
            if session.resolver.committed and not was_committed:
                game_logger.log_answer_committed(
                    session.game_id, session.resolver.answer,
                    round=session.current_round + 1, pool_size=len(session.resolver.pool)
                )

            session.guesses.append(normalized_guess)
            session.feedback.append(feedback)
            session.guess_players.append(player)
            self._update_letter_status(session.letter_status, normalized_guess, feedback)

            if session.game_mode is GameMode.INFINITE:
                self._update_score(session, feedback)

            session.won = normalized_guess == session.resolver.answer
            if multi_player:
                self._finish_turn(session, player)
            else:
                session.game_over = session.won or (
                    session.max_rounds is not None and session.current_round >= session.max_rounds
                )

            outcome = GuessOutcome(
                result=[status.value for status in feedback],
                game_over=session.game_over,
                won=session.won,
                round=session.current_round,
                answer=session.resolver.answer if session.game_over else None,
            )
            if session.game_mode is GameMode.INFINITE:
                hits, presents, misses = count_statuses(feedback)
                outcome.score = session.score
                outcome.hit_count, outcome.present_count, outcome.miss_count = hits, presents, misses
            if multi_player:
                outcome.winner = session.winner
                outcome.next_player = None if session.game_over else session.current_player
            return outcome

    def _finish_turn(self, session: GameSession, player: int) -> None:
        # Both players share the answer; each gets max_rounds guesses
        if session.won:
            session.winner = player
            session.game_over = True
        elif all(session.guess_players.count(p) >= session.max_rounds for p in (0, 1)):
            session.game_over = True
        else:
            session.current_player = 1 - player

    def _update_letter_status(self, letter_status: Dict[str, str], guess: str, feedback: Feedback) -> None:
        """
        Updates global letter status tracking based on guess results.
        """
        for letter, new_status in zip(guess, feedback):
            current_status = LetterStatus(letter_status.get(letter, LetterStatus.UNUSED.value))

            # Status can only progress in priority order
            if new_status == LetterStatus.HIT:
                letter_status[letter] = LetterStatus.HIT.value
            elif new_status == LetterStatus.PRESENT and current_status != LetterStatus.HIT:
                letter_status[letter] = LetterStatus.PRESENT.value
            elif new_status == LetterStatus.MISS and current_status == LetterStatus.UNUSED:
                letter_status[letter] = LetterStatus.MISS.value

    def _update_score(self, session: GameSession, feedback: Feedback) -> None:
        # Infinite mode: hits are worth 3, presents 1, each miss costs 1
        hits, presents, misses = count_statuses(feedback)
        session.hit_count += hits
        session.present_count += presents
        session.miss_count += misses
        session.score += hits * 3 + presents - misses

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        return self.games.remove(game_id)

    @property
    def active_games(self) -> int:
        return len(self.games)
