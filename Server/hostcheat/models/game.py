"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from ..services.host_cheat import HostCheatResolver


class LetterStatus(Enum):
    """Letter evaluation status returned for each position of a guess."""
    HIT = "hit"
    PRESENT = "present"
    MISS = "miss"
    UNUSED = "unused"  # Keyboard summary only, never part of a guess result


class GameMode(Enum):
    """Supported game modes."""
    HOST_CHEAT = "host_cheat"
    NORMAL = "normal"
    INFINITE = "infinite"
    MULTI_PLAYER = "multi_player"


Feedback = List[LetterStatus]


@dataclass
class Candidate:
    """A word the host can still claim as the answer."""
    word: str
    score: int = 0
    hit: int = 0
    present: int = 0
    needs_update: bool = True
    needs_tie_check: bool = False


@dataclass
class GuessOutcome:
    """Result of a single accepted guess."""
    result: List[str]
    game_over: bool
    won: bool
    round: int
    answer: Optional[str] = None  # Only included when game is over
    # Infinite mode only
    score: Optional[int] = None
    hit_count: Optional[int] = None
    present_count: Optional[int] = None
    miss_count: Optional[int] = None
    # Multi-player only
    winner: Optional[int] = None
    next_player: Optional[int] = None

    def extras(self) -> Dict[str, int]:
        """Mode-specific fields that are set for this outcome."""
        names = ('score', 'hit_count', 'present_count', 'miss_count', 'winner', 'next_player')
        return {name: getattr(self, name) for name in names if getattr(self, name) is not None}


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    current_round: int
    max_rounds: Optional[int]  # None means unlimited (infinite mode)
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    game_mode: str = GameMode.HOST_CHEAT.value
    hard_mode: bool = False
    answer: Optional[str] = None  # Only included when game is over
    hit_count: int = 0
    present_count: int = 0
    miss_count: int = 0
    score: int = 0
    current_player: Optional[int] = None  # Multi-player only
    winner: Optional[int] = None
    guess_players: List[Optional[int]] = field(default_factory=list)


@dataclass
class GameSession:
    """Mutable per-game record held by the session store."""
    game_id: str
    game_mode: GameMode
    resolver: "HostCheatResolver"
    max_rounds: Optional[int]
    hard_mode: bool = False
    game_over: bool = False
    won: bool = False
    guesses: List[str] = field(default_factory=list)
    feedback: List[Feedback] = field(default_factory=list)
    letter_status: Dict[str, str] = field(
        default_factory=lambda: {letter: LetterStatus.UNUSED.value for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
    )
    hit_count: int = 0
    present_count: int = 0
    miss_count: int = 0
    score: int = 0
    current_player: Optional[int] = None
    winner: Optional[int] = None
    guess_players: List[Optional[int]] = field(default_factory=list)  # Which player made each guess

    @property
    def current_round(self) -> int:
        return len(self.guesses)
