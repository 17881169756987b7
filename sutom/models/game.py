"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class LetterStatus(Enum):
    """Per-position evaluation of a guessed letter."""
    CORRECT = "CORRECT"
    MISPLACED = "MISPLACED"
    INCORRECT = "INCORRECT"


# Keyboard summary priority: a letter keeps the best status it has reached
LETTER_STATUS_PRIORITY = {
    LetterStatus.INCORRECT: 0,
    LetterStatus.MISPLACED: 1,
    LetterStatus.CORRECT: 2,
}


class AttemptOutcome(Enum):
    """Result of submitting one guess to a game engine."""
    VALID_GUESS = "VALID_GUESS"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"
    REPEATED = "REPEATED"
    UNKNOWN_WORD = "UNKNOWN_WORD"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_rejection(self) -> bool:
        return self in (AttemptOutcome.LENGTH_MISMATCH,
                        AttemptOutcome.REPEATED,
                        AttemptOutcome.UNKNOWN_WORD)

    @property
    def is_terminal(self) -> bool:
        return self in (AttemptOutcome.WON, AttemptOutcome.LOST)


class GameStatus(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class GameMode(Enum):
    """Standard games draw a random word, daily games share the word of the day."""
    STANDARD = "standard"
    DAILY = "daily"


@dataclass(frozen=True)
class PlayerKey:
    """Addresses a session by its owner (command-style guesses)."""
    player_id: str


@dataclass(frozen=True)
class RoutingKey:
    """Addresses a session by the conversation it is bound to (free-text guesses)."""
    routing_token: str


LookupKey = Union[PlayerKey, RoutingKey]


@dataclass
class BoardUpdate:
    """The game continues: current board for the player's conversation."""
    player_id: str
    routing_token: str
    mode: str
    history: List[str]
    evaluations: List[List[str]]  # Letter status as string for JSON serialization
    remaining_attempts: int
    letter_status: Dict[str, str] = field(default_factory=dict)
    note: Optional[str] = None
    parent_routing_token: Optional[str] = None


@dataclass
class TerminalNotice:
    """The game ended (won, lost or stopped) and the word is revealed."""
    player_id: str
    routing_token: str
    mode: str
    won: bool
    revealed_word: str
    history: List[str]
    evaluations: List[List[str]]
    attempts_used: int
    stopped: bool = False
    parent_routing_token: Optional[str] = None


@dataclass
class ErrorNotice:
    """A guess was refused; the session is unchanged."""
    player_id: str
    routing_token: str
    message: str


ResponseDescriptor = Union[BoardUpdate, TerminalNotice, ErrorNotice]


@dataclass
class SessionSnapshot:
    """Read-only view of a running game (never exposes the target word)."""
    player_id: str
    routing_token: str
    mode: str
    word_length: int
    hint: str
    history: List[str]
    evaluations: List[List[str]]
    remaining_attempts: int
    letter_status: Dict[str, str]
    parent_routing_token: Optional[str] = None
    parent_message_id: Optional[str] = None
