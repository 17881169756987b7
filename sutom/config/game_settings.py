"""
Game Configuration Constants Module

Game rules shared by the engine, the word repository and the router.
These are business rules rather than deployment settings, so they are
Final constants instead of environment variables.
"""

import os
from typing import Final

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 10

RESOURCES_DIR: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'resources'
)

DEFAULT_SOLUTIONS_PATH: Final[str] = os.path.join(RESOURCES_DIR, 'solutions.txt')
"""Words that can be drawn as a target."""

DEFAULT_GUESSES_PATH: Final[str] = os.path.join(RESOURCES_DIR, 'guesses.txt')
"""Words accepted as guesses (the solutions are always accepted too)."""


def is_supported_length(length: int) -> bool:
    """Check whether a word length is playable."""
    return MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH


def validate_word(word: str) -> None:
    """
    Validates a single dictionary entry.

    Raises:
        ValueError: If the word is not purely alphabetic lowercase or its
            length is outside the supported range
    """
    if not word.isalpha() or not word.islower():
        raise ValueError(f"Word '{word}' must contain only lowercase letters")
    if not is_supported_length(len(word)):
        raise ValueError(
            f"Word '{word}' must be between {MIN_WORD_LENGTH} and "
            f"{MAX_WORD_LENGTH} letters long"
        )
