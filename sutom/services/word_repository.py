"""
Word Repository

Loads the fixed word lists once at startup and answers random-draw and
membership queries. There is no write path at runtime.
"""

import random
from datetime import date, datetime, timezone
from typing import Dict, FrozenSet, List, Optional

from ..config.game_settings import validate_word
from ..models.errors import DictionaryLoadError, EmptyDictionary


def _normalize(word: str) -> str:
    return word.strip().lower()


def _load_word_file(path: str) -> List[str]:
    """
    Load a line-delimited word list.

    Args:
        path: Location of the word file

    Returns:
        List[str]: Normalized words in file order

    Raises:
        DictionaryLoadError: If the file is missing or holds an invalid entry
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise DictionaryLoadError(f"Word list file not found: {path}") from e

    words = []
    for line_number, line in enumerate(lines, start=1):
        word = _normalize(line)
        if not word:
            continue
        try:
            validate_word(word)
        except ValueError as e:
            raise DictionaryLoadError(f"{path}:{line_number}: {e}") from e
        words.append(word)
    return words


class WordRepository:
    """
    Dictionary of playable words partitioned by length.

    Solutions are the words that may be drawn as a target; guesses are the
    words a player may submit. Every solution is also a valid guess.
    """

    def __init__(self, solutions: List[str], guesses: Optional[List[str]] = None,
                 rng: Optional[random.Random] = None):
        # Deduplicate while keeping file order so the daily draw is stable
        self.solutions: List[str] = list(dict.fromkeys(_normalize(w) for w in solutions))
        if not self.solutions:
            raise EmptyDictionary()

        self._by_length: Dict[int, List[str]] = {}
        for word in self.solutions:
            self._by_length.setdefault(len(word), []).append(word)

        self._known: FrozenSet[str] = frozenset(self.solutions) | frozenset(
            _normalize(w) for w in (guesses or [])
        )
        self._rng = rng or random.Random()

    @classmethod
    def from_files(cls, solutions_path: str, guesses_path: Optional[str] = None) -> 'WordRepository':
        """Build a repository from the line-delimited resources."""
        solutions = _load_word_file(solutions_path)
        guesses = _load_word_file(guesses_path) if guesses_path else []
        if not solutions:
            raise DictionaryLoadError(f"Solutions list is empty: {solutions_path}")
        return cls(solutions, guesses)

    def random_word(self, length: Optional[int] = None) -> str:
        """
        Draw a target word uniformly.

        Args:
            length: Required word length, or None to draw from every length

        Raises:
            EmptyDictionary: If no solution of that length exists
        """
        if length is None:
            return self._rng.choice(self.solutions)
        candidates = self._by_length.get(length)
        if not candidates:
            raise EmptyDictionary(length)
        return self._rng.choice(candidates)

    def daily_word(self, day: Optional[date] = None, length: Optional[int] = None) -> str:
        """
        Word of the day, identical for every player on the same UTC calendar day.
        """
        day = day or datetime.now(timezone.utc).date()
        candidates = self.solutions if length is None else self._by_length.get(length)
        if not candidates:
            raise EmptyDictionary(length)
        chooser = random.Random(day.isoformat())
        return chooser.choice(candidates)

    def exists(self, candidate: str) -> bool:
        return _normalize(candidate) in self._known

    def lengths(self) -> List[int]:
        return sorted(self._by_length)

    def statistics(self) -> dict:
        """Counts used by the health endpoint."""
        return {
            'solutions': len(self.solutions),
            'accepted_guesses': len(self._known),
            'solutions_by_length': {
                str(length): len(words) for length, words in sorted(self._by_length.items())
            }
        }
