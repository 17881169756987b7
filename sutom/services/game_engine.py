"""
Game Engine

One engine per game in progress. Owns the target word and the guess
history, validates guesses and classifies each attempt.
"""

from collections import Counter
from typing import Dict, List, Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import GameFinished
from ..models.game import AttemptOutcome, GameStatus, LetterStatus, LETTER_STATUS_PRIORITY


def evaluate_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Evaluates a guess against the target, handling duplicate letters.

    Exact matches are resolved first and consume their letter; remaining
    positions are then marked MISPLACED only while unconsumed occurrences
    of that letter are left in the target.

    Args:
        guess: Normalized guess, same length as target
        target: The word to find

    Returns:
        List[LetterStatus]: One status per position
    """
    if len(guess) != len(target):
        raise ValueError("Guess and target must have the same length")

    remaining = Counter(target)
    result: List[Optional[LetterStatus]] = [None] * len(target)

    # First pass: exact position matches
    for i, (letter, expected) in enumerate(zip(guess, target)):
        if letter == expected:
            result[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: misplaced letters limited by what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterStatus.MISPLACED
            remaining[letter] -= 1
        else:
            result[i] = LetterStatus.INCORRECT

    return result  # type: ignore[return-value]


class GameEngine:
    """
    Bounded-attempt word game.

    IN_PROGRESS moves to WON on an all-correct guess, or to LOST when the
    last allowed guess is not all-correct. Both are terminal.
    """

    def __init__(self, target_word: str, word_repository, max_attempts: int = MAX_ATTEMPTS):
        self.target_word = target_word.strip().lower()
        self.word_repository = word_repository
        self.max_attempts = max_attempts
        self.guesses: List[str] = []
        self.status = GameStatus.IN_PROGRESS

    @property
    def word_length(self) -> int:
        return len(self.target_word)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def remaining_attempts(self) -> int:
        return self.max_attempts - len(self.guesses)

    def hint(self) -> str:
        """First letter revealed, the rest hidden."""
        return self.target_word[0] + '_' * (self.word_length - 1)

    def check_guess(self, candidate: str) -> AttemptOutcome:
        """Validation only; returns VALID_GUESS when the guess may be appended."""
        if len(candidate) != self.word_length:
            return AttemptOutcome.LENGTH_MISMATCH
        if candidate in self.guesses:
            return AttemptOutcome.REPEATED
        if not self.word_repository.exists(candidate):
            return AttemptOutcome.UNKNOWN_WORD
        return AttemptOutcome.VALID_GUESS

    def add_guess(self, raw: str) -> AttemptOutcome:
        """
        Validates and records a guess.

        Rejected guesses (length mismatch, repeat, unknown word) leave the
        history untouched and do not consume an attempt.

        Raises:
            GameFinished: If the game already reached a terminal status
        """
        if self.is_over:
            raise GameFinished(f"Game already {self.status.value.lower()}")

        candidate = raw.strip().lower()
        outcome = self.check_guess(candidate)
        if outcome.is_rejection:
            return outcome

        self.guesses.append(candidate)
        evaluation = evaluate_guess(candidate, self.target_word)

        if all(status == LetterStatus.CORRECT for status in evaluation):
            self.status = GameStatus.WON
            return AttemptOutcome.WON

        if len(self.guesses) >= self.max_attempts:
            self.status = GameStatus.LOST
            return AttemptOutcome.LOST

        return AttemptOutcome.VALID_GUESS

    def evaluations(self) -> List[List[LetterStatus]]:
        return [evaluate_guess(guess, self.target_word) for guess in self.guesses]

    def serialized_evaluations(self) -> List[List[str]]:
        return [[status.value for status in row] for row in self.evaluations()]

    def letter_status(self) -> Dict[str, str]:
        """
        Keyboard summary: the best status each guessed letter has reached.
        """
        summary: Dict[str, LetterStatus] = {}
        for guess, row in zip(self.guesses, self.evaluations()):
            for letter, new_status in zip(guess, row):
                current = summary.get(letter)
                if current is None or LETTER_STATUS_PRIORITY[new_status] > LETTER_STATUS_PRIORITY[current]:
                    summary[letter] = new_status
        return {letter: status.value for letter, status in sorted(summary.items())}
