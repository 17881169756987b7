import random
from collections import Counter

import pytest

from sutom.models.errors import GameFinished
from sutom.models.game import AttemptOutcome, GameStatus, LetterStatus
from sutom.services.game_engine import GameEngine, evaluate_guess
from sutom.services.word_repository import WordRepository

C = LetterStatus.CORRECT
M = LetterStatus.MISPLACED
I = LetterStatus.INCORRECT


@pytest.fixture()
def engine():
    repository = WordRepository(
        ['radar'],
        ['cable', 'eagle', 'tiger', 'house', 'mouse', 'plant', 'drama', 'arrad']
    )
    return GameEngine('radar', repository)


def test_duplicate_letters_vector():
    assert evaluate_guess('arrad', 'radar') == [M, M, M, C, M]


def test_exact_match_consumes_letter_before_misplaced():
    # Only one "e" in the target and it is matched in place
    assert evaluate_guess('eerie', 'abide') == [I, I, I, M, C]
    assert evaluate_guess('speed', 'abide') == [I, I, M, I, M]


def test_target_is_all_correct():
    assert evaluate_guess('radar', 'radar') == [C] * 5


def test_evaluation_is_pure():
    first = evaluate_guess('arrad', 'radar')
    second = evaluate_guess('arrad', 'radar')
    assert first == second


def test_length_mismatch_is_rejected_by_evaluate():
    with pytest.raises(ValueError):
        evaluate_guess('abc', 'abcd')


def test_marks_never_exceed_target_occurrences():
    rng = random.Random(1234)
    alphabet = 'aabbcde'
    for _ in range(2000):
        length = rng.randint(4, 10)
        target = ''.join(rng.choice(alphabet) for _ in range(length))
        guess = ''.join(rng.choice(alphabet) for _ in range(length))
        evaluation = evaluate_guess(guess, target)

        marked = Counter(
            letter for letter, status in zip(guess, evaluation) if status != I
        )
        target_counts = Counter(target)
        for letter, count in marked.items():
            assert count <= target_counts[letter], (guess, target, evaluation)

        # Exact matches are always reported as correct
        for i, (g, t) in enumerate(zip(guess, target)):
            assert (evaluation[i] == C) == (g == t)


def test_winning_guess(engine):
    assert engine.add_guess('  RADAR ') == AttemptOutcome.WON
    assert engine.status == GameStatus.WON
    assert engine.is_over


def test_valid_guess_keeps_game_running(engine):
    assert engine.add_guess('cable') == AttemptOutcome.VALID_GUESS
    assert engine.guesses == ['cable']
    assert engine.remaining_attempts() == 5
    assert engine.status == GameStatus.IN_PROGRESS


def test_validation_order_and_no_mutation(engine):
    assert engine.add_guess('tigers') == AttemptOutcome.LENGTH_MISMATCH
    assert engine.add_guess('zzzzz') == AttemptOutcome.UNKNOWN_WORD
    assert engine.guesses == []

    engine.add_guess('cable')
    assert engine.add_guess('CABLE') == AttemptOutcome.REPEATED
    assert engine.guesses == ['cable']
    assert engine.remaining_attempts() == 5


def test_sixth_miss_loses(engine):
    outcomes = [engine.add_guess(word) for word in
                ['cable', 'eagle', 'tiger', 'house', 'mouse', 'plant']]
    assert outcomes[:5] == [AttemptOutcome.VALID_GUESS] * 5
    assert outcomes[5] == AttemptOutcome.LOST
    assert engine.status == GameStatus.LOST
    assert engine.remaining_attempts() == 0


def test_win_on_last_attempt_is_a_win(engine):
    for word in ['cable', 'eagle', 'tiger', 'house', 'mouse']:
        engine.add_guess(word)
    assert engine.add_guess('radar') == AttemptOutcome.WON


def test_guess_after_game_over_raises(engine):
    engine.add_guess('radar')
    with pytest.raises(GameFinished):
        engine.add_guess('cable')


def test_letter_status_keeps_best_status(engine):
    engine.add_guess('drama')
    engine.add_guess('arrad')
    status = engine.letter_status()
    # "a" was correct at index 3 in "arrad"
    assert status['a'] == 'CORRECT'
    assert status['m'] == 'INCORRECT'
    assert status['d'] == 'MISPLACED'


def test_evaluations_follow_history(engine):
    engine.add_guess('arrad')
    assert engine.serialized_evaluations() == [
        ['MISPLACED', 'MISPLACED', 'MISPLACED', 'CORRECT', 'MISPLACED']
    ]


def test_hint_reveals_first_letter(engine):
    assert engine.hint() == 'r____'
