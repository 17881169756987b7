import random
from datetime import date

import pytest

from sutom.models.errors import DictionaryLoadError, EmptyDictionary
from sutom.services.word_repository import WordRepository


def _write(path, lines):
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return str(path)


def test_load_normalizes_entries(tmp_path):
    solutions = _write(tmp_path / 'solutions.txt', ['  Radar ', '', 'PLANET', 'radar'])
    guesses = _write(tmp_path / 'guesses.txt', ['cable', ' Tiger'])

    repository = WordRepository.from_files(solutions, guesses)

    assert repository.solutions == ['radar', 'planet']
    assert repository.lengths() == [5, 6]
    assert repository.exists(' TIGER ')
    assert repository.exists('planet')
    assert not repository.exists('zebra')


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(DictionaryLoadError):
        WordRepository.from_files(str(tmp_path / 'missing.txt'))


def test_invalid_entry_is_a_load_error(tmp_path):
    solutions = _write(tmp_path / 'solutions.txt', ['radar', 'ice-cream'])
    with pytest.raises(DictionaryLoadError):
        WordRepository.from_files(solutions)

    too_short = _write(tmp_path / 'short.txt', ['cat'])
    with pytest.raises(DictionaryLoadError):
        WordRepository.from_files(too_short)


def test_empty_solutions_is_a_load_error(tmp_path):
    solutions = _write(tmp_path / 'solutions.txt', ['', '   '])
    with pytest.raises(DictionaryLoadError):
        WordRepository.from_files(solutions)


def test_random_word_respects_length():
    repository = WordRepository(['radar', 'tiger', 'planet'], rng=random.Random(7))
    for _ in range(20):
        assert repository.random_word(5) in ('radar', 'tiger')
    assert repository.random_word(6) == 'planet'
    assert repository.random_word() in repository.solutions


def test_random_word_without_candidates():
    repository = WordRepository(['radar'])
    with pytest.raises(EmptyDictionary) as excinfo:
        repository.random_word(8)
    assert excinfo.value.length == 8


def test_daily_word_is_stable_for_a_day():
    repository = WordRepository(['radar', 'tiger', 'plant', 'house', 'mouse', 'eagle'])
    day = date(2024, 3, 14)
    assert repository.daily_word(day) == repository.daily_word(day)
    assert repository.daily_word(day, length=5) in repository.solutions

    other = WordRepository(['radar', 'tiger', 'plant', 'house', 'mouse', 'eagle'])
    assert other.daily_word(day) == repository.daily_word(day)


def test_statistics_counts_by_length():
    repository = WordRepository(['radar', 'planet'], ['cable'])
    stats = repository.statistics()
    assert stats['solutions'] == 2
    assert stats['accepted_guesses'] == 3
    assert stats['solutions_by_length'] == {'5': 1, '6': 1}


def test_packaged_dictionary_loads():
    from sutom.config.game_settings import DEFAULT_GUESSES_PATH, DEFAULT_SOLUTIONS_PATH

    repository = WordRepository.from_files(DEFAULT_SOLUTIONS_PATH, DEFAULT_GUESSES_PATH)
    assert repository.lengths() == list(range(4, 11))
    for word in repository.solutions:
        assert repository.exists(word)


def test_daily_word_defaults_to_utc_day():
    from datetime import datetime, timezone

    repository = WordRepository(['radar', 'tiger', 'plant', 'house', 'mouse', 'eagle'])
    assert repository.daily_word() == repository.daily_word(datetime.now(timezone.utc).date())
