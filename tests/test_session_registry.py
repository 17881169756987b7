import threading

import pytest

from sutom.models.errors import (
    InvalidGameRequest, NoActiveSession, RoutingTokenInUse, SessionAlreadyExists
)
from sutom.models.game import GameMode
from sutom.services.session_registry import SessionRegistry


@pytest.fixture()
def registry(word_repository):
    return SessionRegistry(word_repository)


def test_create_and_lookup_both_ways(registry):
    session = registry.create('P1', 'T1', word_length=5)

    assert session.target_word == 'radar'
    assert registry.get_by_player('P1') is session
    assert registry.get_by_routing_token('T1') is session
    assert 'P1' in registry
    assert len(registry) == 1


def test_one_session_per_player(registry):
    first = registry.create('P1', 'T1', word_length=5)
    with pytest.raises(SessionAlreadyExists) as excinfo:
        registry.create('P1', 'T2', word_length=5)

    assert excinfo.value.session is first
    assert excinfo.value.session.routing_token == 'T1'
    # The failed create left no trace in the reverse index
    with pytest.raises(NoActiveSession):
        registry.get_by_routing_token('T2')


def test_routing_token_bound_once(registry):
    registry.create('P1', 'T1', word_length=5)
    with pytest.raises(RoutingTokenInUse):
        registry.create('P2', 'T1', word_length=5)
    assert 'P2' not in registry


def test_delete_removes_both_indices(registry):
    registry.create('P1', 'T1', word_length=5)

    assert registry.delete('P1') is True
    assert registry.delete('P1') is False

    with pytest.raises(NoActiveSession):
        registry.get_by_player('P1')
    with pytest.raises(NoActiveSession):
        registry.get_by_routing_token('T1')

    # Both the player and the token are free again
    registry.create('P1', 'T1', word_length=6)
    assert registry.get_by_routing_token('T1').target_word == 'planet'


def test_daily_mode_needs_parent(registry):
    with pytest.raises(InvalidGameRequest):
        registry.create('P1', 'T1', GameMode.DAILY)

    session = registry.create('P1', 'T1', GameMode.DAILY, parent_routing_token='C1', word_length=5)
    assert session.mode == GameMode.DAILY
    assert session.parent_routing_token == 'C1'
    assert session.target_word == 'radar'


def test_standard_mode_rejects_parent(registry):
    with pytest.raises(InvalidGameRequest):
        registry.create('P1', 'T1', GameMode.STANDARD, parent_routing_token='C1')


def test_unsupported_word_length(registry):
    with pytest.raises(InvalidGameRequest):
        registry.create('P1', 'T1', word_length=3)
    with pytest.raises(InvalidGameRequest):
        registry.create('P1', 'T1', word_length=11)
    assert len(registry) == 0


def test_parent_message_id(registry):
    registry.create('P1', 'T1', GameMode.DAILY, parent_routing_token='C1', word_length=5)
    registry.set_parent_message_id('P1', 'M42')
    assert registry.get_by_player('P1').parent_message_id == 'M42'

    with pytest.raises(NoActiveSession):
        registry.set_parent_message_id('P2', 'M43')


def test_concurrent_creates_keep_indices_consistent(registry):
    errors = []

    def worker(index):
        # Every player tries twice, the second attempt must fail
        for attempt in range(2):
            try:
                registry.create(f'P{index}', f'T{index}-{attempt}', word_length=5)
            except SessionAlreadyExists:
                errors.append(index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(32)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == 32
    assert sorted(errors) == list(range(32))
    for index in range(32):
        session = registry.get_by_player(f'P{index}')
        assert registry.get_by_routing_token(session.routing_token) is session
