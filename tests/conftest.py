import os
import sys
import pytest

# Ensure the project root (containing the `sutom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sutom import create_app
from sutom.config import TestingConfig
from sutom.services.word_repository import WordRepository

FIXTURES_DIR = os.path.join(CURRENT_DIR, 'fixtures')

# Every guess a test may play; the target is always "radar" for 5 letters
LOSING_GUESSES = ['cable', 'eagle', 'tiger', 'house', 'mouse', 'plant']


class TestConfig(TestingConfig):
    SECRET_KEY = 'test-secret'
    SOLUTIONS_PATH = os.path.join(FIXTURES_DIR, 'solutions.txt')
    GUESSES_PATH = os.path.join(FIXTURES_DIR, 'guesses.txt')


@pytest.fixture()
def word_repository():
    return WordRepository.from_files(TestConfig.SOLUTIONS_PATH, TestConfig.GUESSES_PATH)


@pytest.fixture()
def app_and_socketio():
    return create_app(TestConfig)


@pytest.fixture()
def flask_app(app_and_socketio):
    application, _ = app_and_socketio
    with application.app_context():
        yield application


@pytest.fixture()
def game_service(flask_app):
    return flask_app.extensions['sutom']


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(app_and_socketio):
    application, socketio = app_and_socketio
    test_client = socketio.test_client(application)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
