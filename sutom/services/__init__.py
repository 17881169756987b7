"""
Services Package

Contains all business logic and service classes.
"""

from .word_repository import WordRepository
from .game_engine import GameEngine, evaluate_guess
from .session_registry import GameSession, SessionRegistry
from .guess_router import GuessRouter
from .responder import Responder, dispatch, hidden_board
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordRepository',
    'GameEngine', 'evaluate_guess',
    'GameSession', 'SessionRegistry',
    'GuessRouter',
    'Responder', 'dispatch', 'hidden_board',
    'GameService', 'get_game_service', 'initialize_game_service'
]
