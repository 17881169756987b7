"""
Data Models Package

Contains all data models, descriptors and errors used throughout the application.
"""

from .game import (
    LetterStatus, AttemptOutcome, GameStatus, GameMode,
    PlayerKey, RoutingKey, BoardUpdate, TerminalNotice, ErrorNotice,
    SessionSnapshot
)
from .errors import (
    SutomError, SessionAlreadyExists, NoActiveSession, RoutingTokenInUse,
    GameFinished, InvalidGameRequest, MalformedGuess, WrongContext,
    NotSessionOwner, DictionaryLoadError, EmptyDictionary
)

__all__ = [
    'LetterStatus', 'AttemptOutcome', 'GameStatus', 'GameMode',
    'PlayerKey', 'RoutingKey', 'BoardUpdate', 'TerminalNotice', 'ErrorNotice',
    'SessionSnapshot',
    'SutomError', 'SessionAlreadyExists', 'NoActiveSession', 'RoutingTokenInUse',
    'GameFinished', 'InvalidGameRequest', 'MalformedGuess', 'WrongContext',
    'NotSessionOwner', 'DictionaryLoadError', 'EmptyDictionary'
]
