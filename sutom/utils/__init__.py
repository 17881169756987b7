"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service, websocket_game_service_required
from .helpers import descriptor_kind, descriptor_payload, parse_word_length
from .game_logger import game_logger

__all__ = [
    'require_game_service', 'websocket_game_service_required',
    'descriptor_kind', 'descriptor_payload', 'parse_word_length',
    'game_logger'
]
