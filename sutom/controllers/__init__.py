"""
Controllers Package

HTTP endpoints exposing the game service.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
