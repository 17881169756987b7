"""
Game Service

Facade used by the HTTP controllers and the Socket.IO handlers to start,
play and stop games. It owns the registry and the router for one
application instance.
"""

from typing import Optional

from flask import current_app

from ..models.errors import InvalidGameRequest, NoActiveSession
from ..models.game import (
    GameMode, LookupKey, ResponseDescriptor, SessionSnapshot, TerminalNotice
)
from ..utils.game_logger import game_logger
from .guess_router import GuessRouter, describe_terminal
from .session_registry import GameSession, SessionRegistry
from .word_repository import WordRepository


EXTENSION_KEY = 'sutom'


def parse_mode(value) -> GameMode:
    """Accepts a GameMode or its string value ('standard', 'daily')."""
    if isinstance(value, GameMode):
        return value
    try:
        return GameMode(str(value or GameMode.STANDARD.value).lower())
    except ValueError:
        raise InvalidGameRequest('Invalid game mode. Must be "standard" or "daily"') from None


class GameService:
    """
    Core game service for one server instance.

    This class handles:
    - Game creation, one live game per player
    - Guess routing by player or by conversation
    - Stopping games and revealing the word
    - Game event logging
    """

    def __init__(self, word_repository: WordRepository):
        self.word_repository = word_repository
        self.registry = SessionRegistry(word_repository)
        self.router = GuessRouter(self.registry)

    def start_game(self, player_id: str, routing_token: str, mode=GameMode.STANDARD,
                   parent_routing_token: Optional[str] = None,
                   word_length: Optional[int] = None) -> GameSession:
        """
        Creates a new game bound to a conversation.

        Returns:
            GameSession: The new session

        Raises:
            SessionAlreadyExists: The player already plays; the error carries
                the existing session so its conversation can be referenced
        """
        session = self.registry.create(
            player_id, routing_token, parse_mode(mode),
            parent_routing_token=parent_routing_token,
            word_length=word_length,
        )
        game_logger.log_game_event(
            player_id, 'game_started', routing_token,
            mode=session.mode.value, word_length=session.engine.word_length,
            parent_routing_token=parent_routing_token
        )
        game_logger.logger.debug(f"Word to guess for {player_id}: {session.target_word}")
        return session

    def submit_guess(self, lookup_key: LookupKey, text: Optional[str],
                     author_id: Optional[str] = None,
                     routing_token: Optional[str] = None) -> ResponseDescriptor:
        """Routes one guess and logs the end of the game if it ended."""
        descriptor = self.router.route(lookup_key, text, author_id=author_id,
                                       routing_token=routing_token)

        if isinstance(descriptor, TerminalNotice):
            game_logger.log_game_event(
                descriptor.player_id,
                'game_won' if descriptor.won else 'game_lost',
                descriptor.routing_token,
                mode=descriptor.mode, attempts_used=descriptor.attempts_used
            )
            game_logger.logger.debug(
                f"Game of {descriptor.player_id} ended, word was {descriptor.revealed_word}"
            )
        return descriptor

    def stop_game(self, player_id: str) -> TerminalNotice:
        """
        Abandons a player's game and reveals the word.

        Raises:
            NoActiveSession: If the player has no game in progress
        """
        session = self.registry.get_by_player(player_id)
        with session.lock:
            if not self.registry.is_registered(session):
                raise NoActiveSession(player_id)
            notice = describe_terminal(session, won=False, stopped=True)
            self.registry.delete(player_id)

        game_logger.log_game_event(
            player_id, 'game_stopped', session.routing_token,
            mode=notice.mode, attempts_used=notice.attempts_used
        )
        game_logger.logger.debug(f"Game of {player_id} stopped, word was {notice.revealed_word}")
        return notice

    def get_session(self, player_id: str) -> SessionSnapshot:
        """Current state of a player's game, without the target word."""
        session = self.registry.get_by_player(player_id)
        with session.lock:
            return snapshot(session)

    def set_parent_message_id(self, player_id: str, message_id: str) -> None:
        self.registry.set_parent_message_id(player_id, message_id)

    def active_games(self) -> int:
        return len(self.registry)


def snapshot(session: GameSession) -> SessionSnapshot:
    engine = session.engine
    return SessionSnapshot(
        player_id=session.player_id,
        routing_token=session.routing_token,
        mode=session.mode.value,
        word_length=engine.word_length,
        hint=engine.hint(),
        history=list(engine.guesses),
        evaluations=engine.serialized_evaluations(),
        remaining_attempts=engine.remaining_attempts(),
        letter_status=engine.letter_status(),
        parent_routing_token=session.parent_routing_token,
        parent_message_id=session.parent_message_id,
    )


def get_game_service() -> Optional[GameService]:
    """Get the game service of the current application."""
    return current_app.extensions.get(EXTENSION_KEY)


def initialize_game_service(app) -> GameService:
    """
    Builds the game service for an application from its configuration.

    Loading the dictionary is fatal at startup: errors propagate.
    """
    word_repository = WordRepository.from_files(
        app.config['SOLUTIONS_PATH'], app.config.get('GUESSES_PATH')
    )
    game_service = GameService(word_repository)
    app.extensions[EXTENSION_KEY] = game_service
    stats = word_repository.statistics()
    game_logger.logger.info(
        f"Dictionary loaded: {stats['solutions']} solutions, "
        f"{stats['accepted_guesses']} accepted guesses"
    )
    return game_service
