"""
Session Registry

In-memory directory of games in progress. Sessions are indexed by player
and, in reverse, by the routing token of the conversation they are bound
to. Both indices are guarded by a single lock and always change together.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..config.game_settings import MIN_WORD_LENGTH, MAX_WORD_LENGTH, is_supported_length
from ..models.errors import (
    InvalidGameRequest, NoActiveSession, RoutingTokenInUse, SessionAlreadyExists
)
from ..models.game import GameMode
from .game_engine import GameEngine


@dataclass
class GameSession:
    """One player's game and where it is played."""
    player_id: str
    routing_token: str
    engine: GameEngine
    mode: GameMode = GameMode.STANDARD
    parent_routing_token: Optional[str] = None
    parent_message_id: Optional[str] = None
    created_at: float = field(default_factory=time.time)
    # Serializes guesses for this session
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def target_word(self) -> str:
        return self.engine.target_word


class SessionRegistry:
    """
    At most one session per player, at most one session per routing token.

    There is no time-based expiry: a session lives until it ends or is
    stopped, or until the process exits.
    """

    def __init__(self, word_repository):
        self.word_repository = word_repository
        self._lock = threading.RLock()
        self._by_player: Dict[str, GameSession] = {}
        self._player_by_token: Dict[str, str] = {}

    def create(self, player_id: str, routing_token: str,
               mode: GameMode = GameMode.STANDARD,
               parent_routing_token: Optional[str] = None,
               word_length: Optional[int] = None) -> GameSession:
        """
        Creates a game for a player and binds it to a conversation.

        Args:
            player_id: Owner of the game
            routing_token: Conversation the game is played in
            mode: Standard draws a random word, daily uses the word of the day
            parent_routing_token: Daily mode only, where progress is mirrored
            word_length: Optional target length, any length when omitted

        Returns:
            GameSession: The registered session

        Raises:
            InvalidGameRequest: If the parameters are inconsistent
            SessionAlreadyExists: If the player already has a session
            RoutingTokenInUse: If another session is bound to the token
            EmptyDictionary: If no word of the requested length exists
        """
        if not player_id or not routing_token:
            raise InvalidGameRequest("Player and routing token are required")
        if mode == GameMode.DAILY and not parent_routing_token:
            raise InvalidGameRequest("Daily games need a parent routing token")
        if mode == GameMode.STANDARD and parent_routing_token:
            raise InvalidGameRequest("Only daily games have a parent routing token")
        if word_length is not None and not is_supported_length(word_length):
            raise InvalidGameRequest(
                f"Word length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}"
            )

        with self._lock:
            existing = self._by_player.get(player_id)
            if existing is not None:
                raise SessionAlreadyExists(existing)
            if routing_token in self._player_by_token:
                raise RoutingTokenInUse(routing_token)

            if mode == GameMode.DAILY:
                target = self.word_repository.daily_word(length=word_length)
            else:
                target = self.word_repository.random_word(word_length)
            engine = GameEngine(target, self.word_repository)

            session = GameSession(
                player_id=player_id,
                routing_token=routing_token,
                engine=engine,
                mode=mode,
                parent_routing_token=parent_routing_token,
            )
            self._by_player[player_id] = session
            self._player_by_token[routing_token] = player_id
            return session

    def get_by_player(self, player_id: str) -> GameSession:
        with self._lock:
            session = self._by_player.get(player_id)
            if session is None:
                raise NoActiveSession(player_id)
            return session

    def get_by_routing_token(self, routing_token: str) -> GameSession:
        with self._lock:
            player_id = self._player_by_token.get(routing_token)
            if player_id is None:
                raise NoActiveSession(routing_token)
            return self._by_player[player_id]

    def is_registered(self, session: GameSession) -> bool:
        """True while this exact session object is the player's live session."""
        with self._lock:
            return self._by_player.get(session.player_id) is session

    def delete(self, player_id: str) -> bool:
        """
        Removes a player's session from both indices.

        Returns:
            bool: True if a session was removed, False if none existed
        """
        with self._lock:
            session = self._by_player.pop(player_id, None)
            if session is None:
                return False
            del self._player_by_token[session.routing_token]
            return True

    def set_parent_message_id(self, player_id: str, message_id: str) -> None:
        with self._lock:
            self.get_by_player(player_id).parent_message_id = message_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_player)

    def __contains__(self, player_id: str) -> bool:
        with self._lock:
            return player_id in self._by_player
