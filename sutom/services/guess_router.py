"""
Guess Router

Resolves the session an inbound guess belongs to, hands the guess to its
engine and turns the engine outcome into a response descriptor. Finished
games are removed from the registry before the descriptor is returned.
"""

from typing import Optional

from ..models.errors import MalformedGuess, NoActiveSession, NotSessionOwner, WrongContext
from ..models.game import (
    AttemptOutcome, BoardUpdate, ErrorNotice, LookupKey, PlayerKey,
    ResponseDescriptor, RoutingKey, TerminalNotice
)
from .session_registry import GameSession, SessionRegistry


def parse_guess(raw_text: Optional[str]) -> str:
    """
    A guess is exactly one token.

    Raises:
        MalformedGuess: If the text is empty or holds several words
    """
    if raw_text is not None and not isinstance(raw_text, str):
        raise MalformedGuess("A guess must be a single word")
    tokens = (raw_text or '').split()
    if len(tokens) != 1:
        raise MalformedGuess("A guess must be a single word")
    return tokens[0]


def remaining_attempts_note(remaining: int) -> str:
    return f"{remaining} attempt{'s' if remaining > 1 else ''} left."


class GuessRouter:
    """Routes guesses addressed either to a player or to a conversation."""

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    def resolve(self, lookup_key: LookupKey) -> GameSession:
        if isinstance(lookup_key, PlayerKey):
            return self.registry.get_by_player(lookup_key.player_id)
        if isinstance(lookup_key, RoutingKey):
            return self.registry.get_by_routing_token(lookup_key.routing_token)
        raise TypeError(f"Unsupported lookup key: {lookup_key!r}")

    def route(self, lookup_key: LookupKey, raw_text: Optional[str],
              author_id: Optional[str] = None,
              routing_token: Optional[str] = None) -> ResponseDescriptor:
        """
        Submits a guess to the session found through the lookup key.

        Args:
            lookup_key: PlayerKey for explicit guesses, RoutingKey for
                free-text messages in a game conversation
            raw_text: The guess as typed
            author_id: For RoutingKey lookups, who wrote the message
            routing_token: For PlayerKey lookups, the conversation the
                guess was typed in

        Returns:
            BoardUpdate, TerminalNotice or ErrorNotice

        Raises:
            MalformedGuess: If raw_text is not exactly one word
            NoActiveSession: If no game matches the lookup key
            WrongContext: If an explicit guess came from another conversation
            NotSessionOwner: If a free-text guess came from someone else
        """
        guess = parse_guess(raw_text)
        session = self.resolve(lookup_key)

        if isinstance(lookup_key, PlayerKey) and routing_token is not None \
                and routing_token != session.routing_token:
            raise WrongContext(session.routing_token)
        if isinstance(lookup_key, RoutingKey) and author_id is not None \
                and author_id != session.player_id:
            raise NotSessionOwner(f"Only {session.player_id} can play in this conversation")

        with session.lock:
            # A racing guess may have concluded the game while we waited
            if not self.registry.is_registered(session) or session.engine.is_over:
                raise NoActiveSession(lookup_key)

            outcome = session.engine.add_guess(guess)
            descriptor = self._describe(session, outcome)

            if outcome.is_terminal:
                self.registry.delete(session.player_id)

        return descriptor

    def _describe(self, session: GameSession, outcome: AttemptOutcome) -> ResponseDescriptor:
        engine = session.engine

        if outcome == AttemptOutcome.REPEATED:
            return self._error(session, "You already tried this word!")
        if outcome == AttemptOutcome.LENGTH_MISMATCH:
            return self._error(
                session, f"Your word does not have the right length! "
                         f"({engine.word_length} letters expected)"
            )
        if outcome == AttemptOutcome.UNKNOWN_WORD:
            return self._error(session, "This word is not in the dictionary!")

        if outcome.is_terminal:
            return describe_terminal(session, won=outcome == AttemptOutcome.WON)

        remaining = engine.remaining_attempts()
        return BoardUpdate(
            player_id=session.player_id,
            routing_token=session.routing_token,
            mode=session.mode.value,
            history=list(engine.guesses),
            evaluations=engine.serialized_evaluations(),
            remaining_attempts=remaining,
            letter_status=engine.letter_status(),
            note=remaining_attempts_note(remaining),
            parent_routing_token=session.parent_routing_token,
        )

    @staticmethod
    def _error(session: GameSession, message: str) -> ErrorNotice:
        return ErrorNotice(
            player_id=session.player_id,
            routing_token=session.routing_token,
            message=message,
        )


def describe_terminal(session: GameSession, won: bool, stopped: bool = False) -> TerminalNotice:
    engine = session.engine
    return TerminalNotice(
        player_id=session.player_id,
        routing_token=session.routing_token,
        mode=session.mode.value,
        won=won,
        revealed_word=engine.target_word,
        history=list(engine.guesses),
        evaluations=engine.serialized_evaluations(),
        attempts_used=len(engine.guesses),
        stopped=stopped,
        parent_routing_token=session.parent_routing_token,
    )
