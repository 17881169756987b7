"""
Game Errors

Exceptions raised by the word repository, the session registry and the
guess router. Engine validation failures are not exceptions: they are
AttemptOutcome values that the router turns into an ErrorNotice.
"""


class SutomError(Exception):
    """Base class for every error raised by the game core."""


# State errors: caller protocol misuse, recoverable

class SessionAlreadyExists(SutomError):
    """The player already has a game in progress."""

    def __init__(self, session):
        self.session = session
        super().__init__(
            f"Player {session.player_id} already has a game in progress "
            f"in {session.routing_token}"
        )


class NoActiveSession(SutomError):
    """No game in progress for the given player or routing token."""

    def __init__(self, key=None):
        self.key = key
        super().__init__("No game in progress")


class RoutingTokenInUse(SutomError):
    """The conversation is already bound to another player's game."""

    def __init__(self, routing_token: str):
        self.routing_token = routing_token
        super().__init__(f"Routing token {routing_token} is already bound to a game")


class GameFinished(SutomError):
    """A guess was submitted to an engine that already reached Won or Lost."""


# Routing and input errors

class InvalidGameRequest(SutomError, ValueError):
    """A start request had inconsistent parameters."""


class MalformedGuess(SutomError, ValueError):
    """The guess text was empty or held more than one word."""


class WrongContext(SutomError):
    """An explicit guess was sent from a conversation other than the game's."""

    def __init__(self, expected_token: str):
        self.expected_token = expected_token
        super().__init__(f"Guesses for this game must be sent in {expected_token}")


class NotSessionOwner(SutomError):
    """A free-text message in a game conversation came from someone else."""


# Resource errors: fatal at startup only

class DictionaryLoadError(SutomError):
    """The word list resources could not be loaded."""


class EmptyDictionary(SutomError):
    """No word of the requested length exists in the dictionary."""

    def __init__(self, length=None):
        self.length = length
        if length is None:
            super().__init__("The dictionary holds no solution words")
        else:
            super().__init__(f"The dictionary holds no {length}-letter solution words")
