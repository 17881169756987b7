"""
Responder

Contract between the game core and whatever presents results to players.
The core only produces descriptors; a responder decides how they look.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

from ..models.game import BoardUpdate, ErrorNotice, ResponseDescriptor, TerminalNotice


class Responder(ABC):
    """Presentation side of a guess: errors and boards."""

    @abstractmethod
    def send_error(self, message: str) -> None:
        ...

    @abstractmethod
    def send_board(self, descriptor: Union[BoardUpdate, TerminalNotice]) -> None:
        ...


def dispatch(descriptor: ResponseDescriptor, responder: Responder) -> None:
    """Hands a descriptor to the matching responder operation."""
    if isinstance(descriptor, ErrorNotice):
        responder.send_error(descriptor.message)
    elif isinstance(descriptor, (BoardUpdate, TerminalNotice)):
        responder.send_board(descriptor)
    else:
        raise TypeError(f"Unknown descriptor: {descriptor!r}")


def hidden_board(descriptor: Union[BoardUpdate, TerminalNotice]) -> Optional[Dict]:
    """
    Daily mode mirror of a board: evaluation rows only, no letters.

    Returns None for games without a parent conversation.
    """
    if not descriptor.parent_routing_token:
        return None

    finished = isinstance(descriptor, TerminalNotice)
    return {
        'player_id': descriptor.player_id,
        'routing_token': descriptor.parent_routing_token,
        'evaluations': [list(row) for row in descriptor.evaluations],
        'attempts_used': len(descriptor.history),
        'finished': finished,
        'won': descriptor.won if finished else None,
    }
