"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict, Optional

from ..models.game import BoardUpdate, ErrorNotice, TerminalNotice

DESCRIPTOR_KINDS = {
    BoardUpdate: 'board_update',
    TerminalNotice: 'game_over',
    ErrorNotice: 'error_notice',
}


def descriptor_kind(descriptor) -> str:
    """Event name for a response descriptor."""
    return DESCRIPTOR_KINDS[type(descriptor)]


def descriptor_payload(descriptor) -> Dict[str, Any]:
    """JSON-ready form of a response descriptor."""
    payload = asdict(descriptor)
    payload['kind'] = descriptor_kind(descriptor)
    return payload


def parse_word_length(value) -> Optional[int]:
    """Optional integer from a request body; ValueError when not a number."""
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValueError("Word length must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("Word length must be a whole number")
    return int(value)
