"""
WebSocket Package

Socket.IO event handlers and the Socket.IO responder.
"""

from .handlers import SocketIOResponder, register_websocket_handlers

__all__ = ['SocketIOResponder', 'register_websocket_handlers']
