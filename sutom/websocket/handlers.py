"""
WebSocket Event Handlers

Handles all WebSocket events. Each game conversation is a Socket.IO room
named after its routing token; boards and notices are emitted to that room.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room

from ..models.errors import (
    EmptyDictionary, InvalidGameRequest, MalformedGuess, NoActiveSession,
    NotSessionOwner, RoutingTokenInUse, SessionAlreadyExists, WrongContext
)
from ..models.game import PlayerKey, RoutingKey
from ..services.responder import Responder, dispatch, hidden_board
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger
from ..utils.helpers import descriptor_kind, descriptor_payload, parse_word_length


class SocketIOResponder(Responder):
    """Emits descriptors to the room of a game conversation."""

    def __init__(self, socketio, room: str):
        self.socketio = socketio
        self.room = room

    def send_error(self, message: str) -> None:
        self.socketio.emit('error_notice', {'message': message}, room=self.room)

    def send_board(self, descriptor) -> None:
        self.socketio.emit(descriptor_kind(descriptor), descriptor_payload(descriptor), room=self.room)

        # Daily games mirror progress in the parent conversation without letters
        mirror = hidden_board(descriptor)
        if mirror is not None:
            self.socketio.emit('daily_progress', mirror, room=descriptor.parent_routing_token)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_thread')
    def handle_join_thread(data):
        """Follow a game conversation (or a daily parent conversation)."""
        routing_token = (data or {}).get('routing_token')
        if not routing_token:
            emit('error', {'error': 'Routing token is required'})
            return
        join_room(routing_token)
        emit('joined', {'routing_token': routing_token})

    @socketio.on('leave_thread')
    def handle_leave_thread(data):
        routing_token = (data or {}).get('routing_token')
        if routing_token:
            leave_room(routing_token)

    @socketio.on('start_game')
    @websocket_game_service_required
    def handle_start_game(data, game_service=None):
        """Start a game and bind this connection to its conversation."""
        player_id = data.get('player_id')
        routing_token = data.get('routing_token')
        try:
            game_logger.log_user_action(request, 'start_game', player_id,
                                        routing_token=routing_token, mode=data.get('mode'))
            game_service.start_game(
                player_id, routing_token,
                mode=data.get('mode'),
                parent_routing_token=data.get('parent_routing_token'),
                word_length=parse_word_length(data.get('word_length')),
            )
            join_room(routing_token)
            emit('game_started', asdict(game_service.get_session(player_id)))

        except SessionAlreadyExists as e:
            emit('error', {
                'error': 'You already have a game in progress',
                'routing_token': e.session.routing_token
            })
        except (RoutingTokenInUse, InvalidGameRequest, EmptyDictionary) as e:
            emit('error', {'error': str(e)})
        except ValueError:
            emit('error', {'error': 'Word length must be a number'})
        except Exception as e:
            game_logger.log_error(request, e, 'start_game', player_id)
            emit('error', {'error': 'Internal server error'})

    @socketio.on('guess')
    @websocket_game_service_required
    def handle_guess(data, game_service=None):
        """Explicit guess addressed to the player's own game."""
        player_id = data.get('player_id')
        guess = data.get('guess')
        try:
            game_logger.log_user_action(request, 'submit_guess', player_id, guess=guess)
            descriptor = game_service.submit_guess(
                PlayerKey(player_id), guess, routing_token=data.get('routing_token')
            )
            dispatch(descriptor, SocketIOResponder(socketio, descriptor.routing_token))

        except MalformedGuess as e:
            emit('error', {'error': str(e)})
        except NoActiveSession:
            emit('error', {'error': 'No game in progress'})
        except WrongContext as e:
            emit('error', {
                'error': 'Guesses for this game must be sent in its conversation',
                'routing_token': e.expected_token
            })
        except Exception as e:
            game_logger.log_error(request, e, 'submit_guess', player_id)
            emit('error', {'error': 'Internal server error'})

    @socketio.on('thread_message')
    @websocket_game_service_required
    def handle_thread_message(data, game_service=None):
        """
        Free-text message posted in a conversation.

        Messages that are not a single word, that land in a conversation
        without a game, or that come from someone other than the game's
        owner are ordinary chat and are ignored.
        """
        routing_token = data.get('routing_token')
        if not routing_token:
            return
        try:
            descriptor = game_service.submit_guess(
                RoutingKey(routing_token), data.get('content'),
                author_id=data.get('author_id')
            )
            game_logger.log_user_action(request, 'thread_guess', descriptor.player_id,
                                        thread=routing_token, guess=data.get('content'))
            dispatch(descriptor, SocketIOResponder(socketio, routing_token))

        except (MalformedGuess, NoActiveSession, NotSessionOwner):
            return
        except Exception as e:
            game_logger.log_error(request, e, 'thread_guess', data.get('author_id'))
            emit('error', {'error': 'Internal server error'})

    @socketio.on('stop_game')
    @websocket_game_service_required
    def handle_stop_game(data, game_service=None):
        """Stop the player's game and reveal the word."""
        player_id = data.get('player_id')
        try:
            game_logger.log_user_action(request, 'stop_game', player_id)
            notice = game_service.stop_game(player_id)
            SocketIOResponder(socketio, notice.routing_token).send_board(notice)

        except NoActiveSession:
            emit('error', {'error': 'No game in progress'})
        except Exception as e:
            game_logger.log_error(request, e, 'stop_game', player_id)
            emit('error', {'error': 'Internal server error'})

    @socketio.on('set_parent_message')
    @websocket_game_service_required
    def handle_set_parent_message(data, game_service=None):
        """Remember which message mirrors a daily game in its parent conversation."""
        try:
            game_service.set_parent_message_id(data.get('player_id'), data.get('message_id'))
        except NoActiveSession:
            emit('error', {'error': 'No game in progress'})
