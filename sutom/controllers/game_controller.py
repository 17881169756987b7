"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify

from ..models.errors import (
    EmptyDictionary, InvalidGameRequest, MalformedGuess, NoActiveSession,
    NotSessionOwner, RoutingTokenInUse, SessionAlreadyExists, WrongContext
)
from ..models.game import ErrorNotice, PlayerKey, RoutingKey
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import descriptor_payload, parse_word_length

game_bp = Blueprint('game', __name__)


def _error_response(action, status_code, message, player_id=None, **extra):
    error_response = {
        'success': False,
        'error': message,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, player_id)
    return jsonify(error_response), status_code


@game_bp.route('/games', methods=['POST'])
@require_game_service
def start_game(game_service):
    """Create a new game bound to a conversation."""
    data = request.get_json(silent=True) or {}
    player_id = data.get('player_id')

    try:
        game_logger.log_user_action(
            request, 'start_game', player_id,
            routing_token=data.get('routing_token'), mode=data.get('mode')
        )

        session = game_service.start_game(
            player_id,
            data.get('routing_token'),
            mode=data.get('mode'),
            parent_routing_token=data.get('parent_routing_token'),
            word_length=parse_word_length(data.get('word_length')),
        )
        response_data = {
            'success': True,
            'session': asdict(game_service.get_session(player_id))
        }
        game_logger.log_server_response(
            request, 'start_game', True, response_data, player_id,
            word_length=session.engine.word_length
        )
        return jsonify(response_data), 201

    except SessionAlreadyExists as e:
        return _error_response(
            'start_game', 409, 'You already have a game in progress',
            player_id, routing_token=e.session.routing_token
        )
    except RoutingTokenInUse as e:
        return _error_response('start_game', 409, str(e), player_id)
    except (InvalidGameRequest, EmptyDictionary) as e:
        return _error_response('start_game', 400, str(e), player_id)
    except ValueError:
        return _error_response('start_game', 400, 'Word length must be a number', player_id)
    except Exception as e:
        game_logger.log_error(request, e, 'start_game', player_id)
        return _error_response('start_game', 500, 'Internal server error', player_id)


@game_bp.route('/games/<player_id>', methods=['GET'])
@require_game_service
def get_game(player_id, game_service):
    """Get the current state of a player's game."""
    try:
        game_logger.log_user_action(request, 'get_game', player_id)

        snapshot = game_service.get_session(player_id)
        response_data = {
            'success': True,
            'session': asdict(snapshot)
        }
        game_logger.log_server_response(request, 'get_game', True, response_data, player_id)
        return jsonify(response_data)

    except NoActiveSession:
        return _error_response('get_game', 404, 'No game in progress', player_id)
    except Exception as e:
        game_logger.log_error(request, e, 'get_game', player_id)
        return _error_response('get_game', 500, 'Internal server error', player_id)


def _submit(game_service, lookup_key, action, player_id=None, **route_kwargs):
    data = request.get_json(silent=True) or {}
    guess = data.get('guess')

    try:
        game_logger.log_user_action(request, action, player_id, guess=guess, **route_kwargs)

        descriptor = game_service.submit_guess(
            lookup_key, guess,
            author_id=data.get('author_id'),
            routing_token=data.get('routing_token'),
        )
        response_data = {
            'success': not isinstance(descriptor, ErrorNotice),
            'board': descriptor_payload(descriptor)
        }
        if isinstance(descriptor, ErrorNotice):
            response_data['error'] = descriptor.message
            game_logger.log_server_response(
                request, action, False, response_data, descriptor.player_id,
                validation_error=descriptor.message, attempted_guess=guess
            )
            return jsonify(response_data), 400

        game_logger.log_server_response(
            request, action, True, response_data, descriptor.player_id,
            attempts=len(descriptor.history)
        )
        return jsonify(response_data)

    except MalformedGuess as e:
        return _error_response(action, 400, str(e), player_id)
    except NoActiveSession:
        return _error_response(action, 404, 'No game in progress', player_id)
    except WrongContext as e:
        return _error_response(
            action, 403, 'Guesses for this game must be sent in its conversation',
            player_id, routing_token=e.expected_token
        )
    except NotSessionOwner:
        return _error_response(action, 403, 'This game belongs to another player', player_id)
    except Exception as e:
        game_logger.log_error(request, e, action, player_id)
        return _error_response(action, 500, 'Internal server error', player_id)


@game_bp.route('/games/<player_id>/guess', methods=['POST'])
@require_game_service
def guess_for_player(player_id, game_service):
    """Submit a guess addressed to a player's game."""
    return _submit(game_service, PlayerKey(player_id), 'submit_guess', player_id)


@game_bp.route('/threads/<routing_token>/guess', methods=['POST'])
@require_game_service
def guess_in_thread(routing_token, game_service):
    """Submit a free-text guess posted in a game conversation."""
    return _submit(game_service, RoutingKey(routing_token), 'thread_guess',
                   thread=routing_token)


@game_bp.route('/games/<player_id>', methods=['DELETE'])
@require_game_service
def stop_game(player_id, game_service):
    """Stop a player's game and reveal the word."""
    try:
        game_logger.log_user_action(request, 'stop_game', player_id)

        notice = game_service.stop_game(player_id)
        response_data = {
            'success': True,
            'board': descriptor_payload(notice)
        }
        game_logger.log_server_response(request, 'stop_game', True, response_data, player_id)
        return jsonify(response_data)

    except NoActiveSession:
        return _error_response('stop_game', 404, 'No game in progress', player_id)
    except Exception as e:
        game_logger.log_error(request, e, 'stop_game', player_id)
        return _error_response('stop_game', 500, 'Internal server error', player_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': game_service.active_games(),
        'dictionary': game_service.word_repository.statistics(),
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
