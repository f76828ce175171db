"""
WebSocket Event Handlers

Handles all WebSocket events for the real-time two-player game.
"""

from flask import request
from flask_socketio import emit, join_room

from ..utils.decorators import logged_event, socket_payload
from ..utils.game_logger import game_logger
from ..utils.helpers import as_text


def dispatch(socketio, result):
    """Perform the room join requested by a coordinator result, then send its emissions in order."""
    room_id = result.get('join_room')
    if room_id is not None:
        join_room(room_id)

    for emission in result.get('emissions', []):
        socketio.emit(emission.event, *emission.args, to=emission.to)


def register_websocket_handlers(socketio, coordinator):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Tell the client its own id."""
        game_logger.log_user_action(request.sid, 'connect')
        emit('connected', {'id': request.sid})

    @socketio.on('disconnect')
    @logged_event('disconnect')
    def handle_disconnect(reason=None):
        """Remove the client from its rooms and notify whoever is left."""
        dispatch(socketio, coordinator.disconnect(request.sid))

    @socketio.on('createRoom')
    @logged_event('createRoom')
    def handle_create_room(room_id=None):
        room_id = as_text(room_id)
        if not room_id:
            game_logger.log_room_event(None, 'missing_room_id', request.sid)
            return
        dispatch(socketio, coordinator.create_room(room_id, request.sid))

    @socketio.on('joinRoom')
    @logged_event('joinRoom')
    def handle_join_room(room_id=None):
        room_id = as_text(room_id)
        if not room_id:
            game_logger.log_room_event(None, 'missing_room_id', request.sid)
            return
        dispatch(socketio, coordinator.join_room(room_id, request.sid))

    @socketio.on('setNumber')
    @logged_event('setNumber')
    @socket_payload('roomId', 'number')
    def handle_set_number(roomId=None, number=None):
        result = coordinator.set_number(as_text(roomId), request.sid, as_text(number))
        dispatch(socketio, result)

    @socketio.on('makeGuess')
    @logged_event('makeGuess')
    @socket_payload('roomId', 'guess')
    def handle_make_guess(roomId=None, guess=None):
        result = coordinator.make_guess(as_text(roomId), request.sid, as_text(guess))
        dispatch(socketio, result)
