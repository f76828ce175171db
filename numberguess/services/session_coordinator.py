"""
Session Coordinator

Owns the room table and implements the game operations: creating and joining
rooms, committing secret numbers, taking turns guessing, and cleaning up after
a client disconnects.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from flask import current_app

from ..config.game_settings import SECRET_LENGTH, is_valid_number
from ..models.events import Emission
from ..models.room import GameError, Room
from ..utils.game_logger import game_logger
from .room_store import RoomStore
from .scoring import count_matches, format_score


class SessionCoordinator:
    """
    Game logic for two-player rooms.

    Operations never send anything themselves. Each returns a result dict:
    - success: whether the action changed room state
    - emissions: ordered list of Emission objects for the transport to send
    - join_room: room id the requesting client must join before sending (optional)
    - error: client-facing error message (optional)

    All mutations are serialized by a single lock, so at most one operation
    touches the room table at a time.
    """

    def __init__(self, store: Optional[RoomStore] = None, strict_numbers: bool = False):
        self.store = store if store is not None else RoomStore()
        self.strict_numbers = strict_numbers
        self._lock = threading.Lock()

    def create_room(self, room_id: str, sid: str) -> Dict[str, Any]:
        """Create a room with the requester as host. An existing room with the same id is replaced."""
        with self._lock:
            replaced = room_id in self.store
            room = self.store.create(room_id, sid)

            game_logger.log_room_event(room_id, 'room_created', sid, replaced=replaced)

            return {
                'success': True,
                'join_room': room_id,
                'emissions': [
                    Emission('playerCount', room_id, room.player_count),
                    Emission('yourTurn', sid, True)
                ]
            }

    def join_room(self, room_id: str, sid: str) -> Dict[str, Any]:
        """Add the requester to an existing room as guest."""
        with self._lock:
            room = self.store.get(room_id)
            if room is None:
                return self._error(GameError.ROOM_NOT_FOUND, room_id, sid)
            if room.has_player(sid):
                return self._ignored('already_in_room', room_id, sid)
            if room.is_full:
                return self._error(GameError.ROOM_FULL, room_id, sid)

            room.players.append(sid)

            game_logger.log_room_event(room_id, 'room_joined', sid, player_count=room.player_count)

            return {
                'success': True,
                'join_room': room_id,
                'emissions': [
                    Emission('playerCount', room_id, room.player_count),
                    Emission('yourTurn', sid, False)
                ]
            }

    def set_number(self, room_id: str, sid: str, number: str) -> Dict[str, Any]:
        """
        Record the requester's secret number.

        Once both players have a secret the game starts: the host gets the
        first turn. Requests for unknown rooms, from non-players, or from a
        player who already committed a number are ignored.
        """
        with self._lock:
            room = self.store.get(room_id)
            if room is None:
                return self._ignored('room_not_found', room_id, sid)
            if not room.has_player(sid):
                return self._ignored('not_a_player', room_id, sid)
            if sid in room.secrets:
                return self._ignored('number_already_set', room_id, sid)
            if self.strict_numbers and not is_valid_number(number):
                return self._ignored('invalid_number', room_id, sid)

            room.secrets[sid] = number

            game_logger.log_room_event(room_id, 'number_set', sid, numbers_set=len(room.secrets))

            emissions = [
                Emission('numberSet', room_id, {
                    'playerId': sid,
                    'playerCount': room.player_count,
                    'numbersSet': len(room.secrets)
                })
            ]

            if room.is_ready:
                emissions.extend(self._start_game(room))

            return {'success': True, 'emissions': emissions}

    def make_guess(self, room_id: str, sid: str, guess: str) -> Dict[str, Any]:
        """
        Score the requester's guess against the opponent's secret.

        A correct guess ends the game; otherwise the turn passes to the
        opponent. The requester always receives the scored result.
        """
        with self._lock:
            room = self.store.get(room_id)
            if room is None:
                return self._ignored('room_not_found', room_id, sid)
            if room.game_over:
                return self._ignored('game_over', room_id, sid)
            if room.current_turn != sid:
                return self._error(GameError.NOT_YOUR_TURN, room_id, sid)
            if self.strict_numbers and not is_valid_number(guess):
                return self._ignored('invalid_guess', room_id, sid)

            opponent = room.opponent_of(sid)
            target = room.secrets.get(opponent) if opponent else None
            if not target:
                return self._ignored('opponent_number_missing', room_id, sid)

            positive_count, negative_count = count_matches(guess, target)
            result = format_score(positive_count, negative_count)

            emissions: List[Emission] = []
            if positive_count == SECRET_LENGTH:
                room.game_over = True
                room.winner = sid
                emissions.append(Emission('gameOver', room_id, {'winner': sid}))
                game_logger.log_room_event(room_id, 'game_won', sid, guess=guess)
            else:
                room.current_turn = opponent
                emissions.append(Emission('yourTurn', opponent, True))
                emissions.append(Emission('yourTurn', sid, False))
                game_logger.log_room_event(room_id, 'guess_scored', sid, guess=guess, result=result)

            emissions.append(Emission('guessResult', sid, {'guess': guess, 'result': result}))

            return {'success': True, 'emissions': emissions}

    def disconnect(self, sid: str) -> Dict[str, Any]:
        """Remove the client from every room it plays in. Empty rooms are deleted."""
        with self._lock:
            emissions: List[Emission] = []
            rooms_left = []

            for room in self.store.rooms_with_player(sid):
                room.players[:] = [player for player in room.players if player != sid]
                room.secrets.pop(sid, None)
                rooms_left.append(room.room_id)

                if not room.players:
                    self.store.delete(room.room_id)
                    game_logger.log_room_event(room.room_id, 'room_deleted', sid)
                    continue

                emissions.append(Emission('playerCount', room.room_id, room.player_count))
                emissions.append(Emission('playerDisconnected', room.room_id, sid))
                game_logger.log_room_event(
                    room.room_id, 'player_disconnected', sid, player_count=room.player_count
                )

            return {'success': True, 'rooms_left': rooms_left, 'emissions': emissions}

    def get_room(self, room_id: str) -> Optional[Room]:
        with self._lock:
            return self.store.get(room_id)

    def room_summaries(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [room.to_summary() for room in self.store.all()]

    def room_count(self) -> int:
        with self._lock:
            return len(self.store)

    def _start_game(self, room: Room) -> List[Emission]:
        room.current_turn = room.host
        game_logger.log_room_event(room.room_id, 'game_ready', room.host)

        emissions = [
            Emission('gameReady', room.room_id),
            Emission('yourTurn', room.players[0], True)
        ]
        if len(room.players) > 1:
            emissions.append(Emission('yourTurn', room.players[1], False))
        return emissions

    def _error(self, error: GameError, room_id: str, sid: str) -> Dict[str, Any]:
        game_logger.log_room_event(room_id, 'rejected', sid, level=logging.WARNING, error=error.name)
        return {
            'success': False,
            'error': error.value,
            'emissions': [Emission('error', sid, error.value)]
        }

    def _ignored(self, reason: str, room_id: str, sid: str) -> Dict[str, Any]:
        game_logger.log_room_event(room_id, 'ignored', sid, reason=reason)
        return {'success': False, 'ignored': True, 'reason': reason, 'emissions': []}


def get_session_coordinator() -> Optional[SessionCoordinator]:
    """Get the coordinator of the current Flask application."""
    return getattr(current_app, 'coordinator', None)
