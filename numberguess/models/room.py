"""
Room Data Models

Contains the room state for one game and the error codes clients can receive.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.game_settings import (
    MAX_PLAYERS, ROOM_NOT_FOUND_MESSAGE, ROOM_FULL_MESSAGE, NOT_YOUR_TURN_MESSAGE
)


class GameError(Enum):
    """User-facing error conditions; the value is the exact client message."""
    ROOM_NOT_FOUND = ROOM_NOT_FOUND_MESSAGE
    ROOM_FULL = ROOM_FULL_MESSAGE
    NOT_YOUR_TURN = NOT_YOUR_TURN_MESSAGE


@dataclass
class Room:
    """Server-side state of one two-player game."""
    room_id: str
    players: List[str] = field(default_factory=list)  # index 0 is the host
    secrets: Dict[str, str] = field(default_factory=dict)
    current_turn: Optional[str] = None
    game_over: bool = False
    winner: Optional[str] = None

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    @property
    def is_ready(self) -> bool:
        """Both players have committed a secret."""
        return len(self.secrets) == MAX_PLAYERS

    @property
    def host(self) -> Optional[str]:
        return self.players[0] if self.players else None

    def has_player(self, sid: str) -> bool:
        return sid in self.players

    def opponent_of(self, sid: str) -> Optional[str]:
        """Return the other player in the room, or None if there is none."""
        for player in self.players:
            if player != sid:
                return player
        return None

    def to_summary(self) -> Dict[str, Any]:
        """Public view of the room. Secrets are never included."""
        return {
            'room_id': self.room_id,
            'player_count': self.player_count,
            'numbers_set': len(self.secrets),
            'ready': self.is_ready,
            'game_over': self.game_over,
            'winner': self.winner
        }
