"""
Services Package

Contains all business logic and service classes.
"""

from .room_store import RoomStore
from .scoring import calculate_score, count_matches, format_score
from .session_coordinator import SessionCoordinator, get_session_coordinator

__all__ = [
    'RoomStore',
    'SessionCoordinator', 'get_session_coordinator',
    'calculate_score', 'count_matches', 'format_score'
]
