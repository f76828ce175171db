"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import socket_payload, logged_event
from .helpers import get_client_sid, as_text
from .game_logger import game_logger

__all__ = ['socket_payload', 'logged_event', 'get_client_sid', 'as_text', 'game_logger']
