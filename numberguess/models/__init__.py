"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .events import Emission
from .room import GameError, Room

__all__ = ['Emission', 'GameError', 'Room']
