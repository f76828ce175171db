"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    SECRET_LENGTH, MAX_PLAYERS, ROOM_NOT_FOUND_MESSAGE, ROOM_FULL_MESSAGE,
    NOT_YOUR_TURN_MESSAGE, is_valid_number
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'SECRET_LENGTH', 'MAX_PLAYERS', 'ROOM_NOT_FOUND_MESSAGE', 'ROOM_FULL_MESSAGE',
    'NOT_YOUR_TURN_MESSAGE', 'is_valid_number'
]
