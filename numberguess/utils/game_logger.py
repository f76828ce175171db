"""
Game Logger Module for the Number Guess Server

This module provides logging for client actions, room events, HTTP responses
and errors as JSON structured lines.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - Client action tracking by socket id
    - Room event logging (create, join, ready, guesses, wins, disconnects)
    - HTTP response logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('numberguess')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Only warnings and errors reach the console
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          client_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'client': client_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        sid: Optional[str],
                        action: str,
                        room_id: Optional[str] = None,
                        **kwargs):
        """
        Log an inbound client action.

        Args:
            sid: Socket id of the client
            action: Event name (e.g. 'createRoom', 'makeGuess')
            room_id: Room identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'room_id': room_id, **kwargs}
        log_message = self._create_log_entry('USER_ACTION', action, {'sid': sid}, details)
        self.logger.info(log_message)

    def log_room_event(self,
                       room_id: Optional[str],
                       event: str,
                       sid: Optional[str],
                       level: int = logging.INFO,
                       **kwargs):
        """
        Log room lifecycle and game events.

        Args:
            room_id: Room identifier
            event: Type of event (e.g. 'room_created', 'game_ready', 'game_won')
            sid: Socket id of the client that caused the event
            level: Logging level for the entry
            **kwargs: Additional game details (never secrets)
        """
        details = {'room_id': room_id, **kwargs}
        log_message = self._create_log_entry('GAME_EVENT', event, {'sid': sid}, details)
        self.logger.log(level, log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log HTTP responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        client_info = {'user_ip': request.remote_addr or 'unknown'}
        safe_response = self._sanitize_response_data(response_data)

        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': safe_response,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, client_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  sid: Optional[str] = None,
                  room_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            sid: Socket id of the client if applicable
            room_id: Room identifier if applicable
        """
        details = {
            'room_id': room_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, {'sid': sid}, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Limit the size of logged room listings."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'rooms' in sanitized and isinstance(sanitized['rooms'], list):
            sanitized['rooms'] = {'count': len(sanitized['rooms'])}

        return sanitized


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
