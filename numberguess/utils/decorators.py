"""
Socket Event Decorators

Contains decorators shared by the WebSocket event handlers.
"""

import logging
from functools import wraps

from .game_logger import game_logger
from .helpers import get_client_sid


def socket_payload(*fields):
    """
    Unpack an object payload into keyword arguments.

    Events whose payload is not an object, or is missing one of the
    fields, are logged and dropped without answering the client.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(data=None, *args, **kwargs):
            if not isinstance(data, dict) or any(data.get(name) is None for name in fields):
                game_logger.log_room_event(
                    data.get('roomId') if isinstance(data, dict) else None,
                    'malformed_payload', get_client_sid(),
                    level=logging.WARNING, handler=f.__name__
                )
                return None
            for name in fields:
                kwargs[name] = data[name]
            return f(*args, **kwargs)

        return decorated_function

    return decorator


def logged_event(action):
    """Log the inbound event and any exception raised while handling it."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            sid = get_client_sid()
            game_logger.log_user_action(sid, action)
            try:
                return f(*args, **kwargs)
            except Exception as e:
                game_logger.log_error(e, action, sid=sid)
                raise

        return decorated_function

    return decorator
