"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Optional
from flask import request


def get_client_sid() -> Optional[str]:
    """Return the Socket.IO id of the client behind the current event."""
    return getattr(request, 'sid', None)


def as_text(value: Any) -> Optional[str]:
    """Coerce a client-supplied id or number to a string; None stays None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)
