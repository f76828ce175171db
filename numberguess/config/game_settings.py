"""
Game Rules Module

Constants for the number-guessing game and the validation helper for
secret numbers and guesses.
"""

from typing import Any, Final

SECRET_LENGTH: Final[int] = 4
"""Number of digits in a secret number or a guess."""

MAX_PLAYERS: Final[int] = 2
"""A room holds the two players of a single game."""

# Client-facing error strings
ROOM_NOT_FOUND_MESSAGE: Final[str] = 'Oda bulunamadı'
ROOM_FULL_MESSAGE: Final[str] = 'Oda dolu'
NOT_YOUR_TURN_MESSAGE: Final[str] = 'Sıra sizde değil'


def is_valid_number(value: Any) -> bool:
    """
    Check that a value is a 4-digit string with all digits distinct.

    Args:
        value: Candidate secret or guess as received from a client

    Returns:
        bool: True if the value can be used as a secret or a guess
    """
    if not isinstance(value, str):
        return False
    if len(value) != SECRET_LENGTH:
        return False
    if not all(ch in '0123456789' for ch in value):
        return False
    return len(set(value)) == SECRET_LENGTH
