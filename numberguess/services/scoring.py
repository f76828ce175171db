"""
Scoring

Bulls-and-cows style feedback for a guess against a secret number.
"""

from typing import Optional, Tuple
from ..config.game_settings import SECRET_LENGTH


def _digit_at(value: str, index: int) -> Optional[str]:
    return value[index] if index < len(value) else None


def count_matches(guess: str, target: str) -> Tuple[int, int]:
    """
    Count exact and misplaced digits of a guess against a target.

    Args:
        guess: The guessed number
        target: The secret number being guessed

    Returns:
        Tuple of (positive_count, negative_count): digits in the right
        position, and digits present in the target at another position.

    Misplaced digits are not consumed, so the counts are only meaningful when
    both numbers have distinct digits.
    """
    positive_count = 0
    negative_count = 0

    for i in range(SECRET_LENGTH):
        digit = _digit_at(guess, i)
        if digit is not None and digit == _digit_at(target, i):
            positive_count += 1

    for i in range(SECRET_LENGTH):
        digit = _digit_at(guess, i)
        if digit is not None and digit != _digit_at(target, i) and digit in target:
            negative_count += 1

    return positive_count, negative_count


def format_score(positive_count: int, negative_count: int) -> str:
    """Format counts as "+P -N", dropping zero parts; "0" when both are zero."""
    if positive_count == 0 and negative_count == 0:
        return '0'

    score = ''
    if positive_count > 0:
        score += f'+{positive_count} '
    if negative_count > 0:
        score += f'-{negative_count}'
    return score.strip()


def calculate_score(guess: str, target: str) -> str:
    """Score a guess against a target and return the formatted result."""
    return format_score(*count_matches(guess, target))
