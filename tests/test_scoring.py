import itertools
import random

import pytest

from numberguess.services.scoring import (
    calculate_score, count_matches, format_score
)


@pytest.mark.parametrize('guess,target,expected', [
    ('1234', '1234', '+4'),
    ('1234', '4321', '-4'),
    ('1234', '5678', '0'),
    ('1234', '1243', '+2 -2'),
    ('1234', '1567', '+1'),
    ('1234', '5123', '-3'),
    ('1234', '1325', '+1 -2'),
])
def test_calculate_score_examples(guess, target, expected):
    assert calculate_score(guess, target) == expected


def test_format_score_drops_zero_parts():
    assert format_score(0, 0) == '0'
    assert format_score(3, 0) == '+3'
    assert format_score(0, 1) == '-1'
    assert format_score(1, 3) == '+1 -3'


def test_count_matches_never_exceeds_length_for_distinct_digits():
    numbers = [''.join(p) for p in itertools.permutations('0123456789', 4)]
    rng = random.Random(2024)
    sample = rng.sample(numbers, 150)
    for a in sample:
        for b in sample:
            positive, negative = count_matches(a, b)
            assert positive + negative <= 4
            assert (positive == 4) == (a == b)


def test_short_input_does_not_raise():
    assert count_matches('12', '1234') == (2, 0)
    assert count_matches('', '1234') == (0, 0)
    assert calculate_score('1234', '12') == '+2'

