"""Lexical metrics over the local part of an email address.

All functions are total: the empty string yields 0.0 rather than an error.
"""

import math
from collections import Counter

DIGITS = frozenset("0123456789")
VOWELS = frozenset("aeiouAEIOU")


def entropy(text: str) -> float:
    """
    Shannon entropy of the character distribution, in bits.

    Characters are compared as-is, so "AaAa" measures higher than "aaaa".
    """
    if not text:
        return 0.0

    length = len(text)
    result = 0.0
    for count in Counter(text).values():
        probability = count / length
        result -= probability * math.log2(probability)
    return result


def digit_ratio(text: str) -> float:
    """Fraction of characters that are ASCII digits."""
    if not text:
        return 0.0
    return sum(1 for char in text if char in DIGITS) / len(text)


def vowel_ratio(text: str) -> float:
    """Fraction of characters that are ASCII vowels (either case)."""
    if not text:
        return 0.0
    return sum(1 for char in text if char in VOWELS) / len(text)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up (0.625 -> 0.63), unlike the built-in round()."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor
