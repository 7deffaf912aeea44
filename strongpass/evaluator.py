"""
strongpass.evaluator

Password strength evaluator:
- estimate_pool_size(password): alphabet size implied by the classes observed
- estimate_entropy(password): length * log2(pool size), in bits
- estimate_crack_time(bits): time to exhaust 2**bits guesses, as text
- classify(bits): Weak / Strong / VeryStrong

The estimate treats the password as if drawn uniformly from the observed
alphabet, so it overestimates human-chosen passwords. No dictionary or
pattern detection is done here.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Union

from .charsets import CharacterClass, observed_classes

# attacker model: 10^12 guesses per second
GUESSES_PER_SECOND = 10 ** 12

VERY_STRONG_BITS = 80.0
STRONG_BITS = 60.0

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
MONTH = DAY * 30  # approximation
YEAR = DAY * 365

Number = Union[float, Decimal]


class StrengthRating(Enum):
    WEAK = "Weak"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


def estimate_pool_size(password: str) -> int:
    """
    Sum the alphabet sizes of every class with at least one character in
    the password. Falls back to the lowercase alphabet when nothing matches.
    """
    pool = sum(len(cls.alphabet) for cls in observed_classes(password))
    return pool or len(CharacterClass.LOWER.alphabet)


def estimate_entropy(password: str) -> float:
    """E = L * log2(R) with R from estimate_pool_size."""
    return len(password) * math.log2(estimate_pool_size(password))


def crack_seconds(entropy_bits: float) -> Number:
    """Seconds needed to try all 2**entropy_bits combinations."""
    try:
        combinations: Number = 2.0 ** entropy_bits
    except OverflowError:
        # beyond float range; only happens for very long evaluated input
        combinations = Decimal(2) ** Decimal(entropy_bits)
    return combinations / GUESSES_PER_SECOND


def _count(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_duration(seconds: Number) -> str:
    if seconds < 1:
        return "instant"
    if seconds < MINUTE:
        return _count(math.floor(seconds), "second")
    if seconds < HOUR:
        return _count(math.floor(seconds / MINUTE), "minute")
    if seconds < DAY:
        return _count(math.floor(seconds / HOUR), "hour")
    if seconds < MONTH:
        return _count(math.floor(seconds / DAY), "day")
    if seconds < YEAR:
        return _count(math.floor(seconds / MONTH), "month")
    return f"{seconds / YEAR:,.1f} years"


def estimate_crack_time(entropy_bits: float) -> str:
    return format_duration(crack_seconds(entropy_bits))


def classify(entropy_bits: float) -> StrengthRating:
    # lower bound of each tier is inclusive
    if entropy_bits >= VERY_STRONG_BITS:
        return StrengthRating.VERY_STRONG
    if entropy_bits >= STRONG_BITS:
        return StrengthRating.STRONG
    return StrengthRating.WEAK
