import math

from strongpass.charsets import CharacterClass, observed_classes
from strongpass.evaluator import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    YEAR,
    StrengthRating,
    classify,
    crack_seconds,
    estimate_crack_time,
    estimate_entropy,
    estimate_pool_size,
    format_duration,
)

def test_alphabets_are_disjoint():
    seen = set()
    for cls in CharacterClass:
        chars = set(cls.alphabet)
        assert not chars & seen
        seen |= chars
    assert len(seen) == 94

def test_pool_size_from_observed_classes():
    assert estimate_pool_size("abc") == 26
    assert estimate_pool_size("aB") == 52
    assert estimate_pool_size("a1") == 36
    assert estimate_pool_size("Ab3!") == 94
    assert observed_classes("!1") == [CharacterClass.DIGIT, CharacterClass.SYMBOL]

def test_pool_size_fallback_for_unknown_characters():
    assert estimate_pool_size("ééé") == 26
    assert estimate_pool_size("") == 26

def test_entropy_known_values():
    assert math.isclose(estimate_entropy("aaaaaaaaaaaa"), 12 * math.log2(26))
    assert round(estimate_entropy("aaaaaaaaaaaa"), 2) == 56.41
    assert math.isclose(estimate_entropy("Ab3!Ab3!Ab3!"), 12 * math.log2(94))
    assert math.floor(estimate_entropy("Ab3!Ab3!Ab3!") * 100) / 100 == 78.65

def test_entropy_increases_with_length():
    e_short = estimate_entropy("Ab1!")
    e_long = estimate_entropy("Ab1!" * 4)
    assert e_long > e_short
    values = [estimate_entropy("x" * n) for n in range(0, 30)]
    assert values == sorted(values)

def test_classify_boundaries():
    assert classify(80) is StrengthRating.VERY_STRONG
    assert classify(79.99) is StrengthRating.STRONG
    assert classify(60) is StrengthRating.STRONG
    assert classify(59.99) is StrengthRating.WEAK
    assert classify(0) is StrengthRating.WEAK

def test_crack_time_zero_entropy_is_instant():
    assert estimate_crack_time(0) == "instant"
    assert estimate_crack_time(estimate_entropy("")) == "instant"

def test_crack_time_buckets():
    assert format_duration(0.5) == "instant"
    assert format_duration(1) == "1 second"
    assert format_duration(59.9) == "59 seconds"
    assert format_duration(MINUTE) == "1 minute"
    assert format_duration(HOUR - 1) == "59 minutes"
    assert format_duration(5 * HOUR + 10) == "5 hours"
    assert format_duration(29 * DAY) == "29 days"
    assert format_duration(MONTH) == "1 month"
    assert format_duration(YEAR - 1) == "12 months"
    assert format_duration(YEAR) == "1.0 years"
    assert format_duration(1234.56 * YEAR) == "1,234.6 years"

def test_crack_seconds_uses_fixed_rate():
    assert math.isclose(crack_seconds(40), 2 ** 40 / 10 ** 12)

def test_crack_time_huge_entropy_does_not_overflow():
    bits = estimate_entropy("Ab3!" * 500)
    text = estimate_crack_time(bits)
    assert text.endswith(" years")
    assert "inf" not in text
