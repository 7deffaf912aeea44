"""
strongpass.advice

Turn an entropy estimate into targeted, ordered improvement advice.
Message wording lives in ADVICE_TEMPLATES; the checks below only decide
which templates apply.
"""

from typing import List, Sequence

from .charsets import CLASS_ORDER, CharacterClass
from .evaluator import StrengthRating, classify

MIN_RECOMMENDED_LENGTH = 12
RECOMMENDED_LENGTH = 16
# above the 60-bit Strong boundary, so Strong passwords can still get the warning
PATTERN_WARNING_BITS = 70.0


def join_names(names: Sequence[str], conjunction: str = "and") -> str:
    """'a', 'a and b', 'a, b and c'."""
    names = list(names)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"


def _too_short(length: int) -> str:
    return (
        f"Increase the length: {length} characters is too short. "
        f"Use {RECOMMENDED_LENGTH} or more characters."
    )


def _low_complexity(missing: Sequence[CharacterClass]) -> str:
    names = join_names([cls.display_name for cls in missing])
    return (
        f"Add variety: the password contains no {names}. "
        "Mixing character types increases entropy dramatically; combine at "
        "least three of uppercase, lowercase, digits and symbols."
    )


ADVICE_TEMPLATES = {
    "too_short": _too_short,
    "low_complexity": _low_complexity,
    "weak_pattern": (
        "Avoid predictable patterns: if you made this password yourself, do not "
        "use dictionary words, birthdays, pet names or sequential characters. "
        "A generated password can be used as is."
    ),
    "very_strong": (
        "Very strong: this password has high entropy and strong resistance to "
        "brute-force attacks. Keep this level of strength."
    ),
}


def missing_classes(password: str) -> List[CharacterClass]:
    return [cls for cls in CLASS_ORDER if not cls.matches(password)]


def advise(password: str, entropy_bits: float) -> List[str]:
    """
    Return advice messages in a fixed order: length, complexity, pattern.

    A VeryStrong rating short-circuits to the congratulatory message, as does
    a password that trips none of the checks.
    """
    if classify(entropy_bits) is StrengthRating.VERY_STRONG:
        return [ADVICE_TEMPLATES["very_strong"]]

    advice: List[str] = []
    if len(password) < MIN_RECOMMENDED_LENGTH:
        advice.append(ADVICE_TEMPLATES["too_short"](len(password)))

    missing = missing_classes(password)
    if 0 < len(missing) < len(CLASS_ORDER):
        advice.append(ADVICE_TEMPLATES["low_complexity"](missing))

    if entropy_bits < PATTERN_WARNING_BITS:
        advice.append(ADVICE_TEMPLATES["weak_pattern"])

    return advice or [ADVICE_TEMPLATES["very_strong"]]
