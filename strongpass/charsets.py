"""
strongpass.charsets
Character classes shared by the generator and the evaluator.

The four alphabets are disjoint, so a character belongs to at most one class
and pool sizes can simply be summed.
"""

import string
from enum import Enum
from typing import Iterable, List


class CharacterClass(Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    def matches(self, password: str) -> bool:
        """True if at least one character of password is in this class."""
        alphabet = self.alphabet
        return any(c in alphabet for c in password)


ALPHABETS = {
    CharacterClass.LOWER: string.ascii_lowercase,
    CharacterClass.UPPER: string.ascii_uppercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: string.punctuation,
}

DISPLAY_NAMES = {
    CharacterClass.LOWER: "lowercase letters",
    CharacterClass.UPPER: "uppercase letters",
    CharacterClass.DIGIT: "digits",
    CharacterClass.SYMBOL: "symbols",
}

# pool order: lower, upper, digit, symbol
CLASS_ORDER = (
    CharacterClass.LOWER,
    CharacterClass.UPPER,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


def observed_classes(password: str) -> List[CharacterClass]:
    """Classes with at least one representative in password, in pool order."""
    return [cls for cls in CLASS_ORDER if cls.matches(password)]


def build_pool(classes: Iterable[CharacterClass]) -> str:
    selected = set(classes)
    return "".join(cls.alphabet for cls in CLASS_ORDER if cls in selected)
