"""StrongPass: secure password generation and entropy-based strength advice."""

from .advice import advise
from .charsets import CharacterClass
from .errors import EmptyAlphabetError, GenerationError, InvalidLengthError
from .evaluator import (
    StrengthRating,
    classify,
    estimate_crack_time,
    estimate_entropy,
    estimate_pool_size,
)
from .generator import GenerationOptions, generate
from .report import StrengthReport, evaluate

__version__ = "0.1.0"
