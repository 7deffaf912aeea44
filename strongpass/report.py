"""
strongpass.report
One-call evaluation combining entropy, crack time, rating and advice.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .advice import advise
from .evaluator import StrengthRating, classify, estimate_crack_time, estimate_entropy


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    crack_time: str
    rating: StrengthRating
    advice: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entropy_bits": self.entropy_bits,
            "crack_time": self.crack_time,
            "rating": self.rating.value,
            "advice": list(self.advice),
        }


def evaluate(password: str) -> StrengthReport:
    """
    Evaluate a non-empty password.

    An empty string is a caller error; callers represent "nothing to
    evaluate" with None and never pass it here.
    """
    if not password:
        raise ValueError("password must be a non-empty string")
    entropy = estimate_entropy(password)
    return StrengthReport(
        entropy_bits=entropy,
        crack_time=estimate_crack_time(entropy),
        rating=classify(entropy),
        advice=advise(password, entropy),
    )
