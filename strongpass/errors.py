"""Errors raised by the password generator."""


class GenerationError(ValueError):
    """Base class for password generation failures."""

    code = "generation_error"


class EmptyAlphabetError(GenerationError):
    """No character class was selected, so the pool is empty."""

    code = "empty_alphabet"

    def __init__(self, message: str = "At least one character set must be enabled"):
        super().__init__(message)


class InvalidLengthError(GenerationError):
    """Requested length is not a positive integer."""

    code = "invalid_length"

    def __init__(self, length, message=None):
        self.length = length
        super().__init__(message or f"length must be a positive integer, got {length!r}")
