from .normalize import normalize
from .composition import is_constructible, letter_pool
from .outcomes import Accepted, Alert, Reason, Rejected, ValidationOutcome, alert_for
from .validation import validate, is_original, MIN_WORD_LENGTH, DEFAULT_LOCALE
from .candidates import constructible_words

__all__ = [
    "normalize", "is_constructible", "letter_pool", "is_original",
    "validate", "constructible_words", "alert_for",
    "Accepted", "Rejected", "Reason", "Alert", "ValidationOutcome",
    "MIN_WORD_LENGTH", "DEFAULT_LOCALE",
]
