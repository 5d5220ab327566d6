"""Validation — Token and document checks against the active word list."""

from wordlevel.validation.document import Annotation, ValidationResult, validate
from wordlevel.validation.token import is_valid, is_word, matches_labels

__all__ = [
    "Annotation",
    "ValidationResult",
    "validate",
    "is_valid",
    "is_word",
    "matches_labels",
]
