"""NLP — Tagger layer."""

from wordlevel.nlp.interfaces import TaggedToken, Tagger, resolve_lemma
from wordlevel.nlp.spacy_loader import get_nlp, reset_nlp

__all__ = [
    # Interfaces
    "TaggedToken",
    "Tagger",
    "resolve_lemma",
    # Loader
    "get_nlp",
    "reset_nlp",
]
