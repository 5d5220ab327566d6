"""NLP Backends — Concrete tagger implementations."""

from wordlevel.nlp.backends.spacy_backend import SpacyTagger
from wordlevel.nlp.backends.stub import StubTagger

__all__ = [
    "SpacyTagger",
    "StubTagger",
    "get_tagger",
]

TAGGERS = {
    "spacy": SpacyTagger,
    "stub": StubTagger,
}


def get_tagger(name: str = "spacy", **kwargs):
    """
    Build a tagger backend by name.

    Raises:
        ValueError: If no backend has that name
    """
    try:
        factory = TAGGERS[name]
    except KeyError:
        raise ValueError(f"Unknown tagger '{name}'. Available: {', '.join(sorted(TAGGERS))}") from None
    return factory(**kwargs)
