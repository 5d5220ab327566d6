"""
Token Validator — Decide whether one tagged token is on the word list.

A token passes when its lemma is listed with at least one label whose
mapped tags the tagger also assigned. Punctuation and whitespace always
pass. "to" is checked by role: infinitive marker and preposition are
listed separately and never fall back to the generic label match.
"""

from typing import Iterable, Mapping, Optional, Sequence

from wordlevel.mapping.labels import tags_for
from wordlevel.nlp.interfaces import TaggedToken
from wordlevel.nlp.tags import INFINITIVE, PREPOSITION, PUNCTUATION, WHITESPACE, WORD

INFINITIVE_TO_LABEL = "infinitive-to"
PREPOSITION_LABEL = "preposition"


def is_word(token: TaggedToken) -> bool:
    """A word, not punctuation, not whitespace."""
    tags = token.tags
    return WORD in tags and PUNCTUATION not in tags and WHITESPACE not in tags


def matches_labels(tags: Iterable[str], labels: Sequence[str]) -> bool:
    """True if any label maps to a tag set sharing a tag with tags."""
    tags = frozenset(tags)
    for label in labels:
        mapped = tags_for(label)
        if mapped and not mapped.isdisjoint(tags):
            return True
    return False


def _check_to(tags: frozenset[str], labels: Sequence[str]) -> bool:
    if INFINITIVE in tags and INFINITIVE_TO_LABEL in labels:
        return True
    if PREPOSITION in tags and PREPOSITION_LABEL in labels:
        return True
    return False


def is_valid(token: TaggedToken, vocabulary: Mapping[str, Sequence[str]]) -> bool:
    """
    Check one token against the active word list.

    Args:
        token: Tagger output for one token
        vocabulary: lemma -> allowed labels (a VocabularyStore or any mapping)

    Returns:
        True if the token is exempt or allowed, False if it should be flagged
    """
    if not is_word(token):
        return True

    allowed: Optional[Sequence[str]] = vocabulary.get(token.lemma)
    if not allowed:
        return False

    if token.surface_text.lower() == "to":
        return _check_to(token.tags, allowed)

    return matches_labels(token.tags, allowed)
