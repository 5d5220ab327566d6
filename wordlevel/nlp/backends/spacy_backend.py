"""
SpaCy Backend — Tagger implementation using spaCy.

Translates spaCy's Universal POS and Penn Treebank tags into the
WordLevel tag vocabulary (wordlevel.nlp.tags).
"""

import re
from typing import Optional

from wordlevel.nlp.interfaces import TaggedToken, Tagger, resolve_lemma
from wordlevel.nlp.spacy_loader import get_nlp
from wordlevel.nlp.tags import (
    ADJECTIVE,
    ADVERB,
    AUXILIARY,
    CARDINAL,
    CONJUNCTION,
    COPULA,
    DETERMINER,
    INFINITIVE,
    INTERJECTION,
    MODAL,
    NEGATIVE,
    NOUN,
    NUMERIC_VALUE,
    ORDINAL,
    POSSESSIVE,
    PREPOSITION,
    PRONOUN,
    PROPER_NOUN,
    PUNCTUATION,
    VERB,
    WHITESPACE,
    WORD,
    with_parents,
)


# =============================================================================
# Constants
# =============================================================================

# Universal POS -> tags
POS_TAG_MAP = {
    "NOUN": (NOUN,),
    "PROPN": (PROPER_NOUN,),
    "PRON": (PRONOUN,),
    "VERB": (VERB,),
    "AUX": (AUXILIARY,),
    "ADJ": (ADJECTIVE,),
    "ADV": (ADVERB,),
    "ADP": (PREPOSITION,),
    "CCONJ": (CONJUNCTION,),
    "SCONJ": (CONJUNCTION,),
    "DET": (DETERMINER,),
    "INTJ": (INTERJECTION,),
    "NUM": (CARDINAL,),
}

STRUCTURAL_POS = {"PUNCT", "SYM"}

ORDINAL_WORDS = {
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth", "tenth", "eleventh", "twelfth", "twentieth",
    "hundredth", "thousandth",
}
ORDINAL_RE = re.compile(r"^\d+(st|nd|rd|th)$", re.IGNORECASE)
DIGITS_RE = re.compile(r"\d")

NEGATIONS = {"not", "n't", "nt", "never"}


def spacy_tags(token) -> frozenset[str]:
    """
    Map one spaCy token to WordLevel tags.

    Rules:
    - Whitespace and punctuation tokens carry only their structural tag
    - "to" tagged TO is the infinitive marker; "to" as ADP is a preposition
    - Any form of "be" is a copula; MD is a modal
    """
    if token.is_space:
        return frozenset({WHITESPACE})
    if token.is_punct or token.pos_ in STRUCTURAL_POS:
        return frozenset({PUNCTUATION})

    tags = {WORD}
    tags.update(POS_TAG_MAP.get(token.pos_, ()))

    lower = token.lower_
    lemma = token.lemma_.lower()

    if token.pos_ in ("AUX", "VERB") and lemma == "be":
        tags.discard(AUXILIARY)
        tags.add(COPULA)
    if token.tag_ == "MD":
        tags.add(MODAL)

    if token.pos_ == "PART":
        if lower == "to" or token.tag_ == "TO":
            tags.add(INFINITIVE)
        elif lower in NEGATIONS or lemma in NEGATIONS:
            tags.update((NEGATIVE, ADVERB))
        elif token.tag_ == "POS":
            tags.add(POSSESSIVE)

    if token.tag_ == "PRP$":
        tags.add(POSSESSIVE)

    if token.like_num and DIGITS_RE.search(token.text):
        tags.add(NUMERIC_VALUE)
    if lower in ORDINAL_WORDS or ORDINAL_RE.match(token.text):
        tags.add(ORDINAL)

    return with_parents(tags)


# =============================================================================
# Tagger
# =============================================================================

class SpacyTagger(Tagger):
    """
    spaCy-based part-of-speech tagger.

    Lemmas come from spaCy's lemmatizer, lower-cased; an empty lemma falls
    back to the lower-cased surface text.
    """

    def __init__(self, model_name: Optional[str] = None) -> None:
        self._model_name = model_name

    @property
    def name(self) -> str:
        return "spacy"

    def tag(self, text: str) -> list[TaggedToken]:
        """Tag text with spaCy and translate every token."""
        doc = get_nlp(self._model_name)(text)
        return [
            TaggedToken(
                surface_text=token.text,
                tags=spacy_tags(token),
                lemma=resolve_lemma(token.lemma_, token.text),
                whitespace=token.whitespace_,
            )
            for token in doc
        ]
