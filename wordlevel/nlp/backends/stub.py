"""
Stub Backend — Lexicon tagger for tests and offline use.

Tokenizes with a regular expression and tags from a small lexicon.
No models, fully deterministic. Words missing from the lexicon are
tagged as bare words with their lower-cased surface as lemma.
"""

import re
from typing import Mapping, Optional

from wordlevel.nlp.interfaces import TaggedToken, Tagger, resolve_lemma
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
    POSSESSIVE,
    PREPOSITION,
    PRONOUN,
    PUNCTUATION,
    VERB,
    WHITESPACE,
    WORD,
    with_parents,
)

# word or single non-space symbol, then its trailing whitespace
TOKEN_RE = re.compile(r"(\w+(?:'\w+)*|[^\w\s])(\s*)")
LEADING_WS_RE = re.compile(r"^\s+")

# surface (lower-case) -> (lemma, tags)
DEFAULT_LEXICON: dict[str, tuple[str, tuple[str, ...]]] = {
    "i": ("i", (PRONOUN,)),
    "me": ("i", (PRONOUN,)),
    "my": ("my", (PRONOUN, POSSESSIVE)),
    "you": ("you", (PRONOUN,)),
    "he": ("he", (PRONOUN,)),
    "she": ("she", (PRONOUN,)),
    "it": ("it", (PRONOUN,)),
    "we": ("we", (PRONOUN,)),
    "they": ("they", (PRONOUN,)),
    "a": ("a", (DETERMINER,)),
    "an": ("an", (DETERMINER,)),
    "the": ("the", (DETERMINER,)),
    "this": ("this", (DETERMINER,)),
    "am": ("be", (COPULA,)),
    "is": ("be", (COPULA,)),
    "are": ("be", (COPULA,)),
    "was": ("be", (COPULA,)),
    "were": ("be", (COPULA,)),
    "be": ("be", (COPULA,)),
    "can": ("can", (MODAL,)),
    "will": ("will", (MODAL,)),
    "do": ("do", (VERB,)),
    "does": ("do", (VERB,)),
    "did": ("do", (VERB,)),
    "have": ("have", (VERB,)),
    "has": ("have", (VERB,)),
    "had": ("have", (VERB,)),
    "not": ("not", (NEGATIVE, ADVERB)),
    "and": ("and", (CONJUNCTION,)),
    "but": ("but", (CONJUNCTION,)),
    "or": ("or", (CONJUNCTION,)),
    "in": ("in", (PREPOSITION,)),
    "on": ("on", (PREPOSITION,)),
    "at": ("at", (PREPOSITION,)),
    "with": ("with", (PREPOSITION,)),
    "to": ("to", (PREPOSITION,)),
    "go": ("go", (VERB,)),
    "goes": ("go", (VERB,)),
    "went": ("go", (VERB,)),
    "like": ("like", (VERB,)),
    "study": ("study", (VERB,)),
    "home": ("home", (NOUN,)),
    "school": ("school", (NOUN,)),
    "book": ("book", (NOUN,)),
    "good": ("good", (ADJECTIVE,)),
    "very": ("very", (ADVERB,)),
    "hello": ("hello", (INTERJECTION,)),
}

# Base forms that follow an infinitive "to"
_VERB_LEMMAS = {"go", "like", "study", "be", "do", "have"}


class StubTagger(Tagger):
    """
    Lexicon-driven tagger.

    "to" directly before a known verb is tagged as the infinitive marker,
    otherwise as a preposition.
    """

    def __init__(self, lexicon: Optional[Mapping[str, tuple[str, tuple[str, ...]]]] = None) -> None:
        self._lexicon = dict(DEFAULT_LEXICON if lexicon is None else lexicon)

    @property
    def name(self) -> str:
        return "stub"

    def tag(self, text: str) -> list[TaggedToken]:
        tokens: list[TaggedToken] = []

        leading = LEADING_WS_RE.match(text)
        if leading:
            tokens.append(TaggedToken(
                surface_text=leading.group(),
                tags=frozenset({WHITESPACE}),
                lemma=leading.group(),
            ))

        matches = list(TOKEN_RE.finditer(text, leading.end() if leading else 0))
        for i, m in enumerate(matches):
            surface, trailing = m.group(1), m.group(2)
            following = matches[i + 1].group(1) if i + 1 < len(matches) else None
            lemma, tags = self._lookup(surface, following)
            tokens.append(TaggedToken(
                surface_text=surface,
                tags=tags,
                lemma=resolve_lemma(lemma, surface),
                whitespace=trailing,
            ))

        return tokens

    def _lookup(self, surface: str, following: Optional[str]) -> tuple[str, frozenset[str]]:
        lower = surface.lower()
        if not (surface[0].isalnum() or surface[0] == "_"):
            return lower, frozenset({PUNCTUATION})

        if lower.isdigit():
            return lower, with_parents({WORD, NUMERIC_VALUE, CARDINAL})

        lemma, tags = self._lexicon.get(lower, ("", ()))
        tags = {WORD, *tags}

        if lower == "to" and following is not None:
            next_lemma = self._lexicon.get(following.lower(), ("",))[0]
            if next_lemma in _VERB_LEMMAS:
                tags.discard(PREPOSITION)
                tags.add(INFINITIVE)

        return lemma, with_parents(tags)
