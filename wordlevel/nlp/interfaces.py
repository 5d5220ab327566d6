"""
NLP Interfaces — Abstract tagger interface and its token type.

Taggers are semantic sensors, not authorities.
Their tags are matched against the word list, never trusted beyond that.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TaggedToken:
    """One unit of tagger output."""

    surface_text: str
    tags: frozenset[str]
    lemma: str
    whitespace: str = ""  # trailing whitespace, not part of surface_text


def resolve_lemma(lemma: str, surface_text: str) -> str:
    """Lower-cased lemma, falling back to the lower-cased surface text."""
    lemma = (lemma or "").strip().lower()
    return lemma or surface_text.lower()


class Tagger(ABC):
    """
    Abstract interface for part-of-speech tagging.

    Implementations must:
    - Return every token of the text, in order
    - Tag with names from wordlevel.nlp.tags only
    - Provide a lower-cased lemma (see resolve_lemma)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for tracing."""
        ...

    @abstractmethod
    def tag(self, text: str) -> list[TaggedToken]:
        """
        Tag text.

        Args:
            text: Input text to tag

        Returns:
            Tokens in document order
        """
        ...
