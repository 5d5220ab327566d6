"""
Document Validator — Check every token of a text against the word list.

Tags the whole text once and annotates each token in order. Surface text
is passed through untouched; escaping belongs to the renderer.
"""

import time
from dataclasses import dataclass
from typing import Mapping, Sequence

from wordlevel.core.logging import LogChannel, get_logger
from wordlevel.nlp.interfaces import Tagger
from wordlevel.validation.token import is_valid, is_word

log = get_logger(LogChannel.VALIDATE)


@dataclass(frozen=True)
class Annotation:
    """One token of output: its text and whether it passed."""

    text: str
    is_valid: bool
    whitespace: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Annotations in document order plus the word count."""

    word_count: int
    annotations: tuple[Annotation, ...] = ()

    @property
    def invalid_count(self) -> int:
        return sum(1 for a in self.annotations if not a.is_valid)

    @property
    def invalid_words(self) -> list[str]:
        return [a.text for a in self.annotations if not a.is_valid]

    @property
    def all_valid(self) -> bool:
        return all(a.is_valid for a in self.annotations)


EMPTY_RESULT = ValidationResult(word_count=0)


def validate(
    text: str,
    tagger: Tagger,
    vocabulary: Mapping[str, Sequence[str]],
) -> ValidationResult:
    """
    Validate a document.

    Args:
        text: The writer's text
        tagger: Tagger backend, run once per call
        vocabulary: lemma -> allowed labels; read, never modified

    Returns:
        ValidationResult with one annotation per token
    """
    if not text.strip():
        return EMPTY_RESULT

    start = time.perf_counter()
    tokens = tagger.tag(text)

    word_count = 0
    annotations = []
    for token in tokens:
        if is_word(token):
            word_count += 1
        annotations.append(Annotation(
            text=token.surface_text,
            is_valid=is_valid(token, vocabulary),
            whitespace=token.whitespace,
        ))

    result = ValidationResult(word_count=word_count, annotations=tuple(annotations))

    log.verbose(
        "document_validated",
        tagger=tagger.name,
        tokens=len(annotations),
        words=word_count,
        invalid=result.invalid_count,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return result
