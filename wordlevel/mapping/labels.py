"""
Label Mapping — Word list labels to tagger tags.

Word lists name parts of speech in their own vocabulary ("be-verb",
"infinitive-to"). Taggers emit their own tags ("Copula", "Infinitive").
This table is the only place the two meet.

Tag names are case-sensitive and must match the tag vocabulary in
wordlevel.nlp.tags. A misspelled tag is not an error: the label simply
never matches.
"""

from types import MappingProxyType
from typing import Mapping, Optional


_LABELS: dict[str, frozenset[str]] = {
    "adverb": frozenset({"Adverb"}),
    "verb": frozenset({"Verb"}),
    "adjective": frozenset({"Adjective"}),
    "noun": frozenset({"Noun"}),
    "preposition": frozenset({"Preposition"}),
    "conjunction": frozenset({"Conjunction"}),
    "determiner": frozenset({"Determiner"}),
    "pronoun": frozenset({"Pronoun"}),
    "be-verb": frozenset({"Copula"}),
    "modal-auxiliary": frozenset({"Modal"}),
    "interjection": frozenset({"Interjection"}),
    "do-verb": frozenset({"Verb", "Auxiliary"}),
    "number": frozenset({"Value", "NumericValue", "Cardinal", "Ordinal"}),
    "have-verb": frozenset({"Verb", "Auxiliary"}),
    "infinitive-to": frozenset({"Infinitive"}),
}

# Older word lists abbreviate the modal label
_LABELS["modal auxi"] = _LABELS["modal-auxiliary"]

LABEL_MAPPING: Mapping[str, frozenset[str]] = MappingProxyType(_LABELS)


def tags_for(label: str) -> Optional[frozenset[str]]:
    """Return the tagger tags a word list label stands for, or None if unknown."""
    return LABEL_MAPPING.get(label)


def known_labels() -> list[str]:
    return sorted(LABEL_MAPPING)
