"""Mapping — Vocabulary labels to tagger tags."""

from wordlevel.mapping.labels import LABEL_MAPPING, known_labels, tags_for

__all__ = [
    "LABEL_MAPPING",
    "known_labels",
    "tags_for",
]
