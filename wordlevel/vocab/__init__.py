"""Vocab — Word list store and loader."""

from wordlevel.vocab.loader import fetch_wordlist, is_inside, parse_wordlist, read_wordlist
from wordlevel.vocab.store import VocabularyStore

__all__ = [
    "VocabularyStore",
    "fetch_wordlist",
    "is_inside",
    "parse_wordlist",
    "read_wordlist",
]
