"""
WordLevel — Graded Vocabulary Checker

Flags the words of an English text that fall outside a graded word list,
checked per part of speech.

The tagger proposes. The word list decides.
"""

__version__ = "0.1.0"
