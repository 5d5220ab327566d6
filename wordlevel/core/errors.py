"""
Errors — Exception types raised by WordLevel.
"""


class VocabularyLoadError(Exception):
    """A word list could not be retrieved or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not load word list '{source}': {reason}")
        self.source = source
        self.reason = reason
