"""
Vocabulary Store — The active word list of one session.

The table is replaced whole, never edited in place: readers always see
either the empty table or one complete word list.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from wordlevel.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.VOCAB)

_EMPTY: Mapping[str, tuple[str, ...]] = MappingProxyType({})


def freeze_table(table: Mapping[str, list[str]]) -> Mapping[str, tuple[str, ...]]:
    """Copy a lemma -> labels table into a read-only one with tuple values."""
    return MappingProxyType({lemma: tuple(labels) for lemma, labels in table.items()})


class VocabularyStore:
    """
    Holds the lemma -> allowed labels table.

    Acts as a read-only mapping for validators; only replace() and clear()
    change what it holds.
    """

    def __init__(self, table: Optional[Mapping[str, list[str]]] = None, source: Optional[str] = None) -> None:
        self._table = freeze_table(table) if table else _EMPTY
        self._source = source if table else None

    @property
    def source(self) -> Optional[str]:
        """Where the active table came from (None when empty)."""
        return self._source

    @property
    def table(self) -> Mapping[str, tuple[str, ...]]:
        """The active table (read-only snapshot)."""
        return self._table

    def get(self, lemma: str, default=None) -> Optional[tuple[str, ...]]:
        return self._table.get(lemma, default)

    def replace(self, table: Mapping[str, list[str]], source: Optional[str] = None) -> None:
        """Swap in a complete new table."""
        frozen = freeze_table(table)
        self._table = frozen
        self._source = source
        log.verbose("store_replaced", source=source, entries=len(frozen))

    def clear(self) -> None:
        """Swap in the empty table."""
        self._table = _EMPTY
        self._source = None
        log.verbose("store_cleared")

    def __contains__(self, lemma: object) -> bool:
        return lemma in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __bool__(self) -> bool:
        return bool(self._table)

    def __repr__(self) -> str:
        return f"VocabularyStore(source={self._source!r}, entries={len(self._table)})"
