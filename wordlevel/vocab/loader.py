"""
Vocabulary Loader — Retrieve and parse word list files.

A word list is a JSON object mapping lower-case lemmas to the ordered
labels they are allowed with:

    {"go": ["verb"], "study": ["noun", "verb"]}

Sources are filesystem paths or http(s) URLs. Every failure (missing file,
HTTP error, bad JSON, wrong shape) surfaces as VocabularyLoadError.
"""

import asyncio
import json
from pathlib import Path
from typing import Optional, Union

import requests
from pydantic import TypeAdapter, ValidationError

from wordlevel.core.errors import VocabularyLoadError
from wordlevel.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.VOCAB)

WordlistTable = dict[str, list[str]]

_TABLE_ADAPTER = TypeAdapter(WordlistTable)

URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


def resolve_source(source: str, base_dir: Optional[Union[str, Path]] = None) -> str:
    """Resolve a relative word list path against base_dir; URLs pass through."""
    if is_url(source):
        return source
    path = Path(source).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return str(path)


def is_inside(source: str, base_dir: Union[str, Path]) -> bool:
    """
    True if source is a relative path that stays inside base_dir.

    URLs, absolute or home-relative paths and paths escaping base_dir
    (through ".." or a symlink) are outside.
    """
    if is_url(source) or not source.strip() or source.startswith("~"):
        return False
    path = Path(source)
    if path.is_absolute() or path.drive:
        return False
    base = Path(base_dir).resolve()
    resolved = (base / path).resolve()
    return resolved != base and base in resolved.parents


def parse_wordlist(raw: Union[str, bytes], source: str) -> WordlistTable:
    """
    Parse word list JSON into a lemma -> labels table.

    Keys are stripped and lower-cased; keys that collide after that are
    merged, keeping the first occurrence of each label.

    Raises:
        VocabularyLoadError: If the JSON is invalid or not lemma -> [label]
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise VocabularyLoadError(source, f"invalid JSON ({e})") from e

    try:
        table = _TABLE_ADAPTER.validate_python(data, strict=True)
    except ValidationError as e:
        raise VocabularyLoadError(
            source, f"expected an object of lemma -> list of labels ({e.error_count()} errors)"
        ) from e

    normalized: WordlistTable = {}
    for lemma, labels in table.items():
        key = lemma.strip().lower()
        if not key:
            continue
        merged = normalized.setdefault(key, [])
        for label in labels:
            label = label.strip()
            if label and label not in merged:
                merged.append(label)
    return normalized


def read_wordlist(
    source: str,
    base_dir: Optional[Union[str, Path]] = None,
    timeout: float = 10.0,
) -> WordlistTable:
    """
    Retrieve and parse a word list (blocking).

    Raises:
        VocabularyLoadError: On any retrieval or parse failure
    """
    location = resolve_source(source, base_dir)
    log.verbose("wordlist_fetch_started", source=location)

    if is_url(location):
        try:
            response = requests.get(location, timeout=timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise VocabularyLoadError(location, f"HTTP status {e.response.status_code}") from e
        except requests.RequestException as e:
            raise VocabularyLoadError(location, str(e)) from e
        raw = response.content
    else:
        try:
            raw = Path(location).read_bytes()
        except OSError as e:
            raise VocabularyLoadError(location, e.strerror or str(e)) from e

    return parse_wordlist(raw, location)


async def fetch_wordlist(
    source: str,
    base_dir: Optional[Union[str, Path]] = None,
    timeout: float = 10.0,
) -> WordlistTable:
    """Retrieve and parse a word list without blocking the event loop."""
    return await asyncio.to_thread(read_wordlist, source, base_dir, timeout)
