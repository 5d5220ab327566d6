"""
Shared fixtures: a scripted tagger, token builders and word list files.
"""

import json

import pytest

from wordlevel.core.config import Settings, WordlistLevel
from wordlevel.core.logging import configure_logging
from wordlevel.nlp.interfaces import TaggedToken, Tagger
from wordlevel.nlp.tags import PUNCTUATION, WHITESPACE, WORD, with_parents


def word(text, *tags, lemma=None, ws=" "):
    """Build a word token; lemma defaults to the lower-cased text."""
    return TaggedToken(
        surface_text=text,
        tags=with_parents({WORD, *tags}),
        lemma=text.lower() if lemma is None else lemma,
        whitespace=ws,
    )


def punct(text, ws=""):
    return TaggedToken(surface_text=text, tags=frozenset({PUNCTUATION}), lemma=text, whitespace=ws)


def space(text):
    return TaggedToken(surface_text=text, tags=frozenset({WHITESPACE}), lemma=text)


class FakeTimer:
    def __init__(self, clock, delay, fn):
        self.clock = clock
        self.delay = delay
        self.fn = fn
        self.cancelled = False

    def start(self):
        self.due = self.clock.now + self.delay
        self.clock.timers.append(self)

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Manual clock; pass clock.factory as a timer factory."""

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def factory(self, delay, fn):
        return FakeTimer(self, delay, fn)

    def advance(self, seconds):
        self.now += seconds
        for timer in list(self.timers):
            if not timer.cancelled and timer.due <= self.now:
                self.timers.remove(timer)
                timer.fn()


class ScriptedTagger(Tagger):
    """Returns prepared tokens for known texts and counts calls."""

    def __init__(self, scripts=None):
        self.scripts = dict(scripts or {})
        self.calls = []

    @property
    def name(self):
        return "scripted"

    def tag(self, text):
        self.calls.append(text)
        return list(self.scripts.get(text, []))


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging(level="silent", force=True)


@pytest.fixture
def scripted_tagger():
    return ScriptedTagger()


@pytest.fixture
def wordlist_dir(tmp_path):
    """Directory with two small levels and one broken file."""
    (tmp_path / "easy.json").write_text(json.dumps({
        "i": ["pronoun"],
        "go": ["verb"],
        "home": ["noun"],
    }))
    (tmp_path / "harder.json").write_text(json.dumps({
        "i": ["pronoun"],
        "go": ["verb"],
        "home": ["noun"],
        "school": ["noun"],
        "to": ["preposition", "infinitive-to"],
    }))
    (tmp_path / "broken.json").write_text("{not json")
    return tmp_path


@pytest.fixture
def settings(wordlist_dir):
    return Settings(
        debounce_ms=750,
        tagger="stub",
        wordlist_dir=str(wordlist_dir),
        wordlists=[
            WordlistLevel(name="Easy", file="easy.json"),
            WordlistLevel(name="Harder", file="harder.json"),
        ],
    )
