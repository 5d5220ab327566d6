"""
Unit tests for tagger backends and the tag vocabulary.
"""

from types import SimpleNamespace

import pytest

from wordlevel.nlp.backends import TAGGERS, get_tagger
from wordlevel.nlp.backends.spacy_backend import SpacyTagger, spacy_tags
from wordlevel.nlp.backends.stub import StubTagger
from wordlevel.nlp.interfaces import resolve_lemma
from wordlevel.nlp.tags import (
    ADVERB,
    AUXILIARY,
    CARDINAL,
    COPULA,
    INFINITIVE,
    MODAL,
    NEGATIVE,
    NOUN,
    NUMERIC_VALUE,
    ORDINAL,
    POSSESSIVE,
    PREPOSITION,
    PROPER_NOUN,
    PUNCTUATION,
    VALUE,
    VERB,
    WHITESPACE,
    WORD,
    with_parents,
)


class TestTagVocabulary:
    def test_parents_closed_transitively(self):
        assert with_parents({MODAL}) == {MODAL, AUXILIARY, VERB}
        assert with_parents({PROPER_NOUN}) == {PROPER_NOUN, NOUN}
        assert with_parents({ORDINAL, WORD}) == {ORDINAL, VALUE, WORD}

    def test_resolve_lemma(self):
        assert resolve_lemma(" Go ", "went") == "go"
        assert resolve_lemma("", "Home") == "home"
        assert resolve_lemma(None, "Home") == "home"


class TestStubTagger:
    """Tests for the lexicon tagger."""

    def test_lemmas_and_tags(self):
        tokens = StubTagger().tag("She went home.")

        assert [t.surface_text for t in tokens] == ["She", "went", "home", "."]
        assert [t.lemma for t in tokens] == ["she", "go", "home", "."]
        assert VERB in tokens[1].tags
        assert tokens[3].tags == {PUNCTUATION}

    def test_whitespace_preserved(self):
        tokens = StubTagger().tag("  I  go\n")

        assert tokens[0].tags == {WHITESPACE}
        assert tokens[0].surface_text == "  "
        assert "".join(t.surface_text + t.whitespace for t in tokens) == "  I  go\n"

    def test_infinitive_to(self):
        tokens = StubTagger().tag("I like to study")
        to = tokens[2]

        assert INFINITIVE in to.tags
        assert PREPOSITION not in to.tags

    def test_prepositional_to(self):
        tokens = StubTagger().tag("I go to school")
        assert PREPOSITION in tokens[2].tags
        assert INFINITIVE not in tokens[2].tags

    def test_copula_implies_verb(self):
        tokens = StubTagger().tag("it is")
        assert tokens[1].lemma == "be"
        assert {COPULA, VERB} <= tokens[1].tags

    def test_numbers(self):
        tokens = StubTagger().tag("3 books")
        assert {NUMERIC_VALUE, CARDINAL, VALUE, WORD} <= tokens[0].tags

    def test_unknown_word(self):
        tokens = StubTagger().tag("Zebras")
        assert tokens[0].tags == {WORD}
        assert tokens[0].lemma == "zebras"

    def test_custom_lexicon(self):
        tagger = StubTagger({"cat": ("cat", (NOUN,))})
        assert NOUN in tagger.tag("cat")[0].tags
        assert tagger.tag("home")[0].tags == {WORD}

    def test_empty_text(self):
        assert StubTagger().tag("") == []


class TestGetTagger:
    def test_by_name(self):
        assert isinstance(get_tagger("stub"), StubTagger)
        assert isinstance(get_tagger("spacy", model_name="en_core_web_sm"), SpacyTagger)
        assert set(TAGGERS) == {"spacy", "stub"}

    def test_unknown(self):
        with pytest.raises(ValueError, match="Available"):
            get_tagger("treetagger")


def fake_token(text, pos, tag="", lemma=None, **flags):
    return SimpleNamespace(
        text=text,
        lower_=text.lower(),
        lemma_=text.lower() if lemma is None else lemma,
        pos_=pos,
        tag_=tag,
        is_space=flags.get("is_space", False),
        is_punct=flags.get("is_punct", False),
        like_num=flags.get("like_num", False),
    )


class TestSpacyTagMapping:
    """Tests for spaCy token -> tag translation."""

    def test_structural(self):
        assert spacy_tags(fake_token(" ", "SPACE", is_space=True)) == {WHITESPACE}
        assert spacy_tags(fake_token(",", "PUNCT", ",", is_punct=True)) == {PUNCTUATION}
        assert spacy_tags(fake_token("$", "SYM", "$")) == {PUNCTUATION}

    def test_be_is_copula_not_auxiliary(self):
        tags = spacy_tags(fake_token("was", "AUX", "VBD", lemma="be"))
        assert COPULA in tags
        assert VERB in tags
        assert AUXILIARY not in tags

    def test_modal(self):
        tags = spacy_tags(fake_token("can", "AUX", "MD"))
        assert {MODAL, AUXILIARY, VERB} <= tags

    def test_infinitive_marker(self):
        tags = spacy_tags(fake_token("to", "PART", "TO"))
        assert INFINITIVE in tags
        assert PREPOSITION not in tags

    def test_prepositional_to(self):
        tags = spacy_tags(fake_token("to", "ADP", "IN"))
        assert PREPOSITION in tags
        assert INFINITIVE not in tags

    def test_negation(self):
        tags = spacy_tags(fake_token("n't", "PART", "RB", lemma="not"))
        assert {NEGATIVE, ADVERB} <= tags

    def test_possessive(self):
        assert POSSESSIVE in spacy_tags(fake_token("my", "PRON", "PRP$"))
        assert POSSESSIVE in spacy_tags(fake_token("'s", "PART", "POS"))

    def test_numbers(self):
        assert {CARDINAL, NUMERIC_VALUE, VALUE} <= spacy_tags(fake_token("42", "NUM", "CD", like_num=True))
        assert NUMERIC_VALUE not in spacy_tags(fake_token("four", "NUM", "CD", like_num=True))
        assert ORDINAL in spacy_tags(fake_token("third", "ADJ", "JJ"))
        assert ORDINAL in spacy_tags(fake_token("21st", "ADJ", "JJ"))

    def test_proper_noun_is_noun(self):
        assert {PROPER_NOUN, NOUN} <= spacy_tags(fake_token("Paris", "PROPN", "NNP"))


@pytest.fixture(scope="module")
def spacy_tagger():
    from wordlevel.nlp.spacy_loader import get_nlp

    try:
        get_nlp()
    except (RuntimeError, ImportError):
        pytest.skip("spaCy model not installed")
    return SpacyTagger()


class TestSpacyTagger:
    """Tests against the real model (skipped when it is not installed)."""

    def test_lemmatizes(self, spacy_tagger):
        tokens = spacy_tagger.tag("She went home.")
        went = tokens[1]

        assert went.lemma == "go"
        assert VERB in went.tags

    def test_round_trips_text(self, spacy_tagger):
        text = "I like  dogs, and cats."
        tokens = spacy_tagger.tag(text)
        assert "".join(t.surface_text + t.whitespace for t in tokens) == text


class TestSpacyLoader:
    def test_missing_model(self):
        from wordlevel.nlp.spacy_loader import get_nlp, is_loaded

        with pytest.raises(RuntimeError, match="spacy download"):
            get_nlp("xx_no_such_model")
        assert not is_loaded("xx_no_such_model")

    def test_reset(self, spacy_tagger):
        from wordlevel.nlp.spacy_loader import is_loaded, reset_nlp

        spacy_tagger.tag("Hello")
        assert is_loaded()
        reset_nlp()
        assert not is_loaded()
