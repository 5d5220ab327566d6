"""
Unit tests for the token validator.
"""

import pytest
from conftest import punct, space, word

from wordlevel.nlp.tags import (
    ADVERB,
    AUXILIARY,
    COPULA,
    INFINITIVE,
    MODAL,
    NOUN,
    ORDINAL,
    PREPOSITION,
    PRONOUN,
    VERB,
    WORD,
)
from wordlevel.nlp.interfaces import TaggedToken
from wordlevel.validation.token import is_valid, is_word, matches_labels
from wordlevel.vocab.store import VocabularyStore


VOCAB = {
    "go": ["verb"],
    "study": ["noun", "verb"],
    "home": ["noun"],
    "be": ["be-verb"],
    "can": ["modal-auxiliary"],
    "first": ["number"],
    "odd": ["made-up-label"],
}


class TestExemptTokens:
    """Punctuation and whitespace never get flagged."""

    @pytest.mark.parametrize("vocab", [{}, VOCAB])
    def test_punctuation_is_valid(self, vocab):
        assert is_valid(punct("."), vocab)
        assert is_valid(punct("!"), vocab)

    @pytest.mark.parametrize("vocab", [{}, VOCAB])
    def test_whitespace_is_valid(self, vocab):
        assert is_valid(space("\n\n"), vocab)

    def test_word_and_punctuation_tags_is_exempt(self):
        """A token carrying Punctuation is exempt even if tagged Word."""
        token = TaggedToken("--", frozenset({WORD, "Punctuation"}), "--")
        assert not is_word(token)
        assert is_valid(token, {})

    def test_token_without_word_tag_is_exempt(self):
        token = TaggedToken("???", frozenset(), "???")
        assert is_valid(token, {})


class TestLemmaLookup:
    """Tests for the vocabulary lookup step."""

    def test_absent_lemma_is_invalid(self):
        assert not is_valid(word("run", VERB), VOCAB)

    def test_lemma_not_surface_is_looked_up(self):
        """'went' passes through its lemma 'go'."""
        assert is_valid(word("went", VERB, lemma="go"), VOCAB)

    def test_unnormalized_lemma_is_invalid(self):
        """If the tagger left 'went' as its own lemma, it is not on the list."""
        assert not is_valid(word("went", VERB, lemma="went"), VOCAB)

    def test_empty_allowed_labels_is_invalid(self):
        assert not is_valid(word("home", NOUN), {"home": []})

    def test_works_with_vocabulary_store(self):
        store = VocabularyStore(VOCAB, source="test")
        assert is_valid(word("home", NOUN), store)
        assert not is_valid(word("house", NOUN), store)


class TestLabelMatching:
    """Tests for the generic label path."""

    def test_matching_part_of_speech(self):
        assert is_valid(word("home", NOUN), VOCAB)

    def test_wrong_part_of_speech(self):
        """'home' is listed as a noun only."""
        assert not is_valid(word("home", ADVERB), VOCAB)

    def test_any_allowed_label_suffices(self):
        assert is_valid(word("study", VERB), VOCAB)
        assert is_valid(word("study", NOUN), VOCAB)

    def test_label_order_irrelevant(self):
        token = word("study", VERB)
        assert is_valid(token, {"study": ["noun", "verb"]}) == is_valid(token, {"study": ["verb", "noun"]})

    def test_copula_needs_be_verb_label(self):
        assert is_valid(word("is", COPULA, lemma="be"), VOCAB)

    def test_modal(self):
        assert is_valid(word("can", MODAL), VOCAB)

    def test_ordinal_number(self):
        assert is_valid(word("first", ORDINAL), VOCAB)

    def test_unknown_label_never_matches(self):
        assert not is_valid(word("odd", NOUN), VOCAB)

    def test_unmapped_tag_never_matches(self):
        assert not matches_labels({"Gerund"}, ["verb", "noun"])

    def test_do_verb_matches_auxiliary(self):
        assert matches_labels({AUXILIARY}, ["do-verb"])


class TestInfinitiveTo:
    """'to' is checked by role, never by generic label match."""

    def test_infinitive_with_infinitive_label(self):
        token = word("to", INFINITIVE)
        assert is_valid(token, {"to": ["infinitive-to"]})

    def test_preposition_with_only_infinitive_label(self):
        token = word("to", PREPOSITION)
        assert not is_valid(token, {"to": ["infinitive-to"]})

    def test_preposition_with_preposition_label(self):
        token = word("to", PREPOSITION)
        assert is_valid(token, {"to": ["preposition"]})

    def test_infinitive_with_only_preposition_label(self):
        token = word("to", INFINITIVE)
        assert not is_valid(token, {"to": ["preposition"]})

    def test_case_insensitive_surface(self):
        token = word("To", INFINITIVE, lemma="to")
        assert is_valid(token, {"to": ["infinitive-to"]})

    def test_generic_path_bypassed(self):
        """A label that would match generically does not help 'to'."""
        token = word("to", PREPOSITION, PRONOUN)
        assert not is_valid(token, {"to": ["pronoun", "infinitive-to"]})

    def test_absent_to_is_invalid(self):
        assert not is_valid(word("to", INFINITIVE), {})
