"""
Tag Vocabulary — The tags every tagger backend emits.

Backends translate their native analyses into these names. The label
mapping table is written against them, so a backend that invents a new
spelling silently stops matching.
"""

# Structural
WORD = "Word"
PUNCTUATION = "Punctuation"
WHITESPACE = "Whitespace"

# Nominal
NOUN = "Noun"
PROPER_NOUN = "ProperNoun"
PRONOUN = "Pronoun"
POSSESSIVE = "Possessive"

# Verbal
VERB = "Verb"
COPULA = "Copula"
MODAL = "Modal"
AUXILIARY = "Auxiliary"
INFINITIVE = "Infinitive"   # the infinitive marker "to", not a base-form verb

# Other word classes
ADJECTIVE = "Adjective"
ADVERB = "Adverb"
PREPOSITION = "Preposition"
CONJUNCTION = "Conjunction"
DETERMINER = "Determiner"
INTERJECTION = "Interjection"
NEGATIVE = "Negative"

# Numbers
VALUE = "Value"
NUMERIC_VALUE = "NumericValue"
CARDINAL = "Cardinal"
ORDINAL = "Ordinal"

ALL_TAGS = frozenset({
    WORD, PUNCTUATION, WHITESPACE,
    NOUN, PROPER_NOUN, PRONOUN, POSSESSIVE,
    VERB, COPULA, MODAL, AUXILIARY, INFINITIVE,
    ADJECTIVE, ADVERB, PREPOSITION, CONJUNCTION, DETERMINER, INTERJECTION, NEGATIVE,
    VALUE, NUMERIC_VALUE, CARDINAL, ORDINAL,
})

# Child tag -> parent tags it implies
PARENTS = {
    PROPER_NOUN: (NOUN,),
    COPULA: (VERB,),
    MODAL: (AUXILIARY, VERB),
    AUXILIARY: (VERB,),
    NUMERIC_VALUE: (VALUE,),
    CARDINAL: (VALUE,),
    ORDINAL: (VALUE,),
}


def with_parents(tags) -> frozenset[str]:
    """Close a tag collection over PARENTS."""
    closed = set(tags)
    pending = list(closed)
    while pending:
        for parent in PARENTS.get(pending.pop(), ()):
            if parent not in closed:
                closed.add(parent)
                pending.append(parent)
    return frozenset(closed)
