"""Part-of-speech breakdowns of tagged sentences."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


def _family(stem: str, prefix: str, variants: Mapping[str, str]) -> dict[str, str]:
    """Build the tag names for one family of related tags."""
    return {stem + suffix: prefix + detail for suffix, detail in variants.items()}


_DEGREES = {"": "", "R": ", Comparitave", "S": ", Superlative"}

_VERB_FORMS = {
    "": "Base Form",
    "D": "Past Tense",
    "G": "Gerund or Present Participle",
    "N": "Past Participle",
    "P": "Non-3rd Person Singular Present",
    "Z": "3rd Person Singular Present",
}

_NOUN_FORMS = {"": "Singular or Mass", "P": "Proper Singular", "S": "Plural"}

_PRONOUN_FORMS = {"": "Personal", "$": "Possesive"}

_SINGLE_TAGS = (
    ("CC", "Conjunction"),
    ("CD", "Cardinal Number"),
    ("DT", "Determiner"),
    ("EX", "Existential There"),
    ("FW", "Foreign Word"),
    ("IN", "Conjunction, Subordinating, or Preposition"),
    ("LS", "List Item Maker"),
    ("MD", "Verb, Modal Auxilary"),
    ("PDT", "Predeterminer"),
    ("POS", "Possesive Ending"),
    ("RP", "Adverb, Particle"),
    ("SYM", "Symbol"),
    ("TO", "Infinitival To"),
    ("UH", "Interjection"),
    ("WDT", "Wh-Determiner"),
    ("WRB", "Wh-Adverb"),
)

TAG_NAMES: dict[str, str] = {
    **{mark: mark for mark in "(),:.#$"},
    "''": "\u201d",
    "``": "\u201c",
    **dict(_SINGLE_TAGS),
    **_family("JJ", "Adjective", _DEGREES),
    **_family("RB", "Adverb", _DEGREES),
    **_family("VB", "Verb, ", _VERB_FORMS),
    **_family("NN", "Noun, ", _NOUN_FORMS),
    **_family("PRP", "Pronoun, ", _PRONOUN_FORMS),
    **_family("WP", "Wh-Pronoun, ", _PRONOUN_FORMS),
}

ADJECTIVE_TAGS = frozenset(_family("JJ", "", _DEGREES))


@dataclass(frozen=True)
class Section:
    """One token with the readable name of its part of speech."""

    part: str
    words: str


def breakdown(tokens: Iterable[tuple[str, str]]) -> list[Section]:
    """Describe each ``(text, tag)`` token by its part of speech."""
    return [Section(TAG_NAMES.get(tag, "UNKNOWN"), text) for text, tag in tokens]


def hellaify(text: str, tokens: Iterable[tuple[str, str]]) -> str:
    """Prefix the first adjective of each adjective kind with ``hella-`` everywhere it occurs."""
    done: set[str] = set()
    for word, tag in tokens:
        if tag in ADJECTIVE_TAGS and tag not in done:
            done.add(tag)
            text = text.replace(word, "hella-" + word)
    return text