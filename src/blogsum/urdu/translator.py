"""
Deterministic word-by-word English to Urdu translation.
"""

from __future__ import annotations

import re
from typing import List, Mapping, Optional

from .dictionary import ENGLISH_URDU_DICTIONARY

SUFFIXES = ("ing", "ed", "er", "est", "s", "ly")

_LOOKUP_PUNCTUATION = re.compile(r"[.,!?;:()\[\]{}'\"]")
_WHITESPACE = re.compile(r"\s+")
_TERMINATOR_SPACING = re.compile(r"([۔؟!])\s*(\S)")


def word_variations(word: str) -> List[str]:
    """Candidate dictionary keys for ``word``, most specific first."""
    variations = [word]
    for suffix in SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            variations.append(word[: -len(suffix)])
    if word.endswith("ies") and len(word) > 4:
        variations.append(word[:-3] + "y")
    return variations


def translate_word(word: str, dictionary: Mapping[str, str] = ENGLISH_URDU_DICTIONARY) -> str:
    lookup = _LOOKUP_PUNCTUATION.sub("", word)
    for candidate in word_variations(lookup):
        translation = dictionary.get(candidate)
        if translation:
            return translation
    return word


def translate_fallback(text: str, dictionary: Optional[Mapping[str, str]] = None) -> str:
    """
    Translate ``text`` word by word; identical input always yields identical output.

    Unknown words are kept (lowercased) so the result never loses content.
    """
    if not text or not text.strip():
        return ""

    table = ENGLISH_URDU_DICTIONARY if dictionary is None else dictionary
    words = text.lower().split()
    translated = " ".join(translate_word(word, table) for word in words)
    translated = _WHITESPACE.sub(" ", translated).strip()
    return _TERMINATOR_SPACING.sub(r"\1 \2", translated)


class DictionaryTranslationProvider:
    """TranslationProvider backed by the offline dictionary."""

    name = "dictionary"
    deterministic = True

    def __init__(self, dictionary: Optional[Mapping[str, str]] = None) -> None:
        self.dictionary = dictionary

    async def translate(self, text: str) -> str:
        return translate_fallback(text, self.dictionary)
