"""Hypothesis strategies for phrasestore property-based testing.

Usage:
    from tests.strategies import locale_names, phrase_trees, translation_keys
"""

from .phrases import (
    KEY_ALPHABET,
    interpolation_args,
    key_segments,
    locale_names,
    phrase_texts,
    phrase_trees,
    translation_keys,
    verb_names,
)

__all__ = [
    "KEY_ALPHABET",
    "interpolation_args",
    "key_segments",
    "locale_names",
    "phrase_texts",
    "phrase_trees",
    "translation_keys",
    "verb_names",
]
