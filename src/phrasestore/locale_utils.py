"""Locale name utilities.

Centralizes the ``ll_CC`` locale-name check and the Babel bridge used to
reach CLDR data for a loaded locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_valid_locale_name",
    "normalize_locale",
]

_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def is_valid_locale_name(name: str) -> bool:
    """Check that name follows the ``ll_CC`` pattern.

    Two lowercase ASCII letters (language), an underscore, and two
    uppercase ASCII letters (country). No linguistic validation is done:
    ``"zz_ZZ"`` is accepted.

    Args:
        name: Candidate locale name

    Returns:
        True if the name matches the pattern

    Example:
        >>> is_valid_locale_name("en_US")
        True
        >>> is_valid_locale_name("en-US")
        False
        >>> is_valid_locale_name("EN_us")
        False
    """
    return (
        len(name) == 5
        and name[0] in _ASCII_LOWER
        and name[1] in _ASCII_LOWER
        and name[2] == "_"
        and name[3] in _ASCII_UPPER
        and name[4] in _ASCII_UPPER
    )


def normalize_locale(locale_code: str) -> str:
    """Replace BCP-47 hyphens with underscores ("pt-BR" -> "pt_BR")."""
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Babel Locale for a phrasestore locale name, parsed once per name.

    Raises:
        babel.UnknownLocaleError: CLDR has no data for the name
        ValueError: The name cannot be parsed at all

    Example:
        >>> get_babel_locale("de_DE").get_display_name("en")
        'German (Germany)'
    """
    # Importing babel loads CLDR metadata; only pay for it on first use
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
