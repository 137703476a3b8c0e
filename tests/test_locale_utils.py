"""Tests for locale_utils.py.

Covers the ll_CC name check, BCP-47 normalization and the cached Babel
bridge. Includes property-based tests with Hypothesis.

Python 3.13+.
"""

import string

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from phrasestore.locale_utils import get_babel_locale, is_valid_locale_name, normalize_locale
from tests.strategies import locale_names


class TestIsValidLocaleName:
    """Test the ll_CC pattern check."""

    @pytest.mark.parametrize("name", ["en_US", "zh_CN", "ru_RU", "zz_ZZ"])
    def test_accepts_pattern(self, name: str) -> None:
        """Two lowercase letters, underscore, two uppercase letters."""
        assert is_valid_locale_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", "en", "en-US", "EN_us", "en_us", "En_US", "en_USA", "eng_US", "e1_US", "én_US", "en_ÜS"],
    )
    def test_rejects_other_shapes(self, name: str) -> None:
        """Anything else is rejected, including non-ASCII letters."""
        assert not is_valid_locale_name(name)

    @given(locale_names())
    def test_generated_names_are_valid(self, name: str) -> None:
        """PROPERTY: every generated ll_CC name passes."""
        assert is_valid_locale_name(name)

    @given(st.text(max_size=7))
    def test_matches_character_rule(self, text: str) -> None:
        """PROPERTY: result equals the per-character rule."""
        expected = (
            len(text) == 5
            and text[0] in string.ascii_lowercase
            and text[1] in string.ascii_lowercase
            and text[2] == "_"
            and text[3] in string.ascii_uppercase
            and text[4] in string.ascii_uppercase
        )
        event(f"valid={expected}")
        assert is_valid_locale_name(text) is expected


class TestNormalizeLocale:
    """Test BCP-47 to POSIX conversion."""

    def test_hyphen_replaced(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_case_preserved(self) -> None:
        """Case is left alone."""
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        """Every hyphen is converted."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestGetBabelLocale:
    """Test the cached Babel bridge."""

    def test_returns_babel_locale(self) -> None:
        """POSIX name resolves to a Babel Locale."""
        locale = get_babel_locale("de_DE")

        assert isinstance(locale, Locale)
        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_accepts_bcp47(self) -> None:
        """Hyphenated names are normalized first."""
        assert get_babel_locale("pt-BR").territory == "BR"

    def test_cached(self) -> None:
        """Repeated calls return the same object."""
        assert get_babel_locale("fr_FR") is get_babel_locale("fr_FR")

    def test_unknown_locale_raises(self) -> None:
        """Names without CLDR data raise Babel's error."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz_ZZ")
