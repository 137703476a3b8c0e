"""Tests for runtime/locale.py: per-locale translation.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from phrasestore.decoding.values import TreeValue, from_native
from phrasestore.diagnostics import IllegalStateError
from phrasestore.enums import TranslationErrorClass
from phrasestore.runtime.locale import Locale, sentinel
from phrasestore.runtime.merger import ScanMerger
from tests.strategies import translation_keys


def _locale(document: dict[str, object], name: str = "en_US") -> Locale:
    tree = from_native(document)
    assert isinstance(tree, TreeValue)
    locale = Locale(name)
    merger = ScanMerger()
    merger.merge(locale.root, tree, 0)
    merger.promote(locale)
    return locale


MENU = {
    "title": "Home",
    "greet": "Hello, {{name}}!",
    "menu": {"file": {"open": "Open", "close": "Close"}, "help": "Help"},
}


class TestSentinel:
    """Test the failure text format."""

    def test_format(self) -> None:
        """Sentinels embed the class and the key."""
        assert (
            sentinel(TranslationErrorClass.TRANSLATION_NOT_FOUND, "menu/open")
            == "i18nErr: TranslationNotFound. Key: menu/open"
        )


class TestTranslate:
    """Test key resolution."""

    def test_nested_key(self) -> None:
        """Slash-separated keys walk the trie."""
        assert _locale(MENU).translate("menu/file/open") == "Open"

    def test_top_level_key(self) -> None:
        """Single-segment keys read the root."""
        assert _locale(MENU).translate("title") == "Home"

    def test_interpolation(self) -> None:
        """Arguments fill {{name}} verbs."""
        assert _locale(MENU).translate("greet", {"name": "Bob"}) == "Hello, Bob!"

    def test_no_args_keeps_verbs(self) -> None:
        """Without arguments the phrase is returned as stored."""
        assert _locale(MENU).translate("greet") == "Hello, {{name}}!"

    def test_empty_key(self) -> None:
        """The empty key has its own failure class."""
        assert _locale(MENU).translate("") == "i18nErr: TranslationKeyIsEmpty. Key: "

    @pytest.mark.parametrize("key", ["/title", "title/", "menu//help", "/", "//"])
    def test_incorrect_key(self, key: str) -> None:
        """Keys with empty segments are incorrect."""
        assert _locale(MENU).translate(key) == f"i18nErr: TranslationKeyIsIncorrect. Key: {key}"

    @pytest.mark.parametrize("key", ["missing", "menu/missing", "menu/file", "nope/open", "title/x"])
    def test_not_found(self, key: str) -> None:
        """Missing leaves, intermediate nodes and paths through leaves are not found."""
        assert _locale(MENU).translate(key) == f"i18nErr: TranslationNotFound. Key: {key}"

    def test_has_translation(self) -> None:
        """has_translation mirrors translate() success."""
        locale = _locale(MENU)

        assert locale.has_translation("menu/help")
        assert not locale.has_translation("menu")
        assert not locale.has_translation("")

    def test_iter_keys(self) -> None:
        """Every stored key is listed once."""
        assert sorted(_locale(MENU).iter_keys()) == [
            "greet",
            "menu/file/close",
            "menu/file/open",
            "menu/help",
            "title",
        ]

    @given(st.text(max_size=30))
    def test_never_raises(self, key: str) -> None:
        """PROPERTY: translate() returns text for any key."""
        result = _locale(MENU).translate(key)
        event(f"sentinel={result.startswith('i18nErr: ')}")
        assert isinstance(result, str)

    @given(translation_keys())
    def test_unknown_keys_not_found(self, key: str) -> None:
        """PROPERTY: well-formed keys of an empty locale are not found."""
        assert Locale("en_US").translate(key) == f"i18nErr: TranslationNotFound. Key: {key}"


class TestLocaleMisc:
    """Test Babel bridge, default marking and repr."""

    def test_babel_locale(self) -> None:
        """CLDR data is reachable through Babel."""
        babel_locale = Locale("de_DE").get_babel_locale()

        assert babel_locale.language == "de"
        assert babel_locale.territory == "DE"

    def test_mark_as_default_without_client(self) -> None:
        """A locale built outside a client cannot become a default."""
        with pytest.raises(IllegalStateError):
            Locale("en_US").mark_as_default()

    def test_resolve_origins_ignores_unknown_indices(self) -> None:
        """Indices outside the load's source list are dropped."""
        locale = Locale("en_US", source_origins=("a.yaml", "b.yaml"))

        assert locale.resolve_origins([1, 5, 0]) == ("b.yaml", "a.yaml")

    def test_repr(self) -> None:
        """repr shows name and phrase count."""
        assert repr(_locale(MENU)) == "Locale(name='en_US', phrase_count=5)"
