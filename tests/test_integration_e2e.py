"""End-to-end scenarios through the public API.

Python 3.13+.
"""

from pathlib import Path

import yaml
from hypothesis import given, settings

from phrasestore import Client
from tests.strategies import locale_names, phrase_trees

EN = b"""
__metadata__:
  locale: en_US
a:
  b: "Hello, {{name}}!"
"""

ZH = """
__metadata__:
  locale: zh_CN
a:
  b: "{{name}}, 你好!"
""".encode()


def _flatten(document: dict[str, object], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in document.items():
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{prefix}{key}/"))
        else:
            flat[f"{prefix}{key}"] = str(value)
    return flat


class TestYamlWords:
    """Plain YAML words keep their text through a load."""

    def test_yes_no_phrases_and_keys(self) -> None:
        """Yes/No/On/Off are phrases, and a "no" key is a key."""
        client = Client()
        client.register(
            b"__metadata__: {locale: en_US}\n"
            b"confirm: Yes\n"
            b"toggle: {enable: On, disable: Off}\n"
            b"languages: {en: English, no: Norwegian}\n"
        )
        client.commit_load()

        assert client.translate("en_US", "confirm") == "Yes"
        assert client.translate("en_US", "toggle/disable") == "Off"
        assert client.translate("en_US", "languages/no") == "Norwegian"

    def test_true_is_still_a_boolean(self) -> None:
        """true renders through the boolean phrase form."""
        client = Client()
        client.register(b"__metadata__: {locale: en_US}\nflag: True\n")
        client.commit_load()

        assert client.translate("en_US", "flag") == "true"


class TestTwoLocales:
    """Two raw documents, one key, default fallback."""

    def test_translate_and_fallback(self) -> None:
        """Each locale interpolates its own phrase; unknown names use the default."""
        client = Client()
        client.register(EN, ZH)
        client.commit_load()

        assert client.translate("en_US", "a/b", {"name": "Frank"}) == "Hello, Frank!"
        assert client.translate("zh_CN", "a/b", {"name": "Dave"}) == "Dave, 你好!"

        client.mark_as_default("en_US")

        assert client.translate("ru_RU", "a/b") == "Hello, {{name}}!"

    def test_failures_are_sentinels(self) -> None:
        """Lookup failures come back as sentinel strings."""
        client = Client()
        client.register(EN)
        client.commit_load()

        assert client.translate("en_US", "a") == "i18nErr: TranslationNotFound. Key: a"
        assert client.translate("en_US", "a//b") == "i18nErr: TranslationKeyIsIncorrect. Key: a//b"
        assert client.translate("ru_RU", "a/b") == "i18nErr: LocaleIsNil. Key: a/b"


class TestDirectoryLayout:
    """A locale tree on disk with YAML and TOML files."""

    def test_directory_per_locale(self, locale_dir: Path) -> None:
        """Files inherit the locale of their directory and merge together."""
        english = locale_dir / "en_US"
        german = locale_dir / "de_DE"
        english.mkdir()
        german.mkdir()
        (english / "menu.yaml").write_text("menu:\n  open: Open\n", encoding="utf-8")
        (english / "dialogs.toml").write_text(
            '[dialog]\nsave = "Save {{file}}?"\n', encoding="utf-8"
        )
        (german / "menu.yml").write_text("menu:\n  open: Öffnen\n", encoding="utf-8")

        client = Client()
        client.register(locale_dir)
        client.commit_load()

        assert client.locales == ("de_DE", "en_US")
        assert client.translate("en_US", "dialog/save", {"file": "a.txt"}) == "Save a.txt?"
        assert client.translate("de_DE", "menu/open") == "Öffnen"
        assert client.lookup("en_US").phrase_count == 2  # type: ignore[union-attr]


class TestRoundTrip:
    """Generated documents survive a YAML dump, load and merge."""

    @given(locale_names(), phrase_trees())
    @settings(max_examples=50)
    def test_yaml_documents(self, name: str, document: dict[str, object]) -> None:
        """PROPERTY: every leaf of a dumped document translates to its text."""
        content = yaml.safe_dump(
            {"__metadata__": {"locale": name}, **document}, allow_unicode=True
        ).encode("utf-8")
        client = Client()
        client.register(content)
        client.commit_load()

        for key, phrase in _flatten(document).items():
            assert client.translate(name, key) == phrase
