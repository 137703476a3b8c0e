"""Loaded locale and per-locale translation lookup.

A Locale is built during a load pass and published as part of an immutable
registry. Once published its trie is never modified, so translate() reads
it without any locking.

Python 3.13+.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from phrasestore.constants import KEY_SEPARATOR, SENTINEL_PREFIX, SENTINEL_SUFFIX
from phrasestore.diagnostics import ErrorTemplate, IllegalStateError
from phrasestore.enums import TranslationErrorClass
from phrasestore.locale_utils import get_babel_locale
from phrasestore.runtime.interpolator import interpolate
from phrasestore.runtime.node import LocaleNode

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

    from phrasestore.localization.orchestrator import Client
    from phrasestore.localization.types import LocaleName, TranslationArgs, TranslationKey

__all__ = ["Locale", "sentinel"]


def sentinel(error_class: TranslationErrorClass, key: str) -> str:
    """Build the text returned by a failed translation.

    Example:
        >>> sentinel(TranslationErrorClass.TRANSLATION_NOT_FOUND, "menu/open")
        'i18nErr: TranslationNotFound. Key: menu/open'
    """
    return f"{SENTINEL_PREFIX}{error_class}{SENTINEL_SUFFIX}{key}"


class Locale:
    """Phrases of one language/region.

    Attributes:
        name: Locale name in ``ll_CC`` form
        root: Top of the phrase trie
        phrase_count: Number of committed phrases in the whole trie

    Example:
        >>> client = Client()
        >>> client.register(b"__metadata__: {locale: en_US}\\ngreet: Hi, {{who}}")
        >>> client.commit_load()
        >>> locale = client.lookup("en_US")
        >>> locale.translate("greet", {"who": "Bob"})
        'Hi, Bob'
        >>> locale.translate("missing")
        'i18nErr: TranslationNotFound. Key: missing'
    """

    __slots__ = ("__weakref__", "_client", "_source_origins", "name", "phrase_count", "root")

    def __init__(
        self,
        name: LocaleName,
        client: Client | None = None,
        source_origins: Sequence[str] = (),
    ) -> None:
        self.name = name
        self.phrase_count = 0
        self._client: weakref.ReferenceType[Client] | None = (
            weakref.ref(client) if client is not None else None
        )
        self._source_origins = tuple(source_origins)
        self.root = LocaleNode(self)

    @property
    def client(self) -> Client | None:
        """Client that loaded this locale, None once it is collected."""
        return self._client() if self._client is not None else None

    def translate(self, key: TranslationKey, args: TranslationArgs | None = None) -> str:
        """Return the phrase for key with ``{{name}}`` verbs substituted.

        Never raises. Failures return a sentinel string of the form
        ``i18nErr: <Class>. Key: <key>``.

        Args:
            key: Slash-separated key, e.g. ``"menu/file/open"``
            args: Interpolation arguments

        Returns:
            Interpolated phrase, or sentinel text
        """
        phrase = self._find(key)
        if isinstance(phrase, TranslationErrorClass):
            return sentinel(phrase, key)
        return interpolate(phrase, args)

    def has_translation(self, key: TranslationKey) -> bool:
        """Check whether key resolves to a phrase."""
        return not isinstance(self._find(key), TranslationErrorClass)

    def iter_keys(self) -> Iterator[TranslationKey]:
        """Yield every translation key of the locale, depth first."""
        yield from _iter_node_keys(self.root, "")

    def get_babel_locale(self) -> BabelLocale:
        """Babel Locale for CLDR data (plural rules, display names, ...).

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for this name
        """
        return get_babel_locale(self.name)

    def mark_as_default(self) -> None:
        """Make this locale the client's fallback for lookup().

        Raises:
            IllegalStateError: Locale is not part of its client's live registry
        """
        client = self.client
        if client is None:
            raise IllegalStateError(ErrorTemplate.locale_not_live(self.name))
        client._set_default(self)  # noqa: SLF001

    def resolve_origins(self, indices: Iterable[int]) -> tuple[str, ...]:
        """Map source indices of the load that built this locale to origins."""
        return tuple(
            self._source_origins[index]
            for index in indices
            if 0 <= index < len(self._source_origins)
        )

    def _find(self, key: str) -> str | TranslationErrorClass:
        if not key:
            return TranslationErrorClass.TRANSLATION_KEY_IS_EMPTY
        segments = key.split(KEY_SEPARATOR)
        if not all(segments):
            return TranslationErrorClass.TRANSLATION_KEY_IS_INCORRECT
        node = self.root.descend(segments[:-1])
        if node is None:
            return TranslationErrorClass.TRANSLATION_NOT_FOUND
        phrase = node.committed.get(segments[-1])
        if phrase is None:
            return TranslationErrorClass.TRANSLATION_NOT_FOUND
        return phrase

    def __repr__(self) -> str:
        return f"Locale(name={self.name!r}, phrase_count={self.phrase_count})"


def _iter_node_keys(node: LocaleNode, prefix: str) -> Iterator[str]:
    for key in node.committed:
        yield f"{prefix}{key}"
    for name, child in node.children.items():
        yield from _iter_node_keys(child, f"{prefix}{name}{KEY_SEPARATOR}")
