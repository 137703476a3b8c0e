"""Load result data structures.

Components:
    SourceLoadResult - Immutable record of one document merged by a load
    LoadSummary - Immutable aggregate of the last successful load

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from phrasestore.enums import SourceKind
from phrasestore.localization.types import LocaleName, SourceOrigin

__all__ = ["LoadSummary", "SourceLoadResult"]


@dataclass(frozen=True, slots=True)
class SourceLoadResult:
    """Immutable result of merging one document.

    Attributes:
        origin: Absolute path or caller location of the document
        kind: Resolved document kind (raw buffers report YAML or TOML)
        locale_name: Locale the document was merged into
        phrases_added: Phrases that were new to the locale (overwrites excluded)
    """

    origin: SourceOrigin
    kind: SourceKind
    locale_name: LocaleName
    phrases_added: int


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of a successful load.

    All statistics are computed properties derived from the ``results``
    tuple, which keeps the registration order of the documents.

    Attributes:
        results: Per-document results (immutable tuple)

    Example:
        >>> client.commit_load()
        >>> summary = client.get_load_summary()
        >>> summary.locales
        ('de_DE', 'en_US')
        >>> summary.phrases_total
        42
    """

    results: tuple[SourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(sources={self.sources_total}, "
            f"locales={self.locales_total}, "
            f"phrases={self.phrases_total})"
        )

    @property
    def locales(self) -> tuple[LocaleName, ...]:
        """Sorted names of the loaded locales."""
        return tuple(sorted({r.locale_name for r in self.results}))

    @property
    def sources(self) -> tuple[SourceOrigin, ...]:
        """Origins of the loaded documents, in load order."""
        return tuple(r.origin for r in self.results)

    @property
    def locales_total(self) -> int:
        """Number of distinct locales loaded."""
        return len(self.locales)

    @property
    def sources_total(self) -> int:
        """Number of documents loaded."""
        return len(self.results)

    @property
    def phrases_total(self) -> int:
        """Number of phrases across all locales."""
        return sum(r.phrases_added for r in self.results)

    def get_by_locale(self, locale_name: LocaleName) -> tuple[SourceLoadResult, ...]:
        """Get the results of the documents merged into one locale."""
        return tuple(r for r in self.results if r.locale_name == locale_name)
