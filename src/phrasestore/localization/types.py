"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Client call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleName",
    "SourceOrigin",
    "TranslationArgs",
    "TranslationKey",
]

type LocaleName = str
"""Locale name in ``ll_CC`` form (e.g., 'en_US', 'ru_RU')."""

type TranslationKey = str
"""Slash-separated phrase key (e.g., 'menu/file/open')."""

type SourceOrigin = str
"""Absolute file path, or '<file>:<line>' of the caller for raw buffers."""

type TranslationArgs = Mapping[str, object]
"""Interpolation arguments keyed by verb name."""
