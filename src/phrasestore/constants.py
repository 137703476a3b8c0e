"""Shared constants for phrasestore.

This module provides centralized configuration constants used across
the localization and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Directory scan ceiling and merge recursion protection
- Input limits: Size constraints and recognized document formats
- Document vocabulary: Metadata marker and locale-name aliases
- Translation syntax: Key separator and interpolation verb markers
- Fallback strings: Sentinel texts returned by failed translations

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_SCAN_DEPTH",
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    "YAML_EXTENSIONS",
    "TOML_EXTENSIONS",
    "SUPPORTED_EXTENSIONS",
    # Document vocabulary
    "METADATA_KEY",
    "LOCALE_NAME_ALIASES",
    "PATH_DELIMITERS",
    "UNDEFINED_PHRASE",
    "FLOAT_PRECISION",
    # Translation syntax
    "KEY_SEPARATOR",
    "VERB_OPEN",
    "VERB_CLOSE",
    # Fallback strings
    "SENTINEL_PREFIX",
    "SENTINEL_SUFFIX",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum directory nesting below a registered root directory.
# A directory found at this depth fails registration with DepthLimitExceededError.
MAX_SCAN_DEPTH: int = 16

# Maximum nesting of trees inside one document during merge.
# Clamped against sys.getrecursionlimit() by DepthGuard.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size of a single registered source in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Recognized document extensions, lowercase and without the leading dot.
# Extension matching is case-insensitive.
YAML_EXTENSIONS: frozenset[str] = frozenset({"yml", "yaml"})
TOML_EXTENSIONS: frozenset[str] = frozenset({"toml"})
SUPPORTED_EXTENSIONS: frozenset[str] = YAML_EXTENSIONS | TOML_EXTENSIONS

# ============================================================================
# DOCUMENT VOCABULARY
# ============================================================================

# Top-level key holding document metadata. Matched case-insensitively.
METADATA_KEY: str = "__metadata__"

# Keys inside the metadata tree that declare the locale name.
# Matched case-insensitively.
LOCALE_NAME_ALIASES: frozenset[str] = frozenset({"locale", "locale_name", "localename", "name"})

# Characters splitting a path segment into tokens during locale-name discovery.
PATH_DELIMITERS: str = "-_. "

# Phrase text stored for a null document value.
UNDEFINED_PHRASE: str = "<undefined>"

# Digits after the decimal point for float phrases.
FLOAT_PRECISION: int = 2

# ============================================================================
# TRANSLATION SYNTAX
# ============================================================================

KEY_SEPARATOR: str = "/"
VERB_OPEN: str = "{{"
VERB_CLOSE: str = "}}"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Failed translations return f"{SENTINEL_PREFIX}{error_class}{SENTINEL_SUFFIX}{key}",
# e.g. "i18nErr: TranslationNotFound. Key: menu/open".
SENTINEL_PREFIX: str = "i18nErr: "
SENTINEL_SUFFIX: str = ". Key: "
