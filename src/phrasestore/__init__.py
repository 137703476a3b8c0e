"""phrasestore - locale phrase store for application internationalization.

Loads key/value phrase trees (YAML or TOML) for any number of ``ll_CC``
locales, merges them into per-locale tries, and serves lock-free lookups with
``{{name}}`` placeholder interpolation.

Public API:
    Client - Register sources, commit loads, translate keys
    ClientConfig - Immutable client configuration
    Locale - One loaded locale (translate, has_translation, iter_keys)
    ClientState - Client lifecycle states
    LoadSummary - Result of the last successful load

Exceptions:
    PhraseStoreError - Base exception class
    IllegalArgumentError, DuplicateSourceError, IllegalStateError,
    IllegalFormatError, AmbiguousMetadataError, AlreadyExistsError,
    DataUnavailableError, DepthLimitExceededError, NotFoundError, InternalError

Submodules:
    phrasestore.diagnostics - Diagnostic codes, templates and formatter
    phrasestore.decoding - YAML/TOML decoders and the document value model
    phrasestore.localization - Sources, metadata discovery and the Client
    phrasestore.runtime - Phrase trie, merge engine and interpolation
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    AlreadyExistsError,
    AmbiguousMetadataError,
    DataUnavailableError,
    DepthLimitExceededError,
    DuplicateSourceError,
    IllegalArgumentError,
    IllegalFormatError,
    IllegalStateError,
    InternalError,
    NotFoundError,
    PhraseStoreError,
)
from .enums import ClientState, SourceKind, TranslationErrorClass
from .localization import Client, ClientConfig, LoadSummary
from .runtime import Locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("phrasestore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AlreadyExistsError",
    "AmbiguousMetadataError",
    "Client",
    "ClientConfig",
    "ClientState",
    "DataUnavailableError",
    "DepthLimitExceededError",
    "DuplicateSourceError",
    "IllegalArgumentError",
    "IllegalFormatError",
    "IllegalStateError",
    "InternalError",
    "LoadSummary",
    "Locale",
    "NotFoundError",
    "PhraseStoreError",
    "SourceKind",
    "TranslationErrorClass",
    "__version__",
]
