"""Locale source registration, metadata discovery and the Client.

Submodules:
    types        - PEP 695 type aliases (LocaleName, TranslationKey, SourceOrigin, TranslationArgs)
    sources      - SourceDescriptor, SourceRegistry
    metadata     - extract_locale_name, find_locale_names_in_path
    loading      - SourceLoadResult, LoadSummary
    orchestrator - Client, ClientConfig

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from phrasestore.localization.loading import LoadSummary, SourceLoadResult
from phrasestore.localization.metadata import extract_locale_name, find_locale_names_in_path
from phrasestore.localization.orchestrator import Client, ClientConfig
from phrasestore.localization.sources import SourceDescriptor, SourceRegistry
from phrasestore.localization.types import (
    LocaleName,
    SourceOrigin,
    TranslationArgs,
    TranslationKey,
)

__all__ = [
    # Main entry point
    "Client",
    "ClientConfig",
    # Source registration
    "SourceDescriptor",
    "SourceRegistry",
    # Locale-name discovery
    "extract_locale_name",
    "find_locale_names_in_path",
    # Load tracking
    "LoadSummary",
    "SourceLoadResult",
    # Type aliases for user code type annotations
    "LocaleName",
    "SourceOrigin",
    "TranslationArgs",
    "TranslationKey",
]
