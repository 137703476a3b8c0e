"""Diagnostic system for phrasestore errors.

Provides structured error diagnostics with codes, contextual fields and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AlreadyExistsError",
    "AmbiguousMetadataError",
    "DataUnavailableError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateSourceError",
    "ErrorCategory",
    "ErrorTemplate",
    "IllegalArgumentError",
    "IllegalFormatError",
    "IllegalStateError",
    "InternalError",
    "NotFoundError",
    "OutputFormat",
    "PhraseStoreError",
]
