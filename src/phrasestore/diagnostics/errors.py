"""phrasestore exception hierarchy with structured diagnostics.

All exceptions store an optional Diagnostic object for rich error information.
Registration and loading raise these; translation never does.

Hierarchy:
    PhraseStoreError
    ├─ IllegalArgumentError
    │   └─ DuplicateSourceError
    ├─ IllegalStateError
    ├─ IllegalFormatError
    │   └─ AmbiguousMetadataError
    ├─ AlreadyExistsError
    ├─ DataUnavailableError
    ├─ DepthLimitExceededError
    ├─ NotFoundError
    └─ InternalError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "AlreadyExistsError",
    "AmbiguousMetadataError",
    "DataUnavailableError",
    "DepthLimitExceededError",
    "DuplicateSourceError",
    "IllegalArgumentError",
    "IllegalFormatError",
    "IllegalStateError",
    "InternalError",
    "NotFoundError",
    "PhraseStoreError",
]


class PhraseStoreError(Exception):
    """Base exception for all phrasestore errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PhraseStoreError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class IllegalArgumentError(PhraseStoreError):
    """Bad caller input: empty or unsupported source, no sources at all."""

    category = ErrorCategory.ILLEGAL_ARGUMENT


class DuplicateSourceError(IllegalArgumentError):
    """Two sources with byte-for-byte identical content.

    The diagnostic's origins field names both conflicting sources.
    """


class IllegalStateError(PhraseStoreError):
    """Operation attempted from a disallowed client state.

    Raised immediately, never after waiting: a concurrent registration or
    load makes the second caller fail fast.
    """

    category = ErrorCategory.ILLEGAL_STATE


class IllegalFormatError(PhraseStoreError):
    """Malformed document, metadata block, locale name or value type."""

    category = ErrorCategory.ILLEGAL_FORMAT


class AmbiguousMetadataError(IllegalFormatError):
    """Two or more locale-name declarations for one document.

    Covers duplicated metadata blocks, duplicated name aliases, several
    names embedded in one path, and a name given both in metadata and path.
    """

    category = ErrorCategory.AMBIGUOUS_METADATA


class AlreadyExistsError(PhraseStoreError):
    """Translation key defined twice without overwrite permission.

    The diagnostic carries the key, the rejected and the stored values,
    and the origins that contributed to the conflicting node.
    """

    category = ErrorCategory.ALREADY_EXISTS


class DataUnavailableError(PhraseStoreError):
    """I/O failure: unreadable file or failed directory scan."""

    category = ErrorCategory.DATA_UNAVAILABLE


class DepthLimitExceededError(PhraseStoreError):
    """Raised when a nesting ceiling is exceeded.

    This error indicates either:
    - A registered directory tree deeper than MAX_SCAN_DEPTH
    - A document nesting trees deeper than the merge depth limit
    """

    category = ErrorCategory.DEPTH_EXCEEDED


class NotFoundError(PhraseStoreError):
    """All sources decoded successfully but no phrase was produced."""

    category = ErrorCategory.NOT_FOUND


class InternalError(PhraseStoreError):
    """Invariant violation that indicates a defect in phrasestore."""

    category = ErrorCategory.INTERNAL
