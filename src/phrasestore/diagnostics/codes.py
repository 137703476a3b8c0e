"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization matching the exception taxonomy.

    Inherits from ``StrEnum`` so that ``str(category)`` yields a plain string
    (``"illegal_format"``) for serialization and log aggregation.
    """

    ILLEGAL_ARGUMENT = "illegal_argument"
    ILLEGAL_STATE = "illegal_state"
    ILLEGAL_FORMAT = "illegal_format"
    AMBIGUOUS_METADATA = "ambiguous_metadata"
    ALREADY_EXISTS = "already_exists"
    DATA_UNAVAILABLE = "data_unavailable"
    DEPTH_EXCEEDED = "depth_exceeded"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (registration input)
        2000-2999: State errors (client state machine)
        3000-3999: Format errors (documents, metadata, locale names)
        4000-4999: Ambiguity errors (metadata declarations)
        5000-5999: Conflict errors (duplicate phrases)
        6000-6999: Availability errors (filesystem I/O, depth ceilings)
        7000-7999: Not-found errors (empty loads)
        9000-9999: Internal errors (defects)
    """

    # Argument errors (1000-1999)
    NO_SOURCES = 1001
    SOURCE_EMPTY = 1002
    SOURCE_TYPE_UNSUPPORTED = 1003
    SOURCE_COLLECTION_MIXED = 1004
    SOURCE_TOO_LARGE = 1005
    SOURCE_DUPLICATE = 1006
    NO_VALID_SOURCES = 1007

    # State errors (2000-2999)
    STATE_CONFLICT = 2001
    NO_PENDING_SOURCES = 2002
    NOTHING_REGISTERED = 2003
    LOCALE_NOT_LIVE = 2004

    # Format errors (3000-3999)
    DOCUMENT_DECODE_FAILED = 3001
    DOCUMENT_UNDECODABLE = 3002
    DOCUMENT_EMPTY = 3003
    DOCUMENT_NOT_A_TREE = 3004
    KEY_EMPTY = 3005
    KEY_TYPE_UNSUPPORTED = 3006
    VALUE_TYPE_UNSUPPORTED = 3007
    INTEGER_OUT_OF_RANGE = 3008
    METADATA_INVALID = 3009
    METADATA_EMPTY = 3010
    LOCALE_NAME_TYPE_INVALID = 3011
    LOCALE_NAME_MISSING = 3012
    LOCALE_NAME_INVALID = 3013

    # Ambiguity errors (4000-4999)
    METADATA_AMBIGUOUS = 4001
    LOCALE_NAME_AMBIGUOUS = 4002
    LOCALE_NAME_IN_PATH_AMBIGUOUS = 4003
    LOCALE_NAME_DECLARED_TWICE = 4004

    # Conflict errors (5000-5999)
    PHRASE_ALREADY_EXISTS = 5001

    # Availability errors (6000-6999)
    PATH_UNREADABLE = 6001
    DIRECTORY_SCAN_FAILED = 6002
    DIRECTORY_DEPTH_EXCEEDED = 6003
    NESTING_DEPTH_EXCEEDED = 6004

    # Not-found errors (7000-7999)
    NO_PHRASES = 7001

    # Internal errors (9000-9999)
    SOURCE_KIND_UNEXPECTED = 9001
    SOURCE_CONTENT_RELEASED = 9002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries the contextual fields a failure is reported with, so callers
    and tools can inspect the offending source, key or values without
    parsing the message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: Origin of the offending source (file path or caller location)
        key: Offending document or translation key
        new_value: Phrase that was rejected (conflicts)
        old_value: Phrase already stored (conflicts)
        origins: Origins involved in the failure (duplicates, conflicts)
        value_type: Name of an unsupported value type
        allowed_states: States an operation may start from (state errors)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    key: str | None = None
    new_value: str | None = None
    old_value: str | None = None
    origins: tuple[str, ...] | None = None
    value_type: str | None = None
    allowed_states: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in multi-line compiler style.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PHRASE_ALREADY_EXISTS]: Phrase 'title' already exists
              --> /srv/locales/en_US/main.yaml
              = key: title
              = new value: Home
              = old value: Main page
              = origins: /srv/locales/en_US/base.yaml
              = help: Enable overwrite_existing_key or remove one of the definitions

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
