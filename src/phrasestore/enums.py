"""Enumerations for phrasestore type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class SourceKind(StrEnum):
    """Kind of a registered source.

    File kinds are fixed by the file extension at registration. Raw buffers
    start as CONTENT_UNKNOWN and are resolved to CONTENT_YAML or CONTENT_TOML
    by the first decoder that accepts them.
    """

    FILE_YAML = "file-yaml"
    """YAML document read from a .yml/.yaml file"""

    FILE_TOML = "file-toml"
    """TOML document read from a .toml file"""

    CONTENT_UNKNOWN = "content-unknown"
    """Raw buffer whose format is not known yet"""

    CONTENT_YAML = "content-yaml"
    """Raw buffer resolved as YAML"""

    CONTENT_TOML = "content-toml"
    """Raw buffer resolved as TOML"""

    @property
    def is_file(self) -> bool:
        """Whether the source was read from the filesystem."""
        return self in (SourceKind.FILE_YAML, SourceKind.FILE_TOML)


class ClientState(IntEnum):
    """Lifecycle state of a Client.

    IntEnum keeps the numeric values stable for logging and comparison.
    """

    STANDBY = 0
    """Idle; registration allowed, load allowed when sources are pending"""

    SOURCE_PENDING = 1
    """A registration is running"""

    LOAD_PENDING = 2
    """A load is running"""

    READY = 10
    """At least one load succeeded and nothing new is pending"""

    @property
    def description(self) -> str:
        """Human readable description used in error messages."""
        match self:
            case ClientState.STANDBY:
                return "<standby mode>"
            case ClientState.SOURCE_PENDING:
                return "<analyzing locale sources>"
            case ClientState.LOAD_PENDING:
                return "<loading locales>"
            case ClientState.READY:
                return "<locales loaded, ready to use>"


class TranslationErrorClass(StrEnum):
    """Failure class embedded into sentinel translation strings.

    StrEnum provides automatic string conversion:
    str(TranslationErrorClass.LOCALE_IS_NIL) == "LocaleIsNil"
    """

    LOCALE_IS_NIL = "LocaleIsNil"
    """No locale was found for the request and no default applies"""

    TRANSLATION_KEY_IS_EMPTY = "TranslationKeyIsEmpty"
    """Requested key is the empty string"""

    TRANSLATION_KEY_IS_INCORRECT = "TranslationKeyIsIncorrect"
    """Requested key has an empty segment (leading, trailing or doubled '/')"""

    TRANSLATION_NOT_FOUND = "TranslationNotFound"
    """Key is well-formed but no phrase is stored under it"""


__all__ = [
    "ClientState",
    "SourceKind",
    "TranslationErrorClass",
]
