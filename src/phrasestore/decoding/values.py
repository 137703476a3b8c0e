"""Closed document value model.

Decoders return native Python objects (dict, list, str, int, ...). Those are
converted once, at the decoder boundary, into the immutable variants below so
that the merge engine only ever pattern-matches a closed set of shapes:

    StringValue | BoolValue | IntValue | UIntValue | FloatValue
    | NullValue | TreeValue | ListValue

Anything a decoder can produce that has no variant here (dates, times,
sets, ...) is rejected with IllegalFormatError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import ClassVar

from phrasestore.constants import KEY_SEPARATOR, MAX_DEPTH
from phrasestore.core.depth_guard import DepthGuard
from phrasestore.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    IllegalFormatError,
)

__all__ = [
    "BoolValue",
    "DocumentValue",
    "FloatValue",
    "IntValue",
    "ListValue",
    "NullValue",
    "StringValue",
    "TreeValue",
    "UIntValue",
    "from_native",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class StringValue:
    """Text scalar."""

    type_name: ClassVar[str] = "string"
    value: str


@dataclass(frozen=True, slots=True)
class BoolValue:
    """Boolean scalar."""

    type_name: ClassVar[str] = "bool"
    value: bool


@dataclass(frozen=True, slots=True)
class IntValue:
    """Signed integer scalar in the 64-bit range."""

    type_name: ClassVar[str] = "int"
    value: int

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            msg = f"IntValue out of signed 64-bit range: {self.value}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class UIntValue:
    """Unsigned integer scalar too large for IntValue."""

    type_name: ClassVar[str] = "uint"
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= UINT64_MAX:
            msg = f"UIntValue out of unsigned 64-bit range: {self.value}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FloatValue:
    """Floating point scalar with its bit width (32 or 64)."""

    type_name: ClassVar[str] = "float"
    value: float
    bits: int = 64

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            msg = f"FloatValue bits must be 32 or 64, got {self.bits}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NullValue:
    """Explicit null (YAML ``~`` / ``null``)."""

    type_name: ClassVar[str] = "null"


@dataclass(frozen=True, slots=True)
class TreeValue:
    """Ordered key/value tree.

    The entries mapping keeps document order. Metadata extraction removes
    its block from the mapping in place before the tree is merged.
    """

    type_name: ClassVar[str] = "tree"
    entries: dict[str, DocumentValue] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class ListValue:
    """Sequence of values."""

    type_name: ClassVar[str] = "list"
    items: tuple[DocumentValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


type DocumentValue = (
    StringValue
    | BoolValue
    | IntValue
    | UIntValue
    | FloatValue
    | NullValue
    | TreeValue
    | ListValue
)


def from_native(obj: object, origin: str | None = None) -> DocumentValue:
    """Convert a decoder's native result into the closed value model.

    Integer mapping keys become their decimal text. Booleans are checked
    before integers since bool is an int subclass.

    Args:
        obj: Object returned by PhraseLoader or tomllib.loads
        origin: Source origin used in error diagnostics

    Returns:
        Equivalent DocumentValue

    Raises:
        IllegalFormatError: Unsupported key type, value type, or integer range
        DepthLimitExceededError: Containers nested deeper than MAX_DEPTH

    Example:
        >>> from_native({1: True})
        TreeValue(entries={'1': BoolValue(value=True)})
    """
    return _convert(obj, "", origin, DepthGuard(MAX_DEPTH))


def _convert(obj: object, path: str, origin: str | None, guard: DepthGuard) -> DocumentValue:
    match obj:
        case None:
            return NullValue()
        case bool():
            return BoolValue(obj)
        case int():
            if INT64_MIN <= obj <= INT64_MAX:
                return IntValue(obj)
            if 0 <= obj <= UINT64_MAX:
                return UIntValue(obj)
            raise IllegalFormatError(ErrorTemplate.integer_out_of_range(path, obj, origin))
        case float():
            return FloatValue(obj)
        case str():
            return StringValue(obj)
        case dict():
            with guard.level(_depth_diagnostic(path, origin)):
                entries: dict[str, DocumentValue] = {}
                for raw_key, raw_value in obj.items():
                    key = _convert_key(raw_key, origin)
                    child_path = f"{path}{KEY_SEPARATOR}{key}" if path else key
                    entries[key] = _convert(raw_value, child_path, origin, guard)
                return TreeValue(entries)
        case list() | tuple():
            with guard.level(_depth_diagnostic(path, origin)):
                return ListValue(tuple(_convert(item, path, origin, guard) for item in obj))
        case _:
            raise IllegalFormatError(
                ErrorTemplate.value_type_unsupported(path, type(obj).__name__, origin)
            )


def _depth_diagnostic(path: str, origin: str | None) -> partial[Diagnostic]:
    return partial(ErrorTemplate.nesting_depth_exceeded, key=path or None, origin=origin)


def _convert_key(raw_key: object, origin: str | None) -> str:
    # Unquoted 1 loads as int and true as bool; only the former is accepted
    if isinstance(raw_key, str):
        return raw_key
    if isinstance(raw_key, int) and not isinstance(raw_key, bool):
        return str(raw_key)
    raise IllegalFormatError(ErrorTemplate.key_type_unsupported(type(raw_key).__name__, origin))
