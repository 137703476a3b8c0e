"""Tree merge engine.

Merges decoded document trees into a locale's phrase trie. Each document is
written into the ``staging`` maps of the nodes it touches and then promoted
into ``committed``, so a key defined by an earlier document of the same load
conflicts with a later one exactly as it would with a previous load.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
import struct
from functools import partial
from typing import TYPE_CHECKING

from phrasestore.constants import FLOAT_PRECISION, KEY_SEPARATOR, MAX_DEPTH, UNDEFINED_PHRASE
from phrasestore.core.depth_guard import DepthGuard
from phrasestore.decoding.values import (
    BoolValue,
    DocumentValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    StringValue,
    TreeValue,
    UIntValue,
)
from phrasestore.diagnostics import (
    AlreadyExistsError,
    ErrorTemplate,
    IllegalFormatError,
)

if TYPE_CHECKING:
    from phrasestore.runtime.locale import Locale
    from phrasestore.runtime.node import LocaleNode

__all__ = ["ScanMerger", "to_phrase"]

logger = logging.getLogger(__name__)


def to_phrase(value: DocumentValue) -> str:
    """Render a scalar document value as phrase text.

    Args:
        value: Scalar value (not a tree or list)

    Returns:
        Phrase text: strings as is, booleans ``true``/``false``, integers in
        base 10, floats with two fixed digits at their bit width, null as
        ``<undefined>``

    Raises:
        TypeError: For TreeValue or ListValue

    Example:
        >>> to_phrase(FloatValue(3.14159))
        '3.14'
        >>> to_phrase(BoolValue(False))
        'false'
    """
    match value:
        case StringValue(value=text):
            return text
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case IntValue(value=number) | UIntValue(value=number):
            return str(number)
        case FloatValue(value=number, bits=bits):
            return _format_float(number, bits)
        case NullValue():
            return UNDEFINED_PHRASE
        case _:
            msg = f"{value.type_name} value has no phrase form"
            raise TypeError(msg)


def _format_float(number: float, bits: int) -> str:
    if bits == 32:
        number = _round_to_float32(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return f"{number:.{FLOAT_PRECISION}f}"


def _round_to_float32(number: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


class ScanMerger:
    """Merges document trees into locale nodes.

    Stateless apart from its depth limit; one instance may serve a whole
    load pass.

    Example:
        >>> locale = Locale("en_US")
        >>> merger = ScanMerger()
        >>> merger.merge(locale.root, from_native({"menu": {"open": "Open"}}), 0)
        >>> merger.promote(locale)
        1
        >>> locale.translate("menu/open")
        'Open'
    """

    __slots__ = ("max_depth",)

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def merge(
        self,
        node: LocaleNode,
        tree: TreeValue,
        source_index: int,
        overwrite: bool = False,
        origin: str | None = None,
    ) -> None:
        """Merge one document tree into ``node``'s staging maps.

        Args:
            node: Node the document's top level maps onto (usually a locale root)
            tree: Metadata-free document tree
            source_index: Index of the document in the load's source list
            overwrite: Allow replacing committed phrases
            origin: Document origin for diagnostics

        Raises:
            IllegalFormatError: Empty key or list value
            AlreadyExistsError: Committed key redefined without overwrite
            DepthLimitExceededError: Trees nested deeper than max_depth
        """
        visited: list[LocaleNode] = []
        self._merge_tree(
            node, tree, "", overwrite, origin, DepthGuard(self.max_depth), visited
        )
        for touched in visited:
            touched.add_source(source_index)

    def _merge_tree(
        self,
        node: LocaleNode,
        tree: TreeValue,
        path: str,
        overwrite: bool,
        origin: str | None,
        guard: DepthGuard,
        visited: list[LocaleNode],
    ) -> None:
        too_deep = partial(ErrorTemplate.nesting_depth_exceeded, key=path or None, origin=origin)
        with guard.level(too_deep):
            visited.append(node)
            for key, value in tree.entries.items():
                if not key:
                    raise IllegalFormatError(ErrorTemplate.key_empty(origin))
                key_path = f"{path}{KEY_SEPARATOR}{key}" if path else key
                match value:
                    case TreeValue():
                        self._merge_tree(
                            node.child(key), value, key_path, overwrite, origin, guard, visited
                        )
                    case ListValue():
                        raise IllegalFormatError(
                            ErrorTemplate.value_type_unsupported(key_path, value.type_name, origin)
                        )
                    case _:
                        self._store(node, key, key_path, to_phrase(value), overwrite, origin)

    def _store(
        self,
        node: LocaleNode,
        key: str,
        key_path: str,
        phrase: str,
        overwrite: bool,
        origin: str | None,
    ) -> None:
        old = node.committed.get(key)
        if old is not None and not overwrite:
            raise AlreadyExistsError(
                ErrorTemplate.phrase_already_exists(key_path, phrase, old, node.origins(), origin)
            )
        node.staging[key] = phrase

    def promote(self, locale: Locale) -> int:
        """Move every staged phrase of ``locale`` into its committed maps.

        Only keys that were not committed before count towards
        ``locale.phrase_count``; overwrites replace the text in place.

        Returns:
            Number of newly committed phrases
        """
        added = 0
        for node in locale.root.walk():
            if not node.staging:
                continue
            for key, phrase in node.staging.items():
                if key not in node.committed:
                    added += 1
                node.committed[key] = phrase
            node.staging.clear()
        locale.phrase_count += added
        logger.debug("Promoted %d new phrase(s) into %s", added, locale.name)
        return added
