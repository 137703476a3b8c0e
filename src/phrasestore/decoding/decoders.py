"""Document decoders.

Grammar handling is delegated to PyYAML (a ``yaml.SafeLoader`` subclass) and the standard
library ``tomllib``. Decoders only return the native top-level mapping;
``decode_source`` converts it to the closed value model and resolves the kind
of raw buffers.

Components:
    DocumentDecoder - Protocol for a grammar backend (structural typing)
    YamlDecoder - PyYAML backend
    TomlDecoder - tomllib backend
    decode_source - Kind dispatch for a SourceDescriptor

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import tomllib
from typing import TYPE_CHECKING, Protocol

import yaml

from phrasestore.decoding.values import TreeValue, from_native
from phrasestore.diagnostics import ErrorTemplate, IllegalFormatError, InternalError
from phrasestore.enums import SourceKind

if TYPE_CHECKING:
    from phrasestore.localization.sources import SourceDescriptor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DocumentDecoder",
    # Concrete decoders
    "PhraseLoader",
    "YamlDecoder",
    "TomlDecoder",
    "YAML_DECODER",
    "TOML_DECODER",
    # Dispatch
    "decode_source",
]

logger = logging.getLogger(__name__)


class DocumentDecoder(Protocol):
    """Protocol for turning raw document bytes into a native mapping.

    Implementations raise IllegalFormatError (chaining the backend error)
    when the bytes are not a valid document or the top level is not a
    key/value mapping.
    """

    name: str

    def parse(self, content: bytes, origin: str) -> dict[object, object]:
        """Parse content into the document's top-level mapping.

        Args:
            content: Raw document bytes
            origin: Source origin for diagnostics

        Returns:
            Top-level mapping (empty for an empty document)

        Raises:
            IllegalFormatError: Content is not a valid key/value document
        """
        ...


_BOOL_TAG = "tag:yaml.org,2002:bool"
_MERGE_TAG = "tag:yaml.org,2002:merge"


class PhraseLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans and unique mapping keys.

    Only true/false (in lower, title or upper case) resolve to booleans, so
    phrases such as ``confirm: Yes`` and keys such as ``no: Norwegian`` stay
    text. A key repeated within one mapping is a construction error.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_mapping(
        self, node: yaml.MappingNode, deep: bool = False
    ) -> dict[object, object]:
        seen: set[object] = set()
        for key_node, _ in node.value:
            # Keys pulled in by "<<" merges may be overridden
            if key_node.tag == _MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            try:
                repeated = key in seen
            except TypeError:
                # Unhashable keys are reported by SafeConstructor
                continue
            if repeated:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


PhraseLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)


class YamlDecoder:
    """YAML backend built on PhraseLoader.

    Only standard YAML tags are constructed; arbitrary Python objects are
    never instantiated.
    """

    __slots__ = ()

    name = "YAML"

    def parse(self, content: bytes, origin: str) -> dict[object, object]:
        """Parse YAML bytes. A document holding only comments is empty."""
        try:
            native = yaml.load(content, Loader=PhraseLoader)  # noqa: S506
        except yaml.YAMLError as exc:
            raise IllegalFormatError(
                ErrorTemplate.document_decode_failed(origin, self.name, str(exc))
            ) from exc
        if native is None:
            return {}
        if not isinstance(native, dict):
            raise IllegalFormatError(
                ErrorTemplate.document_not_a_tree(origin, self.name, type(native).__name__)
            )
        return native


class TomlDecoder:
    """TOML backend using the standard library ``tomllib``."""

    __slots__ = ()

    name = "TOML"

    def parse(self, content: bytes, origin: str) -> dict[object, object]:
        """Parse UTF-8 TOML bytes."""
        try:
            return tomllib.loads(content.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise IllegalFormatError(
                ErrorTemplate.document_decode_failed(origin, self.name, str(exc))
            ) from exc
        except tomllib.TOMLDecodeError as exc:
            raise IllegalFormatError(
                ErrorTemplate.document_decode_failed(origin, self.name, str(exc))
            ) from exc


YAML_DECODER = YamlDecoder()
TOML_DECODER = TomlDecoder()

# Order in which raw buffers of unknown format are tried
_RESOLUTION_ORDER: tuple[tuple[DocumentDecoder, SourceKind], ...] = (
    (YAML_DECODER, SourceKind.CONTENT_YAML),
    (TOML_DECODER, SourceKind.CONTENT_TOML),
)


def decode_source(descriptor: SourceDescriptor) -> TreeValue:
    """Decode a registered source into a non-empty tree.

    Raw buffers of unknown format are tried as YAML, then TOML. The first
    decoder that accepts the buffer fixes ``descriptor.kind``.

    Args:
        descriptor: Source to decode; its content must not be released

    Returns:
        Top-level tree of the document

    Raises:
        IllegalFormatError: Invalid document, empty document, unsupported
            key or value type
        DepthLimitExceededError: Containers nested deeper than MAX_DEPTH
        InternalError: Unknown kind or released content
    """
    origin = descriptor.origin
    content = descriptor.content
    if content is None:
        raise InternalError(ErrorTemplate.source_content_released(origin))

    match descriptor.kind:
        case SourceKind.FILE_YAML | SourceKind.CONTENT_YAML:
            native = YAML_DECODER.parse(content, origin)
        case SourceKind.FILE_TOML | SourceKind.CONTENT_TOML:
            native = TOML_DECODER.parse(content, origin)
        case SourceKind.CONTENT_UNKNOWN:
            native = _resolve_unknown(descriptor, content)
        case _:
            raise InternalError(ErrorTemplate.source_kind_unexpected(origin, str(descriptor.kind)))

    if not native:
        raise IllegalFormatError(ErrorTemplate.document_empty(origin))

    tree = from_native(native, origin)
    assert isinstance(tree, TreeValue)  # Type narrowing: a dict converts to TreeValue
    logger.debug("Decoded %s as %s: %d top-level keys", origin, descriptor.kind, len(tree))
    return tree


def _resolve_unknown(descriptor: SourceDescriptor, content: bytes) -> dict[object, object]:
    last_error: IllegalFormatError | None = None
    for decoder, kind in _RESOLUTION_ORDER:
        try:
            native = decoder.parse(content, descriptor.origin)
        except IllegalFormatError as exc:
            logger.debug("%s is not a %s document: %s", descriptor.origin, decoder.name, exc)
            last_error = exc
            continue
        descriptor.kind = kind
        return native
    raise IllegalFormatError(
        ErrorTemplate.document_undecodable(
            descriptor.origin, (decoder.name for decoder, _ in _RESOLUTION_ORDER)
        )
    ) from last_error
