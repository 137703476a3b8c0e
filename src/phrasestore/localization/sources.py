"""Source registration.

Turns caller input (paths, directories, raw buffers, homogeneous collections
of either) into SourceDescriptor records waiting for the next load. Content is
read and hashed here but never decoded; decoding happens at load time.

Components:
    SourceDescriptor - One pending document: kind, origin, content, hash
    SourceRegistry - Accumulates descriptors across register() calls

Python 3.13+.
"""

from __future__ import annotations

import hashlib
import logging
import os
import stat
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from phrasestore.constants import (
    MAX_SCAN_DEPTH,
    MAX_SOURCE_SIZE,
    SUPPORTED_EXTENSIONS,
    YAML_EXTENSIONS,
)
from phrasestore.core.depth_guard import DepthGuard
from phrasestore.diagnostics import (
    DataUnavailableError,
    DuplicateSourceError,
    ErrorTemplate,
    IllegalArgumentError,
)
from phrasestore.enums import SourceKind
from phrasestore.localization.types import LocaleName, SourceOrigin

__all__ = ["SourceDescriptor", "SourceRegistry"]

logger = logging.getLogger(__name__)

type _Buffer = bytes | bytearray | memoryview
type _PathInput = str | os.PathLike[str] | os.PathLike[bytes]

_BUFFER_TYPES = (bytes, bytearray, memoryview)
_PATH_TYPES = (str, os.PathLike)


@dataclass(slots=True)
class SourceDescriptor:
    """One registered document.

    Mutable: the decoder fixes ``kind`` for raw buffers, metadata extraction
    fills ``locale_name``, and a successful load releases ``content``.

    Attributes:
        kind: Document kind (file or raw buffer, YAML or TOML)
        origin: Absolute path or caller location
        content: Raw document bytes, None once released
        content_hash: SHA-256 hex digest of the content
        locale_name: Resolved locale name, empty until extraction
    """

    kind: SourceKind
    origin: SourceOrigin
    content: bytes | None = field(default=None, repr=False)
    content_hash: str = ""
    locale_name: LocaleName = ""

    @classmethod
    def from_content(
        cls, kind: SourceKind, origin: SourceOrigin, content: bytes
    ) -> SourceDescriptor:
        """Create a descriptor, hashing the content."""
        return cls(
            kind=kind,
            origin=origin,
            content=content,
            content_hash=hashlib.sha256(content).hexdigest(),
        )

    def release_content(self) -> None:
        """Drop the raw bytes once they have been loaded."""
        self.content = None


class SourceRegistry:
    """Pending source descriptors awaiting the next load.

    Not thread-safe on its own: the Client only touches it while holding
    the SOURCE_PENDING or LOAD_PENDING state.

    Example:
        >>> registry = SourceRegistry()
        >>> registry.register([b"__metadata__: {locale: de_DE}\\nhi: Hallo"], "app.py:3")
        (SourceDescriptor(kind=<SourceKind.CONTENT_UNKNOWN: 'content-unknown'>, ...),)
        >>> len(registry)
        1
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: list[SourceDescriptor] = []

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def pending(self) -> tuple[SourceDescriptor, ...]:
        """Descriptors registered since the last flush, in registration order."""
        return tuple(self._pending)

    def flush(self) -> tuple[SourceDescriptor, ...]:
        """Return and clear the pending descriptors."""
        flushed = tuple(self._pending)
        self._pending.clear()
        return flushed

    def register(
        self, inputs: Sequence[object], caller_origin: SourceOrigin
    ) -> tuple[SourceDescriptor, ...]:
        """Register a batch of inputs.

        The batch is all-or-nothing: on any failure no descriptor from this
        call is added to the pending list.

        Args:
            inputs: Paths, buffers, or homogeneous lists/tuples of either
            caller_origin: Origin recorded for raw buffers

        Returns:
            Descriptors created by this call

        Raises:
            IllegalArgumentError: No inputs, empty or unsupported input,
                mixed collection, oversized source, or nothing usable found
            DuplicateSourceError: Two sources share identical content
            DataUnavailableError: Path cannot be read or listed
            DepthLimitExceededError: Directory tree deeper than MAX_SCAN_DEPTH
        """
        if not inputs:
            raise IllegalArgumentError(ErrorTemplate.no_sources())

        batch: list[SourceDescriptor] = []
        for item in inputs:
            match item:
                case str() | os.PathLike():
                    self._add_path(item, batch)
                case bytes() | bytearray() | memoryview():
                    self._add_buffer(item, caller_origin, batch)
                case list() | tuple():
                    self._add_collection(item, caller_origin, batch)
                case _:
                    raise IllegalArgumentError(
                        ErrorTemplate.source_type_unsupported(type(item).__name__)
                    )

        self._check_duplicates(batch)

        if not batch:
            raise IllegalArgumentError(ErrorTemplate.no_valid_sources())

        self._pending.extend(batch)
        return tuple(batch)

    def _add_collection(
        self,
        items: Iterable[object],
        caller_origin: SourceOrigin,
        batch: list[SourceDescriptor],
    ) -> None:
        items = list(items)
        for item in items:
            if not isinstance(item, (*_PATH_TYPES, *_BUFFER_TYPES)):
                raise IllegalArgumentError(
                    ErrorTemplate.source_type_unsupported(type(item).__name__)
                )
        has_paths = any(isinstance(item, _PATH_TYPES) for item in items)
        has_buffers = any(isinstance(item, _BUFFER_TYPES) for item in items)
        if has_paths and has_buffers:
            raise IllegalArgumentError(
                ErrorTemplate.source_collection_mixed(type(item).__name__ for item in items)
            )
        for item in items:
            if isinstance(item, _BUFFER_TYPES):
                self._add_buffer(item, caller_origin, batch)
            else:
                self._add_path(item, batch)  # type: ignore[arg-type]

    def _add_buffer(
        self, buffer: _Buffer, caller_origin: SourceOrigin, batch: list[SourceDescriptor]
    ) -> None:
        content = bytes(buffer)
        if not content:
            raise IllegalArgumentError(ErrorTemplate.source_empty("buffer", caller_origin))
        if len(content) > MAX_SOURCE_SIZE:
            raise IllegalArgumentError(
                ErrorTemplate.source_too_large(caller_origin, len(content), MAX_SOURCE_SIZE)
            )
        batch.append(
            SourceDescriptor.from_content(SourceKind.CONTENT_UNKNOWN, caller_origin, content)
        )
        logger.debug("Registered raw buffer from %s (%d bytes)", caller_origin, len(content))

    def _add_path(self, raw_path: _PathInput, batch: list[SourceDescriptor]) -> None:
        text = os.fsdecode(raw_path).strip()
        if not text:
            raise IllegalArgumentError(ErrorTemplate.source_empty("path"))
        self._scan(Path(os.path.abspath(text)), DepthGuard(MAX_SCAN_DEPTH), batch)

    def _scan(self, path: Path, guard: DepthGuard, batch: list[SourceDescriptor]) -> None:
        try:
            st = path.stat()
        except OSError as exc:
            raise DataUnavailableError(
                ErrorTemplate.path_unreadable(str(path), exc.strerror or str(exc))
            ) from exc

        if stat.S_ISDIR(st.st_mode):
            with guard.level(partial(ErrorTemplate.directory_depth_exceeded, str(path))):
                try:
                    names = sorted(entry.name for entry in os.scandir(path))
                except OSError as exc:
                    raise DataUnavailableError(
                        ErrorTemplate.directory_scan_failed(str(path), exc.strerror or str(exc))
                    ) from exc
                for name in names:
                    self._scan(path / name, guard, batch)
            return

        extension = path.suffix[1:].lower()
        if extension not in SUPPORTED_EXTENSIONS:
            logger.debug("Skipping %s: unsupported extension", path)
            return

        if st.st_size > MAX_SOURCE_SIZE:
            raise IllegalArgumentError(
                ErrorTemplate.source_too_large(str(path), st.st_size, MAX_SOURCE_SIZE)
            )

        try:
            content = path.read_bytes()
        except OSError as exc:
            raise DataUnavailableError(
                ErrorTemplate.path_unreadable(str(path), exc.strerror or str(exc))
            ) from exc

        kind = SourceKind.FILE_YAML if extension in YAML_EXTENSIONS else SourceKind.FILE_TOML
        batch.append(SourceDescriptor.from_content(kind, str(path), content))
        logger.debug("Registered %s as %s (%d bytes)", path, kind, len(content))

    def _check_duplicates(self, batch: Sequence[SourceDescriptor]) -> None:
        seen = {descriptor.content_hash: descriptor.origin for descriptor in self._pending}
        for descriptor in batch:
            previous = seen.get(descriptor.content_hash)
            if previous is not None:
                raise DuplicateSourceError(
                    ErrorTemplate.source_duplicate(descriptor.origin, previous)
                )
            seen[descriptor.content_hash] = descriptor.origin
