"""Client: source registration, load commits and locale lookup.

Lifecycle:
    STANDBY --register()--> SOURCE_PENDING --> STANDBY
    STANDBY --commit_load()--> LOAD_PENDING --> READY (or back on failure)
    READY --register()--> SOURCE_PENDING --> STANDBY

Every transition into a *_PENDING state is a compare-and-swap. A caller that
loses the swap gets IllegalStateError immediately; nothing ever waits.

Readers (lookup, translate, default) never touch the state. They load the
published registry reference once and work on that immutable snapshot, so a
concurrent commit_load() is observed either entirely or not at all.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from phrasestore.decoding.decoders import decode_source
from phrasestore.diagnostics import (
    ErrorTemplate,
    IllegalArgumentError,
    IllegalStateError,
    NotFoundError,
)
from phrasestore.enums import ClientState, TranslationErrorClass
from phrasestore.localization.loading import LoadSummary, SourceLoadResult
from phrasestore.localization.metadata import extract_locale_name
from phrasestore.localization.sources import SourceDescriptor, SourceRegistry
from phrasestore.runtime.atomic import AtomicReference, AtomicState
from phrasestore.runtime.locale import Locale, sentinel
from phrasestore.runtime.merger import ScanMerger

if TYPE_CHECKING:
    from types import FrameType

    from phrasestore.localization.types import (
        LocaleName,
        SourceOrigin,
        TranslationArgs,
        TranslationKey,
    )

__all__ = ["Client", "ClientConfig"]

logger = logging.getLogger(__name__)

type _Registry = Mapping[LocaleName, Locale]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable configuration for a Client.

    All fields default to False; ``ClientConfig()`` gives strict behaviour.

    Attributes:
        overwrite_existing_key: A later document may redefine a key that an
            earlier document of the same load already defined. When False
            the load fails with AlreadyExistsError.
        empty_locale_name_as_none: lookup("") returns None instead of the
            default locale.
        locale_not_found_as_none: lookup() of an unknown name returns None
            instead of the default locale.

    Example:
        >>> config = ClientConfig(overwrite_existing_key=True)
        >>> client = Client(config)
        >>> client.config.overwrite_existing_key
        True
    """

    overwrite_existing_key: bool = False
    empty_locale_name_as_none: bool = False
    locale_not_found_as_none: bool = False

    def __post_init__(self) -> None:
        """Validate field types."""
        for config_field in dataclasses.fields(self):
            value = getattr(self, config_field.name)
            if not isinstance(value, bool):
                msg = f"{config_field.name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)


class Client:
    """Locale phrase store.

    Register documents, commit them as one load, then look up locales and
    translate keys from any number of threads.

    Example:
        >>> client = Client()
        >>> client.register("locales/")
        >>> client.commit_load()
        >>> client.translate("en_US", "menu/file/open")
        'Open'
        >>> client.translate("en_US", "menu/file/nope")
        'i18nErr: TranslationNotFound. Key: menu/file/nope'

    Attributes:
        state: Current lifecycle state
        config: Current configuration
        locales: Sorted names of the published locales
    """

    __slots__ = (
        "__weakref__",
        "_config",
        "_default",
        "_publish_lock",
        "_registry",
        "_sources",
        "_state",
        "_summary",
    )

    def __init__(self, config: ClientConfig | None = None) -> None:
        """Initialize an empty client in STANDBY.

        Args:
            config: Client configuration (default: ClientConfig())
        """
        self._config: AtomicReference[ClientConfig] = AtomicReference(config or ClientConfig())
        self._state = AtomicState(ClientState.STANDBY)
        self._registry: AtomicReference[_Registry | None] = AtomicReference(None)
        self._default: AtomicReference[Locale | None] = AtomicReference(None)
        # Held while the registry or the default changes; lookups never take it
        self._publish_lock = threading.Lock()
        self._summary: AtomicReference[LoadSummary | None] = AtomicReference(None)
        self._sources = SourceRegistry()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> ClientState:
        """Current lifecycle state."""
        return self._state.load()

    @property
    def config(self) -> ClientConfig:
        """Current configuration."""
        return self._config.load()

    def configure(self, **changes: bool) -> ClientConfig:
        """Publish a copy of the configuration with ``changes`` applied.

        Takes effect for lookups immediately and for the next commit_load().

        Returns:
            The new configuration

        Raises:
            TypeError: Unknown field or non-bool value
        """
        config = dataclasses.replace(self._config.load(), **changes)
        self._config.store(config)
        logger.debug("Client configuration changed: %r", config)
        return config

    @property
    def locales(self) -> tuple[LocaleName, ...]:
        """Sorted names of the published locales."""
        registry = self._registry.load()
        return tuple(sorted(registry)) if registry is not None else ()

    @property
    def pending_sources(self) -> tuple[SourceOrigin, ...]:
        """Origins of sources registered since the last load attempt."""
        return tuple(descriptor.origin for descriptor in self._sources.pending)

    def get_load_summary(self) -> LoadSummary | None:
        """Summary of the last successful load, None before the first one."""
        return self._summary.load()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Client(state={self.state.name}, locales={list(self.locales)}, "
            f"pending={len(self._sources)})"
        )

    # ------------------------------------------------------------------
    # Registration and loading
    # ------------------------------------------------------------------

    def register(self, *inputs: object) -> None:
        """Register locale sources for the next commit_load().

        Accepts file or directory paths (str or os.PathLike), raw buffers
        (bytes, bytearray, memoryview), and lists or tuples of either kind.
        Directories are scanned recursively for .yml, .yaml and .toml files.
        Content is read and hashed but not decoded until commit_load().

        A failing call registers nothing; sources from earlier successful
        calls stay pending.

        Args:
            *inputs: Sources to register

        Raises:
            IllegalArgumentError: No inputs, empty or unsupported input,
                mixed collection, oversized source, nothing usable found
            DuplicateSourceError: Two sources share identical content
            DataUnavailableError: Path cannot be read or listed
            DepthLimitExceededError: Directory nested too deep
            IllegalStateError: Another register() or commit_load() is running
        """
        if not inputs:
            raise IllegalArgumentError(ErrorTemplate.no_sources())

        caller = _caller_location(inspect.currentframe())
        self._acquire(
            "register sources",
            ClientState.SOURCE_PENDING,
            (ClientState.STANDBY, ClientState.READY),
        )
        try:
            batch = self._sources.register(inputs, caller)
        finally:
            self._state.store(self._idle_state())

        logger.info(
            "Registered %d source(s); %d pending load", len(batch), len(self._sources)
        )

    def commit_load(self) -> None:
        """Decode, validate and merge every pending source, then publish.

        Either every pending source is merged and the new registry replaces
        the published one, or nothing changes (apart from the pending list,
        which is always consumed). On success the default locale is unset
        and the raw content of the sources is released.

        Raises:
            IllegalStateError: Nothing registered since the last load, or
                another register() or commit_load() is running
            IllegalFormatError: Malformed document, metadata or locale name
            AmbiguousMetadataError: Locale name declared more than once
            AlreadyExistsError: Key redefined without overwrite_existing_key
            DepthLimitExceededError: Document nested deeper than MAX_DEPTH
            NotFoundError: Sources contain no phrases
        """
        if self._state.load() is ClientState.READY:
            raise IllegalStateError(ErrorTemplate.nothing_registered())
        self._acquire("load locales", ClientState.LOAD_PENDING, (ClientState.STANDBY,))

        descriptors = self._sources.flush()
        try:
            if not descriptors:
                raise IllegalStateError(ErrorTemplate.no_pending_sources())
            registry, summary = self._build_registry(descriptors)
        except Exception:
            logger.warning("Load of %d source(s) failed; changes rolled back", len(descriptors))
            self._state.store(self._idle_state())
            raise

        with self._publish_lock:
            self._default.store(None)
            self._registry.store(registry)
        for descriptor in descriptors:
            descriptor.release_content()
        self._summary.store(summary)
        self._state.store(ClientState.READY)

        logger.info(
            "Loaded %d phrase(s) in %d locale(s) from %d source(s)",
            summary.phrases_total,
            summary.locales_total,
            summary.sources_total,
        )

    def _build_registry(
        self, descriptors: Sequence[SourceDescriptor]
    ) -> tuple[_Registry, LoadSummary]:
        overwrite = self._config.load().overwrite_existing_key
        origins = tuple(descriptor.origin for descriptor in descriptors)
        merger = ScanMerger()
        locales: dict[LocaleName, Locale] = {}
        results: list[SourceLoadResult] = []

        for index, descriptor in enumerate(descriptors):
            tree = decode_source(descriptor)
            name = extract_locale_name(tree, descriptor)
            locale = locales.get(name)
            if locale is None:
                locale = Locale(name, self, origins)
                locales[name] = locale
            merger.merge(locale.root, tree, index, overwrite, descriptor.origin)
            added = merger.promote(locale)
            results.append(SourceLoadResult(descriptor.origin, descriptor.kind, name, added))
            logger.debug("Merged %s into %s: %d new phrase(s)", descriptor.origin, name, added)

        if sum(locale.phrase_count for locale in locales.values()) == 0:
            raise NotFoundError(ErrorTemplate.no_phrases(len(descriptors)))

        return MappingProxyType(locales), LoadSummary(tuple(results))

    def _acquire(
        self,
        operation: str,
        target: ClientState,
        allowed: tuple[ClientState, ...],
    ) -> None:
        for expected in allowed:
            if self._state.compare_and_swap(expected, target):
                return
        raise IllegalStateError(
            ErrorTemplate.state_conflict(
                operation,
                self._state.load().description,
                (state.description for state in allowed),
            )
        )

    def _idle_state(self) -> ClientState:
        if len(self._sources) == 0 and self._registry.load() is not None:
            return ClientState.READY
        return ClientState.STANDBY

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, locale_name: LocaleName) -> Locale | None:
        """Find a published locale by exact name.

        An empty or unknown name falls back to the default locale unless
        ``empty_locale_name_as_none`` / ``locale_not_found_as_none`` is set.
        Never raises.

        Args:
            locale_name: Locale name, e.g. "en_US"

        Returns:
            Locale, or None if neither it nor an applicable default exists
        """
        config = self._config.load()
        if not locale_name:
            return None if config.empty_locale_name_as_none else self._default.load()

        registry = self._registry.load()
        if registry is not None:
            locale = registry.get(locale_name)
            if locale is not None:
                return locale

        return None if config.locale_not_found_as_none else self._default.load()

    def translate(
        self,
        locale_name: LocaleName,
        key: TranslationKey,
        args: TranslationArgs | None = None,
    ) -> str:
        """Translate key in the named locale. Never raises.

        Args:
            locale_name: Locale name, resolved with lookup()
            key: Slash-separated translation key
            args: Interpolation arguments for ``{{name}}`` verbs

        Returns:
            Interpolated phrase or ``i18nErr: <Class>. Key: <key>`` sentinel
        """
        locale = self.lookup(locale_name)
        if locale is None:
            return sentinel(TranslationErrorClass.LOCALE_IS_NIL, key)
        return locale.translate(key, args)

    def default(self) -> Locale | None:
        """Current default locale, None when unset."""
        return self._default.load()

    def mark_as_default(self, locale_name: LocaleName) -> Locale:
        """Make a published locale the fallback of lookup().

        The default is reset by every successful commit_load().

        Returns:
            The new default locale

        Raises:
            IllegalStateError: No published locale has that name
        """
        with self._publish_lock:
            registry = self._registry.load()
            locale = registry.get(locale_name) if registry is not None else None
            if locale is None:
                raise IllegalStateError(ErrorTemplate.locale_not_live(locale_name))
            self._default.store(locale)
        logger.debug("Default locale set to %s", locale_name)
        return locale

    def _set_default(self, locale: Locale) -> None:
        with self._publish_lock:
            registry = self._registry.load()
            if registry is None or registry.get(locale.name) is not locale:
                raise IllegalStateError(ErrorTemplate.locale_not_live(locale.name))
            self._default.store(locale)
        logger.debug("Default locale set to %s", locale.name)


def _caller_location(frame: FrameType | None) -> SourceOrigin:
    """Return '<file>:<line>' of the function that called frame's function."""
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return "<unknown>:0"
    return f"{caller.f_code.co_filename}:{caller.f_lineno}"
