"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def no_sources() -> Diagnostic:
        """Registration called without any input.

        Returns:
            Diagnostic for NO_SOURCES
        """
        return Diagnostic(
            code=DiagnosticCode.NO_SOURCES,
            message="There are no sources",
            hint="Pass at least one path or byte buffer",
        )

    @staticmethod
    def source_empty(kind: str, origin: str | None = None) -> Diagnostic:
        """Empty path string or empty byte buffer.

        Args:
            kind: "path" or "buffer"
            origin: Caller location for buffers (optional)

        Returns:
            Diagnostic for SOURCE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_EMPTY,
            message=f"Source {kind} is empty",
            source_path=origin,
        )

    @staticmethod
    def source_type_unsupported(type_name: str) -> Diagnostic:
        """Input of a type that is neither a path nor a byte buffer.

        Args:
            type_name: Name of the rejected type

        Returns:
            Diagnostic for SOURCE_TYPE_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TYPE_UNSUPPORTED,
            message=f"Unexpected type of source: {type_name}",
            hint="Sources are str/PathLike paths, bytes buffers, or lists of either",
            value_type=type_name,
        )

    @staticmethod
    def source_collection_mixed(type_names: Iterable[str]) -> Diagnostic:
        """Collection mixing paths and buffers.

        Args:
            type_names: Names of the item types found in the collection

        Returns:
            Diagnostic for SOURCE_COLLECTION_MIXED
        """
        names = ", ".join(sorted(set(type_names)))
        return Diagnostic(
            code=DiagnosticCode.SOURCE_COLLECTION_MIXED,
            message=f"Source collection mixes item types: {names}",
            hint="Pass paths and buffers as separate collections",
            value_type=names,
        )

    @staticmethod
    def source_too_large(origin: str, size: int, limit: int) -> Diagnostic:
        """Source bigger than MAX_SOURCE_SIZE.

        Args:
            origin: Path or caller location of the source
            size: Size in bytes
            limit: Maximum allowed size in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"Source is too large: {size} bytes (limit {limit})",
            source_path=origin,
        )

    @staticmethod
    def source_duplicate(origin_1: str, origin_2: str) -> Diagnostic:
        """Two sources with identical content.

        Args:
            origin_1: Origin of the newly registered source
            origin_2: Origin of the source it duplicates

        Returns:
            Diagnostic for SOURCE_DUPLICATE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_DUPLICATE,
            message="Two sources with the same content detected",
            hint="Register each document once",
            origins=(origin_1, origin_2),
        )

    @staticmethod
    def no_valid_sources() -> Diagnostic:
        """Inputs were accepted but produced no source.

        Returns:
            Diagnostic for NO_VALID_SOURCES
        """
        return Diagnostic(
            code=DiagnosticCode.NO_VALID_SOURCES,
            message="There are no valid sources",
            hint="Directories are scanned for .yml, .yaml and .toml files only",
        )

    # ------------------------------------------------------------------
    # State errors
    # ------------------------------------------------------------------

    @staticmethod
    def state_conflict(operation: str, current: str, allowed: Iterable[str]) -> Diagnostic:
        """Operation attempted from a disallowed state.

        Args:
            operation: Name of the rejected operation
            current: Description of the state observed
            allowed: Descriptions of the states the operation may start from

        Returns:
            Diagnostic for STATE_CONFLICT
        """
        allowed_states = tuple(allowed)
        return Diagnostic(
            code=DiagnosticCode.STATE_CONFLICT,
            message=f"Cannot {operation}: another registration or load is running ({current})",
            hint="Registration and loading are exclusive; retry after the running call returns",
            allowed_states=allowed_states,
        )

    @staticmethod
    def nothing_registered() -> Diagnostic:
        """Load requested while the client is ready and nothing new is pending.

        Returns:
            Diagnostic for NOTHING_REGISTERED
        """
        return Diagnostic(
            code=DiagnosticCode.NOTHING_REGISTERED,
            message="There was no successful registration before load",
            hint="Call register() with the sources to (re)load first",
        )

    @staticmethod
    def no_pending_sources() -> Diagnostic:
        """Load requested without pending sources.

        Returns:
            Diagnostic for NO_PENDING_SOURCES
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PENDING_SOURCES,
            message="There are no valid sources registered yet",
            hint="Call register() before commit_load()",
        )

    @staticmethod
    def locale_not_live(locale_name: str) -> Diagnostic:
        """Default requested for a locale that is not currently published.

        Args:
            locale_name: Name of the locale

        Returns:
            Diagnostic for LOCALE_NOT_LIVE
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_LIVE,
            message=f"Locale '{locale_name}' is not part of the loaded locales",
            hint="Only locales returned by the current load can be marked as default",
            key=locale_name,
        )

    # ------------------------------------------------------------------
    # Format errors
    # ------------------------------------------------------------------

    @staticmethod
    def document_decode_failed(origin: str, decoder: str, reason: str) -> Diagnostic:
        """Decoder rejected the document.

        Args:
            origin: Path or caller location of the source
            decoder: Decoder name ("YAML", "TOML")
            reason: Decoder error text

        Returns:
            Diagnostic for DOCUMENT_DECODE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_DECODE_FAILED,
            message=f"Failed to decode content using {decoder} decoder: {reason}",
            source_path=origin,
        )

    @staticmethod
    def document_undecodable(origin: str, decoders: Iterable[str]) -> Diagnostic:
        """Raw buffer rejected by every decoder.

        Args:
            origin: Caller location of the buffer
            decoders: Names of the decoders tried

        Returns:
            Diagnostic for DOCUMENT_UNDECODABLE
        """
        tried = ", ".join(decoders)
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_UNDECODABLE,
            message=f"All options for decoding the byte content have failed ({tried})",
            source_path=origin,
        )

    @staticmethod
    def document_empty(origin: str) -> Diagnostic:
        """Document decoded to an empty tree.

        Args:
            origin: Path or caller location of the source

        Returns:
            Diagnostic for DOCUMENT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_EMPTY,
            message="Document has a valid format but an empty content",
            source_path=origin,
        )

    @staticmethod
    def document_not_a_tree(origin: str, decoder: str, type_name: str) -> Diagnostic:
        """Top-level document value is not a mapping.

        Args:
            origin: Path or caller location of the source
            decoder: Decoder name
            type_name: Type of the decoded top-level value

        Returns:
            Diagnostic for DOCUMENT_NOT_A_TREE
        """
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_NOT_A_TREE,
            message=f"{decoder} document must be a key/value tree, got {type_name}",
            source_path=origin,
            value_type=type_name,
        )

    @staticmethod
    def key_empty(origin: str | None = None) -> Diagnostic:
        """Empty key in a document tree.

        Args:
            origin: Path or caller location of the source

        Returns:
            Diagnostic for KEY_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_EMPTY,
            message="Key is empty",
            source_path=origin,
            key="",
        )

    @staticmethod
    def key_type_unsupported(type_name: str, origin: str | None = None) -> Diagnostic:
        """Document key that is neither a string nor an integer.

        Args:
            type_name: Type of the key
            origin: Path or caller location of the source

        Returns:
            Diagnostic for KEY_TYPE_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_TYPE_UNSUPPORTED,
            message=f"Unexpected type of key: {type_name}",
            hint="Quote keys such as true/false/null in YAML documents",
            source_path=origin,
            value_type=type_name,
        )

    @staticmethod
    def value_type_unsupported(
        key: str, type_name: str, origin: str | None = None
    ) -> Diagnostic:
        """Value of a type that cannot become a phrase.

        Args:
            key: Key holding the value
            type_name: Type of the value
            origin: Path or caller location of the source

        Returns:
            Diagnostic for VALUE_TYPE_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_UNSUPPORTED,
            message=f"Unexpected type of value for key '{key}': {type_name}",
            hint="Values must be strings, booleans, numbers, null or nested trees",
            source_path=origin,
            key=key,
            value_type=type_name,
        )

    @staticmethod
    def integer_out_of_range(key: str, value: int, origin: str | None = None) -> Diagnostic:
        """Integer outside the signed and unsigned 64-bit ranges.

        Args:
            key: Key holding the value
            value: The integer
            origin: Path or caller location of the source

        Returns:
            Diagnostic for INTEGER_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.INTEGER_OUT_OF_RANGE,
            message=f"Integer value for key '{key}' does not fit 64 bits: {value}",
            source_path=origin,
            key=key,
            value_type="int",
        )

    @staticmethod
    def metadata_invalid(origin: str, metadata_key: str, type_name: str) -> Diagnostic:
        """Metadata value is neither a tree nor a one-tree list.

        Args:
            origin: Path or caller location of the source
            metadata_key: Metadata key as written in the document
            type_name: Shape found

        Returns:
            Diagnostic for METADATA_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.METADATA_INVALID,
            message=(
                f"Metadata tag '{metadata_key}' found but has an incorrect type: "
                f"{type_name}. Should be an object"
            ),
            source_path=origin,
            key=metadata_key,
            value_type=type_name,
        )

    @staticmethod
    def metadata_empty(origin: str, metadata_key: str) -> Diagnostic:
        """Metadata tree without fields.

        Args:
            origin: Path or caller location of the source
            metadata_key: Metadata key as written in the document

        Returns:
            Diagnostic for METADATA_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.METADATA_EMPTY,
            message=f"Metadata tag '{metadata_key}' found but does not have any field",
            source_path=origin,
            key=metadata_key,
        )

    @staticmethod
    def locale_name_type_invalid(origin: str, key: str, type_name: str) -> Diagnostic:
        """Locale-name alias holding a non-string value.

        Args:
            origin: Path or caller location of the source
            key: Alias key as written in the document
            type_name: Type of the value

        Returns:
            Diagnostic for LOCALE_NAME_TYPE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_TYPE_INVALID,
            message=f"Locale name under '{key}' has an incorrect type: {type_name}",
            source_path=origin,
            key=key,
            value_type=type_name,
        )

    @staticmethod
    def locale_name_missing(origin: str) -> Diagnostic:
        """No locale name in metadata nor in the origin path.

        Args:
            origin: Path or caller location of the source

        Returns:
            Diagnostic for LOCALE_NAME_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_MISSING,
            message="Locale name not found in metadata nor in the source path",
            hint="Add a '__metadata__: {locale: xx_YY}' block or put xx_YY in the file path",
            source_path=origin,
        )

    @staticmethod
    def locale_name_invalid(origin: str, locale_name: str) -> Diagnostic:
        """Locale name not matching the ll_CC pattern.

        Args:
            origin: Path or caller location of the source
            locale_name: The rejected name

        Returns:
            Diagnostic for LOCALE_NAME_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_INVALID,
            message=f"Locale name '{locale_name}' has an incorrect format. Should be: xx_YY",
            source_path=origin,
            key=locale_name,
        )

    # ------------------------------------------------------------------
    # Ambiguity errors
    # ------------------------------------------------------------------

    @staticmethod
    def metadata_ambiguous(origin: str, key_1: str, key_2: str) -> Diagnostic:
        """Two or more metadata blocks.

        Args:
            origin: Path or caller location of the source
            key_1: First metadata key as written
            key_2: Second metadata key as written

        Returns:
            Diagnostic for METADATA_AMBIGUOUS
        """
        return Diagnostic(
            code=DiagnosticCode.METADATA_AMBIGUOUS,
            message="Metadata found but is ambiguous. Found two or more sections",
            source_path=origin,
            origins=(key_1, key_2),
        )

    @staticmethod
    def locale_name_ambiguous(origin: str, key_1: str, key_2: str) -> Diagnostic:
        """Two locale-name aliases inside one metadata block.

        Args:
            origin: Path or caller location of the source
            key_1: First alias as written
            key_2: Second alias as written

        Returns:
            Diagnostic for LOCALE_NAME_AMBIGUOUS
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_AMBIGUOUS,
            message="Metadata found, but locale name is ambiguous. Found two or more locale names",
            source_path=origin,
            origins=(key_1, key_2),
        )

    @staticmethod
    def locale_name_in_path_ambiguous(origin: str, names: Iterable[str]) -> Diagnostic:
        """Two or more locale names embedded in one path.

        Args:
            origin: The path
            names: Locale names found

        Returns:
            Diagnostic for LOCALE_NAME_IN_PATH_AMBIGUOUS
        """
        found = tuple(names)
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_IN_PATH_AMBIGUOUS,
            message=(
                f"Locale name is ambiguous. Found two or more locale names in filepath: "
                f"{', '.join(found)}"
            ),
            source_path=origin,
            origins=found,
        )

    @staticmethod
    def locale_name_declared_twice(
        origin: str, metadata_name: str, path_name: str
    ) -> Diagnostic:
        """Locale name declared both in metadata and in the path.

        Args:
            origin: The path
            metadata_name: Name from the metadata block
            path_name: Name found in the path

        Returns:
            Diagnostic for LOCALE_NAME_DECLARED_TWICE
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NAME_DECLARED_TWICE,
            message=(
                f"Locale name is ambiguous: metadata declares '{metadata_name}' "
                f"and the filepath contains '{path_name}'"
            ),
            hint="Declare the locale name either in metadata or in the file path",
            source_path=origin,
            origins=(metadata_name, path_name),
        )

    # ------------------------------------------------------------------
    # Conflict errors
    # ------------------------------------------------------------------

    @staticmethod
    def phrase_already_exists(
        key: str,
        new_value: str,
        old_value: str,
        origins: Iterable[str],
        origin: str | None = None,
    ) -> Diagnostic:
        """Duplicate translation key without overwrite permission.

        Args:
            key: The duplicated key
            new_value: Phrase being merged
            old_value: Phrase already committed
            origins: Origins that contributed to the node holding the key
            origin: Origin of the source being merged

        Returns:
            Diagnostic for PHRASE_ALREADY_EXISTS
        """
        return Diagnostic(
            code=DiagnosticCode.PHRASE_ALREADY_EXISTS,
            message=f"Failed to add new translation phrase '{key}'. Already exists",
            hint="Enable overwrite_existing_key or remove one of the definitions",
            source_path=origin,
            key=key,
            new_value=new_value,
            old_value=old_value,
            origins=tuple(origins),
        )

    # ------------------------------------------------------------------
    # Availability errors
    # ------------------------------------------------------------------

    @staticmethod
    def path_unreadable(path: str, reason: str) -> Diagnostic:
        """Path that cannot be opened, stat'ed or read.

        Args:
            path: The path
            reason: OS error text

        Returns:
            Diagnostic for PATH_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.PATH_UNREADABLE,
            message=f"Failed to read provided path: {reason}",
            source_path=path,
        )

    @staticmethod
    def directory_scan_failed(path: str, reason: str) -> Diagnostic:
        """Directory listing failed.

        Args:
            path: The directory
            reason: OS error text

        Returns:
            Diagnostic for DIRECTORY_SCAN_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.DIRECTORY_SCAN_FAILED,
            message=f"Failed to scan a directory: {reason}",
            source_path=path,
        )

    @staticmethod
    def directory_depth_exceeded(path: str, max_depth: int) -> Diagnostic:
        """Directory tree deeper than the scan ceiling.

        Args:
            path: First directory found beyond the ceiling
            max_depth: The ceiling

        Returns:
            Diagnostic for DIRECTORY_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.DIRECTORY_DEPTH_EXCEEDED,
            message=f"Provided path contains too many nested directories (limit {max_depth})",
            source_path=path,
        )

    @staticmethod
    def nesting_depth_exceeded(
        max_depth: int, key: str | None = None, origin: str | None = None
    ) -> Diagnostic:
        """Nesting deeper than a recursion limit.

        Args:
            max_depth: The limit
            key: Key at which the limit was hit (optional)
            origin: Path or caller location of the source (optional)

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"Maximum nesting depth ({max_depth}) exceeded",
            hint="Flatten the document or split it into several namespaces",
            source_path=origin,
            key=key,
        )

    # ------------------------------------------------------------------
    # Not-found errors
    # ------------------------------------------------------------------

    @staticmethod
    def no_phrases(source_count: int) -> Diagnostic:
        """Every source decoded but no phrase was produced.

        Args:
            source_count: Number of sources processed

        Returns:
            Diagnostic for NO_PHRASES
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PHRASES,
            message=(
                f"Sources have been parsed but there are no translation phrases "
                f"({source_count} source(s))"
            ),
        )

    # ------------------------------------------------------------------
    # Internal errors
    # ------------------------------------------------------------------

    @staticmethod
    def source_kind_unexpected(origin: str, kind: str) -> Diagnostic:
        """Source kind no decoder handles.

        Args:
            origin: Path or caller location of the source
            kind: The kind value

        Returns:
            Diagnostic for SOURCE_KIND_UNEXPECTED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_KIND_UNEXPECTED,
            message=f"Unexpected kind of source: {kind}. This is a bug",
            source_path=origin,
            value_type=kind,
        )

    @staticmethod
    def source_content_released(origin: str) -> Diagnostic:
        """Descriptor reached the decoder without content.

        Args:
            origin: Path or caller location of the source

        Returns:
            Diagnostic for SOURCE_CONTENT_RELEASED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_CONTENT_RELEASED,
            message="Source content was already released. This is a bug",
            source_path=origin,
        )
