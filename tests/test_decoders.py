"""Tests for decoding/decoders.py: YAML/TOML backends and kind resolution.

Python 3.13+.
"""

import tomllib

import pytest
import yaml

from phrasestore.decoding.decoders import (
    TOML_DECODER,
    YAML_DECODER,
    decode_source,
)
from phrasestore.decoding.values import IntValue, StringValue, TreeValue
from phrasestore.diagnostics import DiagnosticCode, IllegalFormatError, InternalError
from phrasestore.enums import SourceKind
from phrasestore.localization.sources import SourceDescriptor

YAML_DOC = b"title: Home\nmenu:\n  open: Open\ncount: 3\n"
TOML_DOC = b'title = "Home"\ncount = 3\n\n[menu]\nopen = "Open"\n'


def _descriptor(kind: SourceKind, content: bytes) -> SourceDescriptor:
    return SourceDescriptor.from_content(kind, "/srv/doc", content)


def _code(exc: pytest.ExceptionInfo[IllegalFormatError]) -> DiagnosticCode:
    assert exc.value.diagnostic is not None
    return exc.value.diagnostic.code


class TestBackends:
    """Test the grammar backends directly."""

    def test_yaml_mapping(self) -> None:
        """YAML returns the native mapping."""
        assert YAML_DECODER.parse(YAML_DOC, "x") == {
            "title": "Home",
            "menu": {"open": "Open"},
            "count": 3,
        }

    def test_yaml_comment_only_is_empty(self) -> None:
        """A document without nodes decodes to an empty mapping."""
        assert YAML_DECODER.parse(b"# nothing here\n", "x") == {}

    def test_yaml_scalar_top_level_rejected(self) -> None:
        """A top level that is not a mapping is rejected."""
        with pytest.raises(IllegalFormatError) as exc_info:
            YAML_DECODER.parse(b"- a\n- b\n", "x")

        assert _code(exc_info) == DiagnosticCode.DOCUMENT_NOT_A_TREE

    def test_yaml_error_chained(self) -> None:
        """Parser errors are chained as the cause."""
        with pytest.raises(IllegalFormatError) as exc_info:
            YAML_DECODER.parse(b"a: [1, 2\n", "x")

        assert _code(exc_info) == DiagnosticCode.DOCUMENT_DECODE_FAILED
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    @pytest.mark.parametrize("word", ["Yes", "no", "ON", "off", "y", "N"])
    def test_yaml_yes_no_words_are_text(self, word: str) -> None:
        """Only true/false are booleans; the other YAML 1.1 words stay text."""
        assert YAML_DECODER.parse(f"confirm: {word}\n".encode(), "x") == {"confirm": word}

    @pytest.mark.parametrize(("text", "value"), [("true", True), ("False", False), ("TRUE", True)])
    def test_yaml_true_false_are_booleans(self, text: str, value: bool) -> None:
        """true and false in any of the three cases load as booleans."""
        assert YAML_DECODER.parse(f"flag: {text}\n".encode(), "x") == {"flag": value}

    def test_yaml_duplicate_key_rejected(self) -> None:
        """A key repeated in one mapping fails instead of keeping the last value."""
        with pytest.raises(IllegalFormatError) as exc_info:
            YAML_DECODER.parse(b"__metadata__: {locale: en_US}\ntitle: Home\ntitle: Start\n", "x")

        assert _code(exc_info) == DiagnosticCode.DOCUMENT_DECODE_FAILED
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
        assert "duplicate key" in str(exc_info.value.__cause__)

    def test_yaml_nested_duplicate_key_rejected(self) -> None:
        """Repeated keys are caught at every level."""
        with pytest.raises(IllegalFormatError):
            YAML_DECODER.parse(b"menu:\n  open: Open\n  open: Launch\n", "x")

    def test_yaml_same_key_in_sibling_mappings(self) -> None:
        """Equal keys under different parents are not repeats."""
        assert YAML_DECODER.parse(b"a: {title: A}\nb: {title: B}\n", "x") == {
            "a": {"title": "A"},
            "b": {"title": "B"},
        }

    def test_yaml_merge_key_override_allowed(self) -> None:
        """Keys merged with << may be overridden by the mapping itself."""
        content = b"base: &base {open: Open, close: Close}\nmenu:\n  <<: *base\n  open: Launch\n"

        assert YAML_DECODER.parse(content, "x")["menu"] == {"open": "Launch", "close": "Close"}

    def test_yaml_python_tags_refused(self) -> None:
        """safe_load never constructs arbitrary objects."""
        with pytest.raises(IllegalFormatError):
            YAML_DECODER.parse(b"a: !!python/object/apply:os.getcwd []\n", "x")

    def test_toml_mapping(self) -> None:
        """TOML returns the native mapping."""
        assert TOML_DECODER.parse(TOML_DOC, "x") == {
            "title": "Home",
            "count": 3,
            "menu": {"open": "Open"},
        }

    def test_toml_error_chained(self) -> None:
        """tomllib errors are chained as the cause."""
        with pytest.raises(IllegalFormatError) as exc_info:
            TOML_DECODER.parse(b"a = \n", "x")

        assert isinstance(exc_info.value.__cause__, tomllib.TOMLDecodeError)

    def test_toml_invalid_utf8(self) -> None:
        """Bytes that are not UTF-8 fail with the decode error as cause."""
        with pytest.raises(IllegalFormatError) as exc_info:
            TOML_DECODER.parse(b'a = "\xff\xfe"\n', "x")

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestDecodeSource:
    """Test kind dispatch and conversion."""

    @pytest.mark.parametrize(
        ("kind", "content"),
        [
            (SourceKind.FILE_YAML, YAML_DOC),
            (SourceKind.CONTENT_YAML, YAML_DOC),
            (SourceKind.FILE_TOML, TOML_DOC),
            (SourceKind.CONTENT_TOML, TOML_DOC),
        ],
    )
    def test_known_kinds(self, kind: SourceKind, content: bytes) -> None:
        """Known kinds use their decoder and keep the kind."""
        descriptor = _descriptor(kind, content)

        tree = decode_source(descriptor)

        assert tree.entries["title"] == StringValue("Home")
        assert tree.entries["count"] == IntValue(3)
        assert tree.entries["menu"] == TreeValue({"open": StringValue("Open")})
        assert descriptor.kind is kind

    def test_unknown_resolved_as_yaml(self) -> None:
        """Raw buffers are tried as YAML first."""
        descriptor = _descriptor(SourceKind.CONTENT_UNKNOWN, YAML_DOC)

        decode_source(descriptor)

        assert descriptor.kind is SourceKind.CONTENT_YAML

    def test_unknown_resolved_as_toml(self) -> None:
        """A buffer YAML cannot read as a tree falls through to TOML."""
        descriptor = _descriptor(SourceKind.CONTENT_UNKNOWN, TOML_DOC)

        tree = decode_source(descriptor)

        assert descriptor.kind is SourceKind.CONTENT_TOML
        assert tree.entries["menu"] == TreeValue({"open": StringValue("Open")})

    def test_unknown_undecodable(self) -> None:
        """When every decoder fails the last failure is the cause."""
        descriptor = _descriptor(SourceKind.CONTENT_UNKNOWN, b"a: [1\nb = = 2\n")

        with pytest.raises(IllegalFormatError) as exc_info:
            decode_source(descriptor)

        assert _code(exc_info) == DiagnosticCode.DOCUMENT_UNDECODABLE
        assert isinstance(exc_info.value.__cause__, IllegalFormatError)
        assert descriptor.kind is SourceKind.CONTENT_UNKNOWN

    @pytest.mark.parametrize(
        ("kind", "content"),
        [
            (SourceKind.FILE_YAML, b"# empty\n"),
            (SourceKind.FILE_YAML, b"{}\n"),
            (SourceKind.FILE_TOML, b"\n"),
        ],
    )
    def test_empty_document(self, kind: SourceKind, content: bytes) -> None:
        """Valid but empty documents are rejected."""
        with pytest.raises(IllegalFormatError) as exc_info:
            decode_source(_descriptor(kind, content))

        assert _code(exc_info) == DiagnosticCode.DOCUMENT_EMPTY

    def test_yaml_date_rejected(self) -> None:
        """YAML timestamps have no phrase form."""
        with pytest.raises(IllegalFormatError) as exc_info:
            decode_source(_descriptor(SourceKind.FILE_YAML, b"released: 2020-01-01\n"))

        assert _code(exc_info) == DiagnosticCode.VALUE_TYPE_UNSUPPORTED

    def test_toml_datetime_rejected(self) -> None:
        """TOML datetimes have no phrase form."""
        content = b"released = 1979-05-27T07:32:00Z\n"

        with pytest.raises(IllegalFormatError) as exc_info:
            decode_source(_descriptor(SourceKind.FILE_TOML, content))

        assert _code(exc_info) == DiagnosticCode.VALUE_TYPE_UNSUPPORTED

    def test_yaml_bool_key_rejected(self) -> None:
        """An unquoted true key is a boolean and has no key form."""
        with pytest.raises(IllegalFormatError) as exc_info:
            decode_source(_descriptor(SourceKind.FILE_YAML, b"true: agree\n"))

        assert _code(exc_info) == DiagnosticCode.KEY_TYPE_UNSUPPORTED

    def test_yaml_yes_no_keys_are_text(self) -> None:
        """yes/no keys stay strings, so a language table loads."""
        content = b"yes: agree\nlanguages: {en: English, no: Norwegian}\n"

        tree = decode_source(_descriptor(SourceKind.FILE_YAML, content))

        assert tree.entries["yes"] == StringValue("agree")
        assert tree.entries["languages"] == TreeValue(
            {"en": StringValue("English"), "no": StringValue("Norwegian")}
        )

    def test_released_content(self) -> None:
        """Decoding after release is a defect."""
        descriptor = _descriptor(SourceKind.FILE_YAML, YAML_DOC)
        descriptor.release_content()

        with pytest.raises(InternalError):
            decode_source(descriptor)
