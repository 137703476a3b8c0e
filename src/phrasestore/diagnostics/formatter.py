"""Rendering of diagnostics for terminals, log lines and tooling.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output style of DiagnosticFormatter."""

    RUST = "rust"  # multi-line, compiler style
    SIMPLE = "simple"  # CODE: message
    JSON = "json"


# (attribute, label, phrase text subject to sanitizing), in display order.
# source_path is shown separately as the "-->" line.
_DETAIL_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("key", "key", False),
    ("new_value", "new value", True),
    ("old_value", "old value", True),
    ("origins", "origins", False),
    ("value_type", "type", False),
    ("allowed_states", "allowed states", False),
    ("hint", "help", False),
)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns a Diagnostic into text.

    Only populated fields are rendered. With ``sanitize`` set, phrase values
    and messages longer than ``max_content_length`` are cut and suffixed
    with "...", which keeps user-supplied text from flooding logs.

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.key_empty("/srv/en_US.yaml")))
        KEY_EMPTY: Key is empty
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _details(self, diagnostic: Diagnostic) -> Iterable[tuple[str, str, str | list[str]]]:
        for attribute, label, is_phrase in _DETAIL_FIELDS:
            value = getattr(diagnostic, attribute)
            if value is None or value == () or value == "":
                continue
            if isinstance(value, tuple):
                yield attribute, label, list(value)
            else:
                yield attribute, label, self._clip(value) if is_phrase else value

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        # error[PHRASE_ALREADY_EXISTS]: Failed to add ... Already exists
        #   --> /srv/en_US/c.yaml
        #   = key: menu/open
        lines = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.source_path:
            lines.append(f"  --> {diagnostic.source_path}")
        for _, label, value in self._details(diagnostic):
            text = ", ".join(value) if isinstance(value, list) else value
            lines.append(f"  = {label}: {text}")
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        import json  # noqa: PLC0415

        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
        }
        if diagnostic.source_path:
            data["source_path"] = diagnostic.source_path
        for attribute, _, value in self._details(diagnostic):
            data[attribute] = value
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
