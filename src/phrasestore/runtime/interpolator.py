"""Placeholder substitution for phrases.

Phrases reference arguments with ``{{name}}`` verbs. There is no escaping,
no nesting and no formatting beyond converting the argument to text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phrasestore.constants import VERB_CLOSE, VERB_OPEN

if TYPE_CHECKING:
    from phrasestore.localization.types import TranslationArgs

__all__ = ["interpolate"]


def interpolate(phrase: str, args: TranslationArgs | None = None) -> str:
    """Replace ``{{name}}`` verbs in phrase with argument text.

    Verbs without a matching argument are kept byte-for-byte, unused
    arguments are ignored, and a ``{{`` that is never closed leaves the rest
    of the phrase untouched.

    Args:
        phrase: Phrase text
        args: Arguments keyed by verb name

    Returns:
        Interpolated phrase (phrase itself when there is nothing to do)

    Example:
        >>> interpolate("Hello, {{name}}!", {"name": "Alice"})
        'Hello, Alice!'
        >>> interpolate("{{count}} of {{total}}", {"count": 3})
        '3 of {{total}}'
        >>> interpolate("flag: {{on}}", {"on": True})
        'flag: true'
    """
    if not args or VERB_OPEN not in phrase:
        return phrase

    parts: list[str] = []
    position = 0
    while True:
        start = phrase.find(VERB_OPEN, position)
        if start == -1:
            break
        end = phrase.find(VERB_CLOSE, start + len(VERB_OPEN))
        if end == -1:
            break
        name = phrase[start + len(VERB_OPEN) : end]
        after = end + len(VERB_CLOSE)
        parts.append(phrase[position:start])
        if name in args:
            parts.append(_arg_text(args[name]))
        else:
            parts.append(phrase[start:after])
        position = after
    parts.append(phrase[position:])
    return "".join(parts)


def _arg_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
