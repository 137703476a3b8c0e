"""Locale-name discovery for decoded documents.

A document declares its locale either in a metadata block::

    __metadata__:
      locale: en_US

or, for file sources, by carrying exactly one ``ll_CC`` token in its path
(``locales/en_US/menu.yaml``, ``menu.de_DE.toml``). Declaring it in both
places is ambiguous and rejected.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

from phrasestore.constants import LOCALE_NAME_ALIASES, METADATA_KEY, PATH_DELIMITERS
from phrasestore.decoding.values import ListValue, StringValue, TreeValue
from phrasestore.diagnostics import AmbiguousMetadataError, ErrorTemplate, IllegalFormatError
from phrasestore.locale_utils import is_valid_locale_name

if TYPE_CHECKING:
    from phrasestore.localization.sources import SourceDescriptor
    from phrasestore.localization.types import LocaleName

__all__ = ["extract_locale_name", "find_locale_names_in_path"]

logger = logging.getLogger(__name__)

_DELIMITER_SPLIT = re.compile(f"([{re.escape(PATH_DELIMITERS)}])")


def extract_locale_name(tree: TreeValue, descriptor: SourceDescriptor) -> LocaleName:
    """Resolve the locale name of a decoded document.

    Removes the metadata block from ``tree`` and stores the result in
    ``descriptor.locale_name``.

    Args:
        tree: Top-level tree of the document (modified in place)
        descriptor: Source the tree was decoded from

    Returns:
        Locale name in ``ll_CC`` form

    Raises:
        AmbiguousMetadataError: Two metadata blocks, two name aliases,
            two names in the path, or a name both in metadata and path
        IllegalFormatError: Malformed metadata, missing or invalid name
    """
    origin = descriptor.origin
    metadata_name = _name_from_metadata(tree, origin)

    path_name: str | None = None
    if descriptor.kind.is_file:
        path_names = find_locale_names_in_path(origin)
        if len(path_names) > 1:
            raise AmbiguousMetadataError(
                ErrorTemplate.locale_name_in_path_ambiguous(origin, path_names)
            )
        if path_names:
            path_name = path_names[0]

    match metadata_name, path_name:
        case None, None:
            raise IllegalFormatError(ErrorTemplate.locale_name_missing(origin))
        case str(), str():
            raise AmbiguousMetadataError(
                ErrorTemplate.locale_name_declared_twice(origin, metadata_name, path_name)
            )
        case str(), None:
            name = metadata_name
        case _:
            name = path_name

    if not is_valid_locale_name(name):
        raise IllegalFormatError(ErrorTemplate.locale_name_invalid(origin, name))

    descriptor.locale_name = name
    logger.debug("Resolved locale %s for %s", name, origin)
    return name


def find_locale_names_in_path(path: str) -> list[LocaleName]:
    """Find ``ll_CC`` tokens embedded in a filesystem path.

    Each path segment is split on ``-``, ``_``, ``.`` and space, keeping the
    delimiters as tokens. Any run of three tokens (``ll``, delimiter, ``CC``)
    whose concatenation is a valid locale name is a match.

    Args:
        path: Absolute file path

    Returns:
        Locale names found, in path order (may contain repeats)

    Example:
        >>> find_locale_names_in_path("/srv/locales/en_US/menu.yaml")
        ['en_US']
        >>> find_locale_names_in_path("/srv/locales/menu-en-US.yaml")
        []
    """
    _, without_drive = os.path.splitdrive(path)
    found: list[LocaleName] = []
    for segment in without_drive.split(os.sep):
        if not segment:
            continue
        tokens = _DELIMITER_SPLIT.split(segment)
        index = 0
        while index < len(tokens) - 2:
            candidate = "".join(tokens[index : index + 3])
            if len(candidate) == 5 and is_valid_locale_name(candidate):
                found.append(candidate)
                index += 3
            else:
                index += 1
    return found


def _name_from_metadata(tree: TreeValue, origin: str) -> str | None:
    matched = [key for key in tree.entries if key.lower() == METADATA_KEY]
    if not matched:
        return None
    if len(matched) > 1:
        raise AmbiguousMetadataError(
            ErrorTemplate.metadata_ambiguous(origin, matched[0], matched[1])
        )

    metadata_key = matched[0]
    value = tree.entries.pop(metadata_key)

    match value:
        case TreeValue():
            block = value
        case ListValue(items=(TreeValue() as single,)):
            block = single
        case ListValue():
            raise IllegalFormatError(
                ErrorTemplate.metadata_invalid(
                    origin, metadata_key, f"list of {len(value)} item(s)"
                )
            )
        case _:
            raise IllegalFormatError(
                ErrorTemplate.metadata_invalid(origin, metadata_key, value.type_name)
            )

    if not block.entries:
        raise IllegalFormatError(ErrorTemplate.metadata_empty(origin, metadata_key))

    name: str | None = None
    name_key = ""
    for key, field_value in block.entries.items():
        if key.lower() not in LOCALE_NAME_ALIASES:
            continue
        if not isinstance(field_value, StringValue):
            raise IllegalFormatError(
                ErrorTemplate.locale_name_type_invalid(origin, key, field_value.type_name)
            )
        if name is not None:
            raise AmbiguousMetadataError(
                ErrorTemplate.locale_name_ambiguous(origin, name_key, key)
            )
        name, name_key = field_value.value, key
    return name
