"""Locale phrase trie node.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phrasestore.runtime.locale import Locale

__all__ = ["LocaleNode"]


class LocaleNode:
    """One level of a locale's key hierarchy.

    ``committed`` holds phrases that survived a merge pass; ``staging``
    holds phrases written by the document currently being merged and is
    promoted into ``committed`` once the document completes.

    Attributes:
        children: Child nodes keyed by segment name
        committed: Published phrases keyed by leaf name
        staging: Phrases pending promotion
        contributing_sources: Indices of the sources that wrote into this
            node, in merge order, without duplicates
    """

    __slots__ = ("_owner", "children", "committed", "contributing_sources", "staging")

    def __init__(self, owner: Locale | None = None) -> None:
        self.children: dict[str, LocaleNode] = {}
        self.committed: dict[str, str] = {}
        self.staging: dict[str, str] = {}
        self.contributing_sources: list[int] = []
        self._owner: weakref.ReferenceType[Locale] | None = (
            weakref.ref(owner) if owner is not None else None
        )

    @property
    def owner(self) -> Locale | None:
        """Owning locale, or None if it was collected or never set."""
        return self._owner() if self._owner is not None else None

    def child(self, name: str) -> LocaleNode:
        """Return the child for ``name``, creating it on first use."""
        node = self.children.get(name)
        if node is None:
            node = LocaleNode(self.owner)
            self.children[name] = node
        return node

    def descend(self, segments: list[str]) -> LocaleNode | None:
        """Follow ``segments`` down the tree; None if any child is missing."""
        node: LocaleNode | None = self
        for segment in segments:
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def add_source(self, index: int) -> None:
        """Record that source ``index`` contributed to this node."""
        if index not in self.contributing_sources:
            self.contributing_sources.append(index)

    def origins(self) -> tuple[str, ...]:
        """Origins of the contributing sources, resolved through the owner."""
        owner = self.owner
        if owner is None:
            return ()
        return owner.resolve_origins(self.contributing_sources)

    def walk(self) -> Iterator[LocaleNode]:
        """Yield this node and every descendant once, parents first.

        Recursion depth equals trie depth, which merging bounds by MAX_DEPTH.
        """
        yield self
        for child in self.children.values():
            yield from child.walk()

    def __repr__(self) -> str:
        return (
            f"LocaleNode(children={len(self.children)}, committed={len(self.committed)}, "
            f"staging={len(self.staging)})"
        )
