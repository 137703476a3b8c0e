"""Nesting limits for recursive document conversion, merging and directory scans.

A guard is created per top-level call and threaded through the recursion.
Each recursive step enters one ``level``; the caller supplies the diagnostic
to raise, since only it knows the offending key or path.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from phrasestore.constants import MAX_DEPTH
from phrasestore.diagnostics import DepthLimitExceededError, Diagnostic

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthGuard:
    """Counts nested levels and refuses to go past ``limit``.

    Attributes:
        limit: Maximum number of nested levels, clamped to the interpreter's
            recursion limit
        depth: Levels currently entered
    """

    __slots__ = ("depth", "limit")

    def __init__(self, limit: int = MAX_DEPTH) -> None:
        self.limit = depth_clamp(limit)
        self.depth = 0

    @property
    def at_limit(self) -> bool:
        return self.depth >= self.limit

    @contextmanager
    def level(self, describe: Callable[[int], Diagnostic]) -> Iterator[None]:
        """Enter one nesting level for the duration of the block.

        Args:
            describe: Builds the diagnostic from the limit when the level
                cannot be entered

        Raises:
            DepthLimitExceededError: When ``limit`` levels are already entered;
                the depth is left unchanged
        """
        if self.at_limit:
            raise DepthLimitExceededError(describe(self.limit))
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def __repr__(self) -> str:
        return f"DepthGuard(depth={self.depth}, limit={self.limit})"


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower ``requested_depth`` so recursion stays under sys.getrecursionlimit().

    ``reserve_frames`` are kept free for the frames between levels.
    """
    ceiling = sys.getrecursionlimit() - reserve_frames
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Depth limit %d does not fit the interpreter recursion limit %d; using %d",
        requested_depth,
        sys.getrecursionlimit(),
        ceiling,
    )
    return ceiling
