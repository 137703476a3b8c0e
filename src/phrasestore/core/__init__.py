"""Core utilities shared by the decoding and runtime layers.

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp

__all__ = [
    "DepthGuard",
    "DepthLimitExceededError",
    "depth_clamp",
]
