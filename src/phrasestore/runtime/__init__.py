"""Runtime: phrase trie, merge engine, translation lookup.

Python 3.13+.
"""

from .atomic import AtomicReference, AtomicState
from .interpolator import interpolate
from .locale import Locale, sentinel
from .merger import ScanMerger, to_phrase
from .node import LocaleNode

__all__ = [
    "AtomicReference",
    "AtomicState",
    "Locale",
    "LocaleNode",
    "ScanMerger",
    "interpolate",
    "sentinel",
    "to_phrase",
]
