"""
str_overlap
===========

Does: Find the overlap of two sequences, i.e. the longest run that is both a
      suffix of the left operand and a prefix of the right operand.
Returns: Public API via overlap/find_overlap and the merge helpers built on it.
Used by: Stream chunk joiners, diff/merge tooling, search preprocessing.

Example:
    >>> from str_overlap import overlap
    >>> overlap("abc", "bcd")
    'bc'
    >>> overlap("bcd", "abc")
    ''
"""

from __future__ import annotations

from .core import (
    OverlapMatch,
    find_overlap,
    join_chunks,
    merge_overlapping,
    overlap,
    overlap_end,
    overlap_start,
)
from .errors import OverlapError, TextUnitMismatchError

__all__ = [
    # matcher
    "overlap",
    "find_overlap",
    "overlap_end",
    "overlap_start",
    "OverlapMatch",
    # merge
    "merge_overlapping",
    "join_chunks",
    # errors
    "OverlapError",
    "TextUnitMismatchError",
]
__version__ = "0.1.0"
__docformat__ = "google"
