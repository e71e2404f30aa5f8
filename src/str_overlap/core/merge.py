# src/str_overlap/core/merge.py
"""
merge.py

Does: Join consecutive chunks of a stream (text, bytes, token lists) so that
      the region shared by the end of one chunk and the start of the next
      appears only once.
Returns: merge_overlapping(), join_chunks().
Used by: Streaming transcript / LLM delta joiners.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from str_overlap.core.matcher import find_overlap
from str_overlap.types import UnitSequence
from str_overlap.utils.log import debug

__all__ = ["merge_overlapping", "join_chunks"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def _tail(seq: UnitSequence, size: int) -> Any:
    """Last `size` units of `seq` (whole seq when shorter)."""
    if size >= len(seq):
        return seq
    return seq[len(seq) - size :]


def merge_overlapping(left: UnitSequence, right: UnitSequence) -> Any:
    """
    Does: Concatenate `left` and `right`, dropping the overlapping prefix of `right`.
    Returns: left + right[k:], where k is the overlap length. Plain
             concatenation when nothing overlaps.

    Example:
        >>> merge_overlapping("the quick bro", "brown fox")
        'the quick brown fox'
    """
    # Only the last len(right) units of left can take part in the overlap.
    match = find_overlap(_tail(left, len(right)), right)
    log.debug("merge: overlap=%d left=%d right=%d", match.length, len(left), len(right))
    return left + right[match.length :]


def join_chunks(chunks: Iterable[UnitSequence]) -> Any:
    """
    Does: Fold merge_overlapping over `chunks` from left to right.
    Returns: The joined sequence; "" for no chunks. The result type follows
             the first chunk.
    """
    merged: Any = None
    for index, chunk in enumerate(chunks):
        if merged is None:
            merged = chunk
            continue
        merged = merge_overlapping(merged, chunk)
        debug(f"chunk {index}: joined length {len(merged)}", topic="merge")
    return "" if merged is None else merged
