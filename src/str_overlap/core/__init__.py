# str_overlap/core/__init__.py
"""
core.
=====

Does: Provide the overlap matcher and the chunk-merging helpers built on it.
Exports: overlap, find_overlap, overlap_end, overlap_start, OverlapMatch,
         merge_overlapping, join_chunks
"""

from __future__ import annotations

from .matcher import (
    OverlapMatch,
    find_overlap,
    overlap,
    overlap_end,
    overlap_start,
)
from .merge import (
    join_chunks,
    merge_overlapping,
)

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
]
