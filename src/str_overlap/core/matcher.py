# src/str_overlap/core/matcher.py
"""
matcher.py

Does: Core overlap matcher. Finds the longest run that ends `left` and starts
      `right` with a Knuth-Morris-Pratt scan, in time linear in the shorter operand.
Returns: overlap() slice, find_overlap() (offset, length) record, and the two
         orientation helpers overlap_end()/overlap_start().
Used by: core.merge, public package API.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from str_overlap.errors import TextUnitMismatchError
from str_overlap.types import UnitSequence

__all__ = [
    "OverlapMatch",
    "find_overlap",
    "overlap",
    "overlap_end",
    "overlap_start",
]

__docformat__ = "google"

_BINARY_TYPES = (bytes, bytearray, memoryview)


# ─────────────────────────────────────────────────────────────────────────────
# Result type
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class OverlapMatch:
    """Overlap located inside `left` as an (offset, length) view.

    Attributes:
        left: The left operand the overlap borrows from.
        start: Offset of the first overlapping unit in `left`.
        length: Number of overlapping units (0 means no overlap).
    """

    left: Any
    start: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset; always len(left)."""
        return self.start + self.length

    @property
    def value(self) -> Any:
        """The overlapping slice of `left` (same type as `left`)."""
        return self.left[self.start : self.end]

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return self.length > 0


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────
def _check_operands(left: object, right: object) -> None:
    """
    Does: Enforce the operand contract: both indexable sequences, and never
          str on one side with bytes-like on the other.
    Raises: TypeError / TextUnitMismatchError.
    """
    for name, value in (("left", left), ("right", right)):
        if not isinstance(value, (Sequence, memoryview)):
            raise TypeError(f"{name} must be a sequence, got {type(value).__name__}")

    left_text, right_text = isinstance(left, str), isinstance(right, str)
    left_bin, right_bin = isinstance(left, _BINARY_TYPES), isinstance(right, _BINARY_TYPES)
    if (left_text and right_bin) or (left_bin and right_text):
        raise TextUnitMismatchError(type(left), type(right))


def _failure_table(pattern: UnitSequence, m: int) -> list[int]:
    """
    Does: KMP failure function over pattern[:m]; fail[i] is the length of the
          longest proper border of pattern[:i + 1].
    Returns: List of m ints.
    """
    fail = [0] * m
    k = 0
    for i in range(1, m):
        unit = pattern[i]
        while True:
            if unit == pattern[k]:
                k += 1
                break
            if k == 0:
                break
            k = fail[k - 1]
        fail[i] = k
    return fail


def _overlap_length(left: UnitSequence, right: UnitSequence) -> int:
    """
    Does: Run the KMP automaton of right[:m] over the last m units of left,
          m = min(len(left), len(right)). The final state is the overlap.
    Returns: Overlap length k, 0 <= k <= m.
    """
    n = len(left)
    m = min(n, len(right))
    if m == 0:
        return 0

    fail = _failure_table(right, m)
    k = 0
    # The scanned window holds exactly m units, so k == m only after the last one.
    for i in range(n - m, n):
        unit = left[i]
        while True:
            if unit == right[k]:
                k += 1
                break
            if k == 0:
                break
            k = fail[k - 1]
    return k


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────
def find_overlap(left: UnitSequence, right: UnitSequence) -> OverlapMatch:
    """
    Does: Locate the longest suffix of `left` that is also a prefix of `right`.
    Returns: OverlapMatch into `left`; length 0 when there is no overlap.
    Raises: TypeError for non-sequences, TextUnitMismatchError for str vs bytes.
    """
    _check_operands(left, right)
    k = _overlap_length(left, right)
    return OverlapMatch(left=left, start=len(left) - k, length=k)


def overlap(left: UnitSequence, right: UnitSequence) -> Any:
    """Finds the overlap between two sequences.

    The overlap is the largest run contained at both the end of `left` and the
    beginning of `right`. If no overlap exists an empty slice is returned. The
    check is one-way; call it twice with swapped operands to test both sides.

    Args:
        left: Sequence whose suffix is matched.
        right: Sequence whose prefix is matched.

    Returns:
        A slice of `left` of the same type as `left`.

    Example:
        >>> overlap("abcd", "cdab")
        'cd'
        >>> overlap("cdab", "abcd")
        'ab'
    """
    return find_overlap(left, right).value


def overlap_end(text: UnitSequence, other: UnitSequence) -> Any:
    """Overlap where `text` supplies the suffix and `other` the prefix."""
    return overlap(text, other)


def overlap_start(text: UnitSequence, other: UnitSequence) -> Any:
    """Overlap where `text` supplies the prefix; the result is sliced from `other`."""
    return overlap(other, text)
