# str_overlap/errors.py
"""
errors.py.

Does: Exception types for operand contract violations.
Used by: core.matcher (validation), callers that want a single except clause.
"""

from __future__ import annotations

__all__ = ["OverlapError", "TextUnitMismatchError"]


class OverlapError(Exception):
    """Base class for every error raised by str_overlap."""


class TextUnitMismatchError(OverlapError, TypeError):
    """Raise when operands compare different text units (e.g. str vs bytes)."""

    def __init__(self, left_type: type, right_type: type):
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(
            f"cannot compare {left_type.__name__} with {right_type.__name__}: "
            "operands must share one text unit"
        )
