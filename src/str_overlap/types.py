# str_overlap/types.py
from __future__ import annotations

from typing import Any, Protocol

"""
types.py.

Does: Define the structural Protocol accepted by the matcher: anything with a
length and integer/slice indexing (str, bytes, tuples, lists of tokens...).
"""


class UnitSequence(Protocol):
    def __len__(self) -> int: ...
    def __getitem__(self, index: Any) -> Any: ...


__all__ = ["UnitSequence"]

__docformat__ = "google"
