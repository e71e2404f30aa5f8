# str_overlap/utils/__init__.py
"""
Does: Provide the topic-gated debug logger used across the package.
Returns: Public API via debug/reload_topics.
Used by: core.merge, tests.
"""

from __future__ import annotations

from .log import (
    DEBUG_TOPICS_ENV,
    debug,
    reload_topics,
)

__all__ = [
    "DEBUG_TOPICS_ENV",
    "debug",
    "reload_topics",
]
