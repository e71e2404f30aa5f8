"""
log.py.

Does: Lightweight debug logger controlled by STR_OVERLAP_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Silent when the variable is unset.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["DEBUG_TOPICS_ENV", "debug", "reload_topics"]

DEBUG_TOPICS_ENV = "STR_OVERLAP_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable STR_OVERLAP_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def debug(
    msg: str,
    topic: str = "overlap",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via STR_OVERLAP_DEBUG_TOPICS.
    """
    topic_key = topic.lower().strip()
    if not _DEBUG_TOPICS:
        return
    if "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS:
        if stream is None:
            stream = sys.stderr
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
