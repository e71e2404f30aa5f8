# tests/test_utils_log.py
"""Tests for the env-gated debug logger (topic filtering, 'all', silence when unset)."""

from __future__ import annotations

import io
import re

import pytest

from str_overlap.utils import log as L


@pytest.fixture
def set_topics(monkeypatch):
    """Does: Set STR_OVERLAP_DEBUG_TOPICS and reload; restore on teardown."""

    def _set(value: str | None) -> None:
        if value is None:
            monkeypatch.delenv(L.DEBUG_TOPICS_ENV, raising=False)
        else:
            monkeypatch.setenv(L.DEBUG_TOPICS_ENV, value)
        L.reload_topics()

    yield _set
    monkeypatch.delenv(L.DEBUG_TOPICS_ENV, raising=False)
    L.reload_topics()


def _emit(msg: str, topic: str, **kw) -> str:
    buf = io.StringIO()
    L.debug(msg, topic=topic, stream=buf, **kw)
    return buf.getvalue()


def test_silent_when_unset(set_topics):
    set_topics(None)
    assert _emit("hello", "merge") == ""


def test_enabled_topic_prints_formatted_line(set_topics):
    set_topics("merge, overlap")
    out = _emit("hello", "MERGE", level="info")
    assert re.match(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[merge\]\[INFO\] hello\n$", out)


def test_other_topics_filtered(set_topics):
    set_topics("overlap")
    assert _emit("hello", "merge") == ""
    assert _emit("hello", "overlap") != ""


def test_all_enables_every_topic(set_topics):
    set_topics("ALL")
    assert "[anything][DEBUG] x" in _emit("x", "anything")


def test_reload_picks_up_env_changes(set_topics):
    set_topics("merge")
    assert _emit("a", "merge")
    set_topics("")
    assert _emit("a", "merge") == ""
