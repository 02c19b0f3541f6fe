"""
log.py.

Does: Topic-gated debug tracing controlled by POLARITY_DEBUG_TOPICS (comma-sep or 'all').
Returns: Emits lines on the 'polarity_correction.trace' logger, tagged with topic + level.
Used by: consistency filter traces, classifier adapters, CLI --debug.
"""

from __future__ import annotations

import logging
import os

__all__ = ["debug", "is_enabled", "reload_topics"]

_ENV_VAR = "POLARITY_DEBUG_TOPICS"

_trace = logging.getLogger("polarity_correction.trace")


def _load_topics() -> frozenset[str]:
    raw = os.getenv(_ENV_VAR, "")
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read POLARITY_DEBUG_TOPICS (tests and long-lived processes)."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    """Does: True when `topic` (or 'all') is listed in POLARITY_DEBUG_TOPICS."""
    key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or key in _DEBUG_TOPICS


def debug(msg: str, topic: str = "correction", *, level: str = "DEBUG", force: bool = False) -> None:
    """Does: Log `msg` tagged with topic when the topic is enabled (or `force` is set).

    Unlike a bare logger call, nothing is emitted for disabled topics even when the
    trace logger is at DEBUG, which keeps per-sentence traces out of normal runs.
    """
    if not (force or is_enabled(topic)):
        return
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.DEBUG
    _trace.log(lvl, "[%s] %s", topic.lower().strip(), msg)
