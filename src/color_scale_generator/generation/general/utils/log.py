"""
log.py.

Does: Lightweight topic debug logger controlled by COLOR_SCALE_DEBUG_TOPICS
      (comma-separated topics or 'all'; unset keeps every topic silent).
Returns: Prints timestamped lines with topic + level. Used by the variable
         reconciler and the demo CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "is_enabled", "reload_topics", "DEBUG_TOPICS_ENV"]

DEBUG_TOPICS_ENV = "COLOR_SCALE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read topics from COLOR_SCALE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "generation",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line tagged with topic and level when the topic is enabled."""
    if not is_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream or sys.stderr)
