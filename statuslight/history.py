"""
Bounded lookup history.

The history is a plain tuple of StatusEntry, oldest first. append(...)
never mutates: it returns a new tuple holding at most HISTORY_LIMIT of the
most recent entries.
"""

from __future__ import annotations

import time
from typing import NamedTuple, Optional, Sequence, Tuple

HISTORY_LIMIT = 10


class StatusEntry(NamedTuple):
    code: int
    category: str
    timestamp: int  # ms since epoch


def now_ms() -> int:
    return int(time.time() * 1000)


def make_entry(code: int, category: str, timestamp: Optional[int] = None) -> StatusEntry:
    if timestamp is None:
        timestamp = now_ms()
    return StatusEntry(code=code, category=category, timestamp=timestamp)


def append(history: Sequence[StatusEntry], entry: StatusEntry) -> Tuple[StatusEntry, ...]:
    """Return history + entry, truncated to the last HISTORY_LIMIT entries."""
    return (tuple(history) + (entry,))[-HISTORY_LIMIT:]
