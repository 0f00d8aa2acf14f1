"""Timestamp helpers and session-local item identifiers."""

import threading
import time
from datetime import datetime, timezone

_id_lock = threading.Lock()
_last_item_id = 0


def now_exact() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_item_id() -> int:
    """
    Return a monotonic, millisecond-timestamp-based identifier for a list item.

    Two calls within the same millisecond still get distinct ids: the counter
    advances by one past the previous id. Uniqueness holds within one process only.
    """
    global _last_item_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        _last_item_id = max(candidate, _last_item_id + 1)
        return _last_item_id
