from __future__ import annotations

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC instant as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
