"""Local date and time."""

import datetime as _dt

from barstatus.util import warn

_BUFFER_SIZE = 1024


def datetime(fmt, now=None):
    """Format ``now`` (default: the current local time) with strftime."""
    if now is None:
        now = _dt.datetime.now()
    text = now.strftime(fmt)
    if not text or len(text) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return text