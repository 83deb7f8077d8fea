"""File contents and directory entry counts."""

import os

from barstatus.util import warn

_MAX_LINE = 1022


def cat(path):
    """Return the first line of a file, or None if it is unreadable or empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            line = fh.readline(_MAX_LINE)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def num_files(path):
    """Return the number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)