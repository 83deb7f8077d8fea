"""Available kernel entropy."""

import sys

from barstatus.util import read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def entropy(unused=None, path=None):
    """Return the entropy pool size; BSD systems report infinity."""
    if path is None:
        if sys.platform.startswith(("openbsd", "freebsd")):
            return "\u221e"
        path = ENTROPY_AVAIL
    value = read_int(path)
    return None if value is None else str(value)