"""Memory and swap usage from /proc/meminfo."""

from barstatus.util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def parse_meminfo(text):
    """Parse meminfo text into a mapping of field name to value in kB."""
    fields = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path, *names):
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            info = parse_meminfo(fh.read())
    except OSError:
        warn(f"fopen '{path}':")
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(unused=None, path=MEMINFO):
    """Return the memory available for new allocations."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused=None, path=MEMINFO):
    """Return the used share of memory in percent, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused=None, path=MEMINFO):
    """Return the total memory size."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused=None, path=MEMINFO):
    """Return the used memory, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def _swap(path):
    return _fields(path, "SwapTotal", "SwapFree", "SwapCached")


def swap_free(unused=None, path=MEMINFO):
    """Return the free swap space."""
    values = _swap(path)
    if values is None:
        return None
    return fmt_human(values[1] * 1024, 1024)


def swap_perc(unused=None, path=MEMINFO):
    """Return the used share of swap in percent."""
    values = _swap(path)
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(int(100 * (total - free - cached) / total))


def swap_total(unused=None, path=MEMINFO):
    """Return the total swap size."""
    values = _swap(path)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused=None, path=MEMINFO):
    """Return the used swap space."""
    values = _swap(path)
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)