"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def warn(message):
    """Write a diagnostic line to stderr.

    A message ending in ':' is followed by the text of the exception being
    handled, if there is one.
    """
    exc = sys.exc_info()[1]
    if message.endswith(":") and exc is not None:
        if isinstance(exc, OSError) and exc.strerror:
            detail = exc.strerror
        else:
            detail = str(exc)
        print(f"{message} {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def fmt_human(num, base):
    """Scale ``num`` by ``base`` (1000 or 1024) and format it with a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"invalid base: {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path):
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError:
        warn(f"open '{path}':")
        return None


def read_line(path):
    """Return the first line of a file without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            line = fh.readline()
    except OSError:
        warn(f"open '{path}':")
        return None
    return line[:-1] if line.endswith("\n") else line


def read_int(path):
    """Return the integer at the start of a file, or None if there is none."""
    text = _read_text(path)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None