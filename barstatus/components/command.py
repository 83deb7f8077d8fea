"""Output of a shell command."""

import subprocess

from barstatus.util import warn

_MAX_LINE = 1022


def run_command(cmd):
    """Run ``cmd`` in the shell and return the first line of its output."""
    try:
        completed = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    line = completed.stdout[:_MAX_LINE]
    newline = line.find(b"\n")
    if newline >= 0:
        line = line[:newline]
    text = line.decode("utf-8", errors="replace")
    return text or None