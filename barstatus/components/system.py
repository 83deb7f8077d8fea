"""Host name, kernel release, load, uptime and the current user."""

import os
import pwd
import socket
import time

from barstatus.util import warn


def _uptime_clock():
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return name, clock
    raise OSError("no suitable clock available")


def hostname(unused=None):
    """Return the host name of the machine."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused=None):
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused=None):
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds):
    """Format a number of seconds as 'Hh Mm'."""
    whole = int(seconds)
    hours, rest = divmod(whole, 3600)
    return f"{hours}h {rest // 60}m"


def uptime(unused=None):
    """Return the time since boot as 'Hh Mm'."""
    try:
        name, clock = _uptime_clock()
    except OSError:
        warn("clock_gettime:")
        return None
    try:
        seconds = time.clock_gettime(clock)
    except OSError:
        warn(f"clock_gettime {name}")
        return None
    return format_uptime(seconds)


def gid(unused=None):
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused=None):
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused=None):
    """Return the login name belonging to the effective user id."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None