"""Wireless link quality and network name."""

import array
import fcntl
import os
import re
import socket
import struct

from barstatus.util import warn

NET_ROOT = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
IFNAMSIZ = 16
_IWREQ_SIZE = 32
_MAX_QUALITY = 70
_MAX_LINE = 1022

_LINK = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def rssi_to_perc(rssi):
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless_link(text, interface):
    """Return the link quality of ``interface`` from /proc/net/wireless text.

    Only the first data line (the third line) is considered.
    """
    lines = text.splitlines()
    if len(lines) < 3:
        return None
    line = lines[2][:_MAX_LINE]
    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK.match(line[start + len(interface) + 2:])
    return int(match.group(1)) if match else None


def wifi_perc(interface, root=NET_ROOT, wireless_path=PROC_WIRELESS):
    """Return the link quality of an interface that is up, in percent."""
    operstate = os.path.join(root, interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as fh:
            status = fh.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless_path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError:
        warn(f"fopen '{wireless_path}':")
        return None

    link = parse_wireless_link(text, interface)
    if link is None:
        return None
    return str(int(link / _MAX_QUALITY * 100))


def wifi_essid(interface):
    """Return the name of the network an interface is associated with."""
    name = interface.encode("utf-8")
    if len(name) >= IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = struct.pack(
        "16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0
    ).ljust(_IWREQ_SIZE, b"\0")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    raw = essid.tobytes().split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace") or None