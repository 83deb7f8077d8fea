"""IP addresses and transfer rates of network interfaces."""

import os
import socket

import psutil

from barstatus.util import fmt_human, read_int, warn

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL = 1000

_DIRECTIONS = ("rx", "tx")


def _ip(interface, family):
    try:
        addresses = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family and entry.address:
            return entry.address
    return None


def ipv4(interface):
    """Return the first IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface):
    """Return the first IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Bytes per second through an interface since the previous call."""

    def __init__(self, direction, interval=DEFAULT_INTERVAL, root=NET_ROOT):
        if direction not in _DIRECTIONS:
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface):
        previous = self._bytes
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % (1 << 64)
        return fmt_human(delta * 1000 // self.interval, 1024)


_RX = NetSpeed("rx")
_TX = NetSpeed("tx")


def netspeed_rx(interface):
    """Return the receive rate of an interface."""
    return _RX(interface)


def netspeed_tx(interface):
    """Return the transmit rate of an interface."""
    return _TX(interface)